"""Configuration parser for the trie search tool."""

from pathlib import Path
from typing import cast


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when any of the configuration settings is not provided."""


class TrieConfig:
    """A class to save the trie configuration settings."""

    def __init__(
        self,
        wordlist_path: Path,
        prune_on_remove: bool,
        log_queries: bool,
    ) -> None:
        """Initialize the trie configuration.

        Args:
            wordlist_path (Path): The path to the word list loaded
            into the trie at start-up.
            prune_on_remove (bool): Whether nodes left without a word are
            pruned after each removal.
            log_queries (bool): Whether every handled query is logged.

        """
        self.wordlist_path = wordlist_path
        self.prune_on_remove = prune_on_remove
        self.log_queries = log_queries

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Trie configuration settings:
                Word list path: {self.wordlist_path}
                Prune on remove: {"YES" if self.prune_on_remove else "NO"}
                Log queries: {"YES" if self.log_queries else "NO"}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def load_config_file(config_file_path: Path) -> TrieConfig:
    """Load and parse the configuration file.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        FileNotFoundError: If the config file or the word list
        does not exist.

    Returns:
        TrieConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    wordlist_path = prune_on_remove = log_queries = None

    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "wordlist":
                wordlist_path = Path(value)
            elif key == "prune_on_remove":
                prune_on_remove = parse_bool("prune_on_remove", value)
            elif key == "log_queries":
                log_queries = parse_bool("log_queries", value)

    required = {
        "wordlist": wordlist_path,
        "prune_on_remove": prune_on_remove,
        "log_queries": log_queries,
    }

    for key, val in required.items():
        if val is None:
            raise ConfigNotFoundError(
                f"Missing required configuration: '{key}'. "
                f"Please ensure the config file includes a valid line "
                f"for '{key}'.",
            )

    # Relative word lists are resolved against the config file
    wordlist_path = cast("Path", wordlist_path)
    if not wordlist_path.is_absolute():
        wordlist_path = config_file_path.parent / wordlist_path

    if not wordlist_path.exists():
        raise FileNotFoundError(
            f"The required word list {wordlist_path} doesn't exist.",
        )

    return TrieConfig(
        wordlist_path,
        cast("bool", prune_on_remove),
        cast("bool", log_queries),
    )
