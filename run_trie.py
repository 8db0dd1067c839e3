"""This module provides the entry point for querying a compressed trie."""

import argparse
import signal
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

from trie_search.service.config import (
    ConfigBoolParsingError,
    ConfigNotFoundError,
    load_config_file,
)
from trie_search.service.logger import setup_logging, shutdown_logging
from trie_search.service.query_handler import handle_query
from trie_search.service.word_source import build_trie

CONFIG_PATH = Path(__file__).parent / "config.txt"
QUIT_COMMAND = "QUIT"


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse the command line arguments.

    Args:
        argv (list[str], optional): The arguments, sys.argv[1:] if None.

    Returns:
        argparse.Namespace: The parsed arguments.

    """
    parser = argparse.ArgumentParser(
        description="Load a word list into a compressed trie and query it.",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=str(CONFIG_PATH),
        help="Optional path to the config file.",
        required=False,
    )
    parser.add_argument(
        "--query",
        action="append",
        default=[],
        help="A query such as 'MATCHES tw' to run instead of reading "
        "queries from standard input. Can be given several times.",
        required=False,
    )
    return parser.parse_args(argv)


def handle_sigterm(signum: int, frame: Any) -> None:
    """Handle SIGTERM or SIGINT signals to perform a
    graceful shutdown of the application.

    Args:
        signum (int): The signal number received.
        frame (FrameType): The current stack frame (unused).

    Exits:
        Exits the process with status code 0.

    """
    shutdown_logging()
    sys.exit(0)


def main(
    argv: Optional[list[str]] = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> int:
    """Run the trie query tool.

    Args:
        argv (list[str], optional): Command line arguments.
        stdin (TextIO): Where queries are read from when none are given
        on the command line.
        stdout (TextIO): Where responses are written to.

    Returns:
        int: The process exit status.

    """
    args = parse_args(argv)

    try:
        config = load_config_file(Path(args.config_path))
    except (
        ConfigBoolParsingError,
        ConfigNotFoundError,
        FileNotFoundError,
    ) as e:
        print(f"[TRIE] Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging()

    try:
        trie = build_trie(
            config.wordlist_path,
            prune_on_remove=config.prune_on_remove,
        )

        queries = args.query or stdin
        for query in queries:
            if query.strip().upper() == QUIT_COMMAND:
                break
            response = handle_query(
                trie,
                query,
                log_details=config.log_queries,
            )
            print(response, file=stdout)
    finally:
        shutdown_logging()
    return 0


def cli() -> None:
    """Console entry point, exits with the status returned by main()."""
    signal.signal(signal.SIGTERM, handle_sigterm)
    signal.signal(signal.SIGINT, handle_sigterm)
    sys.exit(main())


if __name__ == "__main__":
    cli()
