"""Handle text queries against a compressed trie."""

import logging
import time
from datetime import datetime
from typing import Callable

from trie_search.custom_data_structures.CompressedTrie.CompressedTrie import (
    CompressedTrie,
)

from .logger import log


def _add(trie: CompressedTrie, word: str) -> str:
    return "ADDED" if trie.add(word) else "ALREADY PRESENT"


def _contains(trie: CompressedTrie, word: str) -> str:
    return "WORD EXISTS" if trie.contains(word) else "WORD NOT FOUND"


def _remove(trie: CompressedTrie, word: str) -> str:
    return "REMOVED" if trie.remove(word) else "WORD NOT FOUND"


def _matches(trie: CompressedTrie, prefix: str) -> str:
    found = trie.matches(prefix)
    if not found:
        return "NO MATCHES"
    return "\n".join(sorted(found))


def _size(trie: CompressedTrie, _argument: str) -> str:
    return str(trie.size())


def _prune(trie: CompressedTrie, _argument: str) -> str:
    trie.prune()
    return "PRUNED"


COMMANDS: dict[str, Callable[[CompressedTrie, str], str]] = {
    "ADD": _add,
    "CONTAINS": _contains,
    "REMOVE": _remove,
    "MATCHES": _matches,
    "SIZE": _size,
    "PRUNE": _prune,
}


def handle_query(
    trie: CompressedTrie,
    query: str,
    log_details: bool = True,
) -> str:
    """Run a single text command against the trie.

    A query is a command name, optionally followed by a space and the
    argument. Everything after the first space is the argument, so
    "CONTAINS " asks for the empty word.

    Args:
        trie (CompressedTrie): The trie to query.
        query (str): The raw query line.
        log_details (bool): Whether to log the query and its timing.

    Returns:
        str: The response string.

    """
    query = query.rstrip("\r\n")
    if not query:
        return "ERROR: Empty query."

    command, _, argument = query.partition(" ")
    command = command.upper()

    handler = COMMANDS.get(command)
    if handler is None:
        logging.warning(f"Unknown command '{command}' received")
        return f"ERROR: Unknown command '{command}'."

    start_time = time.perf_counter()
    response = handler(trie, argument)
    duration = (time.perf_counter() - start_time) * 1000  # in milliseconds

    if log_details:
        log(
            datetime.now().isoformat(),
            command,
            argument,
            response,
            duration,
        )
    return response
