"""Load word list files into a compressed trie."""

import logging
import time
from pathlib import Path

from trie_search.custom_data_structures.CompressedTrie.CompressedTrie import (
    CompressedTrie,
)


def load_words(data_path: Path) -> list[str]:
    """Read the words of a word list file.

    The file holds one word per line. Line endings are stripped and
    blank lines are skipped.

    Args:
        data_path (Path): The path of the word list file.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.

    Returns:
        list[str]: The words in file order, duplicates included.

    """
    try:
        with data_path.open("r", encoding="utf-8") as file:
            words = [line.rstrip("\r\n") for line in file]
    except FileNotFoundError as e:
        raise FileNotFoundError(f"File not found: {data_path}") from e

    return [word for word in words if word.strip()]


def build_trie(data_path: Path, prune_on_remove: bool = False) -> CompressedTrie:
    """Build a compressed trie holding every word of a word list file.

    Args:
        data_path (Path): The path of the word list file.
        prune_on_remove (bool): Passed on to the trie.

    Raises:
        FileNotFoundError: If the file specified by `data_path` does not exist.

    Returns:
        CompressedTrie: The filled trie.

    """
    start_time = time.perf_counter()
    words = load_words(data_path)
    trie = CompressedTrie(words, prune_on_remove=prune_on_remove)
    duration = (time.perf_counter() - start_time) * 1000  # in milliseconds

    logging.info(
        f"Built trie from '{data_path}': {len(words)} words read, "
        f"{trie.size()} distinct, {trie.root.count_nodes()} nodes "
        f"in {duration:.2f} ms",
    )
    return trie
