import pytest

from trie_search.custom_data_structures.CompressedTrie.CompressedTrie import (
    CompressedTrie,
)

WORDS = [
    "test",
    "testing",
    "twitter",
    "twerk",
    "box",
    "boxes",
    "boxing",
    "boxer",
]


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def trie(words):
    """A trie filled with the sample words."""
    return CompressedTrie(words)


@pytest.fixture
def word_file(tmp_path, words):
    file_path = tmp_path / "words.txt"
    with file_path.open("w", encoding="utf-8") as f:
        for word in words:
            f.write(f"{word}\n")
    return file_path


@pytest.fixture
def config_file(tmp_path, word_file):
    """A valid config file pointing at the sample word list."""
    config_path = tmp_path / "config.txt"
    config_path.write_text(
        f"wordlist = {word_file}\n"
        "prune_on_remove = false\n"
        "log_queries = true\n",
        encoding="utf-8",
    )
    return config_path
