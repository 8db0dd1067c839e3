from pathlib import Path

import pytest

from trie_search.service.word_source import build_trie, load_words


def test_load_words(word_file, words):
    assert load_words(word_file) == words


def test_load_words_strips_line_endings_and_blank_lines(tmp_path):
    file_path = tmp_path / "words.txt"
    file_path.write_bytes(b"apple\r\n\r\nbanana\n   \n cherry pie\n")

    assert load_words(file_path) == ["apple", "banana", " cherry pie"]


def test_load_words_empty_file(tmp_path):
    file_path = tmp_path / "empty.txt"
    file_path.touch()
    assert load_words(file_path) == []


def test_load_words_file_not_found():
    with pytest.raises(FileNotFoundError) as excinfo:
        load_words(Path("/non/existent/file.txt"))
    assert "File not found" in str(excinfo.value)


def test_build_trie(word_file, words):
    trie = build_trie(word_file)
    assert trie.size() == len(words)
    assert trie.contains_all(words)
    assert trie.prune_on_remove is False


def test_build_trie_counts_duplicates_once(tmp_path):
    file_path = tmp_path / "words.txt"
    file_path.write_text("box\nboxes\nbox\n", encoding="utf-8")

    trie = build_trie(file_path, prune_on_remove=True)

    assert trie.size() == 2
    assert trie.prune_on_remove is True


def test_build_trie_logs_summary(word_file, caplog):
    with caplog.at_level("INFO"):
        build_trie(word_file)
    assert "8 words read, 8 distinct" in caplog.text


def test_build_trie_file_not_found():
    with pytest.raises(FileNotFoundError):
        build_trie(Path("/non/existent/file.txt"))
