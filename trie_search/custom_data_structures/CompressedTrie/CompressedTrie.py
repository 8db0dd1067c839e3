"""This module represents the implementation of a compressed trie that
stores a set of strings and answers membership and prefix queries.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any, Optional

from trie_search.custom_data_structures.CompressedTrie.TrieNode import (
    TrieNode,
)


class InvalidWordError(ValueError):
    """Raised when a word argument is None or not a string."""


def _validate_word(word: Any) -> None:
    """Reject a missing word before the trie is touched.

    Args:
        word (Any): The argument to validate.

    Raises:
        InvalidWordError: If `word` is None.

    """
    if word is None:
        raise InvalidWordError("Cannot look for a None word.")


class CompressedTrie:
    """Represents a set of strings stored in a compressed trie."""

    def __init__(
        self,
        items: Optional[Iterable[str]] = None,
        prune_on_remove: bool = False,
    ) -> None:
        """Initialize the trie, optionally filling it with `items`.

        Args:
            items (Iterable[str], optional): Words to add right away.
            prune_on_remove (bool): Whether nodes left without a word are
            pruned after every successful removal.

        """
        self.root = TrieNode("", False)
        self.prune_on_remove = prune_on_remove
        # Kept here since removal leaves nodes behind in the tree
        self._size = 0
        if items is not None:
            self.add_all(items)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, str):
            return False
        return self.root.find_word(item)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.matches("")))

    def __repr__(self) -> str:
        return f"CompressedTrie({sorted(self.matches(''))!r})"

    def size(self) -> int:
        """Return the number of stored words."""
        return self._size

    def is_empty(self) -> bool:
        """Return True if no word is stored."""
        return self._size == 0

    def add(self, word: str) -> bool:
        """Add a word to the trie.

        Args:
            word (str): The word to add.

        Raises:
            InvalidWordError: If `word` is None or not a string.

        Returns:
            bool: True if the set changed, False if the word was
            already present.

        """
        _validate_word(word)
        if not isinstance(word, str):
            raise InvalidWordError(
                f"Only strings can be added, got {type(word).__name__}.",
            )
        if self.root.find_word(word):
            return False
        self.root.insert(word)
        self._size += 1
        return True

    def contains(self, word: str) -> bool:
        """Check whether a word is stored in the trie.

        Args:
            word (str): The word to look for.

        Raises:
            InvalidWordError: If `word` is None.

        Returns:
            bool: True if `word` is stored, False otherwise. Non-string
            arguments are never stored.

        """
        _validate_word(word)
        return word in self

    def remove(self, word: str) -> bool:
        """Remove a word from the trie.

        The node spelling the word only loses its word flag. It is taken
        out of the tree only when `prune_on_remove` is set.

        Args:
            word (str): The word to remove.

        Raises:
            InvalidWordError: If `word` is None.

        Returns:
            bool: True if the word was stored and got removed,
            False otherwise.

        """
        _validate_word(word)
        if not isinstance(word, str):
            return False

        path = self.root.find_word_path(word)
        if path is None or not path[-1].is_complete_word:
            return False

        path[-1].is_complete_word = False
        self._size -= 1

        if self.prune_on_remove:
            # Walk back up so that merges can cascade towards the root
            for parent, child in reversed(list(zip(path, path[1:]))):
                parent.prune_child(child)
        return True

    def matches(self, prefix: str) -> set[str]:
        """Return every stored word that starts with `prefix`.

        Args:
            prefix (str): The prefix the words have to begin with.

        Raises:
            InvalidWordError: If `prefix` is None or not a string.

        Returns:
            set[str]: The matching words, possibly empty.

        """
        _validate_word(prefix)
        if not isinstance(prefix, str):
            raise InvalidWordError(
                f"Only strings can be matched, got {type(prefix).__name__}.",
            )

        subtree, word = self.root.locate_prefix_subtree("", prefix)
        if subtree is None:
            return set()

        words: list[str] = []
        subtree.collect_complete_words(word, words)
        return set(words)

    def prune(self) -> None:
        """Remove or merge every node that no longer carries a word."""
        nodes_before = self.root.count_nodes()
        self.root.prune()
        logging.debug(
            f"Pruned trie from {nodes_before} to "
            f"{self.root.count_nodes()} nodes",
        )

    def clear(self) -> None:
        """Remove every word from the trie."""
        self.root.children.clear()
        self.root.is_complete_word = False
        self._size = 0

    def add_all(self, items: Iterable[str]) -> bool:
        """Add every word of `items`.

        Returns:
            bool: True if at least one word was added.

        """
        changed = False
        for item in items:
            changed |= self.add(item)
        return changed

    def remove_all(self, items: Iterable[Any]) -> bool:
        """Remove every word of `items`, skipping non-string items.

        Returns:
            bool: True if at least one word was removed.

        """
        changed = False
        for item in items:
            if isinstance(item, str):
                changed |= self.remove(item)
        return changed

    def contains_all(self, items: Iterable[Any]) -> bool:
        """Return True if every item of `items` is stored.

        Stops at the first item that isn't stored.
        """
        return all(item in self for item in items)

    def contains_any(self, items: Iterable[Any]) -> bool:
        """Return True if at least one item of `items` is stored.

        Stops at the first item that is stored.
        """
        return any(item in self for item in items)

    def retain_all(self, items: Iterable[Any]) -> bool:
        """Remove every stored word that isn't in `items`.

        Returns:
            bool: True if at least one word was removed.

        """
        keep = list(items)
        changed = False
        for word in self.matches(""):
            if word not in keep:
                changed |= self.remove(word)
        return changed
