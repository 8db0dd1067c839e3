"""This module represents a node of the compressed trie (radix tree).

A node keeps the part of a word consumed on the edge leading to it, a flag
telling whether the path up to it is a stored word and its child nodes.
In a trie holding "box" and "boxes" the shape is:

    [box, True]
        |
    [es, True]

Adding "boxing" gives:

         [box, True]
         /         \\
    [es, True]   [ing, True]

A node that is not a complete word only appears once a split happens
inside an edge, e.g. after also adding "boxer":

          [box, True]
          /         \\
     [e, False]   [ing, True]
      /      \\
 [s, True]  [r, True]
"""

import logging
from typing import Optional

from trie_search.custom_data_structures.CompressedTrie.string_helper import (
    longest_common_prefix,
)


class TrieNode:
    """Represent a node in the compressed trie structure.

    Two nodes compare equal when their prefixes are equal, regardless of
    their flags and children. A parent holds at most one child per prefix,
    so this is what identifies a slot in the parent. Don't use it to
    compare whole subtrees.
    """

    def __init__(
        self,
        prefix: str,
        is_complete_word: bool = True,
        children: Optional[list["TrieNode"]] = None,
    ) -> None:
        """Initialize a new node.

        Args:
            prefix (str): The characters consumed on the edge from the
            parent to this node. Empty only for the root.
            is_complete_word (bool): Whether the path from the root to
            this node is a stored word.
            children (list[TrieNode], optional): The initial child nodes.

        """
        self._prefix = prefix
        self.is_complete_word = is_complete_word
        # Child nodes keyed by their prefix
        self.children: dict[str, TrieNode] = {}
        for child in children or []:
            self.children[child.prefix] = child

    @property
    def prefix(self) -> str:
        """str: The edge label of this node."""
        return self._prefix

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        return other is self or other.prefix == self.prefix

    def __hash__(self) -> int:
        return hash(self.prefix)

    def __repr__(self) -> str:
        return (
            f"TrieNode(prefix={self.prefix!r}, "
            f"is_complete_word={self.is_complete_word}, "
            f"children={len(self.children)})"
        )

    def prefix_matching_child(self, text: str) -> Optional["TrieNode"]:
        """Find the child whose prefix is a leading part of `text`.

        Args:
            text (str): The remaining text relative to this node.

        Returns:
            Optional[TrieNode]: The matching child, or None.

        """
        for child in self.children.values():
            if text.startswith(child.prefix):
                return child
        return None

    def reverse_matching_child(self, text: str) -> Optional["TrieNode"]:
        """Find the child whose prefix starts with `text`.

        Args:
            text (str): The remaining text relative to this node.

        Returns:
            Optional[TrieNode]: The matching child, or None.

        """
        for child in self.children.values():
            if child.prefix.startswith(text):
                return child
        return None

    def overlapping_child(self, text: str) -> Optional["TrieNode"]:
        """Find the child sharing a non-empty common prefix with `text`.

        Args:
            text (str): The remaining text relative to this node.

        Returns:
            Optional[TrieNode]: The matching child, or None.

        """
        for child in self.children.values():
            if longest_common_prefix(child.prefix, text):
                return child
        return None

    def replace_child(self, old: "TrieNode", new: "TrieNode") -> None:
        """Swap the child `old` for `new` in this node's children."""
        del self.children[old.prefix]
        self.children[new.prefix] = new

    def insert(self, text: str) -> None:
        """Insert `text` into the subtree rooted at this node.

        `text` is relative to this node, i.e. the characters consumed by
        the ancestors are already stripped off.

        Args:
            text (str): The remaining part of the word to insert.

        """
        # The whole word was consumed on the way here
        if not text:
            self.is_complete_word = True
            return

        child = self.prefix_matching_child(text)
        if child is not None:
            if len(child.prefix) == len(text):
                child.is_complete_word = True
            else:
                child.insert(text[len(child.prefix) :])
            return

        # The new word ends inside the edge of an existing child
        old = self.reverse_matching_child(text)
        if old is not None:
            keeper = TrieNode(
                old.prefix[len(text) :],
                old.is_complete_word,
                list(old.children.values()),
            )
            self.replace_child(old, TrieNode(text, True, [keeper]))
            logging.debug(f"Split edge '{old.prefix}' at '{text}'")
            return

        # The new word diverges from an existing child partway
        old = self.overlapping_child(text)
        if old is not None:
            common = longest_common_prefix(old.prefix, text)
            keeper = TrieNode(
                old.prefix[len(common) :],
                old.is_complete_word,
                list(old.children.values()),
            )
            inserted = TrieNode(text[len(common) :])
            self.replace_child(old, TrieNode(common, False, [keeper, inserted]))
            logging.debug(
                f"Branched edge '{old.prefix}' at '{common}' for '{text}'",
            )
            return

        new_leaf = TrieNode(text)
        self.children[new_leaf.prefix] = new_leaf

    def locate_prefix_subtree(
        self,
        accumulated_word: str,
        remaining_prefix: str,
    ) -> tuple[Optional["TrieNode"], str]:
        """Find the subtree holding every word that starts with a prefix.

        Args:
            accumulated_word (str): The part of the query already matched
            on the way to this node.
            remaining_prefix (str): The part of the query still to match.

        Returns:
            tuple[Optional[TrieNode], str]: The node whose path is the
            shortest one starting with the full query, together with the
            word spelled by that path. The node is None if no stored path
            starts with the query.

        """
        if not remaining_prefix:
            return self, accumulated_word

        child = self.prefix_matching_child(remaining_prefix)
        if child is not None:
            if child.prefix == remaining_prefix:
                return child, accumulated_word + remaining_prefix
            return child.locate_prefix_subtree(
                accumulated_word + child.prefix,
                remaining_prefix[len(child.prefix) :],
            )

        # The query ends in the middle of this child's edge
        child = self.reverse_matching_child(remaining_prefix)
        if child is not None:
            return child, accumulated_word + child.prefix

        return None, accumulated_word

    def collect_complete_words(
        self,
        accumulated_word: str,
        out: list[str],
    ) -> None:
        """Append every complete word of this subtree to `out`.

        Args:
            accumulated_word (str): The word spelled by the path up to and
            including this node.
            out (list[str]): The list to fill.

        """
        if self.is_complete_word:
            out.append(accumulated_word)
        for child in self.children.values():
            child.collect_complete_words(accumulated_word + child.prefix, out)

    def find_word_path(self, text: str) -> Optional[list["TrieNode"]]:
        """Find the chain of nodes spelling `text` below this node.

        Args:
            text (str): The word relative to this node.

        Returns:
            Optional[list[TrieNode]]: The nodes from this one down to the
            node that spells `text`, or None if no such node exists. The
            last node may or may not be a complete word.

        """
        path = [self]
        remaining = text
        while remaining:
            child = path[-1].prefix_matching_child(remaining)
            if child is None:
                return None
            remaining = remaining[len(child.prefix) :]
            path.append(child)
        return path

    def find_word_node(self, text: str) -> Optional["TrieNode"]:
        """Return the node that spells `text` below this node, or None."""
        path = self.find_word_path(text)
        if path is None:
            return None
        return path[-1]

    def find_word(self, text: str) -> bool:
        """Check whether `text` is a complete word below this node.

        Args:
            text (str): The word relative to this node.

        Returns:
            bool: True if the node spelling `text` exists and is a
            complete word, False otherwise.

        """
        node = self.find_word_node(text)
        return node is not None and node.is_complete_word

    def prune_child(self, child: "TrieNode") -> Optional["TrieNode"]:
        """Remove or merge a child that no longer carries a word.

        A child that is not a complete word is removed when it has no
        children and merged with its only child when it has one.

        Args:
            child (TrieNode): One of this node's children.

        Returns:
            Optional[TrieNode]: The node now occupying the child's
            place, or None if the child was removed.

        """
        if child.is_complete_word or len(child.children) > 1:
            return child

        if not child.children:
            del self.children[child.prefix]
            logging.debug(f"Pruned dangling node '{child.prefix}'")
            return None

        (grandchild,) = child.children.values()
        merged = TrieNode(
            child.prefix + grandchild.prefix,
            grandchild.is_complete_word,
            list(grandchild.children.values()),
        )
        self.replace_child(child, merged)
        logging.debug(
            f"Merged '{child.prefix}' with its only child "
            f"'{grandchild.prefix}'",
        )
        return merged

    def prune(self) -> None:
        """Prune every node below this one, deepest nodes first."""
        for child in list(self.children.values()):
            child.prune()
            self.prune_child(child)

    def count_nodes(self) -> int:
        """Return the number of nodes in this subtree, this one included."""
        return 1 + sum(
            child.count_nodes() for child in self.children.values()
        )
