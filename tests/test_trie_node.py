import pytest

from trie_search.custom_data_structures.CompressedTrie.TrieNode import (
    TrieNode,
)


def only_child(node):
    assert len(node.children) == 1
    return next(iter(node.children.values()))


def shape(node):
    """Describe a subtree as nested (prefix, flag, children) tuples."""
    return (
        node.prefix,
        node.is_complete_word,
        sorted(shape(child) for child in node.children.values()),
    )


# Test node equality
def test_equality_respects_prefix_only():
    assert TrieNode("test") == TrieNode("test")
    assert hash(TrieNode("test")) == hash(TrieNode("test"))


def test_equality_ignores_word_flag_and_children():
    one = TrieNode("test", False, [TrieNode("ing")])
    other = TrieNode("test")
    assert one == other


def test_equality_respects_case():
    assert TrieNode("test") != TrieNode("Test")


def test_equality_only_compares_nodes():
    assert TrieNode("test") != "test"


# Test insertion
def test_insert_missing_prefix():
    root = TrieNode("", False)
    root.insert("test")
    assert "test" in root.children
    assert root.children["test"].is_complete_word is True


def test_insert_existing_prefix_marks_node_complete():
    subtree = TrieNode("bo", False, [TrieNode("ss"), TrieNode("x")])
    root = TrieNode("", False, [subtree])
    assert only_child(root).is_complete_word is False

    root.insert("bo")

    assert only_child(root).is_complete_word is True
    assert set(only_child(root).children) == {"ss", "x"}


def test_insert_empty_text_marks_node_complete():
    root = TrieNode("", False)
    root.insert("")
    assert root.is_complete_word is True
    assert root.children == {}


def test_insert_is_idempotent():
    root = TrieNode("", False)
    root.insert("box")
    root.insert("box")
    assert shape(root) == ("", False, [("box", True, [])])


def test_build_tree():
    root = TrieNode("", False)
    root.insert("box")
    root.insert("boxes")

    node = only_child(root)
    assert node.prefix == "box"
    assert node.is_complete_word is True
    leaf = only_child(node)
    assert leaf.prefix == "es"
    assert leaf.is_complete_word is True
    assert leaf.children == {}

    root.insert("boxing")
    assert set(node.children) == {"es", "ing"}
    for leaflet in node.children.values():
        assert leaflet.children == {}
        assert leaflet.is_complete_word is True


def test_build_branching_tree():
    root = TrieNode("", False)
    root.insert("boxes")
    root.insert("boxing")

    node = only_child(root)
    assert node.prefix == "box"
    assert node.is_complete_word is False
    assert set(node.children) == {"es", "ing"}
    for leaf in node.children.values():
        assert leaf.children == {}
        assert leaf.is_complete_word is True


def test_prefix_splitting_tree():
    root = TrieNode("", False)
    root.insert("boxes")
    root.insert("box")

    node = only_child(root)
    assert node.prefix == "box"
    assert node.is_complete_word is True
    leaf = only_child(node)
    assert leaf.prefix == "es"
    assert leaf.is_complete_word is True


def test_split_keeps_descendants():
    root = TrieNode("", False)
    root.insert("boxes")
    root.insert("boxer")
    root.insert("bo")

    assert shape(root) == (
        "",
        False,
        [
            (
                "bo",
                True,
                [("xe", False, [("r", True, []), ("s", True, [])])],
            ),
        ],
    )


def test_nested_split_tree():
    root = TrieNode("", False)
    for word in ["box", "boxes", "boxing", "boxer"]:
        root.insert(word)

    assert shape(root) == (
        "",
        False,
        [
            (
                "box",
                True,
                [
                    ("e", False, [("r", True, []), ("s", True, [])]),
                    ("ing", True, []),
                ],
            ),
        ],
    )


def test_insertion_order_does_not_change_shape():
    first = TrieNode("", False)
    second = TrieNode("", False)
    for word in ["box", "boxes"]:
        first.insert(word)
    for word in ["boxes", "box"]:
        second.insert(word)
    assert shape(first) == shape(second)


def test_siblings_never_share_a_prefix():
    root = TrieNode("", False)
    for word in ["apple", "apply", "ape", "bat", "batch", "b", "a"]:
        root.insert(word)

    def check(node):
        prefixes = list(node.children)
        for one in prefixes:
            assert one
            for two in prefixes:
                if one != two:
                    assert one[0] != two[0]
        for child in node.children.values():
            check(child)

    check(root)


# Test child lookups
def test_child_classifications():
    root = TrieNode("", False, [TrieNode("box"), TrieNode("cat")])
    assert root.prefix_matching_child("boxes").prefix == "box"
    assert root.prefix_matching_child("bo") is None
    assert root.reverse_matching_child("bo").prefix == "box"
    assert root.reverse_matching_child("boxes") is None
    assert root.overlapping_child("bat").prefix == "box"
    assert root.overlapping_child("dog") is None


# Test subtree lookups
def test_find_subtree_node():
    root = TrieNode("", False)
    root.insert("box")
    root.insert("boxes")

    box_node = only_child(root)
    es_node = only_child(box_node)

    node, word = root.locate_prefix_subtree("", "b")
    assert node is box_node
    assert word == "box"

    node, word = root.locate_prefix_subtree("", "boxe")
    assert node is es_node
    assert word == "boxes"

    node, word = root.locate_prefix_subtree("", "box")
    assert node is box_node
    assert word == "box"


def test_find_subtree_for_empty_prefix_is_the_node_itself():
    root = TrieNode("", False)
    root.insert("box")
    node, word = root.locate_prefix_subtree("", "")
    assert node is root
    assert word == ""


def test_empty_subtree_node():
    root = TrieNode("", False)
    node, word = root.locate_prefix_subtree("test", "b")
    assert node is None
    assert word == "test"


def test_subtree_missing_after_partial_match():
    root = TrieNode("", False)
    root.insert("box")
    root.insert("boxes")
    node, word = root.locate_prefix_subtree("", "boxing")
    assert node is None
    assert word == "box"

    node, word = root.locate_prefix_subtree("", "cat")
    assert node is None
    assert word == ""


# Test word collection
def test_collect_complete_words():
    root = TrieNode("", False)
    root.insert("box")
    root.insert("boxes")

    subtree_words = []
    only_child(root).collect_complete_words("asd", subtree_words)
    assert subtree_words == ["asd", "asdes"]

    subtree_words = []
    root.collect_complete_words("", subtree_words)
    assert sorted(subtree_words) == ["box", "boxes"]


def test_collect_complete_words_is_deterministic():
    root = TrieNode("", False)
    for word in ["twitter", "test", "twerk", "testing"]:
        root.insert(word)

    first, second = [], []
    root.collect_complete_words("", first)
    root.collect_complete_words("", second)
    assert first == second


# Test exact lookups
@pytest.mark.parametrize(
    "text, expected",
    [
        ("box", True),
        ("boxes", True),
        ("boxe", False),
        ("bo", False),
        ("boxing", False),
        ("", False),
    ],
)
def test_find_word(text, expected):
    root = TrieNode("", False)
    root.insert("box")
    root.insert("boxes")
    assert root.find_word(text) is expected


def test_find_word_path():
    root = TrieNode("", False)
    root.insert("box")
    root.insert("boxes")

    path = root.find_word_path("boxes")
    assert [node.prefix for node in path] == ["", "box", "es"]
    assert root.find_word_path("") == [root]
    assert root.find_word_path("boxe") is None


def test_find_word_node_returns_incomplete_nodes():
    root = TrieNode("", False)
    root.insert("boxes")
    root.insert("boxing")

    node = root.find_word_node("box")
    assert node is not None
    assert node.is_complete_word is False
    assert root.find_word("box") is False


# Test pruning
def test_prune_child_keeps_complete_nodes():
    child = TrieNode("box")
    root = TrieNode("", False, [child])
    assert root.prune_child(child) is child
    assert "box" in root.children


def test_prune_child_removes_dangling_leaf():
    child = TrieNode("box", False)
    root = TrieNode("", False, [child])
    assert root.prune_child(child) is None
    assert root.children == {}


def test_prune_child_merges_single_child():
    child = TrieNode("box", False, [TrieNode("es", True, [TrieNode("s")])])
    root = TrieNode("", False, [child])

    merged = root.prune_child(child)

    assert merged.prefix == "boxes"
    assert merged.is_complete_word is True
    assert set(merged.children) == {"s"}
    assert root.children == {"boxes": merged}


def test_prune_child_keeps_branching_nodes():
    child = TrieNode("box", False, [TrieNode("es"), TrieNode("ing")])
    root = TrieNode("", False, [child])
    assert root.prune_child(child) is child


def test_prune_whole_subtree():
    root = TrieNode("", False)
    for word in ["test", "testing", "twitter", "twerk"]:
        root.insert(word)
    assert root.count_nodes() == 7

    root.find_word_node("twerk").is_complete_word = False
    root.find_word_node("testing").is_complete_word = False
    root.prune()

    assert shape(root) == (
        "",
        False,
        [("t", False, [("est", True, []), ("witter", True, [])])],
    )
    assert root.count_nodes() == 4


def test_prune_collapses_chains():
    root = TrieNode("", False)
    for word in ["a", "ab", "abc"]:
        root.insert(word)
    root.find_word_node("a").is_complete_word = False
    root.find_word_node("ab").is_complete_word = False

    root.prune()

    assert shape(root) == ("", False, [("abc", True, [])])


def test_prune_never_removes_the_node_itself():
    root = TrieNode("", False)
    root.prune()
    assert root.children == {}
    assert root.count_nodes() == 1
