import pytest

from huff_canonical import canonical_codes_from_lengths, code_lengths, tree_from_lengths
from huffman import EMPTY_TREE, build_codebook, build_frequencies, build_tree, check_tree


def test_code_lengths_follow_tree_depth():
    root = build_tree(build_frequencies("aabbbcccc"))
    assert code_lengths(root) == {"c": 1, "a": 2, "b": 2}


def test_code_lengths_single_and_empty():
    assert code_lengths(build_tree(build_frequencies("zzz"))) == {"z": 1}
    assert code_lengths(EMPTY_TREE) == {}


def test_canonical_codes_ordered_by_length_then_symbol():
    codes = canonical_codes_from_lengths({"c": 1, "a": 2, "b": 2})
    assert codes == {"c": (0, 1), "a": (2, 2), "b": (3, 2)}


def test_tree_from_lengths_matches_canonical_codes():
    root = tree_from_lengths({"c": 1, "b": 2, "a": 2})
    assert build_codebook(root) == {"c": "0", "a": "10", "b": "11"}
    check_tree(root)


def test_tree_from_lengths_preserves_lengths():
    text = "she sells sea shells by the sea shore"
    lengths = code_lengths(build_tree(build_frequencies(text)))
    assert code_lengths(tree_from_lengths(lengths)) == lengths


def test_tree_from_lengths_single_symbol():
    root = tree_from_lengths({"q": 1})
    assert root.right is None
    assert root.left.sym == "q"
    assert build_codebook(root) == {"q": "0"}


def test_tree_from_lengths_empty():
    assert tree_from_lengths({}) is EMPTY_TREE


@pytest.mark.parametrize("lengths", [
    {"a": 1, "b": 1, "c": 1},
    {"a": 1, "b": 2},
    {"a": 2},
    {"a": 0, "b": 1},
])
def test_tree_from_lengths_rejects_invalid_sets(lengths):
    with pytest.raises(ValueError):
        tree_from_lengths(lengths)
