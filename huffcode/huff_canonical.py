from __future__ import annotations
from typing import Dict, Tuple

from huffman import EMPTY_TREE, Node, Symbol


def _collect_lengths(node: Node, depth: int, out: Dict[Symbol, int]):
    if node.is_leaf:
        out[node.sym] = max(1, depth)  # avoid 0-length
        return
    if node.left is not None:
        _collect_lengths(node.left, depth + 1, out)
    if node.right is not None:
        _collect_lengths(node.right, depth + 1, out)


def code_lengths(root: Node) -> Dict[Symbol, int]:
    lengths: Dict[Symbol, int] = {}
    if not root.is_empty:
        _collect_lengths(root, 0, lengths)
    return lengths


def canonical_codes_from_lengths(lengths: Dict[Symbol, int]) -> Dict[Symbol, Tuple[int, int]]:
    """
    Return mapping: sym -> (code_int, code_len), canonical Huffman.
    Canonical ordering: sort by (code_len, sym). Symbols must be orderable.
    """
    items = sorted(lengths.items(), key=lambda kv: (kv[1], kv[0]))
    code = 0
    prev_len = 0
    out: Dict[Symbol, Tuple[int, int]] = {}
    for sym, L in items:
        if L < 1:
            raise ValueError(f"code length of {sym!r} must be >= 1")
        code <<= (L - prev_len)
        if code >> L:
            raise ValueError("Over-subscribed code lengths")
        out[sym] = (code, L)
        code += 1
        prev_len = L
    return out


def _check_complete(lengths: Dict[Symbol, int]):
    if len(lengths) == 1:
        if next(iter(lengths.values())) != 1:
            raise ValueError("single symbol must have code length 1")
        return
    max_len = max(lengths.values())
    kraft = sum(1 << (max_len - L) for L in lengths.values())
    if kraft != 1 << max_len:
        raise ValueError("Code lengths do not form a complete prefix code")


def _to_node(trie) -> Node:
    if "sym" in trie:
        return Node(sym=trie["sym"])
    left = _to_node(trie[0]) if 0 in trie else None
    right = _to_node(trie[1]) if 1 in trie else None
    return Node(left=left, right=right)


def tree_from_lengths(lengths: Dict[Symbol, int]) -> Node:
    """
    Rebuild a decoding tree whose root-to-leaf paths are the canonical codes.
    Weights are not recoverable from lengths, so every node has freq 0.
    """
    if not lengths:
        return EMPTY_TREE
    _check_complete(lengths)
    codes = canonical_codes_from_lengths(lengths)

    root = {}
    for sym, (code, L) in codes.items():
        cur = root
        for i in range(L - 1, -1, -1):
            bit = (code >> i) & 1
            cur = cur.setdefault(bit, {})
        cur["sym"] = sym
    return _to_node(root)
