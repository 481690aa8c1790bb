from __future__ import annotations
import heapq
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, Optional

logger = logging.getLogger(__name__)

Symbol = Hashable


class SymbolNotInTableError(KeyError):
    """Symbol to encode has no code (table built from other frequencies)."""


class CorruptStreamError(ValueError):
    """Payload bits do not decode cleanly with the given tree."""


# sym of internal and empty nodes; None stays usable as a symbol
NO_SYMBOL = object()


@dataclass(frozen=True, eq=False)
class Node:
    freq: int = 0
    sym: Symbol = NO_SYMBOL
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.sym is not NO_SYMBOL and self.left is None and self.right is None

    @property
    def is_empty(self) -> bool:
        return self.sym is NO_SYMBOL and self.left is None and self.right is None


# Tree of an empty input: no symbol, no children
EMPTY_TREE = Node()


def build_frequencies(symbols: Iterable[Symbol]) -> Dict[Symbol, int]:
    return Counter(symbols)


def merge_frequencies(*parts: Dict[Symbol, int]) -> Dict[Symbol, int]:
    """Sum partial frequency maps (e.g. counted per chunk)."""
    total: Counter = Counter()
    for part in parts:
        total.update(part)
    return total


def build_tree(freqs: Dict[Symbol, int]) -> Node:
    """
    Greedy Huffman merge.
    Heap entries are (freq, seq, node); seq is an insertion counter, so equal
    weights pop oldest first. Leaves are seeded in the mapping's order.
    """
    if not freqs:
        return EMPTY_TREE

    pq = []
    for seq, (s, f) in enumerate(freqs.items()):
        if f < 1:
            raise ValueError(f"frequency of {s!r} must be >= 1, got {f}")
        pq.append((f, seq, Node(freq=f, sym=s)))
    heapq.heapify(pq)
    seq = len(pq)

    if len(pq) == 1:
        # Edge case: only one symbol -> wrap it so it still gets a 1-bit code
        only = pq[0][2]
        return Node(freq=only.freq, left=only)

    while len(pq) > 1:
        fa, _, a = heapq.heappop(pq)
        fb, _, b = heapq.heappop(pq)
        heapq.heappush(pq, (fa + fb, seq, Node(freq=fa + fb, left=a, right=b)))
        seq += 1

    root = pq[0][2]
    logger.debug("built tree: %d symbols, root weight %d", len(freqs), root.freq)
    return root


def build_codebook(node: Node, prefix: str = "", code: Optional[Dict[Symbol, str]] = None) -> Dict[Symbol, str]:
    if code is None:
        code = {}
    if node.is_leaf:
        code[node.sym] = prefix
        return code
    if node.left is not None:
        build_codebook(node.left, prefix + "0", code)
    if node.right is not None:
        build_codebook(node.right, prefix + "1", code)
    return code


def check_tree(root: Node) -> None:
    """
    Assert the structural invariants of a built tree:
      - internal weight == sum of child weights
      - internal nodes have two children, except a root wrapping a lone leaf
      - leaves have no children
    """
    if root.is_empty:
        return
    if root.right is None:
        assert root.left is not None and root.left.is_leaf, "single-child root must wrap a leaf"
        assert root.freq == root.left.freq, "weight mismatch at root"
        return

    stack = [root]
    while stack:
        node = stack.pop()
        if node.sym is not NO_SYMBOL:
            assert node.left is None and node.right is None, f"leaf {node.sym!r} has children"
            continue
        assert node.left is not None and node.right is not None, "internal node with one child"
        assert node.freq == node.left.freq + node.right.freq, "weight mismatch"
        stack.append(node.left)
        stack.append(node.right)
