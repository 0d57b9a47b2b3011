"""Huffman tree construction."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional, Union

from goolzip.heap import NodeHeap

MAX_FREQUENCY = 9_000_000_000_000_000_000


@dataclass(eq=False)
class TreeNode:
    """A node of a Huffman tree; leaves carry a byte symbol."""

    frequency: int
    symbol: Optional[int] = None
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @classmethod
    def leaf(cls, symbol: int, frequency: int) -> "TreeNode":
        """Create a leaf for ``symbol``; the frequency saturates at MAX_FREQUENCY."""
        if not 0 <= symbol <= 255:
            raise ValueError(f"symbol must be a byte value, got {symbol}")
        if frequency < 0:
            raise ValueError(f"frequency must not be negative, got {frequency}")
        return cls(frequency=min(frequency, MAX_FREQUENCY), symbol=symbol)

    @classmethod
    def join(cls, left: "TreeNode", right: "TreeNode") -> "TreeNode":
        """Create an inner node over two subtrees."""
        total = min(left.frequency + right.frequency, MAX_FREQUENCY)
        return cls(frequency=total, left=left, right=right)

    def is_leaf(self) -> bool:
        return self.symbol is not None


def build_huffman_tree(
    frequencies: Union[Mapping[int, int], Iterable[int]],
) -> TreeNode:
    """Build a Huffman tree from byte counts.

    ``frequencies`` is either a mapping from byte value to count or a sequence
    indexed by byte value. Symbols with a zero count are left out.
    """
    if isinstance(frequencies, Mapping):
        counts = sorted(frequencies.items())
    else:
        counts = list(enumerate(frequencies))
    leaves = [TreeNode.leaf(symbol, count) for symbol, count in counts if count]
    if not leaves:
        raise ValueError("cannot build a Huffman tree without symbols")
    heap = NodeHeap(leaves)
    while len(heap) > 1:
        left = heap.pop()
        right = heap.pop()
        heap.push(TreeNode.join(left, right))
    return heap.pop()