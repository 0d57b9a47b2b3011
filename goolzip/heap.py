"""Binary min-heap of tree nodes keyed by their frequency."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class NodeHeap:
    """Min-heap of objects carrying a ``frequency`` attribute.

    Ties are broken by position in the heap, so the order in which equal
    nodes come out is fixed by the order in which they went in.
    """

    def __init__(self, nodes: Iterable[Any] = ()) -> None:
        self._items = list(nodes)
        for index in reversed(range(len(self._items) // 2)):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, node: Any) -> None:
        """Add a node to the heap."""
        self._items.append(node)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the node with the lowest frequency."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        last = self._items.pop()
        if not self._items:
            return last
        top = self._items[0]
        self._items[0] = last
        self._sift_down(0)
        return top

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and items[left].frequency < items[smallest].frequency:
                smallest = left
            if right < size and items[right].frequency < items[smallest].frequency:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index].frequency >= items[parent].frequency:
                return
            items[index], items[parent] = items[parent], items[index]
            index = parent