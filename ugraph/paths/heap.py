"""
Binary min-heap with decrease-key support.

heapq cannot move an item after its key changes, which Dijkstra needs.
MinHeap keeps each item's position so reorder() can sift it in place.
Items must be hashable; the key is read through a callable on every
comparison, so callers change the key on the item and then call reorder().
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class MinHeap(Generic[T]):
    """
    Mutable min-priority structure.

    Ties between equal keys are broken arbitrarily.

    Args:
        items: Initial contents (heapified in linear time)
        key: Returns the ordering key of an item
    """

    def __init__(self, items: Iterable[T], key: Callable[[T], Any]) -> None:
        self._key = key
        self._heap: list[T] = []
        self._index: dict[T, int] = {}

        for item in items:
            if item in self._index:
                raise ValueError(f"Duplicate heap item: {item!r}")
            self._index[item] = len(self._heap)
            self._heap.append(item)

        for i in reversed(range(len(self._heap) // 2)):
            self._sift_down(i)

    def push(self, item: T) -> None:
        """Add an item that is not already in the heap."""
        if item in self._index:
            raise ValueError(f"Duplicate heap item: {item!r}")
        self._index[item] = len(self._heap)
        self._heap.append(item)
        self._sift_up(len(self._heap) - 1)

    def peek(self) -> T:
        """Return the minimum item without removing it."""
        if not self._heap:
            raise IndexError("peek from an empty heap")
        return self._heap[0]

    def pop(self) -> T:
        """Remove and return the minimum item."""
        if not self._heap:
            raise IndexError("pop from an empty heap")

        last = self._heap.pop()
        del self._index[last]
        if not self._heap:
            return last

        top = self._heap[0]
        del self._index[top]
        self._heap[0] = last
        self._index[last] = 0
        self._sift_down(0)
        return top

    def reorder(self, item: T) -> None:
        """
        Restore heap order after item's key changed.

        Raises:
            KeyError: If item is not in the heap
        """
        i = self._index[item]
        self._sift_up(i)
        # sift_up left it in place only if the key grew
        if self._heap[i] is item:
            self._sift_down(i)

    def __contains__(self, item: object) -> bool:
        return item in self._index

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"MinHeap(size={len(self)})"

    # =========================================================================
    # Internals
    # =========================================================================

    def _less(self, i: int, j: int) -> bool:
        return self._key(self._heap[i]) < self._key(self._heap[j])

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i]] = i
        self._index[heap[j]] = j

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        size = len(self._heap)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < size and self._less(left, smallest):
                smallest = left
            if right < size and self._less(right, smallest):
                smallest = right
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest
