"""
Pending-set disciplines for graph traversal.

A traversal only needs to put one item in and take one item out; the order
in which items come back decides the visit order:
- Queue (FIFO): breadth-first
- Stack (LIFO): depth-first
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class PendingSet(ABC, Generic[T]):
    """Abstract insert/remove-one collection driving a traversal."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def put(self, item: T) -> None:
        """Insert one item."""
        self._items.append(item)

    @abstractmethod
    def take(self) -> T:
        """
        Remove and return one item.

        Raises:
            IndexError: If the set is empty
        """
        ...

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"


class Queue(PendingSet[T]):
    """First in, first out."""

    def take(self) -> T:
        return self._items.popleft()


class Stack(PendingSet[T]):
    """Last in, first out."""

    def take(self) -> T:
        return self._items.pop()
