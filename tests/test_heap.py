"""
Unit tests for the decrease-key min-heap.
"""

from dataclasses import dataclass
from operator import attrgetter

import pytest

from ugraph.paths import MinHeap


@dataclass(eq=False)
class Item:
    name: str
    key: float


def make_heap(keys: dict[str, float]) -> tuple[MinHeap, dict[str, Item]]:
    items = {name: Item(name, key) for name, key in keys.items()}
    return MinHeap(items.values(), key=attrgetter("key")), items


def drain(heap: MinHeap) -> list[str]:
    return [heap.pop().name for _ in range(len(heap))]


class TestMinHeap:
    """Test build, extract-minimum and reorder."""

    def test_pops_in_key_order(self):
        """Items come out smallest key first."""
        heap, _ = make_heap({"a": 5, "b": 1, "c": 4, "d": 2, "e": 3})
        assert drain(heap) == ["b", "d", "e", "c", "a"]
        assert not heap

    def test_reorder_after_decrease(self):
        """Lowering a key and reordering moves the item to the front."""
        heap, items = make_heap({"a": 1, "b": 2, "c": 3, "d": 4})
        items["d"].key = 0
        heap.reorder(items["d"])
        assert heap.peek() is items["d"]
        assert drain(heap) == ["d", "a", "b", "c"]

    def test_reorder_after_increase(self):
        """Raising a key and reordering moves the item back."""
        heap, items = make_heap({"a": 1, "b": 2, "c": 3})
        items["a"].key = 10
        heap.reorder(items["a"])
        assert drain(heap) == ["b", "c", "a"]

    def test_infinite_keys(self):
        """Infinite keys sort last and can be decreased later."""
        inf = float("inf")
        heap, items = make_heap({"a": inf, "b": 0, "c": inf})
        assert heap.pop() is items["b"]
        items["c"].key = 7
        heap.reorder(items["c"])
        assert drain(heap) == ["c", "a"]

    def test_push_and_contains(self):
        """Pushed items join the ordering; popped items leave the heap."""
        heap, items = make_heap({"a": 3})
        extra = Item("z", 1)
        heap.push(extra)
        assert extra in heap
        assert len(heap) == 2
        assert heap.pop() is extra
        assert extra not in heap
        assert items["a"] in heap

    def test_empty_heap(self):
        """pop and peek on an empty heap raise IndexError."""
        heap = MinHeap([], key=attrgetter("key"))
        with pytest.raises(IndexError):
            heap.pop()
        with pytest.raises(IndexError):
            heap.peek()

    def test_duplicates_rejected(self):
        """The same item cannot be in the heap twice."""
        item = Item("a", 1)
        with pytest.raises(ValueError):
            MinHeap([item, item], key=attrgetter("key"))
        heap = MinHeap([item], key=attrgetter("key"))
        with pytest.raises(ValueError):
            heap.push(item)

    def test_reorder_unknown(self):
        """Reordering an item that is not in the heap raises KeyError."""
        heap, _ = make_heap({"a": 1})
        with pytest.raises(KeyError):
            heap.reorder(Item("b", 0))
