"""Array-backed binary min-heap used as a priority queue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class HeapItem:
    """An entry of the min priority queue; a lower priority comes first."""

    content: Any
    priority: int


def parent(index: int) -> int:
    """Index of the parent of ``index``; the root is its own parent."""
    return (index - 1) // 2 if index > 0 else 0


def left_child(index: int) -> int:
    """Index of the left child of ``index``."""
    return 2 * index + 1


def right_child(index: int) -> int:
    """Index of the right child of ``index``."""
    return 2 * index + 2


class MinPriorityQueue:
    """A priority queue where the item with the lowest priority comes first.

    ``items`` holds the heap in array order; ``capacity`` doubles whenever an
    insertion finds the queue full.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be greater than zero")
        self.capacity = capacity
        self.items: list[HeapItem] = []

    def __len__(self) -> int:
        return len(self.items)

    def _swap(self, a: int, b: int) -> None:
        self.items[a], self.items[b] = self.items[b], self.items[a]

    def sift_up(self, index: int) -> None:
        """Move the item at ``index`` up while its parent is larger."""
        items = self.items
        while index > 0 and items[parent(index)].priority > items[index].priority:
            up = parent(index)
            self._swap(index, up)
            index = up

    def sift_down(self, index: int) -> None:
        """Move the item at ``index`` down while a child is smaller."""
        items = self.items
        size = len(items)
        while True:
            smallest = index
            left, right = left_child(index), right_child(index)
            if left < size and items[left].priority < items[smallest].priority:
                smallest = left
            if right < size and items[right].priority < items[smallest].priority:
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def insert(self, item: HeapItem) -> None:
        """Add ``item``, doubling the capacity when the queue is full."""
        if len(self.items) >= self.capacity:
            self.capacity *= 2
        self.items.append(item)
        self.sift_up(len(self.items) - 1)

    def peek_min(self) -> HeapItem:
        """Return the item with the lowest priority without removing it."""
        if not self.items:
            raise IndexError("priority queue is empty")
        return self.items[0]

    def remove_min(self) -> HeapItem:
        """Remove and return the item with the lowest priority."""
        if not self.items:
            raise IndexError("cannot remove from empty priority queue")
        smallest = self.items[0]
        last = self.items.pop()
        if self.items:
            self.items[0] = last
            self.sift_down(0)
        return smallest