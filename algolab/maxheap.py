"""Array-backed binary max-heap used as a priority queue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class HeapItem:
    """An entry of the max priority queue."""

    priority: int
    data: Any = None


def parent(index: int) -> int:
    """Index of the parent of ``index``; the root has parent -1."""
    return -1 if index == 0 else (index - 1) // 2


def left_child(index: int) -> int:
    """Index of the left child of ``index``."""
    return 2 * index + 1


def right_child(index: int) -> int:
    """Index of the right child of ``index``."""
    return 2 * index + 2


class MaxPriorityQueue:
    """A priority queue where the item with the highest priority comes first.

    ``items`` holds the heap in array order; ``capacity`` doubles whenever an
    insertion finds the queue full.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.items: list[HeapItem] = []

    def __len__(self) -> int:
        return len(self.items)

    def _swap(self, a: int, b: int) -> None:
        self.items[a], self.items[b] = self.items[b], self.items[a]

    def sift_up(self, index: int) -> None:
        """Move the item at ``index`` up until its parent is not smaller."""
        items = self.items
        while index > 0 and items[index].priority > items[parent(index)].priority:
            up = parent(index)
            self._swap(index, up)
            index = up

    def sift_down(self, index: int) -> None:
        """Move the item at ``index`` down until no child is larger."""
        items = self.items
        size = len(items)
        while True:
            largest = index
            left, right = left_child(index), right_child(index)
            if left < size and items[left].priority > items[largest].priority:
                largest = left
            if right < size and items[right].priority > items[largest].priority:
                largest = right
            if largest == index:
                return
            self._swap(index, largest)
            index = largest

    def insert(self, item: HeapItem) -> None:
        """Add ``item``, doubling the capacity when the queue is full."""
        if len(self.items) >= self.capacity:
            self.capacity = max(1, self.capacity * 2)
        self.items.append(item)
        self.sift_up(len(self.items) - 1)

    def peek_max(self) -> HeapItem:
        """Return the item with the highest priority without removing it."""
        if not self.items:
            raise IndexError("peek from an empty priority queue")
        return self.items[0]

    def remove_max(self) -> HeapItem:
        """Remove and return the item with the highest priority."""
        if not self.items:
            raise IndexError("remove from an empty priority queue")
        top = self.items[0]
        last = self.items.pop()
        if self.items:
            self.items[0] = last
            self.sift_down(0)
        return top