"""Stack and FIFO queue of plain values."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator, Optional


class Stack:
    """A last-in, first-out stack.

    Items given to the constructor are pushed in order, so the last of them
    ends up on top.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = list(items) if items is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]


class Queue:
    """A first-in, first-out queue.

    Items given to the constructor are enqueued in order.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: deque[Any] = deque(items) if items is not None else deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the back."""
        return iter(self._items)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def first(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise IndexError("first element of an empty queue")
        return self._items[0]