"""Huffman coding over byte values, built on a small node min-heap."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 256
INTERNAL_VALUE = ord("$")


def _parent(index: int) -> int:
    return (index - 1) // 2


def _left(index: int) -> int:
    return 2 * index + 1


def _right(index: int) -> int:
    return 2 * index + 2


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree; leaves carry the byte value they encode."""

    value: int
    left: Optional[HuffmanNode] = None
    right: Optional[HuffmanNode] = None
    parent: Optional[HuffmanNode] = field(default=None, repr=False)

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None


class NodeHeap:
    """A min-heap of ``(element, priority)`` pairs ordered by priority."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("invalid heap capacity")
        self.capacity = capacity
        self.entries: list[tuple[Any, int]] = []

    def __len__(self) -> int:
        return len(self.entries)

    def _swap(self, a: int, b: int) -> None:
        self.entries[a], self.entries[b] = self.entries[b], self.entries[a]

    def _sift_up(self, index: int) -> None:
        entries = self.entries
        while index > 0 and entries[_parent(index)][1] > entries[index][1]:
            up = _parent(index)
            self._swap(index, up)
            index = up

    def _sift_down(self, index: int) -> None:
        entries = self.entries
        size = len(entries)
        while True:
            smallest = index
            left, right = _left(index), _right(index)
            if left < size and entries[left][1] < entries[smallest][1]:
                smallest = left
            if right < size and entries[right][1] < entries[smallest][1]:
                smallest = right
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def insert(self, element: Any, priority: int) -> None:
        """Add ``element`` with ``priority``, doubling capacity when full."""
        if element is None:
            raise ValueError("heap element must not be None")
        if len(self.entries) >= self.capacity:
            self.capacity *= 2
        self.entries.append((element, priority))
        self._sift_up(len(self.entries) - 1)

    def peek(self) -> tuple[Any, int]:
        """Return the pair with the lowest priority without removing it."""
        if not self.entries:
            raise IndexError("heap is empty")
        return self.entries[0]

    def pop_min(self) -> tuple[Any, int]:
        """Remove and return the pair with the lowest priority."""
        if not self.entries:
            raise IndexError("cannot remove from empty heap")
        smallest = self.entries[0]
        last = self.entries.pop()
        if self.entries:
            self.entries[0] = last
            self._sift_down(0)
        return smallest


def _byte_values(text: str) -> list[int]:
    values = [ord(ch) for ch in text]
    if any(v >= ALPHABET_SIZE for v in values):
        raise ValueError("text holds characters outside the byte range")
    return values


def compute_freqs(text: str) -> list[int]:
    """Count how often each byte value 0..255 occurs in ``text``."""
    freqs = [0] * ALPHABET_SIZE
    for value in _byte_values(text):
        freqs[value] += 1
    return freqs


def make_tree(freqs: Sequence[int]) -> HuffmanNode:
    """Build the Huffman tree for a table of byte frequencies."""
    if len(freqs) > ALPHABET_SIZE:
        raise ValueError("frequency table is larger than the byte alphabet")
    heap = NodeHeap(ALPHABET_SIZE)
    for value, count in enumerate(freqs):
        if count > 0:
            heap.insert(HuffmanNode(value), count)
    if not heap:
        raise ValueError("no symbol has a positive frequency")

    while len(heap) > 1:
        left, left_priority = heap.pop_min()
        right, right_priority = heap.pop_min()
        node = HuffmanNode(INTERNAL_VALUE, left=left, right=right)
        left.parent = right.parent = node
        heap.insert(node, left_priority + right_priority)

    root, _ = heap.peek()
    return root


def make_codes(root: HuffmanNode) -> dict[int, str]:
    """Map every leaf's byte value to its bit string ('0' left, '1' right)."""
    codes: dict[int, str] = {}
    pending: list[tuple[HuffmanNode, str]] = [(root, "")]
    while pending:
        node, prefix = pending.pop()
        if node.is_leaf():
            codes[node.value] = prefix
            continue
        if node.right is not None:
            pending.append((node.right, prefix + "1"))
        if node.left is not None:
            pending.append((node.left, prefix + "0"))
    return codes


def compress(text: str, codes: dict[int, str]) -> str:
    """Encode ``text`` as a bit string; characters without a code are skipped."""
    parts = []
    for value in _byte_values(text):
        code = codes.get(value)
        if code is not None:
            logger.debug("encoding %r -> %s", chr(value), code)
            parts.append(code)
    encoded = "".join(parts)
    logger.debug("final encoded string: %s", encoded)
    return encoded


def decompress(bits: str, root: HuffmanNode) -> str:
    """Decode a bit string by walking the tree from ``root``.

    A '0' moves left and any other character moves right.  The node reached
    when the bits run out is emitted as the final symbol.
    """
    if root.is_leaf() and bits:
        raise ValueError("a single-symbol tree cannot decode any bits")
    out: list[str] = []
    node = root
    for bit in bits:
        if node.is_leaf():
            out.append(chr(node.value))
            node = root
        child = node.left if bit == "0" else node.right
        if child is None:
            raise ValueError("bit string leaves the tree")
        node = child
    out.append(chr(node.value))
    decoded = "".join(out)
    logger.debug("final decoded string: %s", decoded)
    return decoded