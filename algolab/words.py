"""Chained hash table of word counts and a common-word counter."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Iterator, Optional, Sequence

HashFunction = Callable[[str, int], int]

MAX_WORD_LENGTH = 255
_WORD_MASK = (1 << 64) - 1


def hash1(word: str, size: int) -> int:
    """Polynomial hash with base 17 over the word's bytes, reduced modulo ``size``.

    Bytes are read as signed chars and the running value wraps as a signed
    64-bit integer.
    """
    if size <= 0:
        raise ValueError("hash size must be positive")
    h = 0
    for byte in word.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        h = (h * 17 + signed) & _WORD_MASK
    if h >= 1 << 63:
        h -= 1 << 64
    return h % size


class HashTable:
    """A hash table from string keys to integer values with separate chaining.

    New keys go to the front of their bucket's chain.
    """

    def __init__(self, size: int, hash_function: HashFunction = hash1) -> None:
        if size <= 0:
            raise ValueError("hash table size must be positive")
        self.size = size
        self.hash_function = hash_function
        self._buckets: list[list[list]] = [[] for _ in range(size)]

    def _chain(self, key: str) -> list[list]:
        return self._buckets[self.hash_function(key, self.size)]

    def exists(self, key: str) -> bool:
        """True when ``key`` is stored."""
        return any(entry[0] == key for entry in self._chain(key))

    def get(self, key: str) -> int:
        """The value stored for ``key``, or 0 when it is absent."""
        for stored, value in self._chain(key):
            if stored == key:
                return value
        return 0

    def put(self, key: str, value: int) -> None:
        """Store ``value`` for ``key``, replacing any earlier value."""
        chain = self._chain(key)
        for entry in chain:
            if entry[0] == key:
                entry[1] = value
                return
        chain.insert(0, [key, value])

    def delete(self, key: str) -> None:
        """Remove ``key`` if it is stored."""
        chain = self._chain(key)
        for position, entry in enumerate(chain):
            if entry[0] == key:
                del chain[position]
                return

    def format(self) -> str:
        """Render every non-empty bucket as "idx: (key: value) -> ... NULL"."""
        lines = ["", "--- Hash Table ---"]
        for index, chain in enumerate(self._buckets):
            if chain:
                body = "".join(f"({key}: {value}) -> " for key, value in chain)
                lines.append(f"{index}: {body}NULL")
        lines.append("--- End ---")
        return "\n".join(lines) + "\n"


def _tokens(text: str) -> Iterator[str]:
    """Whitespace-separated words, long ones split into 255-character pieces."""
    for token in text.split():
        for start in range(0, len(token), MAX_WORD_LENGTH):
            yield token[start : start + MAX_WORD_LENGTH]


def _fill(table: HashTable, words: Iterable[str]) -> None:
    for word in words:
        table.put(word, table.get(word) + 1)


def _consume(table: HashTable, words: Iterable[str]) -> int:
    common = 0
    for word in words:
        if table.exists(word):
            common += 1
            count = table.get(word)
            if count == 1:
                table.delete(word)
            else:
                table.put(word, count - 1)
    return common


def count_common(first_words: Iterable[str], second_words: Iterable[str], size: int) -> int:
    """Count the words of the second sequence matched by unused words of the first.

    Each occurrence in the first sequence can be matched at most once.
    """
    table = HashTable(size)
    _fill(table, first_words)
    return _consume(table, second_words)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Count the words two files have in common, printing the first file's table."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Usage: words <hash size> <file1> <file2>", file=sys.stderr)
        return 1
    try:
        size = int(args[0])
    except ValueError:
        print(f"Error: invalid hash size: {args[0]}", file=sys.stderr)
        return 1
    try:
        with open(args[1], encoding="utf-8") as first, open(args[2], encoding="utf-8") as second:
            first_text, second_text = first.read(), second.read()
    except OSError:
        print("Error: Unable to open input files.", file=sys.stderr)
        return 1
    try:
        table = HashTable(size)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _fill(table, _tokens(first_text))
    print(table.format(), end="")
    common = _consume(table, _tokens(second_text))
    print(f"Common words: {common}")
    return 0


if __name__ == "__main__":
    sys.exit(main())