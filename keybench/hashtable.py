"""Open-addressing hash table of non-negative integer keys with double hashing."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterator

_PRIMES = (
    5, 53, 97, 193, 389, 769, 1543, 3079, 6151, 12289, 24593,
    49157, 98317, 196613, 393241, 786433, 1572869, 3145739,
    6291469, 12582917, 25165843, 50331653, 100663319,
    201326611, 402653189, 805306457, 1610612741,
)

_DELETED = object()


def _table_dimensions(size: int) -> tuple[int, int]:
    """Return (capacity, secondary prime) for a requested size."""
    for smaller, larger in pairwise(_PRIMES):
        if larger >= size:
            return larger, smaller
    raise ValueError(f"requested size {size} exceeds the largest supported capacity")


class HashTable:
    """Set of non-negative integers stored with double hashing and tombstones."""

    def __init__(self, size: int) -> None:
        self.capacity, self.prime = _table_dimensions(size)
        self._slots: list[object] = [None] * self.capacity
        self._count = 0

    def _step(self, key: int) -> int:
        return self.prime - key % self.prime

    def search(self, key: int) -> int | None:
        """Return the slot index holding ``key``, or None if it is absent."""
        start = pos = key % self.capacity
        step = self._step(key)
        for attempt in range(2 * self.capacity):
            slot = self._slots[pos]
            if slot is None:
                return None
            if slot is not _DELETED and slot == key:
                return pos
            if attempt and pos == start:
                return None
            pos = (pos + step) % self.capacity
        return None

    def _grow(self) -> None:
        target = int(self.capacity * 1.5)
        new_size = next((p for p in _PRIMES if p >= target), target)
        fresh = HashTable(new_size)
        for key in self:
            fresh.insert(key)
        self.capacity = fresh.capacity
        self.prime = fresh.prime
        self._slots = fresh._slots
        self._count = fresh._count

    def insert(self, key: int) -> None:
        """Add ``key``; negative keys and keys already reached before a free slot are ignored."""
        if key < 0:
            return
        if self.capacity <= 1.5 * self._count:
            self._grow()

        pos = key % self.capacity
        step = self._step(key)
        while True:
            slot = self._slots[pos]
            if slot is None or slot is _DELETED:
                break
            if slot == key:
                return
            pos = (pos + step) % self.capacity

        self._slots[pos] = key
        self._count += 1

    def delete(self, key: int) -> None:
        """Remove ``key`` if present, leaving a tombstone in its slot."""
        pos = self.search(key)
        if pos is None:
            return
        self._slots[pos] = _DELETED
        self._count -= 1

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        for slot in self._slots:
            if slot is not None and slot is not _DELETED:
                yield slot  # type: ignore[misc]

    def __str__(self) -> str:
        body = "".join(f"{key}, " for key in self if key > 0)
        return f"HashTable:\n{body}\n"