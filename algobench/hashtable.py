"""Separate-chaining hash tables of integers that double when full."""

from __future__ import annotations

from typing import Iterator, List, Tuple

__all__ = ["DuplicateValueError", "HashTable", "ScaledHashTable"]


class DuplicateValueError(ValueError):
    """Raised when a value already held by the table is inserted again."""


class HashTable:
    """Integers chained into ``value % capacity`` buckets.

    New values go to the end of their bucket's chain.  Once the number of
    values reaches the capacity, the table doubles its capacity and moves
    every value over, bucket by bucket and in chain order.
    """

    def __init__(self, size: int = 1) -> None:
        if size < 1:
            raise ValueError(f"table size must be at least 1, got {size}")
        self._capacity = size
        self._buckets: List[List[int]] = [[] for _ in range(size)]
        self._count = 0

    def insert(self, value: int) -> None:
        """Add a value; raise DuplicateValueError if it is already present."""
        if value in self:
            raise DuplicateValueError(f"value {value} is already in the table")
        self._add(value)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return value in self._buckets[value % self._capacity]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        for bucket in self._buckets:
            yield from bucket

    def capacity(self) -> int:
        """Number of buckets."""
        return self._capacity

    def load_factor(self) -> float:
        """Values held per bucket."""
        return self._count / self._capacity

    def buckets(self) -> List[Tuple[int, ...]]:
        """The chain of every bucket, in bucket order."""
        return [tuple(bucket) for bucket in self._buckets]

    def __str__(self) -> str:
        return "".join(
            f"\nt[{index}]: " + "".join(f"{value} -> " for value in bucket)
            for index, bucket in enumerate(self._buckets)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, values={list(self)!r})"

    def _add(self, stored: int) -> None:
        self._buckets[stored % self._capacity].append(stored)
        self._count += 1
        if self._count >= self._capacity:
            self._grow(2 * self._capacity)

    def _rekey(self, stored: int, capacity: int) -> int:
        """The form a stored value takes in a table of the given capacity."""
        return stored

    def _grow(self, capacity: int) -> None:
        buckets: List[List[int]] = [[] for _ in range(capacity)]
        for bucket in self._buckets:
            for stored in bucket:
                moved = self._rekey(stored, capacity)
                buckets[moved % capacity].append(moved)
        self._buckets = buckets
        self._capacity = capacity


class ScaledHashTable(HashTable):
    """Worst-case table: every value is scaled by the capacity when stored.

    A value is kept as ``value * capacity`` and is multiplied by the new
    capacity again whenever the table grows, so every value lands in
    bucket 0 and lookups walk one long chain.
    """

    def insert(self, value: int) -> None:
        """Store ``value * capacity``; raise DuplicateValueError if value is held."""
        if value in self:
            raise DuplicateValueError(f"value {value} is already in the table")
        self._add(value * self._capacity)

    def _rekey(self, stored: int, capacity: int) -> int:
        return stored * capacity