"""A string-keyed hash table with separate chaining."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

TABLE_SIZE = 100


def hash_key(key: str) -> int:
    """Return the bucket index for ``key``: a base-31 rolling hash modulo the table size."""
    value = 0
    for byte in key.encode("utf-8"):
        value = (value * 31 + byte) % TABLE_SIZE
    return value


@dataclass
class _Entry:
    key: str
    value: int


class HashTable:
    """Maps strings to integers; new keys go to the head of their bucket's chain."""

    def __init__(self) -> None:
        self._buckets: list[list[_Entry]] = [[] for _ in range(TABLE_SIZE)]
        self._size = 0

    def _bucket(self, key: str) -> list[_Entry]:
        return self._buckets[hash_key(key)]

    def insert(self, key: str, value: int) -> None:
        """Store ``value`` under ``key``, replacing any value already there."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry.key == key:
                entry.value = value
                return
        bucket.insert(0, _Entry(key, value))
        self._size += 1

    def update(self, key: str, value: int) -> None:
        """Same as :meth:`insert`."""
        self.insert(key, value)

    def find(self, key: str) -> int | None:
        """Return the value stored under ``key``, or ``None`` if it is absent."""
        for entry in self._bucket(key):
            if entry.key == key:
                return entry.value
        return None

    def remove(self, key: str) -> None:
        """Remove ``key``; raise ``KeyError`` if it is absent."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry.key == key:
                del bucket[position]
                self._size -= 1
                return
        raise KeyError(f"Key not found: {key}")

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield ``(key, value)`` pairs bucket by bucket, each chain from its head."""
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def format(self) -> str:
        """Return one ``key: value`` line per entry, in :meth:`items` order."""
        return "".join(f"{key}: {value}\n" for key, value in self.items())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key) is not None