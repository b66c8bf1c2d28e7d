"""Integer hash tables resolving collisions by chaining and by linear probing."""

from __future__ import annotations

__all__ = ["ChainingHashTable", "OpenAddressingHashTable"]


class ChainingHashTable:
    """A hash table whose buckets hold lists of the keys that hash to them."""

    def __init__(self, bucket_count: int) -> None:
        if bucket_count <= 0:
            raise ValueError("bucket_count must be positive")
        self.bucket_count = bucket_count
        self._buckets: list[list[int]] = [[] for _ in range(bucket_count)]

    def hash(self, key: int) -> int:
        return key % self.bucket_count

    def insert(self, key: int) -> None:
        """Append ``key`` to its bucket; duplicates are kept."""
        self._buckets[self.hash(key)].append(key)

    def search(self, key: int) -> bool:
        return key in self._buckets[self.hash(key)]

    def remove(self, key: int) -> bool:
        """Remove every copy of ``key``; return whether any was present."""
        bucket = self._buckets[self.hash(key)]
        kept = [item for item in bucket if item != key]
        removed = len(kept) != len(bucket)
        bucket[:] = kept
        return removed

    def buckets(self) -> list[list[int]]:
        """Return a copy of every bucket, in index order."""
        return [list(bucket) for bucket in self._buckets]


class _Marker:
    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name


_EMPTY = _Marker("EMPTY")
_DELETED = _Marker("DELETED")


class OpenAddressingHashTable:
    """A fixed-size hash table using linear probing and tombstones for removals."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[object] = [_EMPTY] * capacity
        self._size = 0

    def hash(self, key: int) -> int:
        return key % self.capacity

    def _probe(self, key: int):
        start = self.hash(key)
        for offset in range(self.capacity):
            yield (start + offset) % self.capacity

    def insert(self, key: int) -> None:
        """Store ``key`` in the first empty or deleted slot from its home slot on."""
        if self._size == self.capacity:
            raise OverflowError("table is full")
        for index in self._probe(key):
            if self._slots[index] is _EMPTY or self._slots[index] is _DELETED:
                self._slots[index] = key
                self._size += 1
                return

    def _locate(self, key: int) -> int | None:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is _EMPTY:
                return None
            if slot is not _DELETED and slot == key:
                return index
        return None

    def search(self, key: int) -> bool:
        return self._locate(key) is not None

    def remove(self, key: int) -> bool:
        """Mark the slot holding ``key`` as deleted; return whether it was found."""
        index = self._locate(key)
        if index is None:
            return False
        self._slots[index] = _DELETED
        self._size -= 1
        return True

    def slots(self) -> list[int | None]:
        """Return the slot contents in index order, None for empty or deleted slots."""
        return [
            None if slot is _EMPTY or slot is _DELETED else slot
            for slot in self._slots
        ]

    def __len__(self) -> int:
        return self._size