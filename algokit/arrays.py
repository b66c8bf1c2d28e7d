"""Array algorithms and a fixed-capacity array with positional insert and delete."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

__all__ = [
    "FixedArray",
    "find_duplicates_brute_force",
    "find_duplicates_sorted",
    "max_subarray_sum",
    "merge_arrays",
    "linear_search",
    "binary_search",
    "left_rotate",
    "right_rotate",
]


class FixedArray:
    """A sequence with a fixed capacity supporting shifting inserts and deletes."""

    def __init__(self, capacity: int, values: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        items = list(values)
        if len(items) > capacity:
            raise ValueError("more values than capacity")
        self.capacity = capacity
        self._items = items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __repr__(self) -> str:
        return f"FixedArray({self.capacity}, {self._items!r})"

    def _ensure_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError("array is full")

    def _ensure_not_empty(self) -> None:
        if not self._items:
            raise IndexError("array is empty")

    def insert_at_beginning(self, value: Any) -> None:
        """Shift every element right and put ``value`` at index 0."""
        self.insert_at(0, value)

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        self._ensure_room()
        self._items.append(value)

    def insert_at(self, index: int, value: Any) -> None:
        """Shift elements from ``index`` right and put ``value`` there."""
        self._ensure_room()
        if not 0 <= index <= len(self._items):
            raise IndexError("insertion index out of range")
        self._items.insert(index, value)

    def delete_at_beginning(self) -> Any:
        """Remove and return the first element."""
        return self.delete_at(0)

    def delete_at_end(self) -> Any:
        """Remove and return the last element."""
        self._ensure_not_empty()
        return self._items.pop()

    def delete_at(self, index: int) -> Any:
        """Remove and return the element at ``index``, shifting the rest left."""
        self._ensure_not_empty()
        if not 0 <= index < len(self._items):
            raise IndexError("deletion index out of range")
        return self._items.pop(index)


def find_duplicates_brute_force(values: Sequence[Any]) -> list[Any]:
    """Report a value once for every later element equal to it, comparing all pairs."""
    return [
        value
        for position, value in enumerate(values)
        for other in values[position + 1:]
        if value == other
    ]


def find_duplicates_sorted(values: Iterable[Any]) -> list[Any]:
    """Sort the values and report each one equal to its successor."""
    ordered = sorted(values)
    return [left for left, right in zip(ordered, ordered[1:]) if left == right]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    iterator = iter(values)
    try:
        current = best = next(iterator)
    except StopIteration:
        raise ValueError("max_subarray_sum() of an empty sequence") from None
    for value in iterator:
        current = max(value, current + value)
        best = max(best, current)
    return best


def merge_arrays(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Return the elements of ``first`` followed by those of ``second``."""
    return [*first, *second]


def linear_search(values: Iterable[Any], target: Any) -> int:
    """Return the index of the first element equal to ``target``, or -1."""
    return next((i for i, value in enumerate(values) if value == target), -1)


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = low + (high - low) // 2
        candidate = values[middle]
        if candidate == target:
            return middle
        if candidate < target:
            low = middle + 1
        else:
            high = middle - 1
    return -1


def left_rotate(values: Sequence[Any], steps: int) -> list[Any]:
    """Return ``values`` shifted ``steps`` places to the left, wrapping around."""
    items = list(values)
    if not items or steps <= 0:
        return items
    shift = steps % len(items)
    return items[shift:] + items[:shift]


def right_rotate(values: Sequence[Any], steps: int) -> list[Any]:
    """Return ``values`` shifted ``steps`` places to the right, wrapping around."""
    items = list(values)
    if not items or steps <= 0:
        return items
    shift = steps % len(items)
    return items[len(items) - shift:] + items[:len(items) - shift]