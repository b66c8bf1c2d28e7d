"""Bounded binary max- and min-heaps stored in arrays, and in-place heap building."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

__all__ = ["MaxHeap", "MinHeap", "heapify", "build_heap"]

_Before = Callable[[Any, Any], bool]


def _parent(index: int) -> int:
    return (index - 1) // 2


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return capacity


def _check_index(items: list[Any], index: int) -> None:
    if not 0 <= index < len(items):
        raise IndexError("heap index out of range")


def _sift_up(items: list[Any], index: int, before: _Before, *, force: bool) -> None:
    while index and (force or before(items[index], items[_parent(index)])):
        parent = _parent(index)
        items[index], items[parent] = items[parent], items[index]
        index = parent


def _sift_down(items: list[Any], index: int, before: _Before) -> None:
    size = len(items)
    while True:
        chosen = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and before(items[child], items[chosen]):
                chosen = child
        if chosen == index:
            return
        items[index], items[chosen] = items[chosen], items[index]
        index = chosen


def _push(items: list[Any], capacity: int, key: Any, before: _Before) -> None:
    if len(items) == capacity:
        raise OverflowError("heap is full")
    items.append(key)
    _sift_up(items, len(items) - 1, before, force=False)


def _peek(items: list[Any]) -> Any:
    if not items:
        raise IndexError("peek at an empty heap")
    return items[0]


def _set_key(items: list[Any], index: int, value: Any, before: _Before) -> None:
    _check_index(items, index)
    items[index] = value
    _sift_up(items, index, before, force=False)


def _pop_root(items: list[Any], before: _Before) -> Any:
    if not items:
        raise IndexError("extract from an empty heap")
    root = items[0]
    last = items.pop()
    if items:
        items[0] = last
        _sift_down(items, 0, before)
    return root


def _delete(items: list[Any], index: int, before: _Before) -> Any:
    _check_index(items, index)
    _sift_up(items, index, before, force=True)
    return _pop_root(items, before)


class MaxHeap:
    """A bounded heap whose root is its largest key."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MaxHeap({self.capacity}, {self._items!r})"

    def items(self) -> list[Any]:
        """Return the heap's array, root first."""
        return list(self._items)

    def insert(self, key: Any) -> None:
        """Add ``key`` and sift it up into place."""
        _push(self._items, self.capacity, key, operator.gt)

    def peek(self) -> Any:
        """Return the largest key without removing it."""
        return _peek(self._items)

    def increase_key(self, index: int, value: Any) -> None:
        """Set the key at ``index`` to ``value`` and sift it up."""
        _set_key(self._items, index, value, operator.gt)

    def extract_max(self) -> Any:
        """Remove and return the largest key."""
        return _pop_root(self._items, operator.gt)

    def delete_key(self, index: int) -> Any:
        """Remove and return the key at ``index``."""
        return _delete(self._items, index, operator.gt)


class MinHeap:
    """A bounded heap whose root is its smallest key."""

    def __init__(self, capacity: int) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MinHeap({self.capacity}, {self._items!r})"

    def items(self) -> list[Any]:
        """Return the heap's array, root first."""
        return list(self._items)

    def insert(self, key: Any) -> None:
        """Add ``key`` and sift it up into place."""
        _push(self._items, self.capacity, key, operator.lt)

    def peek(self) -> Any:
        """Return the smallest key without removing it."""
        return _peek(self._items)

    def decrease_key(self, index: int, value: Any) -> None:
        """Set the key at ``index`` to ``value`` and sift it up."""
        _set_key(self._items, index, value, operator.lt)

    def extract_min(self) -> Any:
        """Remove and return the smallest key."""
        return _pop_root(self._items, operator.lt)

    def delete_key(self, index: int) -> Any:
        """Remove and return the key at ``index``."""
        return _delete(self._items, index, operator.lt)


def heapify(values: MutableSequence[Any], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items to restore the max-heap order."""
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def build_heap(values: MutableSequence[Any]) -> None:
    """Rearrange ``values`` in place into a max heap."""
    size = len(values)
    for index in range(size // 2 - 1, -1, -1):
        heapify(values, size, index)