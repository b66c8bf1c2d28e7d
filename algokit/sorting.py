"""Classic sorting algorithms, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "bucket_sort",
    "counting_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "radix_sort",
    "selection_sort",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent elements that are out of order."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def bucket_sort(values: Iterable[int]) -> list[int]:
    """Sort integers in the range [0, 100) by spreading them over one bucket per element."""
    items = list(values)
    size = len(items)
    if not size:
        return []
    buckets: list[list[int]] = [[] for _ in range(size)]
    for value in items:
        if not 0 <= value < 100:
            raise ValueError(f"bucket_sort() values must lie in [0, 100), got {value!r}")
        buckets[value * size // 100].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting_sort() requires non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    for key in range(1, len(counts)):
        counts[key] += counts[key - 1]
    output: list[int] = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def _sift_down(items: list[Any], size: int, index: int) -> None:
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max heap and repeatedly moving its root to the end."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, index)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them stably."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the last element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return items


def _counting_pass(items: list[int], exponent: int) -> list[int]:
    counts = [0] * 10
    for value in items:
        counts[(value // exponent) % 10] += 1
    for digit in range(1, 10):
        counts[digit] += counts[digit - 1]
    output: list[int] = [0] * len(items)
    for value in reversed(items):
        digit = (value // exponent) % 10
        counts[digit] -= 1
        output[counts[digit]] = value
    return output


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant first."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("radix_sort() requires non-negative integers")
    largest = max(items)
    exponent = 1
    while largest // exponent > 0:
        items = _counting_pass(items, exponent)
        exponent *= 10
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping the smallest remaining element into place."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = min(range(i, size), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items