import random
from dataclasses import dataclass, field

import pytest

from algokit.sorting import (
    bubble_sort,
    bucket_sort,
    counting_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
)


def _random_lists(seed, count, low, high):
    rng = random.Random(seed)
    return [[rng.randint(low, high) for _ in range(rng.randint(0, 40))] for _ in range(count)]


@pytest.mark.parametrize(
    "values",
    [
        [64, 34, 25, 12, 22, 11, 90],
        [12, 11, 13, 5, 6, 7],
        [12, 11, 13, 5, 6],
        [38, 27, 43, 3, 9, 82, 10],
        [10, 7, 8, 9, 1, 5],
        [64, 25, 12, 22, 11],
        [-2, 1, -3, 4, -1, 2, 1, -5, 4],
        [],
        [1],
        [3, 3, 3],
    ],
)
def test_general_sorts_on_source_examples(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


@pytest.mark.parametrize("values", _random_lists(7, 15, 0, 999))
def test_sorts_on_random_non_negative(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected
    assert counting_sort(values) == expected
    assert radix_sort(values) == expected


@pytest.mark.parametrize("values", _random_lists(11, 10, -500, 500))
def test_general_sorts_on_random_with_negatives(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


def test_input_is_not_mutated():
    values = [34, 2, 10, 6, 8, 3, 1, 5]
    snapshot = list(values)
    expected = sorted(snapshot)
    assert bubble_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected
    assert counting_sort(values) == expected
    assert radix_sort(values) == expected
    assert bucket_sort(values) == expected
    assert values == snapshot


def test_counting_sort_source_example():
    assert counting_sort([4, 2, 2, 8, 3, 3, 1]) == [1, 2, 2, 3, 3, 4, 8]


def test_bucket_sort_source_example():
    assert bucket_sort([34, 2, 10, 6, 8, 3, 1, 5]) == [1, 2, 3, 5, 6, 8, 10, 34]


@pytest.mark.parametrize("values", _random_lists(3, 10, 0, 99))
def test_bucket_sort_random_in_range(values):
    assert bucket_sort(values) == sorted(values)


def test_bucket_sort_empty():
    assert bucket_sort([]) == []


@pytest.mark.parametrize("bad", [100, -1, 250])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort([5, bad, 7])


@pytest.mark.parametrize("sort", [counting_sort, radix_sort])
def test_non_negative_sorts_reject_negatives(sort):
    with pytest.raises(ValueError):
        sort([3, -1, 2])


@pytest.mark.parametrize("sort", [counting_sort, radix_sort])
def test_non_negative_sorts_on_empty(sort):
    assert sort([]) == []


def test_radix_sort_all_zeros():
    assert radix_sort([0, 0, 0]) == [0, 0, 0]


def test_sorts_accept_iterables():
    assert merge_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert quick_sort(x for x in (5, 4, 6)) == [4, 5, 6]


def test_quick_sort_large_sorted_input_does_not_overflow():
    values = list(range(5000))
    assert quick_sort(values) == values
    assert quick_sort(reversed(values)) == values


@dataclass(order=True)
class _Record:
    grade: int
    name: str = field(compare=False)


def _records():
    return [
        _Record(2, "a"),
        _Record(1, "b"),
        _Record(2, "c"),
        _Record(1, "d"),
        _Record(2, "e"),
    ]


def test_stable_sorts_keep_equal_keys_in_order():
    records = _records()
    expected_names = ["b", "d", "a", "c", "e"]
    assert [r.name for r in bubble_sort(records)] == expected_names
    assert [r.name for r in insertion_sort(records)] == expected_names
    assert [r.name for r in merge_sort(records)] == expected_names


def test_result_is_a_permutation():
    values = ["pear", "apple", "fig", "apple", "kiwi"]
    expected = ["apple", "apple", "fig", "kiwi", "pear"]
    assert bubble_sort(values) == expected
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected