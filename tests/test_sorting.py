import random

import pytest

from algobox.sorting import insertion_sort, radix_sort, selection_sort


def _random_lists(seed, count=30):
    rng = random.Random(seed)
    return [[rng.randint(0, 10_000) for _ in range(rng.randint(0, 40))] for _ in range(count)]


def test_insertion_sort_matches_builtin_sorted():
    for items in _random_lists(7):
        assert insertion_sort(items) == sorted(items)


def test_selection_sort_matches_builtin_sorted():
    for items in _random_lists(7):
        assert selection_sort(items) == sorted(items)


def test_radix_sort_matches_builtin_sorted():
    for items in _random_lists(7):
        assert radix_sort(items) == sorted(items)


def test_input_is_left_unchanged():
    items = [5, 3, 9, 1, 3]
    assert insertion_sort(items) == [1, 3, 3, 5, 9]
    assert selection_sort(items) == [1, 3, 3, 5, 9]
    assert radix_sort(items) == [1, 3, 3, 5, 9]
    assert items == [5, 3, 9, 1, 3]


def test_empty_and_single():
    assert insertion_sort([]) == []
    assert insertion_sort([4]) == [4]
    assert selection_sort([]) == []
    assert selection_sort([4]) == [4]
    assert radix_sort([]) == []
    assert radix_sort([4]) == [4]


def test_already_sorted_and_reversed():
    items = list(range(25))
    backwards = list(reversed(items))
    assert insertion_sort(items) == items
    assert insertion_sort(backwards) == items
    assert selection_sort(items) == items
    assert selection_sort(backwards) == items
    assert radix_sort(items) == items
    assert radix_sort(backwards) == items


def test_insertion_sort_handles_negatives_and_floats():
    assert insertion_sort([3.5, -2, 0, -7.25, 10, 3.5]) == [-7.25, -2, 0, 3.5, 3.5, 10]


def test_selection_sort_handles_negatives_and_floats():
    assert selection_sort([3.5, -2, 0, -7.25, 10, 3.5]) == [-7.25, -2, 0, 3.5, 3.5, 10]


def test_radix_sort_rejects_negatives():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_radix_sort_handles_zeros_and_varied_lengths():
    assert radix_sort([0, 1000, 7, 0, 45, 999, 10]) == [0, 0, 7, 10, 45, 999, 1000]


def test_insertion_sort_accepts_any_iterable():
    assert insertion_sort(iter([3, 1, 2])) == [1, 2, 3]