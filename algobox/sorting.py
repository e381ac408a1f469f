"""Insertion, selection and radix sort."""

from __future__ import annotations

import bisect
from typing import Any, Iterable


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted list, inserting each item after any equal ones already placed."""
    result: list[Any] = []
    for item in items:
        bisect.insort_right(result, item)
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a sorted list by repeatedly swapping the smallest remaining item forward."""
    result = list(items)
    size = len(result)
    for start in range(size - 1):
        smallest = min(range(start, size), key=result.__getitem__)
        if smallest != start:
            result[start], result[smallest] = result[smallest], result[start]
    return result


def radix_sort(items: Iterable[int]) -> list[int]:
    """Sort non-negative integers by their decimal digits, least significant first."""
    result = list(items)
    if not result:
        return result
    if any(value < 0 for value in result):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(result)
    place = 1
    while largest // place > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            buckets[(value // place) % 10].append(value)
        result = [value for bucket in buckets for value in bucket]
        place *= 10
    return result