"""Linear and binary search over sequences."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of ``target`` in the sorted ``items``, or None if it is absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search_recursive(items: Sequence[Any], target: Any) -> Optional[int]:
    """Recursive binary search; return the index of ``target`` or None."""

    def search(low: int, high: int) -> Optional[int]:
        if low > high:
            return None
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(items) - 1)


def linear_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to ``target``, or None."""
    return next((index for index, item in enumerate(items) if item == target), None)