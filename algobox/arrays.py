"""Array problems: maximum subarray, stock profit, rotation and more."""

from __future__ import annotations

import heapq
from itertools import accumulate, pairwise
from typing import Sequence


def kadane(items: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``items``."""
    if not items:
        raise ValueError("kadane needs at least one item")
    best = items[0]
    running = 0
    for value in items:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def max_sum_naive(items: Sequence[int]) -> int:
    """Largest contiguous sum by trying every start; never below zero."""
    best = 0
    for start in range(len(items)):
        best = max(best, *accumulate(items[start:]))
    return best


def max_sum(items: Sequence[int]) -> int:
    """Largest contiguous sum in one pass; never below zero."""
    best = 0
    ending_here = 0
    for value in items:
        ending_here = max(ending_here + value, value)
        best = max(best, ending_here)
    return best


def stock_profit(prices: Sequence[int]) -> int:
    """Total profit from buying at every local low and selling at the next high."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def rotate(items: Sequence[int], k: int) -> list[int]:
    """Return ``items`` rotated ``k`` places to the right."""
    values = list(items)
    if not values:
        return values
    k %= len(values)
    return values[len(values) - k:] + values[:len(values) - k]


def furthest_building(heights: Sequence[int], bricks: int, ladders: int) -> int:
    """Return the index of the furthest building reachable with the bricks and ladders."""
    climbs: list[int] = []
    for index, (current, following) in enumerate(pairwise(heights)):
        jump = following - current
        if jump <= 0:
            continue
        heapq.heappush(climbs, jump)
        if len(climbs) > ladders:
            bricks -= heapq.heappop(climbs)
        if bricks < 0:
            return index
    return max(len(heights) - 1, 0)


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three of ``nums`` that lies closest to ``target``."""
    if len(nums) < 3:
        raise ValueError("three_sum_closest needs at least three numbers")
    ordered = sorted(nums)
    best = ordered[0] + ordered[1] + ordered[2]
    for first in range(len(ordered) - 2):
        left, right = first + 1, len(ordered) - 1
        while left < right:
            total = ordered[first] + ordered[left] + ordered[right]
            if total == target:
                return total
            if abs(total - target) < abs(best - target):
                best = total
            if total > target:
                right -= 1
            else:
                left += 1
    return best


def invert_color(rgb: Sequence[int]) -> list[int]:
    """Invert each 8-bit colour channel."""
    return [255 - channel for channel in rgb]