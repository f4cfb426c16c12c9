"""Algorithms over lists of integers."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from itertools import groupby


def max_profit(prices: list[int]) -> int:
    """Return the best profit from one buy followed by one later sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_sub_array(nums: list[int]) -> int:
    """Return the largest sum of a non-empty contiguous slice of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(current + value, value)
        best = max(best, current)
    return best


def merge(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge sorted ``nums2`` into the first ``m`` sorted items of ``nums1`` in place."""
    if n == 0:
        return
    merged = list(heapq.merge(nums1[:m], nums2))
    nums1[: len(merged)] = merged


def search_insert(nums: list[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums`` or where it would be inserted."""
    if not nums:
        raise ValueError("nums must not be empty")
    return bisect_left(nums, target)


def remove_duplicates(nums: list[int]) -> int:
    """Move the distinct values of sorted ``nums`` to its front; return their count."""
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return the indices of two items adding up to ``target``, or an empty list."""
    wanted: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in wanted:
            return [wanted[value], index]
        wanted[target - value] = index
    return []


def two_sum_sorted(numbers: list[int], target: int) -> list[int]:
    """Return 1-based indices of two items adding up to ``target``, or ``[0, 0]``."""
    wanted: dict[int, int] = {}
    for position, value in enumerate(numbers, start=1):
        if value in wanted:
            return [wanted[value], position]
        wanted[target - value] = position
    return [0, 0]