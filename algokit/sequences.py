"""Scanning problems over sequences and grids."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_SUDOKU_SIZE = 9


def can_jump(nums: list[int]) -> bool:
    """Tell whether the last index is reachable from the first.

    Each item is the longest jump allowed from its position.
    """
    last = len(nums) - 1
    reach = 0
    for index, length in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + length)
        if reach >= last:
            return True
    return True


def daily_temperatures(temperatures: list[int]) -> list[int]:
    """For each day, count the days until a strictly warmer one, or 0 if none."""
    waits = [0] * len(temperatures)
    pending: list[tuple[int, int]] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperature > pending[-1][1]:
            earlier, _ = pending.pop()
            waits[earlier] = day - earlier
        pending.append((day, temperature))
    return waits


def max_area(height: list[int]) -> int:
    """Return the most water held between two of the given vertical lines."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        left_height, right_height = height[left], height[right]
        best = max(best, (right - left) * min(left_height, right_height))
        if left_height > right_height:
            right -= 1
        else:
            left += 1
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, ch in enumerate(s):
        previous = last_seen.get(ch)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[ch] = index
        best = max(best, index - start + 1)
    return best


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the leftmost one on ties."""
    if len(s) < 2:
        return s

    best_start, best_length = 0, 1
    for center in range(2 * len(s) - 1):
        left = center // 2
        right = left + center % 2
        while left >= 0 and right < len(s) and s[left] == s[right]:
            left -= 1
            right += 1
        length = right - left - 1
        start = left + 1
        if length > best_length or (length == best_length and start < best_start):
            best_start, best_length = start, length
    return s[best_start : best_start + best_length]


def is_valid_sudoku(board: Sequence[Iterable[str]]) -> bool:
    """Tell whether the filled cells of a sudoku board break no rule.

    Empty cells are ``"."``; the board may be given as rows of strings or
    as lists of single characters.
    """
    seen: set[tuple[str, int, str]] = set()
    for row, cells in enumerate(board):
        if row >= _SUDOKU_SIZE:
            raise ValueError("a sudoku board has at most 9 rows")
        for column, value in enumerate(cells):
            if column >= _SUDOKU_SIZE:
                raise ValueError("a sudoku row has at most 9 cells")
            if value == ".":
                continue
            box = (column // 3) * 3 + row // 3
            for key in (("row", row, value), ("column", column, value), ("box", box, value)):
                if key in seen:
                    return False
                seen.add(key)
    return True