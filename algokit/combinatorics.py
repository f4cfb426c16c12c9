"""Grouping, enumeration and ordering problems over strings and integers."""

from __future__ import annotations

from functools import cmp_to_key, lru_cache
from itertools import product
from string import ascii_lowercase

_PHONE_LETTERS = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_LETTER_INDEX = {letter: index for index, letter in enumerate(ascii_lowercase)}


def _letter_counts(word: str) -> tuple[int, ...]:
    counts = [0] * len(ascii_lowercase)
    for ch in word:
        index = _LETTER_INDEX.get(ch)
        if index is None:
            raise ValueError(f"only lowercase latin letters are allowed, got {ch!r}")
        counts[index] += 1
    return tuple(counts)


def group_anagrams(strs: list[str]) -> list[list[str]]:
    """Group words that are anagrams of each other.

    Groups appear in the order their first word appears, and words keep
    their input order inside a group.
    """
    groups: dict[tuple[int, ...], list[str]] = {}
    for word in strs:
        groups.setdefault(_letter_counts(word), []).append(word)
    return list(groups.values())


def letter_combinations(digits: str) -> list[str]:
    """Return every word a phone keypad can spell from ``digits``.

    A digit without letters yields no combinations at all.
    """
    if not digits:
        return []
    pools = [_PHONE_LETTERS.get(digit, "") for digit in digits]
    return ["".join(letters) for letters in product(*pools)]


@lru_cache(maxsize=None)
def _parenthesis(n: int) -> tuple[str, ...]:
    if n == 0:
        return ("",)
    return tuple(
        f"({inner}){rest}"
        for i in range(n)
        for inner in _parenthesis(i)
        for rest in _parenthesis(n - i - 1)
    )


def generate_parenthesis(n: int) -> list[str]:
    """Return every well-formed string of ``n`` pairs of parentheses."""
    if n < 0:
        return []
    return list(_parenthesis(n))


def three_sum(nums: list[int]) -> list[list[int]]:
    """Return the distinct sorted triples of items of ``nums`` that add up to zero."""
    if len(nums) < 3:
        return []

    # Negated value -> last index holding it.
    negated_at = {-value: index for index, value in enumerate(nums)}

    seen: set[tuple[int, ...]] = set()
    result: list[list[int]] = []
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            second = nums[j]
            k = negated_at.get(first + second)
            if k is None or k in (i, j):
                continue
            triple = tuple(sorted((first, second, nums[k])))
            if triple in seen:
                continue
            seen.add(triple)
            result.append(list(triple))
    return result


def _concatenation_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: list[int]) -> str:
    """Arrange ``nums`` so their concatenation is the largest number possible."""
    if not nums:
        raise ValueError("nums must not be empty")
    texts = sorted((str(value) for value in nums), key=cmp_to_key(_concatenation_order))
    joined = "".join(texts)
    return "0" if joined.startswith("0") else joined