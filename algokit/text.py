"""String algorithms."""

from __future__ import annotations

import re
from collections import Counter

_ALNUM = re.compile(r"[a-z0-9]")

_CLOSER_TO_OPENER = {
    "}": "{",
    "]": "[",
    ")": "(",
}


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of the characters of ``s``."""
    if len(s) != len(t):
        return False
    return Counter(s) == Counter(t)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").rpartition(" ")[2])


def longest_common_prefix(strs: list[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("at least one string is required")
    if len(strs) < 2:
        return strs[0]

    prefix: list[str] = []
    for chars in zip(*strs):
        first = chars[0]
        if any(ch != first for ch in chars):
            break
        prefix.append(first)
    return "".join(prefix)


def is_palindrome_string(s: str) -> bool:
    """Tell whether ``s`` is a palindrome, considering only ASCII letters and digits."""
    chars = _ALNUM.findall(s.lower())
    return chars == chars[::-1]


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed by its match in the right order.

    Any character that is not a closing bracket counts as an opener.
    """
    opens: list[str] = []
    for ch in s:
        opener = _CLOSER_TO_OPENER.get(ch)
        if opener is None:
            opens.append(ch)
            continue
        if not opens or opens.pop() != opener:
            return False
    return not opens


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)