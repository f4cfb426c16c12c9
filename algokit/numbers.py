"""Integer and digit algorithms."""

from __future__ import annotations

import math
from functools import reduce
from itertools import zip_longest
from operator import xor

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def add_strings(num1: str, num2: str) -> str:
    """Add two non-negative decimal numbers given as strings, digit by digit."""
    digits: list[str] = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry += int(a) + int(b)
        digits.append(str(carry % 10))
        carry //= 10
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one or two steps at a time."""
    if n == 1:
        return 1
    previous, current = 1, 2
    for _ in range(3, n + 1):
        previous, current = current, previous + current
    return current


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves 32-bit range."""
    if -10 < x < 10:
        return x
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if result < _INT32_MIN or result > _INT32_MAX:
        return 0
    return result


def fib(num: int) -> int:
    """Return the ``num``-th Fibonacci number (fib(0) == 0, fib(1) == 1)."""
    if num == 0:
        return 0
    if num < 3:
        return 1
    previous, current = 1, 1
    for _ in range(3, num + 1):
        previous, current = current, previous + current
    return current


def _is_power(num: int, base: int) -> bool:
    if num <= 0:
        return False
    while num > 1:
        if num % base:
            return False
        num //= base
    return True


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a power of two."""
    return _is_power(n, 2)


def is_power_of_three(n: int) -> bool:
    """Tell whether ``n`` is a power of three."""
    return _is_power(n, 3)


def is_power_of_four(n: int) -> bool:
    """Tell whether ``n`` is a power of four."""
    return _is_power(n, 4)


def int_sqrt(x: int) -> int:
    """Return the integer square root of ``x``, rounded down."""
    if x < 2:
        return x
    return math.isqrt(x)


def plus_one(digits: list[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits, most significant first."""
    result: list[int] = []
    carry = 1
    for digit in reversed(digits):
        total = digit + carry
        result.append(total % 10)
        carry = total // 10
    if carry:
        result.append(carry)
    result.reverse()
    return result


def single_number(nums: list[int]) -> int:
    """Return the value that appears once when every other appears twice."""
    return reduce(xor, nums, 0)


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer."""
    try:
        values = [_ROMAN_VALUES[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral character: {exc.args[0]!r}") from None

    total = 0
    index = 0
    while index < len(values):
        current = values[index]
        following = values[index + 1] if index + 1 < len(values) else 0
        if current < following:
            total += following - current
            index += 2
        else:
            total += current
            index += 1
    return total


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal form of ``x`` reads the same both ways."""
    if 0 <= x <= 9:
        return True
    text = str(x)
    return text == text[::-1]