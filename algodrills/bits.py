"""Bit manipulation drills on Python integers."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor
from typing import TypeVar

T = TypeVar("T")

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def odd_occurring_pair(arr: Sequence[int]) -> tuple[int, int]:
    """The two values that occur an odd number of times when all others occur evenly."""
    combined = reduce(xor, arr, 0)
    rightmost = (combined & (combined - 1)) ^ combined
    with_bit = 0
    without_bit = 0
    for value in arr:
        if value & rightmost:
            with_bit ^= value
        else:
            without_bit ^= value
    return with_bit, without_bit


def to_binary(x: int) -> str:
    """Binary digits of a positive integer; empty for zero or less."""
    digits = []
    while x > 0:
        digits.append("1" if x % 2 == 1 else "0")
        x //= 2
    return "".join(reversed(digits))


def from_binary(s: str) -> int:
    """Value of a string of binary digits."""
    result = 0
    place = 1
    for ch in reversed(s):
        if ch not in "01":
            raise ValueError(f"not a binary digit: {ch!r}")
        if ch == "1":
            result += place
        place *= 2
    return result


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` has at most one bit set (true for zero, as the bit test gives)."""
    return n & (n - 1) == 0


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("value must not be negative")


def count_set_bits(n: int) -> int:
    """Number of one bits in a non-negative integer."""
    _require_non_negative(n)
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def min_bit_flips(start: int, goal: int) -> int:
    """Number of bits to flip to turn ``start`` into ``goal``."""
    return count_set_bits(start ^ goal)


def is_odd(n: int) -> bool:
    """Whether the lowest bit of ``n`` is set."""
    return n & 1 == 1


def is_bit_set(n: int, i: int) -> bool:
    """Whether bit ``i`` of ``n`` is set."""
    return (n >> i) & 1 == 1


def set_bit(n: int, i: int) -> int:
    """``n`` with bit ``i`` set."""
    return n | (1 << i)


def clear_bit(n: int, i: int) -> int:
    """``n`` with bit ``i`` cleared."""
    return n & ~(1 << i)


def toggle_bit(n: int, i: int) -> int:
    """``n`` with bit ``i`` flipped."""
    return n ^ (1 << i)


def remove_last_set_bit(n: int) -> int:
    """``n`` with its lowest set bit cleared."""
    return n & (n - 1)


def set_rightmost_unset_bit(n: int) -> int:
    """``n`` with its lowest clear bit set."""
    return n | (n + 1)


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with three exclusive-ors."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def xor_upto(n: int) -> int:
    """Exclusive-or of all integers from 0 to ``n``; 0 for an empty range."""
    if n < 0:
        return 0
    remainder = n % 4
    if remainder == 1:
        return 1
    if remainder == 2:
        return n + 1
    if remainder == 3:
        return 0
    return n


def xor_range(left: int, right: int) -> int:
    """Exclusive-or of all integers from ``left`` to ``right`` inclusive."""
    return xor_upto(left - 1) ^ xor_upto(right)


def divide(dividend: int, divisor: int) -> int:
    """Integer quotient truncated toward zero using shifts, clamped to 32 bits."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    positive = (dividend < 0) == (divisor < 0)
    remaining = abs(dividend)
    step = abs(divisor)
    if remaining == step:
        return 1 if positive else -1
    quotient = 0
    while remaining >= step:
        count = 0
        while remaining >= step << (count + 1):
            count += 1
        quotient += 1 << count
        remaining -= step << count
    if quotient >= 1 << 31:
        return INT_MAX if positive else INT_MIN
    return quotient if positive else -quotient


def power_set(arr: Sequence[T]) -> list[list[T]]:
    """All subsets of ``arr``, ordered by the bit mask that selects them."""
    n = len(arr)
    return [
        [item for i, item in enumerate(arr) if mask & (1 << i)]
        for mask in range(1 << n)
    ]