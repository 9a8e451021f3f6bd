"""Small string drills."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_DIGITS = "0123456789"


def is_anagram(first: str, second: str) -> bool:
    """Whether the two strings hold the same characters with the same counts."""
    if len(first) != len(second):
        return False
    return Counter(first) == Counter(second)


def atoi(s: str) -> int:
    """Parse an optionally negative string of decimal digits."""
    negative = s.startswith("-")
    digits = s[1:] if negative else s
    if not digits:
        raise ValueError(f"no digits in {s!r}")
    value = 0
    for ch in digits:
        if ch not in _DIGITS:
            raise ValueError(f"invalid character {ch!r} in {s!r}")
        value = value * 10 + _DIGITS.index(ch)
    return -value if negative else value


def largest_odd_prefix(s: str) -> str:
    """Longest prefix of a digit string that ends in an odd digit; empty if none."""
    for end in range(len(s), 0, -1):
        if ord(s[end - 1]) % 2 == 1:
            return s[:end]
    return ""


def longest_common_prefix(words: Sequence[str]) -> str:
    """Longest prefix shared by all the words."""
    if not words:
        return ""
    first, last = min(words), max(words)
    prefix = []
    for a, b in zip(first, last):
        if a != b:
            break
        prefix.append(a)
    return "".join(prefix)