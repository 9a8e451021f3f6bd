"""String drills on substrings, parentheses, words and numerals."""

from __future__ import annotations

from collections import Counter
from itertools import groupby

MOD = 1_000_000_007

_ROMAN = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def count_homogenous(s: str) -> int:
    """Number of substrings made of one repeated character, modulo 10**9 + 7."""
    total = 0
    for _, run in groupby(s):
        size = sum(1 for _ in run)
        total = (total + size * (size + 1) // 2) % MOD
    return total


def max_depth(s: str) -> int:
    """Deepest nesting of parentheses in ``s``."""
    depth = best = 0
    for ch in s:
        if ch == "(":
            depth += 1
            best = max(best, depth)
        elif ch == ")":
            depth -= 1
    return best


def is_rotation(s: str, goal: str) -> bool:
    """Whether ``goal`` is a rotation of ``s``; two empty strings are not."""
    if len(s) != len(goal):
        return False
    return any(s[i:] + s[:i] == goal for i in range(len(s)))


def remove_outer_parentheses(s: str) -> str:
    """Drop the outermost pair of each primitive group of parentheses."""
    depth = 0
    kept = []
    for ch in s:
        if ch == ")":
            depth -= 1
        if depth != 0:
            kept.append(ch)
        if ch == "(":
            depth += 1
    return "".join(kept)


def reverse_words(s: str) -> str:
    """Reverse the order of the space-separated words of ``s``."""
    result = ""
    for word in s.split(" "):
        result = f"{word} {result}" if result else word
    return result


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral."""
    try:
        values = [_ROMAN[ch] for ch in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral digit: {exc.args[0]!r}") from None
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total


def beauty_sum(s: str) -> int:
    """Sum over all substrings of the gap between the most and least frequent character."""
    total = 0
    for start in range(len(s)):
        counts: Counter[str] = Counter()
        for ch in s[start:]:
            counts[ch] += 1
            frequencies = counts.values()
            total += max(frequencies) - min(frequencies)
    return total