"""Sliding window and two-pointer drills."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence


def _count_at_most(values: Sequence[int], goal: int) -> int:
    """Number of subarrays whose sum is at most ``goal`` (non-negative values)."""
    if goal < 0:
        return 0
    left = 0
    total = 0
    count = 0
    for right, value in enumerate(values):
        total += value
        while total > goal:
            total -= values[left]
            left += 1
        count += right - left + 1
    return count


def count_subarrays_with_sum(arr: Sequence[int], goal: int) -> int:
    """Number of subarrays of a 0/1 array whose sum is exactly ``goal``."""
    return _count_at_most(arr, goal) - _count_at_most(arr, goal - 1)


def count_nice_subarrays(arr: Sequence[int], k: int) -> int:
    """Number of subarrays holding exactly ``k`` odd numbers."""
    parities = [value % 2 for value in arr]
    return count_subarrays_with_sum(parities, k)


def total_fruit(s: Sequence[Hashable], k: int) -> int:
    """Longest run with at most ``k`` distinct items, using a window that never shrinks."""
    counts: Counter[Hashable] = Counter()
    best = 0
    left = 0
    for right, item in enumerate(s):
        counts[item] += 1
        if len(counts) > k:
            out = s[left]
            counts[out] -= 1
            if counts[out] == 0:
                del counts[out]
            left += 1
        if len(counts) <= k:
            best = max(best, right - left + 1)
    return best


def longest_k_distinct(s: Sequence[Hashable], k: int) -> int:
    """Length of the longest run holding at most ``k`` distinct items."""
    counts: Counter[Hashable] = Counter()
    best = 0
    left = 0
    for right, item in enumerate(s):
        counts[item] += 1
        while len(counts) > k:
            out = s[left]
            counts[out] -= 1
            if counts[out] == 0:
                del counts[out]
            left += 1
        best = max(best, right - left + 1)
    return best


def character_replacement(s: str, k: int) -> int:
    """Longest run of one letter reachable by replacing at most ``k`` characters."""
    counts: Counter[str] = Counter()
    best = 0
    most = 0
    left = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        most = max(most, counts[ch])
        if (right - left + 1) - most > k:
            counts[s[left]] -= 1
            left += 1
        if (right - left + 1) - most <= k:
            best = max(best, right - left + 1)
    return best


def longest_unique_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    best = 0
    start = 0
    for end, ch in enumerate(s):
        seen = last_seen.get(ch)
        if seen is not None and seen >= start:
            start = seen + 1
        last_seen[ch] = end
        best = max(best, end - start + 1)
    return best


def longest_ones(bits: Sequence[int], k: int) -> int:
    """Longest run of ones when at most ``k`` zeros may be flipped."""
    zeros = 0
    best = 0
    left = 0
    for right, bit in enumerate(bits):
        if bit == 0:
            zeros += 1
        if zeros > k:
            if bits[left] == 0:
                zeros -= 1
            left += 1
        if zeros <= k:
            best = max(best, right - left + 1)
    return best


def max_card_points(cards: Sequence[int], k: int) -> int:
    """Best total of ``k`` cards taken from the two ends of the row."""
    if not 0 <= k <= len(cards):
        raise ValueError("k must be between 0 and the number of cards")
    left_sum = sum(cards[:k])
    right_sum = 0
    best = left_sum
    for taken in range(1, k + 1):
        left_sum -= cards[k - taken]
        right_sum += cards[-taken]
        best = max(best, left_sum + right_sum)
    return best


def count_abc_substrings(s: str) -> int:
    """Number of substrings of an a/b/c string that contain all three letters."""
    last = {"a": -1, "b": -1, "c": -1}
    count = 0
    for i, ch in enumerate(s):
        if ch not in last:
            raise ValueError(f"unexpected character {ch!r}")
        last[ch] = i
        earliest = min(last.values())
        if earliest >= 0:
            count += 1 + earliest
    return count