"""Greedy algorithms: intervals, scheduling, change making and knapsacks."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

DENOMINATIONS: tuple[int, ...] = (1000, 500, 100, 50, 20, 10, 5, 2, 1)


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns ``profit`` if done by ``deadline``."""

    id: int
    deadline: int
    profit: int


@dataclass(frozen=True)
class Item:
    """An item that can be taken whole or in part."""

    value: int
    weight: int

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def assign_cookies(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Number of children content when each gets at most one cookie big enough."""
    children = sorted(greed)
    fed = 0
    for size in sorted(sizes):
        if fed < len(children) and children[fed] <= size:
            fed += 1
    return fed


def insert_interval(
    intervals: Sequence[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert ``new_interval`` into sorted disjoint ``intervals``, merging overlaps."""
    low, high = new_interval
    result: list[list[int]] = []
    merging = False
    placed = False
    for start, end in intervals:
        if placed:
            result.append([start, end])
        elif not merging and end < low:
            result.append([start, end])
        elif start <= high:
            merging = True
            low = min(low, start)
            high = max(high, end)
        else:
            result.append([low, high])
            placed = True
            result.append([start, end])
    if not placed:
        result.append([low, high])
    return result


def job_sequencing(jobs: Sequence[Job]) -> tuple[int, int]:
    """Number of jobs done and total profit when the best-paying jobs go first."""
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    last_deadline = max((job.deadline for job in ordered), default=0)
    slots: list[int | None] = [None] * (last_deadline + 1)
    done = 0
    profit = 0
    for job in ordered:
        for slot in range(job.deadline, 0, -1):
            if slots[slot] is None:
                slots[slot] = job.id
                done += 1
                profit += job.profit
                break
    return done, profit


def can_jump(arr: Sequence[int]) -> bool:
    """Whether the last index can be reached when each value is a maximum jump."""
    reach = 0
    for i, step in enumerate(arr):
        if i > reach:
            return False
        reach = max(reach, i + step)
    return True


def min_jumps(arr: Sequence[int]) -> int:
    """Fewest jumps from the first index to the last.

    Raises ValueError when the array is empty or the end cannot be reached.
    """
    if not arr:
        raise ValueError("sequence is empty")
    left = right = 0
    jumps = 0
    while right < len(arr) - 1:
        farthest = max(
            i + step for i, step in enumerate(arr[left : right + 1], start=left)
        )
        if farthest <= right:
            raise ValueError("the last index cannot be reached")
        left, right = right + 1, farthest
        jumps += 1
    return jumps


def fractional_knapsack(capacity: int, items: Sequence[Item]) -> float:
    """Greatest value that fits in ``capacity`` when items may be split."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    remaining = capacity
    total = 0.0
    for item in sorted(items, key=lambda it: it.ratio, reverse=True):
        if item.weight <= remaining:
            total += item.value
            remaining -= item.weight
        else:
            total += remaining * item.ratio
            break
    return total


def lemonade_change(bills: Sequence[int]) -> bool:
    """Whether change can be given to every customer for a 5-unit lemonade."""
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif fives and tens:
            fives -= 1
            tens -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping intervals into a sorted list of disjoint ones."""
    if not intervals:
        return []
    ordered = sorted([start, end] for start, end in intervals)
    merged: list[list[int]] = []
    current = ordered[0]
    for start, end in ordered[1:]:
        if start <= current[1]:
            current[1] = max(current[1], end)
        else:
            merged.append(current)
            current = [start, end]
    merged.append(current)
    return merged


def min_coins(value: int) -> list[int]:
    """Coins making up ``value``, largest first, using the fixed denominations."""
    if value < 0:
        raise ValueError("value must not be negative")
    coins: list[int] = []
    for coin in DENOMINATIONS:
        count, value = divmod(value, coin)
        coins.extend([coin] * count)
    return coins


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Most trains present at once, hence the platforms a station needs."""
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures differ in length")
    arrive = sorted(arrivals)
    depart = sorted(departures)
    i = j = 0
    present = best = 0
    while i < len(arrive):
        if arrive[i] <= depart[j]:
            present += 1
            i += 1
        else:
            if present == 0:
                raise ValueError("a departure comes before its arrival")
            present -= 1
            j += 1
        best = max(best, present)
    return best


def max_meetings(start: Sequence[int], end: Sequence[int]) -> int:
    """Most meetings one room can hold; a meeting must start after the last ends."""
    if len(start) != len(end):
        raise ValueError("start and end differ in length")
    count = 0
    free_at: int | None = None
    for begin, finish in sorted(zip(start, end), key=lambda meeting: meeting[1]):
        if free_at is None or begin > free_at:
            count += 1
            free_at = finish
    return count


def min_removals_for_non_overlap(intervals: Sequence[Sequence[int]]) -> int:
    """Fewest intervals to remove so that the rest do not overlap."""
    kept = 0
    free_at: int | None = None
    for start, end in sorted(intervals, key=lambda interval: interval[1]):
        if free_at is None or free_at <= start:
            kept += 1
            free_at = end
    return len(intervals) - kept


def average_waiting_time(durations: Sequence[int]) -> int:
    """Average wait, rounded down, when the shortest jobs run first."""
    if not durations:
        raise ValueError("no jobs given")
    waited = 0
    elapsed = 0
    for duration in sorted(durations):
        waited += elapsed
        elapsed += duration
    return waited // len(durations)