"""Binary search over sorted, rotated and two-dimensional data."""

from __future__ import annotations

from collections.abc import Sequence


def first_occurrence(arr: Sequence[int], k: int) -> int:
    """Index of the first ``k`` in sorted ``arr``, or -1."""
    low, high = 0, len(arr) - 1
    first = -1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == k:
            first = mid
            high = mid - 1
        elif arr[mid] < k:
            low = mid + 1
        else:
            high = mid - 1
    return first


def last_occurrence(arr: Sequence[int], k: int) -> int:
    """Index of the last ``k`` in sorted ``arr``, or -1."""
    low, high = 0, len(arr) - 1
    last = -1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == k:
            last = mid
            low = mid + 1
        elif arr[mid] < k:
            low = mid + 1
        else:
            high = mid - 1
    return last


def first_and_last_position(arr: Sequence[int], k: int) -> tuple[int, int]:
    """First and last index of ``k`` in sorted ``arr``; (-1, -1) when absent."""
    return first_occurrence(arr, k), last_occurrence(arr, k)


def count_occurrences(arr: Sequence[int], x: int) -> int:
    """Number of times ``x`` appears in sorted ``arr``."""
    first, last = first_and_last_position(arr, x)
    if first == -1:
        return 0
    return last - first + 1


def floor_value(arr: Sequence[int], target: int) -> int:
    """Largest element not above ``target``, or -1 if there is none."""
    low, high = 0, len(arr) - 1
    ans = -1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] <= target:
            ans = arr[mid]
            low = mid + 1
        else:
            high = mid - 1
    return ans


def ceil_value(arr: Sequence[int], target: int) -> int:
    """Smallest element not below ``target``, or -1 if there is none."""
    low, high = 0, len(arr) - 1
    ans = -1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] >= target:
            ans = arr[mid]
            high = mid - 1
        else:
            low = mid + 1
    return ans


def _require_items(arr: Sequence[int]) -> None:
    if not arr:
        raise ValueError("sequence is empty")


def rotation_count(arr: Sequence[int]) -> int:
    """Index of the minimum of a rotated sorted array, i.e. how often it was rotated."""
    _require_items(arr)
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[low] <= arr[mid] <= arr[high]:
            return low
        if arr[low] <= arr[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return low


def rotated_minimum(arr: Sequence[int]) -> int:
    """Minimum element of a rotated sorted array."""
    _require_items(arr)
    low, high = 0, len(arr) - 1
    ans: int | None = None
    while low <= high:
        mid = (low + high) // 2
        if arr[low] <= arr[mid] <= arr[high]:
            return arr[low]
        ans = arr[mid] if ans is None else min(ans, arr[mid])
        if arr[low] <= arr[mid]:
            low = mid + 1
        else:
            high = mid - 1
    assert ans is not None
    return ans


def search_rotated(arr: Sequence[int], x: int) -> int:
    """Index of ``x`` in a rotated sorted array of distinct values, or -1."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == x:
            return mid
        if arr[low] <= arr[mid]:
            if arr[low] <= x <= arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] <= x <= arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_rotated_with_duplicates(arr: Sequence[int], x: int) -> bool:
    """Whether ``x`` occurs in a rotated sorted array that may hold duplicates."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == x:
            return True
        if arr[mid] == arr[low] == arr[high]:
            low += 1
            high -= 1
            continue
        if arr[low] <= arr[mid]:
            if arr[low] <= x <= arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] <= x <= arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def kth_missing(arr: Sequence[int], k: int) -> int:
    """The k-th positive integer missing from strictly increasing ``arr``."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        missing = arr[mid] - (mid + 1)
        if missing < k:
            low = mid + 1
        else:
            high = mid - 1
    return k + high + 1


def _compare_power(base: int, n: int, m: int) -> int:
    """Return 0 if base**n == m, 1 if it is smaller, 2 if it is larger."""
    result = 1
    for _ in range(n):
        result *= base
        if result > m:
            return 2
    if result == m:
        return 0
    return 1


def nth_root(n: int, m: int) -> int:
    """Integer ``n``-th root of ``m`` if it is exact, otherwise -1."""
    low, high = 1, m
    while low <= high:
        mid = (low + high) // 2
        outcome = _compare_power(mid, n, m)
        if outcome == 0:
            return mid
        if outcome == 2:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def lower_bound(arr: Sequence[int], x: int) -> int:
    """First index whose element is at least ``x``; ``len(arr)`` if none."""
    low, high = 0, len(arr) - 1
    ans = len(arr)
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] >= x:
            ans = mid
            high = mid - 1
        else:
            low = mid + 1
    return ans


def row_with_max_ones(matrix: Sequence[Sequence[int]]) -> int:
    """Index of the first sorted 0/1 row with the most ones, or -1 if none has any."""
    best = 0
    index = -1
    for i, row in enumerate(matrix):
        ones = len(row) - lower_bound(row, 1)
        if ones > best:
            best = ones
            index = i
    return index


def contains(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` is in sorted ``nums``."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if target > nums[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search the first row whose range covers ``target``."""
    for row in matrix:
        if row and row[0] <= target <= row[-1]:
            return contains(row, target)
    return False


def search_staircase(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows and columns each increase, from the top-right corner."""
    if not matrix or not matrix[0]:
        return False
    rows, cols = len(matrix), len(matrix[0])
    row, col = 0, cols - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False


def single_element(arr: Sequence[int]) -> int:
    """The one element of a sorted array that does not appear twice, or -1."""
    _require_items(arr)
    n = len(arr)
    if n == 1:
        return arr[0]
    if arr[0] != arr[1]:
        return arr[0]
    if arr[-1] != arr[-2]:
        return arr[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] != arr[mid - 1] and arr[mid] != arr[mid + 1]:
            return arr[mid]
        if (mid % 2 == 0 and arr[mid] == arr[mid + 1]) or (
            mid % 2 == 1 and arr[mid] == arr[mid - 1]
        ):
            low = mid + 1
        else:
            high = mid - 1
    return -1


def _divided_sum(arr: Sequence[int], divisor: int) -> int:
    return sum(-(-value // divisor) for value in arr)


def smallest_divisor(arr: Sequence[int], threshold: int) -> int:
    """Smallest divisor keeping the sum of rounded-up quotients within ``threshold``.

    Returns -1 when the array is longer than ``threshold``.
    """
    _require_items(arr)
    if len(arr) > threshold:
        return -1
    low, high = 1, max(arr)
    while low <= high:
        mid = (low + high) // 2
        if _divided_sum(arr, mid) <= threshold:
            high = mid - 1
        else:
            low = mid + 1
    return low


def integer_sqrt(n: int) -> int:
    """Floor of the square root of ``n``."""
    low, high = 1, n
    while low <= high:
        mid = (low + high) // 2
        if mid * mid <= n:
            low = mid + 1
        else:
            high = mid - 1
    return high