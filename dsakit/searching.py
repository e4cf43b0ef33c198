"""Binary searches: medians, ball placement, special arrays, extra elements and square roots."""

from __future__ import annotations

from bisect import bisect_left
from heapq import merge
from typing import Iterable, Sequence


def find_median_sorted_arrays(nums1: Iterable[int], nums2: Iterable[int]) -> float:
    """Return the median of the values of two sorted sequences taken together."""
    merged = list(merge(nums1, nums2))
    if not merged:
        raise ValueError("cannot take the median of no values")
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle - 1] + merged[middle]) / 2


def _can_place(force: int, positions: Sequence[int], balls: int) -> bool:
    placed = 1
    last = positions[0]
    for position in positions[1:]:
        if position - last >= force:
            placed += 1
            last = position
            if placed == balls:
                return True
    return placed >= balls


def max_magnetic_force(position: Iterable[int], m: int) -> int:
    """Return the largest minimum gap achievable when placing m balls at the positions.

    Answers 0 when there are fewer positions than balls.
    """
    if m < 2:
        raise ValueError("at least two balls are required")
    positions = sorted(position)
    if not positions:
        raise ValueError("at least one position is required")
    low, high = 1, positions[-1] - positions[0]
    best = 0
    while low <= high:
        middle = (low + high) // 2
        if _can_place(middle, positions, m):
            best = middle
            low = middle + 1
        else:
            high = middle - 1
    return best


def special_array(nums: Iterable[int]) -> int:
    """Return x such that exactly x values are at least x, or -1 if there is none."""
    ordered = sorted(nums)
    size = len(ordered)
    low, high = 0, size
    while low <= high:
        middle = (low + high) // 2
        count = size - bisect_left(ordered, middle)
        if count == middle:
            return middle
        if count > middle:
            low = middle + 1
        else:
            high = middle - 1
    return -1


def find_extra(arr1: Sequence[int], arr2: Sequence[int]) -> int:
    """Return the index of the element of sorted arr1 that is missing from arr2."""
    if len(arr2) != len(arr1) - 1:
        raise ValueError("arr2 must be exactly one element shorter than arr1")
    low, high = 0, len(arr1) - 1
    while low < high:
        middle = (low + high) // 2
        if arr2[middle] == arr1[middle]:
            low = middle + 1
        else:
            high = middle
    return low


def floor_sqrt(n: int) -> int:
    """Return the largest integer whose square does not exceed n."""
    if n < 0:
        raise ValueError("square root of a negative number")
    if n < 2:
        return n
    low, high = 1, n
    best = 0
    while low <= high:
        middle = (low + high) // 2
        square = middle * middle
        if square == n:
            return middle
        if square < n:
            best = middle
            low = middle + 1
        else:
            high = middle - 1
    return best