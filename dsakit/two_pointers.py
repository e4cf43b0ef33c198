"""Two-pointer and sliding-window routines over sequences and strings."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, MutableSequence, Sequence


def min_swaps_to_group(nums: Iterable[int]) -> int:
    """Return the fewest swaps that gather all 1s of a circular 0/1 array together."""
    values = list(nums)
    if any(value not in (0, 1) for value in values):
        raise ValueError("only the values 0 and 1 are allowed")
    ones = sum(values)
    if ones == 0:
        return 0
    window = values + values[: ones - 1]
    current = sum(window[:ones])
    best = current
    for leaving, entering in zip(window, window[ones:]):
        current += entering - leaving
        best = max(best, current)
    return ones - best


def append_characters(s: str, t: str) -> int:
    """Return how many characters must be appended to s for t to be a subsequence of it."""
    matched = 0
    for ch in s:
        if matched < len(t) and ch == t[matched]:
            matched += 1
    return len(t) - matched


def divide_players(skill: Iterable[int]) -> int:
    """Pair players into teams of equal total skill and return the sum of skill products.

    Returns -1 when no such pairing exists.
    """
    ordered = sorted(skill)
    size = len(ordered)
    if size % 2:
        return -1
    if not ordered:
        return 0
    target = ordered[0] + ordered[-1]
    chemistry = 0
    for low, high in zip(ordered[: size // 2], reversed(ordered)):
        if low + high != target:
            return -1
        chemistry += low * high
    return chemistry


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange nums in place into the next permutation in lexicographic order.

    The last permutation wraps around to the first.
    """
    size = len(nums)
    pivot = next((i for i in range(size - 2, -1, -1) if nums[i] < nums[i + 1]), None)
    if pivot is None:
        nums.reverse()
        return
    successor = next(j for j in range(size - 1, pivot, -1) if nums[j] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1:] = nums[pivot + 1:][::-1]


def reverse_string(chars: MutableSequence[str]) -> None:
    """Reverse a sequence of characters in place."""
    chars.reverse()


def check_inclusion(s1: str, s2: str) -> bool:
    """Return True if some permutation of s1 is a substring of s2."""
    width = len(s1)
    if width == 0 or width > len(s2):
        return False
    needed = Counter(s1)
    window = Counter(s2[:width])
    if window == needed:
        return True
    for leaving, entering in zip(s2, s2[width:]):
        window[entering] += 1
        window[leaving] -= 1
        if window[leaving] == 0:
            del window[leaving]
        if window == needed:
            return True
    return False


def num_rescue_boats(people: Sequence[int], limit: int) -> int:
    """Return the fewest boats, each holding at most two people within limit, to carry everyone."""
    weights = sorted(people)
    light, heavy = 0, len(weights) - 1
    boats = 0
    while light <= heavy:
        if weights[light] + weights[heavy] <= limit:
            light += 1
        heavy -= 1
        boats += 1
    return boats