"""Bit manipulation routines."""

from __future__ import annotations

from typing import Sequence

_WORD_MASK = 0xFFFFFFFF


def min_bit_flips(start: int, goal: int) -> int:
    """Return how many bits must be flipped to turn start into goal."""
    difference = start ^ goal
    if difference <= 0:
        return 0
    return bin(difference).count("1")


def longest_subarray(nums: Sequence[int]) -> int:
    """Return the length of the longest run of the maximum element.

    That run is the longest subarray whose bitwise AND is maximal.
    """
    largest = max(nums)
    longest = current = 0
    for value in nums:
        if value == largest:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def number_complement(num: int) -> int:
    """Flip every bit of num's 32-bit pattern below its highest set bit.

    Raises ValueError when the pattern has no set bit.
    """
    value = num & _WORD_MASK
    if value == 0:
        raise ValueError("number has no set bits to complement")
    return value ^ ((1 << value.bit_length()) - 1)