"""Assorted number, sequence and string routines, and a small file-name command."""

from __future__ import annotations

import argparse
from collections import Counter
from heapq import merge
from itertools import combinations
from typing import Iterable, Iterator, Optional, Sequence

MOD = 1_000_000_007

_FLIP = str.maketrans("01", "10")


def process_filename(text: str) -> str:
    """Turn a title into a source file name: spaces become '_', dots vanish, '.cpp' is added."""
    return text.replace(".", "").replace(" ", "_") + ".cpp"


def padovan(n: int) -> int:
    """Return the n-th Padovan number, modulo MOD."""
    if n < 0:
        raise ValueError("index must not be negative")
    a0 = a1 = a2 = 1
    for _ in range(3, n + 1):
        a0, a1, a2 = a1, a2, (a0 + a1) % MOD
    return a2


def find_kth_bit(n: int, k: int) -> str:
    """Return the k-th (1-based) bit of S_n, where S_1 = "0" and S_n = S_(n-1) + "1" + reverse(invert(S_(n-1)))."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if not 1 <= k <= 2**n - 1:
        raise ValueError(f"k must lie between 1 and {2**n - 1}")
    bits = "0"
    for _ in range(n - 1):
        bits = bits + "1" + bits.translate(_FLIP)[::-1]
    return bits[k - 1]


def single_number(nums: Iterable[int]) -> list[int]:
    """Return, in ascending order, the values occurring exactly once."""
    counts = Counter(nums)
    return sorted(value for value, count in counts.items() if count == 1)


def min_steps(n: int) -> int:
    """Return the fewest copy-all and paste operations to get n characters from one."""
    steps = 0
    factor = 2
    while factor * factor <= n:
        while n % factor == 0:
            steps += factor
            n //= factor
        factor += 1
    if n > 1:
        steps += n
    return steps


def smallest_distance_pair(nums: Sequence[int], k: int) -> int:
    """Return the k-th smallest distance among all pairs of non-negative values.

    Returns 0 when k is not positive and -1 when there are fewer than k pairs.
    """
    if not nums:
        raise ValueError("at least one value is required")
    if any(value < 0 for value in nums):
        raise ValueError("values must not be negative")
    if k <= 0:
        return 0
    counts = Counter(abs(a - b) for a, b in combinations(nums, 2))
    remaining = k
    for distance in sorted(counts):
        remaining -= counts[distance]
        if remaining <= 0:
            return distance
    return -1


def _swap_permutations(values: list[int], index: int) -> Iterator[list[int]]:
    if index >= len(values):
        yield list(values)
        return
    for j in range(index, len(values)):
        values[index], values[j] = values[j], values[index]
        yield from _swap_permutations(list(values), index + 1)


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Return every ordering of nums, produced by successive swaps."""
    return list(_swap_permutations(list(nums), 0))


def check_subarray_sum(nums: Sequence[int], k: int) -> bool:
    """Return True if a run of at least two non-negative values sums to a multiple of k."""
    first_seen: dict[int, int] = {}
    prefix = 0
    for index, value in enumerate(nums):
        prefix = (prefix + value) % k
        if prefix == 0 and index > 0:
            return True
        if prefix in first_seen:
            if index - first_seen[prefix] > 1:
                return True
        else:
            first_seen[prefix] = index
    return False


def sort_array(nums: Iterable[int]) -> list[int]:
    """Return the values sorted in ascending order by merge sort."""
    values = list(nums)
    if len(values) <= 1:
        return values
    middle = (len(values) + 1) // 2
    return list(merge(sort_array(values[:middle]), sort_array(values[middle:])))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the file name made from the given words, or from a line read from stdin."""
    parser = argparse.ArgumentParser(
        prog="dsakit",
        description="Turn a title into a source file name.",
    )
    parser.add_argument("text", nargs="*", help="title words; read from stdin when absent")
    args = parser.parse_args(argv)
    if args.text:
        text = " ".join(args.text)
    else:
        try:
            text = input("Enter the string: ")
        except EOFError:
            text = ""
    print(f"Processed string: {process_filename(text)}")
    return 0