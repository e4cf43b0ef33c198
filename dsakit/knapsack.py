"""Subset-sum, coin-change and knapsack problems solved by dynamic programming."""

from __future__ import annotations

from functools import lru_cache
from math import inf
from typing import Optional, Sequence

MOD = 1_000_000_007


def _check_count(n: int, *sequences: Sequence[int], minimum: int = 1) -> None:
    if n < minimum:
        raise ValueError(f"at least {minimum} item(s) required, got {n}")
    for sequence in sequences:
        if len(sequence) != n:
            raise ValueError(f"expected {n} items, got {len(sequence)}")


def _check_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def _reachable_sums(values: Sequence[int], limit: int) -> int:
    """Return a bit mask whose bit s is set when some subset of values sums to s <= limit."""
    full = (1 << (limit + 1)) - 1
    mask = 1
    for value in values:
        mask |= (mask << value) & full
    return mask


def _count_subsets(values: Sequence[int], target: int) -> int:
    """Count the subsets of values that sum to target, modulo MOD."""
    _check_non_negative(target, "target")
    ways = [1] + [0] * target
    for value in values:
        for total in range(target, value - 1, -1):
            ways[total] = (ways[total] + ways[total - value]) % MOD
    return ways[target]


def _partition_target(arr: Sequence[int], d: int) -> Optional[int]:
    total = sum(arr)
    if total < d or (total - d) % 2 != 0:
        return None
    return (total - d) // 2


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins that make up amount, or -1 if it cannot be made."""
    _check_non_negative(amount, "amount")
    best: list[float] = [0] + [inf] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            best[total] = min(best[total], best[total - coin] + 1)
    return -1 if best[amount] == inf else int(best[amount])


def coin_change_memo(coins: Sequence[int], amount: int) -> int:
    """Top-down variant of coin_change.

    With no coins at all it answers -1, even for an amount of 0.
    """
    _check_non_negative(amount, "amount")
    denominations = tuple(coins)

    @lru_cache(maxsize=None)
    def fewest(index: int, target: int) -> float:
        if index < 0:
            return inf
        if target == 0:
            return 0
        skip = fewest(index - 1, target)
        coin = denominations[index]
        take = 1 + fewest(index, target - coin) if coin <= target else inf
        return min(skip, take)

    result = fewest(len(denominations) - 1, amount)
    return -1 if result == inf else int(result)


def can_partition(arr: Sequence[int]) -> bool:
    """Return True if arr splits into two subsets of equal sum."""
    total = sum(arr)
    if total % 2 != 0:
        return False
    target = total // 2
    return bool((_reachable_sums(arr, target) >> target) & 1)


def count_partitions(n: int, d: int, arr: Sequence[int]) -> int:
    """Count the splits of arr into two subsets whose sums differ by d, modulo MOD."""
    _check_count(n, arr, minimum=0)
    target = _partition_target(arr, d)
    if target is None:
        return 0
    return _count_subsets(arr, target)


def count_partitions_memo(n: int, d: int, arr: Sequence[int]) -> int:
    """Top-down variant of count_partitions; arr must not be empty."""
    _check_count(n, arr)
    target = _partition_target(arr, d)
    if target is None:
        return 0
    values = tuple(arr)

    @lru_cache(maxsize=None)
    def ways(index: int, remaining: int) -> int:
        if index == 0:
            if remaining == 0 and values[0] == 0:
                return 2
            if remaining == 0 or remaining == values[0]:
                return 1
            return 0
        skip = ways(index - 1, remaining)
        take = ways(index - 1, remaining - values[index]) if values[index] <= remaining else 0
        return (take + skip) % MOD

    return ways(n - 1, target)


def change(amount: int, coins: Sequence[int]) -> int:
    """Return the number of coin combinations that make up amount."""
    _check_non_negative(amount, "amount")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def min_subset_sum_difference(nums: Sequence[int]) -> int:
    """Return the smallest absolute difference between the sums of a two-way split.

    Negative numbers are allowed.
    """
    total = sum(nums)
    sums = {0}
    for value in nums:
        sums |= {s + value for s in sums}
    return min(abs(total - 2 * s) for s in sums)


def find_ways(arr: Sequence[int], k: int) -> int:
    """Count the subsets of arr that sum to k, modulo MOD."""
    return _count_subsets(arr, k)


def cut_rod(price: Sequence[int], n: int) -> int:
    """Return the best value from cutting a rod of length n.

    price[i] is the value of a piece of length i + 1.
    """
    if not price:
        raise ValueError("price list must not be empty")
    _check_non_negative(n, "rod length")
    best = [length * price[0] for length in range(n + 1)]
    for size, value in enumerate(price[1:], start=2):
        for length in range(size, n + 1):
            best[length] = max(best[length], best[length - size] + value)
    return best[n]


def subset_sum_to_k(n: int, k: int, arr: Sequence[int]) -> bool:
    """Return True if a subset of arr sums to k.

    The first element only counts when it equals k on its own; it is never
    combined with the other elements.
    """
    _check_count(n, arr)
    _check_non_negative(k, "k")
    if k == 0 or arr[0] == k:
        return True
    return bool((_reachable_sums(arr[1:], k) >> k) & 1)


def unbounded_knapsack(n: int, w: int, profit: Sequence[int], weight: Sequence[int]) -> int:
    """Return the best profit within capacity w when every item may be taken any number of times."""
    _check_count(n, profit, weight)
    _check_non_negative(w, "capacity")
    best = [(capacity // weight[0]) * profit[0] for capacity in range(w + 1)]
    for value, size in zip(profit[1:], weight[1:]):
        for capacity in range(size, w + 1):
            best[capacity] = max(best[capacity], best[capacity - size] + value)
    return best[w]


def knapsack(weight: Sequence[int], value: Sequence[int], n: int, max_weight: int) -> int:
    """Return the best value within max_weight when every item is taken at most once."""
    _check_count(n, weight, value)
    _check_non_negative(max_weight, "capacity")
    best = [value[0] if capacity >= weight[0] else 0 for capacity in range(max_weight + 1)]
    for size, worth in zip(weight[1:], value[1:]):
        for capacity in range(max_weight, size - 1, -1):
            best[capacity] = max(best[capacity], best[capacity - size] + worth)
    return best[max_weight]