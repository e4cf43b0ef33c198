"""Array and matrix problems: sorting by rules, greedy fills and simulations."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, MutableSequence, Sequence

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))  # north, east, south, west
_DIE_FACES = 6


def height_checker(heights: Sequence[int]) -> int:
    """Return how many positions differ from the sorted order of heights."""
    return sum(a != b for a, b in zip(heights, sorted(heights)))


def relative_sort_array(arr1: Sequence[int], arr2: Iterable[int]) -> list[int]:
    """Order arr1 as the values appear in arr2; the rest follow in ascending order."""
    counts = Counter(arr1)
    result: list[int] = []
    for value in arr2:
        result.extend([value] * counts.pop(value, 0))
    for value in sorted(counts):
        result.extend([value] * counts[value])
    return result


def lucky_numbers(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the values that are the minimum of their row and maximum of their column."""
    row_min = [min(row) for row in matrix]
    col_max = [max(column) for column in zip(*matrix)]
    return [
        value
        for row, smallest in zip(matrix, row_min)
        for value, largest in zip(row, col_max)
        if value == smallest and value == largest
    ]


def can_arrange(arr: Iterable[int], k: int) -> bool:
    """Return True if arr splits into pairs whose sums are divisible by k."""
    if k <= 0:
        raise ValueError("k must be positive")
    freq = Counter(value % k for value in arr)
    if freq[0] % 2 != 0:
        return False
    return all(freq[r] == freq[k - r] for r in range(1, k // 2 + 1))


def restore_matrix(row_sum: Sequence[int], col_sum: Sequence[int]) -> list[list[int]]:
    """Build a non-negative matrix with the given row and column sums."""
    rows = list(row_sum)
    cols = list(col_sum)
    result = [[0] * len(cols) for _ in rows]
    i = j = 0
    while i < len(rows) and j < len(cols):
        value = min(rows[i], cols[j])
        result[i][j] = value
        rows[i] -= value
        cols[j] -= value
        if rows[i] == 0:
            i += 1
        if cols[j] == 0:
            j += 1
    return result


def frequency_sort(nums: Iterable[int]) -> list[int]:
    """Sort by increasing frequency; equal frequencies go by decreasing value."""
    values = list(nums)
    freq = Counter(values)
    return sorted(values, key=lambda v: (freq[v], -v))


def chalk_replacer(chalk: Sequence[int], k: int) -> int:
    """Return the index of the student who runs out of chalk first."""
    total = sum(chalk)
    if total == 0:
        raise ValueError("students use no chalk at all")
    remaining = k % total
    for index, used in enumerate(chalk):
        if remaining < used:
            return index
        remaining -= used
    return -1


def construct_2d_array(original: Sequence[int], m: int, n: int) -> list[list[int]]:
    """Reshape original into m rows of n, or return [] if the sizes disagree."""
    if len(original) != m * n:
        return []
    return [list(original[row * n:(row + 1) * n]) for row in range(m)]


def missing_rolls(rolls: Sequence[int], mean: int, n: int) -> list[int]:
    """Return n die rolls that bring the mean of all rolls to mean, or [] if impossible."""
    needed = (n + len(rolls)) * mean - sum(rolls)
    if needed < n or needed > n * _DIE_FACES:
        return []
    result = [1] * n
    remaining = needed - n
    for index in range(n):
        if remaining <= 0:
            break
        add = min(remaining, _DIE_FACES - 1)
        result[index] += add
        remaining -= add
    return result


def count_max_or_subsets(nums: Iterable[int]) -> int:
    """Count the subsets (the empty one included) whose bitwise OR is the largest possible."""
    counts: Counter[int] = Counter({0: 1})
    max_or = 0
    for value in nums:
        max_or |= value
        updated = Counter(counts)
        for or_value, count in counts.items():
            updated[or_value | value] += count
        counts = updated
    return counts[max_or]


def sort_people(names: Sequence[str], heights: Sequence[int]) -> list[str]:
    """Return the names ordered by decreasing height."""
    if len(names) != len(heights):
        raise ValueError("names and heights differ in length")
    return [name for _, name in sorted(zip(heights, names), reverse=True)]


def max_distance(arrays: Sequence[Sequence[int]]) -> int:
    """Return the largest distance between values picked from two different sorted arrays."""
    if len(arrays) < 2:
        raise ValueError("at least two arrays are required")
    low, high = arrays[0][0], arrays[0][-1]
    best: int | None = None
    for array in arrays[1:]:
        candidate = max(abs(array[-1] - low), abs(array[0] - high))
        best = candidate if best is None else max(best, candidate)
        low = min(low, array[0])
        high = max(high, array[-1])
    assert best is not None
    return best


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    if any(value not in (0, 1, 2) for value in nums):
        raise ValueError("only the values 0, 1 and 2 can be sorted")
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def lemonade_change(bills: Iterable[int]) -> bool:
    """Return True if every customer paying 5, 10 or 20 for a 5 lemonade gets change."""
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if fives == 0:
                return False
            fives -= 1
            tens += 1
        elif tens > 0 and fives > 0:
            tens -= 1
            fives -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True


def robot_sim(commands: Iterable[int], obstacles: Iterable[Sequence[int]]) -> int:
    """Return the largest squared distance from the origin the robot reaches.

    -2 turns left, -1 turns right, any other value moves that many steps,
    stopping short of an obstacle.
    """
    blocked = {(ob[0], ob[1]) for ob in obstacles}
    direction = 0
    x = y = 0
    best = 0
    for command in commands:
        if command == -2:
            direction = (direction + 3) % 4
        elif command == -1:
            direction = (direction + 1) % 4
        else:
            dx, dy = _DIRECTIONS[direction]
            for _ in range(command):
                if (x + dx, y + dy) in blocked:
                    break
                x += dx
                y += dy
                best = max(best, x * x + y * y)
    return best


def sort_by_freq(arr: Iterable[int]) -> list[int]:
    """Sort by decreasing frequency; equal frequencies go by increasing value."""
    freq = Counter(arr)
    ordered = sorted(freq.items(), key=lambda item: (-item[1], item[0]))
    return [value for value, count in ordered for _ in range(count)]