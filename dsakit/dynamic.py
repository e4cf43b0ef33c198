"""Dynamic-programming problems over grids, strings and sequences."""

from __future__ import annotations

import operator
from bisect import bisect_left
from functools import lru_cache
from math import isqrt
from typing import Callable, Iterable, Sequence

MOD = 1_000_000_007

_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


def count_squares(mat: Sequence[Sequence[int]]) -> int:
    """Count the square submatrices made only of ones."""
    if not mat or not mat[0]:
        raise ValueError("matrix must not be empty")
    cols = len(mat[0])
    below = [0] * (cols + 1)
    total = 0
    for row in reversed(mat):
        current = [0] * (cols + 1)
        for j in range(cols - 1, -1, -1):
            if row[j] != 0:
                current[j] = 1 + min(current[j + 1], below[j], below[j + 1])
        total += sum(current)
        below = current
    return total


def diff_ways_to_compute(expression: str) -> list[int]:
    """Return the value of every way to parenthesise an expression of +, - and *.

    Results are listed by splitting at each operator from left to right.
    """

    @lru_cache(maxsize=None)
    def ways(text: str) -> tuple[int, ...]:
        results: list[int] = []
        for index, ch in enumerate(text):
            apply = _OPERATORS.get(ch)
            if apply is None:
                continue
            left = ways(text[:index])
            right = ways(text[index + 1:])
            results.extend(apply(a, b) for a in left for b in right)
        if not results:
            return (int(text),)
        return tuple(results)

    return list(ways(expression))


def longest_square_streak(nums: Iterable[int]) -> int:
    """Return the length of the longest chain in which each value is the square of the last.

    Returns -1 when no chain has at least two values.
    """
    values = sorted(nums)
    if not values or values[-1] < 0:
        return -1
    bound = isqrt(values[-1])
    streak = [1] * len(values)
    for index in range(len(values) - 1, -1, -1):
        square = values[index] * values[index]
        following = bisect_left(values, square, index + 1)
        if following < len(values) and values[following] == square:
            streak[index] += streak[following]
    best = max(
        (length for value, length in zip(values, streak) if value <= bound),
        default=0,
    )
    return best if best > 1 else -1


def max_moves(grid: Sequence[Sequence[int]]) -> int:
    """Return the most moves rightwards (up, straight or down) onto strictly larger cells.

    Walks may start from any cell of the first column holding a value above -1;
    if there is none, the answer is -1.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    moves = [1] * rows
    for j in range(cols - 2, -1, -1):
        moves = [
            1
            + max(
                (
                    moves[ni]
                    for ni in (i - 1, i, i + 1)
                    if 0 <= ni < rows and grid[ni][j + 1] > grid[i][j]
                ),
                default=0,
            )
            for i in range(rows)
        ]
    best = max((count for row, count in zip(grid, moves) if row[0] > -1), default=0)
    return best - 1


def check_record(n: int) -> int:
    """Count attendance records of length n eligible for an award, modulo MOD.

    An eligible record has fewer than two absences and never three late days in a row.
    """
    if n < 0:
        raise ValueError("record length must not be negative")
    # ways[absent][late]: records of the remaining length from that state
    ways = [[1, 1, 1], [1, 1, 1]]
    for _ in range(n):
        ways = [
            [
                (
                    ways[absent][0]
                    + (ways[absent][late + 1] if late < 2 else 0)
                    + (ways[1][0] if absent == 0 else 0)
                )
                % MOD
                for late in range(3)
            ]
            for absent in range(2)
        ]
    return ways[0][0]


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring, the leftmost one on ties."""
    best = ""
    for start in range(len(s)):
        for end in range(start + 1, len(s) + 1):
            candidate = s[start:end]
            if len(candidate) > len(best) and candidate == candidate[::-1]:
                best = candidate
    return best


def longest_palindrome_memo(s: str) -> str:
    """Return the longest palindromic substring, remembering which ranges are palindromes."""
    known: dict[tuple[int, int], bool] = {}

    def is_palindrome(i: int, j: int) -> bool:
        path: list[tuple[int, int]] = []
        while i < j and (i, j) not in known and s[i] == s[j]:
            path.append((i, j))
            i += 1
            j -= 1
        if i >= j:
            result = True
        elif (i, j) in known:
            result = known[(i, j)]
        else:
            result = False
            known[(i, j)] = False
        known.update(dict.fromkeys(path, result))
        return result

    start = 0
    best = 0
    for i in range(len(s)):
        for j in range(i, len(s)):
            if j - i + 1 > best and is_palindrome(i, j):
                best = j - i + 1
                start = i
    return s[start:start + best]


def longest_palindrome_tab(s: str) -> str:
    """Return the longest palindromic substring from a table of palindromic ranges.

    Among palindromes of length two the rightmost wins; among longer ones the leftmost.
    """
    n = len(s)
    if n == 0:
        return ""
    table = [[False] * n for _ in range(n)]
    for i in range(n):
        table[i][i] = True
    start, best = 0, 1
    for i in range(n - 1):
        if s[i] == s[i + 1]:
            table[i][i + 1] = True
            start, best = i, 2
    for length in range(3, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            if s[i] == s[j] and table[i + 1][j - 1]:
                table[i][j] = True
                if length > best:
                    start, best = i, length
    return s[start:start + best]


def strange_printer(s: str) -> int:
    """Return the fewest turns a printer of runs of one character needs to print s."""
    n = len(s)
    if n == 0:
        return 0
    turns = [[0] * n for _ in range(n)]
    for i in range(n - 1, -1, -1):
        turns[i][i] = 1
        for j in range(i + 1, n):
            best = min(turns[i][x] + turns[x + 1][j] for x in range(i, j))
            turns[i][j] = best - 1 if s[i] == s[j] else best
    return turns[0][n - 1]