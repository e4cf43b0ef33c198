"""Backtracking searches: string splits, combination sums, queens, grid paths and word search."""

from __future__ import annotations

from typing import Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_OBSTACLE = -1
_START = 1
_END = 2


def max_unique_split(s: str) -> int:
    """Return the most pieces s can be cut into with no two pieces equal."""
    used: set[str] = set()

    def best_from(start: int) -> int:
        if start == len(s):
            return 0
        best = 0
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece in used:
                continue
            used.add(piece)
            best = max(best, 1 + best_from(end))
            used.remove(piece)
        return best

    return best_from(0)


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct combination of candidates, each used once, summing to target.

    Combinations come out in ascending lexicographic order, each sorted.
    """
    nums = sorted(candidates)
    found: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            found.append(list(chosen))
            return
        for index, value in enumerate(nums[start:], start):
            if index > start and value == nums[index - 1]:
                continue
            if value > remaining:
                break
            chosen.append(value)
            search(index + 1, remaining - value)
            chosen.pop()

    search(0, target)
    return found


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens on an n x n board.

    Each board is a list of rows in which "Q" marks a queen and "." an empty square.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[str]] = []
    columns: list[int] = []
    used_columns: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * col + "Q" + "." * (n - col - 1) for col in columns])
            return
        for col in range(n):
            if col in used_columns or row - col in used_diagonals or row + col in used_anti_diagonals:
                continue
            columns.append(col)
            used_columns.add(col)
            used_diagonals.add(row - col)
            used_anti_diagonals.add(row + col)
            place(row + 1)
            columns.pop()
            used_columns.remove(col)
            used_diagonals.remove(row - col)
            used_anti_diagonals.remove(row + col)

    place(0)
    return solutions


def unique_paths_iii(grid: Sequence[Sequence[int]]) -> int:
    """Count the walks from the start (1) to the end (2) that cross every free cell once.

    Cells holding -1 are obstacles; the grid passed in is left untouched.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    cells = [list(row) for row in grid]
    rows, cols = len(cells), len(cells[0])
    free = sum(cell != _OBSTACLE for row in cells for cell in row)
    start = next(
        ((i, j) for i, row in enumerate(cells) for j, cell in enumerate(row) if cell == _START),
        None,
    )
    if start is None:
        raise ValueError("grid has no starting cell")

    def walk(i: int, j: int, visited: int) -> int:
        if not (0 <= i < rows and 0 <= j < cols) or cells[i][j] == _OBSTACLE:
            return 0
        if cells[i][j] == _END:
            return 1 if visited == free else 0
        cells[i][j] = _OBSTACLE
        total = sum(walk(i + di, j + dj, visited + 1) for di, dj in _STEPS)
        cells[i][j] = 0
        return total

    return walk(start[0], start[1], 1)


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Return True if word can be traced through adjacent cells, using each cell once."""
    if not word or not board:
        return False
    rows, cols = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def trace(i: int, j: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= i < rows and 0 <= j < cols):
            return False
        if (i, j) in visited or board[i][j] != word[index]:
            return False
        visited.add((i, j))
        found = any(trace(i + di, j + dj, index + 1) for di, dj in _STEPS)
        visited.discard((i, j))
        return found

    return any(trace(i, j, 0) for i in range(rows) for j in range(cols))