"""Grid and graph traversals: sub-islands and removable stones."""

from __future__ import annotations

from typing import Iterable, Sequence

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _island_within(
    grid1: Sequence[Sequence[int]],
    grid2: Sequence[Sequence[int]],
    start: tuple[int, int],
    seen: set[tuple[int, int]],
) -> bool:
    rows, cols = len(grid2), len(grid2[0])
    contained = True
    stack = [start]
    seen.add(start)
    while stack:
        i, j = stack.pop()
        if grid1[i][j] != 1:
            contained = False
        for di, dj in _NEIGHBOURS:
            ni, nj = i + di, j + dj
            if 0 <= ni < rows and 0 <= nj < cols and (ni, nj) not in seen and grid2[ni][nj] == 1:
                seen.add((ni, nj))
                stack.append((ni, nj))
    return contained


def count_sub_islands(grid1: Sequence[Sequence[int]], grid2: Sequence[Sequence[int]]) -> int:
    """Count the islands of grid2 whose every cell is land in grid1 as well."""
    if not grid2:
        return 0
    cols = len(grid2[0])
    if len(grid1) != len(grid2) or any(len(row) != cols for row in (*grid1, *grid2)):
        raise ValueError("grids must have the same shape")
    seen: set[tuple[int, int]] = set()
    count = 0
    for i, row in enumerate(grid2):
        for j, cell in enumerate(row):
            if cell == 1 and (i, j) not in seen and _island_within(grid1, grid2, (i, j), seen):
                count += 1
    return count


def remove_stones(stones: Iterable[Sequence[int]]) -> int:
    """Return how many stones can be removed, each sharing a row or column with a remaining one."""
    parent: dict[tuple[str, int], tuple[str, int]] = {}

    def find(key: tuple[str, int]) -> tuple[str, int]:
        parent.setdefault(key, key)
        while parent[key] != key:
            parent[key] = parent[parent[key]]
            key = parent[key]
        return key

    positions = [(stone[0], stone[1]) for stone in stones]
    for x, y in positions:
        parent[find(("row", x))] = find(("col", y))
    components = {find(("row", x)) for x, _ in positions}
    return len(positions) - len(components)