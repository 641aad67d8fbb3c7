"""Breadth-first searches over small grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
_ALL_DIRECTIONS = ((1, 1), (1, 0), (1, -1), (0, 1), (0, -1), (-1, 1), (-1, 0), (-1, -1))


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the groups of orthogonally adjacent ``'1'`` cells."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen: set[tuple[int, int]] = set()
    islands = 0
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell != "1" or (row, col) in seen:
                continue
            islands += 1
            seen.add((row, col))
            queue = deque([(row, col)])
            while queue:
                r, c = queue.popleft()
                for dr, dc in _ORTHOGONAL:
                    nr, nc = r + dr, c + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and grid[nr][nc] == "1"
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        queue.append((nr, nc))
    return islands


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Length in cells of the shortest clear 8-connected path between opposite corners.

    Cells holding 0 are clear. Returns -1 when no such path exists.
    The grid is left unchanged.
    """
    n = len(grid)
    if n == 0 or grid[0][0] == 1:
        return -1
    if n == 1:
        return 1
    if grid[n - 1][n - 1] == 1:
        return -1

    length = {(0, 0): 1}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        here = length[(x, y)]
        if (x, y) == (n - 1, n - 1):
            return here
        for dx, dy in _ALL_DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and grid[nx][ny] == 0 and (nx, ny) not in length:
                length[(nx, ny)] = here + 1
                queue.append((nx, ny))
    return -1