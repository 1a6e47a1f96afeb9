"""Flood fills and shortest paths on rectangular grids."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Callable, Iterator, Sequence

Cell = tuple[int, int]

_ORTHOGONAL = ((1, 0), (0, -1), (-1, 0), (0, 1))
_ALL_DIRECTIONS = ((1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1), (0, 1), (1, 1))


def _shape(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return rows, cols


def _neighbours(cell: Cell, rows: int, cols: int, steps=_ORTHOGONAL) -> Iterator[Cell]:
    r, c = cell
    for dr, dc in steps:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _border(rows: int, cols: int) -> Iterator[Cell]:
    for c in range(cols):
        yield 0, c
        yield rows - 1, c
    for r in range(rows):
        yield r, 0
        yield r, cols - 1


def _reachable_from_border(
    grid: Sequence[Sequence[object]], is_open: Callable[[object], bool]
) -> set[Cell]:
    """Return every open cell orthogonally connected to an open border cell."""
    rows, cols = _shape(grid)
    if not rows or not cols:
        return set()
    seen: set[Cell] = set()
    stack = []
    for r, c in _border(rows, cols):
        if (r, c) not in seen and is_open(grid[r][c]):
            seen.add((r, c))
            stack.append((r, c))
    while stack:
        cell = stack.pop()
        for nr, nc in _neighbours(cell, rows, cols):
            if (nr, nc) not in seen and is_open(grid[nr][nc]):
                seen.add((nr, nc))
                stack.append((nr, nc))
    return seen


def capture_surrounded(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a copy of the board where only 'O' regions touching the edge survive.

    Every other cell, whatever it held, becomes 'X'.
    """
    safe = _reachable_from_border(board, lambda value: value == "O")
    rows, cols = _shape(board)
    return [
        ["O" if (r, c) in safe else "X" for c in range(cols)]
        for r in range(rows)
    ]


def count_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Count land cells (1) from which the grid edge cannot be reached."""
    safe = _reachable_from_border(grid, lambda value: value == 1)
    return sum(
        1
        for r, row in enumerate(grid)
        for c, value in enumerate(row)
        if value == 1 and (r, c) not in safe
    )


def rotting_time(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange (1) is left, or -1 if some never rot.

    Rotten oranges (2) spread to orthogonal fresh neighbours each minute.
    """
    rows, cols = _shape(grid)
    rotten = {
        (r, c) for r, row in enumerate(grid) for c, value in enumerate(row) if value == 2
    }
    queue = deque((cell, 0) for cell in sorted(rotten))
    elapsed = 0
    while queue:
        cell, elapsed = queue.popleft()
        for nr, nc in _neighbours(cell, rows, cols):
            if grid[nr][nc] == 1 and (nr, nc) not in rotten:
                rotten.add((nr, nc))
                queue.append(((nr, nc), elapsed + 1))
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value == 1 and (r, c) not in rotten:
                return -1
    return elapsed


def shortest_clear_path(grid: Sequence[Sequence[int]]) -> int:
    """Length in cells of the shortest 8-connected clear path corner to corner.

    Cells holding a non-zero value are blocked. Returns -1 if no path exists.
    """
    rows, cols = _shape(grid)
    if not rows or not cols:
        raise ValueError("grid must be non-empty")
    target = (rows - 1, cols - 1)
    if grid[0][0] or grid[rows - 1][cols - 1]:
        return -1
    distance = {(0, 0): 1}
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        if cell == target:
            return distance[cell]
        for nr, nc in _neighbours(cell, rows, cols, _ALL_DIRECTIONS):
            if not grid[nr][nc] and (nr, nc) not in distance:
                distance[nr, nc] = distance[cell] + 1
                queue.append((nr, nc))
    return -1


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Smallest possible largest height step on a path from top-left to bottom-right."""
    rows, cols = _shape(heights)
    if not rows or not cols:
        raise ValueError("grid must be non-empty")
    target = (rows - 1, cols - 1)
    best: dict[Cell, int] = {(0, 0): 0}
    heap = [(0, (0, 0))]
    while heap:
        effort, cell = heapq.heappop(heap)
        if effort > best[cell]:
            continue
        if cell == target:
            return effort
        r, c = cell
        for nr, nc in _neighbours(cell, rows, cols):
            step = max(effort, abs(heights[nr][nc] - heights[r][c]))
            if step < best.get((nr, nc), step + 1):
                best[nr, nc] = step
                heapq.heappush(heap, (step, (nr, nc)))
    return best[target]