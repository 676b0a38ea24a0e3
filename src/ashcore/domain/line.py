"""Cell tracing used by projectiles and line-of-sight checks."""
from __future__ import annotations

from typing import List

from ashcore.core.types import GridPosition


def _in_bounds(width: int, height: int, x: int, y: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def linear_trajectory(
    width: int,
    height: int,
    start: GridPosition,
    dx: int,
    dy: int,
    max_range: int,
) -> List[GridPosition]:
    """Step ``(dx, dy)`` repeatedly from ``start`` (excluded) until the range or the map edge."""
    cells: List[GridPosition] = []
    if (dx == 0 and dy == 0) or max_range <= 0:
        return cells
    x, y = start
    for _ in range(max_range):
        x += dx
        y += dy
        if not _in_bounds(width, height, x, y):
            break
        cells.append(GridPosition(x, y))
    return cells


def line_trajectory(
    width: int,
    height: int,
    start: GridPosition,
    end: GridPosition,
    max_range: int,
) -> List[GridPosition]:
    """Bresenham cells from ``start`` (excluded) toward ``end`` (included)."""
    cells: List[GridPosition] = []
    if start == end or max_range <= 0:
        return cells

    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    x, y = x0, y0

    while len(cells) < max_range:
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
        if not _in_bounds(width, height, x, y):
            break
        cells.append(GridPosition(x, y))
        if x == x1 and y == y1:
            break
    return cells
