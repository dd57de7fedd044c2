"""Passage carving between rooms: integer line + disc brush."""
from __future__ import annotations

from typing import List, Tuple

from .grid import Grid
from .tiles import FLOOR, Coord


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def get_line(start: Tuple[int, int], end: Tuple[int, int]) -> List[Coord]:
    """Integer line from ``start`` to ``end``, both inclusive.

    Steps one cell along the dominant axis per point and carries the minor
    axis movement in an error accumulator (Bresenham style). Always emits
    ``max(|dx|, |dy|) + 1`` points.
    """
    x, y = start
    dx = end[0] - x
    dy = end[1] - y

    inverted = False
    step = _sign(dx)
    gradient_step = _sign(dy)
    longest = abs(dx)
    shortest = abs(dy)
    if longest < shortest:
        inverted = True
        longest, shortest = shortest, longest
        step = _sign(dy)
        gradient_step = _sign(dx)

    line = []
    accumulation = longest // 2
    for _ in range(longest):
        line.append(Coord(x, y))
        if inverted:
            y += step
        else:
            x += step
        accumulation += shortest
        if accumulation >= longest:
            if inverted:
                x += gradient_step
            else:
                y += gradient_step
            accumulation -= longest
    line.append(Coord(x, y))
    return line


def carve_disc(grid: Grid, centre: Tuple[int, int], radius: int) -> int:
    """Set FLOOR on every in-bounds cell with dx² + dy² <= radius². Returns cells changed."""
    cx, cy = centre
    cells = grid.cells
    r2 = radius * radius
    changed = 0
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            if dx * dx + dy * dy > r2:
                continue
            x, y = cx + dx, cy + dy
            if grid.in_bounds(x, y) and cells[x][y] != FLOOR:
                cells[x][y] = FLOOR
                changed += 1
    return changed


def carve_passage(grid: Grid, a: Tuple[int, int], b: Tuple[int, int], radius: int) -> List[Coord]:
    """Stamp a disc of ``radius`` on every point of the a-b line; returns the line."""
    line = get_line(a, b)
    for point in line:
        carve_disc(grid, point, radius)
    return line


__all__ = ["get_line", "carve_disc", "carve_passage"]
