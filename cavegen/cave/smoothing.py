"""Cellular-automaton smoothing.

Rule per cell, against the pre-pass snapshot:
    * more than 4 wall neighbours -> WALL
    * fewer than 4               -> FLOOR
    * exactly 4                  -> unchanged

Neighbours are the 8 surrounding cells; positions outside the grid count as
walls, which pulls the map edges solid. Each pass writes a fresh buffer.
"""
from __future__ import annotations

from .grid import Grid
from .tiles import FLOOR, WALL


def count_wall_neighbours(grid: Grid, x: int, y: int) -> int:
    cells = grid.cells
    count = 0
    for nx in range(x - 1, x + 2):
        for ny in range(y - 1, y + 2):
            if nx == x and ny == y:
                continue
            if grid.in_bounds(nx, ny):
                count += int(cells[nx][ny])
            else:
                count += 1
    return count


def smooth_once(grid: Grid) -> Grid:
    out = grid.copy()
    target = out.cells
    for x in range(grid.width):
        for y in range(grid.height):
            walls = count_wall_neighbours(grid, x, y)
            if walls > 4:
                target[x][y] = WALL
            elif walls < 4:
                target[x][y] = FLOOR
    return out


def smooth(grid: Grid, iterations: int) -> Grid:
    """Apply exactly ``iterations`` passes; the input grid is left untouched."""
    if iterations < 0:
        raise ValueError("iterations must be >= 0")
    current = grid.copy()
    for _ in range(iterations):
        current = smooth_once(current)
    return current


__all__ = ["count_wall_neighbours", "smooth_once", "smooth"]
