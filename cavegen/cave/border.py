from __future__ import annotations

from .errors import ConfigurationError
from .grid import Grid
from .tiles import WALL


def add_border(grid: Grid, size: int) -> Grid:
    """Return a new grid padded by ``size`` wall cells on every side.

    The source occupies ``[size, size + width) x [size, size + height)``.
    """
    if size < 0:
        raise ConfigurationError("border_size", f"must be >= 0, got {size}")
    if size == 0:
        return grid.copy()
    bordered = Grid(grid.width + size * 2, grid.height + size * 2, fill=WALL)
    for x in range(grid.width):
        column = bordered.cells[x + size]
        column[size:size + grid.height] = grid.cells[x]
    return bordered


__all__ = ["add_border"]
