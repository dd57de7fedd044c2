"""Dense rectangular tile buffer.

Cells are stored column-major (``cells[x][y]``) to match the ``(x, y)``
indexing used by every generation stage. Out-of-bounds item access raises
``IndexError``; stages that want "outside counts as wall" semantics must ask
``in_bounds`` first.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .tiles import FLOOR, WALL, Coord, Tile

CARDINALS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))


class Grid:
    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int, height: int, fill: Tile = WALL, cells: Optional[List[List[Tile]]] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        if cells is None:
            cells = [[fill for _ in range(height)] for _ in range(width)]
        elif len(cells) != width or any(len(col) != height for col in cells):
            raise ValueError("cell buffer does not match grid dimensions")
        self.cells = cells

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, pos) -> Tuple[int, int]:
        x, y = pos
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        return x, y

    def __getitem__(self, pos) -> Tile:
        x, y = self._check(pos)
        return self.cells[x][y]

    def __setitem__(self, pos, tile: Tile) -> None:
        x, y = self._check(pos)
        self.cells[x][y] = Tile(tile)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, floor={self.count(FLOOR)})"

    def copy(self) -> "Grid":
        return Grid(self.width, self.height, cells=[list(col) for col in self.cells])

    def coords(self) -> Iterator[Coord]:
        """All coordinates in scan order: x outer, y inner."""
        for x in range(self.width):
            for y in range(self.height):
                yield Coord(x, y)

    def count(self, tile: Tile) -> int:
        return sum(1 for col in self.cells for t in col if t == tile)

    def tiles_of(self, tile: Tile) -> List[Coord]:
        return [c for c in self.coords() if self.cells[c.x][c.y] == tile]

    def fill(self, coords: Iterable[Sequence[int]], tile: Tile) -> None:
        for x, y in coords:
            self[x, y] = tile

    # ------------------------------------------------------------------
    # Text form (debugging / fixtures)
    # ------------------------------------------------------------------
    def render(self, wall: str = "#", floor: str = ".") -> str:
        """Rows top to bottom (y = 0 first), one character per cell."""
        chars = {WALL: wall, FLOOR: floor}
        return "\n".join(
            "".join(chars[self.cells[x][y]] for x in range(self.width)) for y in range(self.height)
        )

    @classmethod
    def from_rows(cls, rows: Sequence[str], wall: str = "#") -> "Grid":
        """Parse ``render`` output: ``wall`` characters become Wall, anything else Floor."""
        rows = [r for r in rows if r]
        if not rows:
            raise ValueError("no rows given")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("ragged rows")
        height = len(rows)
        cells = [[WALL if rows[y][x] == wall else FLOOR for y in range(height)] for x in range(width)]
        return cls(width, height, cells=cells)


__all__ = ["Grid", "CARDINALS"]
