# Tile constants centralized for modular imports
from enum import IntEnum
from typing import NamedTuple


class Tile(IntEnum):
    FLOOR = 0
    WALL = 1


class Coord(NamedTuple):
    x: int
    y: int


FLOOR = Tile.FLOOR
WALL = Tile.WALL

__all__ = ["Tile", "Coord", "FLOOR", "WALL"]
