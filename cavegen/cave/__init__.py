"""Public cave package interface.

    from cavegen.cave import CaveGenerator, CaveConfig, WALL, FLOOR
    result = CaveGenerator(CaveConfig(width=64, height=48, seed="troll-lair")).generate()
    result.grid[10, 12]        # Tile.WALL / Tile.FLOOR
    result.rooms.components()  # connection relation between rooms
"""

from .border import add_border
from .config import CaveConfig, apply_env_overrides
from .connectivity import Passage, connect_rooms
from .errors import ConfigurationError, EmptyResultWarning
from .fill import make_rng, random_fill, resolve_seed
from .grid import Grid
from .pipeline import CaveGenerator, CaveResult, generate_cave
from .regions import find_regions, process_regions, remove_small_regions
from .rooms import Room, RoomGraph, build_rooms
from .smoothing import smooth, smooth_once
from .tiles import FLOOR, WALL, Coord, Tile

__all__ = [
    "CaveGenerator",
    "CaveResult",
    "CaveConfig",
    "generate_cave",
    "apply_env_overrides",
    "ConfigurationError",
    "EmptyResultWarning",
    "Grid",
    "Tile",
    "Coord",
    "WALL",
    "FLOOR",
    "Room",
    "RoomGraph",
    "Passage",
    "random_fill",
    "make_rng",
    "resolve_seed",
    "smooth",
    "smooth_once",
    "find_regions",
    "remove_small_regions",
    "process_regions",
    "build_rooms",
    "connect_rooms",
    "add_border",
]
