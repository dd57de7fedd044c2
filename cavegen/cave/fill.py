"""Seeded random fill: the first generation stage."""
from __future__ import annotations

import random
import time
from typing import Optional

from .grid import Grid
from .tiles import FLOOR, WALL


def resolve_seed(seed: Optional[str], use_random_seed: bool = False) -> str:
    """Return the seed string for one generation pass.

    A time-derived seed is taken once here so that every stage of the pass
    draws from the same stream.
    """
    if use_random_seed or seed is None:
        return repr(time.time())
    return seed


def make_rng(seed: str) -> random.Random:
    # str seeds hash through sha512 in random.Random, stable across runs
    return random.Random(seed)


def random_fill(width: int, height: int, fill_percent: int, rng: random.Random) -> Grid:
    """Boundary cells are always WALL; each interior cell is WALL with
    probability ``fill_percent / 100``.

    Draw order is fixed (x outer, y inner), one ``randrange(100)`` per
    interior cell, so a given rng state always yields the same grid.
    """
    grid = Grid(width, height, fill=WALL)
    cells = grid.cells
    for x in range(width):
        for y in range(height):
            if x == 0 or x == width - 1 or y == 0 or y == height - 1:
                continue
            cells[x][y] = WALL if rng.randrange(100) < fill_percent else FLOOR
    return grid


__all__ = ["random_fill", "make_rng", "resolve_seed"]
