"""Region extraction and small-region cleanup.

A region is a maximal 4-connected set of same-typed tiles. ``find_regions``
scans x outer, y inner and floods breadth-first from every unvisited tile of
the target type, so region order (and order of tiles inside a region) is
deterministic.
"""
from __future__ import annotations

from collections import deque
from typing import List, Tuple

from .grid import CARDINALS, Grid
from .tiles import FLOOR, WALL, Coord, Tile

Region = List[Coord]


def get_region_tiles(grid: Grid, start: Coord, tile: Tile, visited: List[List[bool]]) -> Region:
    """Flood fill from ``start``; marks every collected tile in ``visited``."""
    cells = grid.cells
    sx, sy = start
    q = deque([Coord(sx, sy)])
    visited[sx][sy] = True
    tiles: Region = []
    while q:
        cur = q.popleft()
        tiles.append(cur)
        for dx, dy in CARDINALS:
            nx, ny = cur.x + dx, cur.y + dy
            if grid.in_bounds(nx, ny) and not visited[nx][ny] and cells[nx][ny] == tile:
                visited[nx][ny] = True
                q.append(Coord(nx, ny))
    return tiles


def find_regions(grid: Grid, tile: Tile) -> List[Region]:
    visited = [[False] * grid.height for _ in range(grid.width)]
    cells = grid.cells
    regions: List[Region] = []
    for x in range(grid.width):
        for y in range(grid.height):
            if not visited[x][y] and cells[x][y] == tile:
                regions.append(get_region_tiles(grid, Coord(x, y), tile, visited))
    return regions


def remove_small_regions(grid: Grid, tile: Tile, threshold: int) -> Tuple[List[Region], List[Region]]:
    """Flip every ``tile`` region smaller than ``threshold`` to the other tile type.

    Returns ``(removed, kept)`` in discovery order. A region of exactly
    ``threshold`` tiles is kept.
    """
    fill_type = FLOOR if tile == WALL else WALL
    removed: List[Region] = []
    kept: List[Region] = []
    for region in find_regions(grid, tile):
        if len(region) < threshold:
            grid.fill(region, fill_type)
            removed.append(region)
        else:
            kept.append(region)
    return removed, kept


def process_regions(grid: Grid, wall_threshold: int, room_threshold: int, metrics=None) -> List[Region]:
    """Remove small wall chunks, then small floor pockets (in place).

    The floor pass re-scans the grid produced by the wall pass. Returns the
    surviving floor regions, which become rooms.
    """
    walls_removed, _ = remove_small_regions(grid, WALL, wall_threshold)
    floors_removed, rooms = remove_small_regions(grid, FLOOR, room_threshold)
    if metrics is not None:
        metrics["wall_regions_removed"] += len(walls_removed)
        metrics["floor_regions_removed"] += len(floors_removed)
    return rooms


__all__ = ["Region", "get_region_tiles", "find_regions", "remove_small_regions", "process_regions"]
