from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from functools import cached_property
from typing import Iterable, List, Sequence, Set, Tuple

from .grid import CARDINALS, Grid
from .tiles import WALL, Coord


@dataclass
class Room:
    index: int
    tiles: Tuple[Coord, ...]
    edge_tiles: Tuple[Coord, ...]
    connections: Set[int] = field(default_factory=set)
    accessible: bool = False
    is_main: bool = False

    @property
    def size(self) -> int:
        return len(self.tiles)

    @cached_property
    def bounds(self) -> Tuple[int, int, int, int]:
        """(min_x, min_y, max_x, max_y) over the room tiles."""
        xs = [t.x for t in self.tiles]
        ys = [t.y for t in self.tiles]
        return (min(xs), min(ys), max(xs), max(ys))

    @property
    def centroid(self) -> Tuple[int, int]:
        n = len(self.tiles)
        return (round(sum(t.x for t in self.tiles) / n), round(sum(t.y for t in self.tiles) / n))

    def is_connected(self, other: "Room") -> bool:
        return other.index in self.connections


def edge_tiles_of(grid: Grid, tiles: Iterable[Coord]) -> Tuple[Coord, ...]:
    """Tiles with a cardinal neighbour that is WALL or off the grid."""
    cells = grid.cells
    edges = []
    for t in tiles:
        for dx, dy in CARDINALS:
            nx, ny = t.x + dx, t.y + dy
            if not grid.in_bounds(nx, ny) or cells[nx][ny] == WALL:
                edges.append(t)
                break
    return tuple(edges)


class RoomGraph:
    """Rooms plus their symmetric "connected" relation, keyed by room index.

    Accessibility spreads along connections: once any room in a component is
    accessible, every room in it is.
    """

    def __init__(self, rooms: Sequence[Room] = ()):
        self.rooms: List[Room] = list(rooms)
        self.connections: List[Tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self):
        return iter(self.rooms)

    def __getitem__(self, index: int) -> Room:
        return self.rooms[index]

    @property
    def main_room(self):
        for room in self.rooms:
            if room.is_main:
                return room
        return None

    def is_connected(self, a: int, b: int) -> bool:
        return b in self.rooms[a].connections

    def connect(self, a: int, b: int) -> bool:
        """Add the a-b connection; returns False if it already existed."""
        if a == b:
            raise ValueError("a room cannot connect to itself")
        ra, rb = self.rooms[a], self.rooms[b]
        if b in ra.connections:
            return False
        if ra.accessible and not rb.accessible:
            self._spread_access(b)
        elif rb.accessible and not ra.accessible:
            self._spread_access(a)
        ra.connections.add(b)
        rb.connections.add(a)
        self.connections.append((a, b))
        return True

    def set_main(self, index: int) -> None:
        self.rooms[index].is_main = True
        self._spread_access(index)

    def _spread_access(self, start: int) -> None:
        rooms = self.rooms
        rooms[start].accessible = True
        q = deque([start])
        while q:
            cur = q.popleft()
            for n in rooms[cur].connections:
                if not rooms[n].accessible:
                    rooms[n].accessible = True
                    q.append(n)

    def accessible_indices(self) -> List[int]:
        return [r.index for r in self.rooms if r.accessible]

    def inaccessible_indices(self) -> List[int]:
        return [r.index for r in self.rooms if not r.accessible]

    def components(self) -> List[List[int]]:
        seen: Set[int] = set()
        out = []
        for room in self.rooms:
            if room.index in seen:
                continue
            comp = [room.index]
            seen.add(room.index)
            q = deque([room.index])
            while q:
                cur = q.popleft()
                for n in sorted(self.rooms[cur].connections):
                    if n not in seen:
                        seen.add(n)
                        comp.append(n)
                        q.append(n)
            out.append(sorted(comp))
        return out

    def is_fully_connected(self) -> bool:
        return len(self.components()) <= 1


def build_rooms(grid: Grid, regions: Sequence[Sequence[Coord]]) -> RoomGraph:
    """One room per surviving floor region, indexed in region order.

    Edge tiles are taken against ``grid`` as it is now, before any border is
    added, so tiles on the generation boundary count as edge tiles.
    """
    rooms = []
    for region in regions:
        tiles = tuple(Coord(*t) for t in region)
        if not tiles:
            continue
        rooms.append(Room(index=len(rooms), tiles=tiles, edge_tiles=edge_tiles_of(grid, tiles)))
    return RoomGraph(rooms)


__all__ = ["Room", "RoomGraph", "build_rooms", "edge_tiles_of"]
