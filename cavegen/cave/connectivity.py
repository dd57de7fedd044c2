"""Room connection: greedy nearest pairing followed by forced accessibility.

Phase A walks rooms in index order; every room that has no connection yet
is joined to its nearest other room (Manhattan distance between edge tiles).
The first room to make such a connection becomes the main room.

Phase B then repeatedly joins each room that is still not reachable from the
main room to its nearest reachable room until all of them are. Each join
makes at least one more room accessible, so the loop is bounded by the room
count.

Ties go to the first pair found: candidate rooms in index order, then the
source room's edge tiles, then the candidate's edge tiles.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Optional

from .grid import Grid
from .rooms import Room, RoomGraph
from .tiles import Coord
from .tunnels import carve_passage

logger = logging.getLogger(__name__)


class Passage(NamedTuple):
    room_a: int
    room_b: int
    tile_a: Coord
    tile_b: Coord
    distance: int


def _box_gap(a: Room, b: Room) -> int:
    """Lower bound on the edge-tile distance between two rooms."""
    ax0, ay0, ax1, ay1 = a.bounds
    bx0, by0, bx1, by1 = b.bounds
    return max(0, bx0 - ax1, ax0 - bx1) + max(0, by0 - ay1, ay0 - by1)


def closest_pair(graph: RoomGraph, room: Room, candidates: Iterable[Room]) -> Optional[Passage]:
    """Nearest edge-tile pair between ``room`` and any candidate it is not yet connected to."""
    best: Optional[Passage] = None
    best_d = -1
    for other in candidates:
        if other.index == room.index or graph.is_connected(room.index, other.index):
            continue
        if best is not None and _box_gap(room, other) >= best_d:
            continue
        for ta in room.edge_tiles:
            ax, ay = ta
            for tb in other.edge_tiles:
                d = abs(ax - tb[0]) + abs(ay - tb[1])
                if best is None or d < best_d:
                    best = Passage(room.index, other.index, ta, tb, d)
                    best_d = d
    return best


def _join(grid: Grid, graph: RoomGraph, passage: Passage, radius: int) -> None:
    carve_passage(grid, passage.tile_a, passage.tile_b, radius)
    graph.connect(passage.room_a, passage.room_b)
    logger.debug(
        "passage %s->%s from %s to %s distance=%s",
        passage.room_a, passage.room_b, tuple(passage.tile_a), tuple(passage.tile_b), passage.distance,
    )


def connect_nearest(grid: Grid, graph: RoomGraph, radius: int) -> List[Passage]:
    """Phase A: give every unconnected room a link to its nearest neighbour."""
    made: List[Passage] = []
    for room in graph:
        if room.connections:
            continue
        passage = closest_pair(graph, room, graph)
        if passage is None:
            continue
        if graph.main_room is None:
            graph.set_main(room.index)
        _join(grid, graph, passage, radius)
        made.append(passage)
    return made


def force_accessibility(grid: Grid, graph: RoomGraph, radius: int) -> List[Passage]:
    """Phase B: link rooms unreachable from the main room until none remain."""
    if graph.main_room is None:
        graph.set_main(0)
    made: List[Passage] = []
    while True:
        pending = graph.inaccessible_indices()
        if not pending:
            break
        progress = False
        for index in pending:
            room = graph[index]
            if room.accessible:
                continue
            reachable = [graph[i] for i in graph.accessible_indices()]
            passage = closest_pair(graph, room, reachable)
            if passage is None:
                continue
            _join(grid, graph, passage, radius)
            made.append(passage)
            progress = True
        if not progress:
            logger.debug("accessibility closure stalled with %d rooms pending", len(pending))
            break
    return made


def connect_rooms(grid: Grid, graph: RoomGraph, radius: int) -> List[Passage]:
    """Carve passages until every room is reachable from the main room.

    Mutates ``grid`` (passages become FLOOR) and ``graph`` (connections and
    accessibility). A graph with fewer than two rooms is left untouched.
    """
    if len(graph) < 2:
        return []
    passages = connect_nearest(grid, graph, radius)
    passages.extend(force_accessibility(grid, graph, radius))
    return passages


__all__ = ["Passage", "closest_pair", "connect_nearest", "force_accessibility", "connect_rooms"]
