import pytest

from cavegen.cave import Coord, Room, RoomGraph, build_rooms, find_regions, FLOOR
from cavegen.cave.rooms import edge_tiles_of
from tests.cave_test_utils import grid_from


def _room(index, *tiles):
    tiles = tuple(Coord(*t) for t in tiles)
    return Room(index=index, tiles=tiles, edge_tiles=tiles)


def test_edge_tiles_of_enclosed_block():
    g = grid_from(
        "#####",
        "#...#",
        "#...#",
        "#...#",
        "#####",
    )
    graph = build_rooms(g, find_regions(g, FLOOR))
    assert len(graph) == 1
    room = graph[0]
    assert room.size == 9
    assert set(room.edge_tiles) == set(room.tiles) - {(2, 2)}
    assert room.centroid == (2, 2)


def test_grid_boundary_tiles_are_edges():
    g = grid_from(
        "...",
        "...",
        "...",
    )
    tiles = find_regions(g, FLOOR)[0]
    edges = set(edge_tiles_of(g, tiles))
    assert (1, 1) not in edges
    assert len(edges) == 8


def test_centroid_rounds_mean():
    room = _room(0, (0, 0), (1, 0), (2, 0), (2, 1))
    # mean x 1.25 -> 1, mean y 0.25 -> 0
    assert room.centroid == (1, 0)


def test_rooms_indexed_in_region_order():
    g = grid_from(
        ".#.",
        ".#.",
    )
    graph = build_rooms(g, find_regions(g, FLOOR))
    assert [r.index for r in graph] == [0, 1]
    assert graph[0].tiles[0] == (0, 0)
    assert graph[1].tiles[0] == (2, 0)


def test_connect_is_symmetric_and_idempotent():
    graph = RoomGraph([_room(0, (0, 0)), _room(1, (5, 5))])
    assert graph.connect(0, 1) is True
    assert graph.is_connected(0, 1) and graph.is_connected(1, 0)
    assert graph[0].is_connected(graph[1])
    assert graph.connect(1, 0) is False
    assert graph.connections == [(0, 1)]


def test_self_connection_rejected():
    graph = RoomGraph([_room(0, (0, 0))])
    with pytest.raises(ValueError):
        graph.connect(0, 0)


def test_accessibility_spreads_through_components():
    graph = RoomGraph([_room(i, (i * 3, 0)) for i in range(4)])
    graph.connect(1, 2)
    graph.set_main(0)
    assert graph.accessible_indices() == [0]
    assert graph.main_room is graph[0]
    graph.connect(2, 0)
    assert graph.accessible_indices() == [0, 1, 2]
    assert graph.inaccessible_indices() == [3]
    assert graph.components() == [[0, 1, 2], [3]]
    assert not graph.is_fully_connected()
    graph.connect(3, 1)
    assert graph.is_fully_connected()
    assert graph.inaccessible_indices() == []


def test_empty_graph():
    graph = build_rooms(grid_from("###"), [])
    assert len(graph) == 0
    assert graph.main_room is None
    assert graph.is_fully_connected()
