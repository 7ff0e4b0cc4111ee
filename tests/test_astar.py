# tests/test_astar.py
"""
Unit tests for the generic A* core.

A small 4-connected open-grid strategy stands in for terrain, so these
tests exercise only cost bookkeeping and path reconstruction.
"""

from __future__ import annotations

from typing import FrozenSet, List

from groundpath import (
    AStarSearch,
    Coordinate,
    ManhattanDistanceMixin,
    manhattan_distance,
    reconstruct_path,
)


class OpenGridStrategy(ManhattanDistanceMixin):
    """Four axis-aligned unit steps inside a width x height box."""

    def __init__(self, width: int, height: int, blocked: FrozenSet[Coordinate] = frozenset()):
        self.width = width
        self.height = height
        self.blocked = blocked

    def neighbours(self, position: Coordinate) -> List[Coordinate]:
        result = []
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nxt = Coordinate(position.x + dx, position.y + dy)
            if 0 <= nxt.x < self.width and 0 <= nxt.y < self.height and nxt not in self.blocked:
                result.append(nxt)
        return result


def test_coordinate_value_semantics() -> None:
    assert Coordinate(3, 4) == Coordinate(3, 4)
    assert Coordinate(3, 4) != Coordinate(4, 3)
    assert hash(Coordinate(3, 4)) == hash(Coordinate(3, 4))
    assert len({Coordinate(3, 4), Coordinate(4, 3), Coordinate(3, 4)}) == 2


def test_manhattan_distance() -> None:
    assert manhattan_distance(Coordinate(0, 0), Coordinate(3, 2)) == 5
    assert manhattan_distance(Coordinate(-2, 5), Coordinate(1, 1)) == 7


def test_open_grid_path_matches_manhattan_distance() -> None:
    search = AStarSearch(OpenGridStrategy(6, 6))
    start, goal = Coordinate(0, 0), Coordinate(3, 2)

    path = search.find_path(start, goal)

    assert path is not None
    assert len(path) == 3 + 2 + 1
    assert path[0] == start
    assert path[-1] == goal
    for a, b in zip(path, path[1:]):
        assert manhattan_distance(a, b) == 1


def test_same_start_and_goal_returns_single_cell() -> None:
    search = AStarSearch(OpenGridStrategy(3, 3))

    assert search.find_path(Coordinate(1, 1), Coordinate(1, 1)) == [Coordinate(1, 1)]


def test_enclosed_goal_is_not_found() -> None:
    goal = Coordinate(5, 5)
    ring = frozenset(
        Coordinate(goal.x + dx, goal.y + dy)
        for dx in (-1, 0, 1)
        for dy in (-1, 0, 1)
        if (dx, dy) != (0, 0)
    )
    search = AStarSearch(OpenGridStrategy(10, 10, blocked=ring))

    assert search.find_path(Coordinate(0, 0), goal) is None
    # Every cell outside the ring was reached before giving up
    assert len(search.last_state.cost_from_start) == 10 * 10 - len(ring) - 1


def test_path_goes_around_wall() -> None:
    wall = frozenset(Coordinate(2, y) for y in range(0, 4))
    search = AStarSearch(OpenGridStrategy(5, 5, blocked=wall))

    path = search.find_path(Coordinate(0, 0), Coordinate(4, 0))

    assert path is not None
    assert not wall.intersection(path)
    assert Coordinate(2, 4) in path
    assert len(path) == 4 + 2 * 4 + 1


def test_queries_do_not_share_state() -> None:
    search = AStarSearch(OpenGridStrategy(5, 5))

    first = search.find_path(Coordinate(0, 0), Coordinate(4, 4))
    first_state = search.last_state
    second = search.find_path(Coordinate(4, 4), Coordinate(0, 0))

    assert first is not None and second is not None
    assert len(first) == len(second) == 9
    assert search.last_state is not first_state
    assert Coordinate(4, 4) not in search.last_state.predecessor


def test_reconstruct_path_walks_predecessors() -> None:
    a, b, c, d = (Coordinate(i, 0) for i in range(4))
    predecessor = {b: a, c: b, d: c}

    assert reconstruct_path(predecessor, a, d) == [a, b, c, d]
