"""
Best-first (A*) search over integer grid coordinates.

The search core only knows about costs and predecessors. Which cells
are adjacent, and how far apart two cells look, is answered by a
pluggable strategy object.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol

from .geometry import Coordinate, manhattan_distance
from .priority_queue import PriorityQueue, SearchNode

logger = logging.getLogger(__name__)


class SearchStrategy(Protocol):
    """Neighbour enumeration and distance estimate used by AStarSearch."""

    def neighbours(self, position: Coordinate) -> Iterable[Coordinate]:
        ...

    def distance(self, a: Coordinate, b: Coordinate) -> int:
        ...


class ManhattanDistanceMixin:
    """Default heuristic for strategies: Manhattan distance."""

    def distance(self, a: Coordinate, b: Coordinate) -> int:
        return manhattan_distance(a, b)


@dataclass
class SearchState:
    """Everything one query owns; created fresh for each find_path call."""
    frontier: PriorityQueue = field(default_factory=PriorityQueue)
    cost_from_start: Dict[Coordinate, int] = field(default_factory=dict)
    predecessor: Dict[Coordinate, Coordinate] = field(default_factory=dict)
    expanded: int = 0


def reconstruct_path(predecessor: Dict[Coordinate, Coordinate],
                     start: Coordinate, goal: Coordinate) -> List[Coordinate]:
    """
    Walk the predecessor chain from goal back to start.

    Args:
        predecessor: Map of position -> position it was reached from
        start: First cell of the path
        goal: Last cell of the path

    Returns:
        List of cells from start to goal, both included
    """
    path = []
    current = goal
    while current != start:
        path.append(current)
        current = predecessor[current]
    path.append(start)
    path.reverse()
    return path


class AStarSearch:
    """
    A* search with unit step cost between accepted neighbours.

    Every transition costs 1 regardless of how many cells it spans, so
    the Manhattan estimate can overshoot for jump-style neighbours. The
    search still terminates and returns a valid path whenever one
    exists; it just may not have the fewest hops.

    Example:
        search = AStarSearch(strategy)
        path = search.find_path(Coordinate(0, 0), Coordinate(3, 2))
    """

    def __init__(self, strategy: SearchStrategy):
        self.strategy = strategy
        self.last_state: Optional[SearchState] = None

    def find_path(self, start: Coordinate, goal: Coordinate) -> Optional[List[Coordinate]]:
        """
        Find a path from start to goal.

        Args:
            start: Start cell
            goal: Goal cell

        Returns:
            List of cells from start to goal inclusive, or None if the goal
            cannot be reached
        """
        if start == goal:
            return [start]

        state = SearchState()
        self.last_state = state
        distance = self.strategy.distance

        state.cost_from_start[start] = 0
        state.frontier.put(SearchNode(start, 0, distance(start, goal)))

        while state.frontier:
            node = state.frontier.next()
            state.expanded += 1

            if node.position == goal:
                path = reconstruct_path(state.predecessor, start, goal)
                logger.debug("Path %s -> %s: %d cells, %d nodes expanded",
                             start, goal, len(path), state.expanded)
                return path

            candidate_cost = node.cost_from_start + 1
            for neighbour in self.strategy.neighbours(node.position):
                known_cost = state.cost_from_start.get(neighbour)
                if known_cost is not None and known_cost <= candidate_cost:
                    continue

                state.cost_from_start[neighbour] = candidate_cost
                state.predecessor[neighbour] = node.position
                state.frontier.put(SearchNode(
                    neighbour,
                    candidate_cost,
                    candidate_cost + distance(neighbour, goal),
                ))

        logger.debug("No path %s -> %s after %d nodes expanded",
                     start, goal, state.expanded)
        return None
