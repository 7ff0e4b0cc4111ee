"""
Binary min-heap frontier for best-first search.
"""

from heapq import heappush, heappop
from itertools import count
from typing import List, NamedTuple, Optional, Tuple

from .geometry import Coordinate


class SearchNode(NamedTuple):
    """Frontier entry: a position with its cost so far and total estimate."""
    position: Coordinate
    cost_from_start: int
    total_cost: int


class PriorityQueue:
    """
    Min-heap of search nodes ordered by ``total_cost``.

    There is no decrease-key: the same position may be queued several
    times with different costs and stale entries are handed out like any
    other. Equal totals come out in insertion order.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, SearchNode]] = []
        self._counter = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def clear(self):
        """Drop every queued node."""
        self._heap.clear()
        self._counter = count()

    def put(self, node: SearchNode):
        """Insert a node, sifting it up past costlier parents."""
        heappush(self._heap, (node.total_cost, next(self._counter), node))

    def next(self) -> SearchNode:
        """
        Remove and return the cheapest node without an emptiness check.

        Only valid when the caller already knows the queue is non-empty;
        an empty queue raises ``IndexError``.
        """
        return heappop(self._heap)[2]

    def try_get(self) -> Tuple[Optional[SearchNode], bool]:
        """
        Remove and return the cheapest node if there is one.

        Returns:
            Tuple of (node, found); (None, False) when the queue is empty
        """
        if not self._heap:
            return None, False
        return heappop(self._heap)[2], True
