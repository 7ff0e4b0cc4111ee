"""
Jump-point neighbour generation for platformer movement.

A character standing on a ground cell can jump to another ground cell
within ``h_range`` columns and ``v_range`` rows, provided the open
space above both cells overlaps enough to pass through, nothing blocks
the way horizontally, and a downward jump is not too shallow.
"""

import logging
from typing import Iterator, List, Optional, Sequence

from .astar import AStarSearch, ManhattanDistanceMixin
from .columns import Column, ColumnIndex, column_index
from .config import JumpConfig
from .geometry import Coordinate
from .terrain import TerrainGrid

logger = logging.getLogger(__name__)


def diagonal_test(tolerance: Column, candidate: Column) -> bool:
    """
    Descent-angle rule for downward jumps.

    Landing at the same height or higher always passes, as does a drop of
    a single row. Larger drops must cover less horizontal distance than
    they drop.
    """
    if tolerance.bottom <= candidate.bottom:
        return True
    drop = tolerance.bottom - candidate.bottom
    if drop < 2:
        return True
    return abs(tolerance.pos.x - candidate.pos.x) < drop


def current_column(terrain: TerrainGrid, pos: Coordinate, v_range: int) -> Column:
    """
    Headroom above a jump origin.

    Args:
        terrain: Terrain to measure in
        pos: Jump origin
        v_range: Rows above pos worth measuring

    Returns:
        Column at pos covering at most v_range open rows above it, cut at
        the first obstacle or the map edge
    """
    height = 1
    for y in range(pos.y + 1, pos.y + v_range + 1):
        if terrain.is_obstacle(pos.x, y):
            break
        height += 1
    return Column(pos, height)


class GroundJumpStrategy(ManhattanDistanceMixin):
    """
    Search strategy whose neighbours are the jump points of a ground cell.

    The column index is computed by the caller and only read here, so
    one index can back several strategies and searches.
    """

    def __init__(self, terrain: TerrainGrid, columns: ColumnIndex, config: JumpConfig):
        self.terrain = terrain
        self.columns = columns
        self.config = config

    def neighbours(self, position: Coordinate) -> List[Coordinate]:
        return self.get_jump_points(
            position,
            self.config.h_range,
            self.config.v_range,
            self.config.jump_tolerance,
            self.config.touch_tolerance,
        )

    def columns_at(self, x: int) -> Sequence[Column]:
        if x < 0 or x >= len(self.columns):
            return ()
        return self.columns[x]

    def get_jump_points(self, pos: Coordinate, h_range: int, v_range: int,
                        jump_tolerance: int = 3, touch_tolerance: int = 2) -> List[Coordinate]:
        """
        Every ground cell reachable from pos with a single jump.

        Args:
            pos: Jump origin (a ground cell)
            h_range: Max horizontal jump distance
            v_range: Max vertical jump distance
            jump_tolerance: Open height a column must offer, measured from
                pos, for the jump to carry on past it. With 3, a column
                capped two rows above pos ends the scan in that direction.
            touch_tolerance: Rows two columns must share for a jump between
                them; a ceiling leaving a one-row gap blocks the jump at 2.

        Returns:
            Landing cells, +x direction first, then -x
        """
        tolerance = current_column(self.terrain, pos, v_range)
        continuation = Column(pos, jump_tolerance)

        points = [g.pos for g in self._scan(tolerance, continuation, h_range,
                                            v_range, 1, touch_tolerance)]
        points.extend(g.pos for g in self._scan(tolerance, continuation, h_range,
                                                v_range, -1, touch_tolerance))
        return points

    def _scan(self, tolerance: Column, continuation: Column, h_range: int,
              v_range: int, direction: int, touch_tolerance: int) -> Iterator[Column]:
        for step in range(1, h_range + 1):
            should_continue = False
            for g in self.columns_at(tolerance.pos.x + step * direction):
                # Not enough shared space to move between the columns at all
                if not g.touch(tolerance, touch_tolerance):
                    continue

                # Row 0 is never a landing target
                if (g.pos.y != 0
                        and abs(g.pos.y - tolerance.pos.y) <= v_range
                        and diagonal_test(tolerance, g)):
                    yield g

                # Mostly open column: the jump may pass over it
                if g.contains(continuation):
                    should_continue = True

            if not should_continue:
                break


class AStarGround:
    """
    Ground-aware pathfinder for a single terrain.

    Builds the column index once; create a new instance when the
    terrain's obstacles change. Ranges come either from ``h_range`` and
    ``v_range`` (unset ones fall back to JumpConfig defaults) or from a
    full ``config``, never both.

    Example:
        finder = AStarGround(terrain, h_range=4, v_range=5)
        path = finder.find_path(Coordinate(1, 1), Coordinate(9, 4))
    """

    def __init__(self, terrain: TerrainGrid, h_range: Optional[int] = None,
                 v_range: Optional[int] = None, config: Optional[JumpConfig] = None):
        ranges = {name: value for name, value in (("h_range", h_range), ("v_range", v_range))
                  if value is not None}
        if config is None:
            config = JumpConfig(**ranges)
        elif ranges:
            raise ValueError(f"Pass either config or {', '.join(ranges)}, not both")
        self.terrain = terrain
        self.config = config
        self.columns = column_index(terrain)
        self.strategy = GroundJumpStrategy(terrain, self.columns, config)
        self.search = AStarSearch(self.strategy)

    @property
    def h_range(self) -> int:
        return self.config.h_range

    @property
    def v_range(self) -> int:
        return self.config.v_range

    def find_path(self, start: Coordinate, goal: Coordinate) -> Optional[List[Coordinate]]:
        """
        Find a jump path between two ground cells.

        Returns:
            Cells from start to goal inclusive, or None if either end is not
            ground or no path exists
        """
        if not self.terrain.is_ground(start.x, start.y) or not self.terrain.is_ground(goal.x, goal.y):
            logger.debug("Endpoint is not ground: %s -> %s", start, goal)
            return None
        return self.search.find_path(start, goal)

    def get_neighbours(self, pos: Coordinate) -> List[Coordinate]:
        return self.strategy.neighbours(pos)

    def get_jump_points(self, pos: Coordinate, h_range: int, v_range: int,
                        jump_tolerance: int = 3, touch_tolerance: int = 2) -> List[Coordinate]:
        return self.strategy.get_jump_points(pos, h_range, v_range,
                                             jump_tolerance, touch_tolerance)
