"""
Vertical spans of open space standing on ground cells.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .geometry import Coordinate
from .terrain import TerrainGrid

logger = logging.getLogger(__name__)

ColumnIndex = Tuple[Tuple["Column", ...], ...]


@dataclass(frozen=True)
class Column:
    """
    Open span of ``height`` cells starting at ``pos`` and going up.

    ``bottom`` is the anchor row and ``top`` the last open row, both
    inclusive.
    """
    pos: Coordinate
    height: int

    @property
    def bottom(self) -> int:
        return self.pos.y

    @property
    def top(self) -> int:
        return self.pos.y + self.height - 1

    def contains(self, other: "Column") -> bool:
        """True if other's span lies entirely within this one."""
        return self.bottom <= other.bottom and self.top >= other.top

    def touch(self, other: "Column", tolerance: int) -> bool:
        """
        Check whether two spans overlap by at least ``tolerance`` cells.

        Args:
            other: Column to compare against
            tolerance: Minimum number of shared rows

        Returns:
            True if the spans share at least ``tolerance`` rows
        """
        if self.top < other.bottom or other.top < self.bottom:
            return False
        overlap = min(self.top, other.top) - max(self.bottom, other.bottom) + 1
        return overlap >= tolerance


def column_from_ground_point(terrain: TerrainGrid, pos: Coordinate) -> Column:
    """
    Measure the open column standing on a ground cell.

    Args:
        terrain: Terrain the cell belongs to
        pos: Ground cell

    Returns:
        Column from pos up to (not including) the next obstacle, or up to
        the top of the map
    """
    for y in range(pos.y + 1, terrain.height):
        if terrain.is_obstacle(pos.x, y):
            return Column(pos, y - pos.y)
    return Column(pos, terrain.height - pos.y)


def column_index(terrain: TerrainGrid) -> ColumnIndex:
    """
    Group the columns of every ground cell by x.

    Returns:
        One tuple per x in [0, width), each ordered by ascending y
    """
    columns: List[List[Column]] = [[] for _ in range(terrain.width)]
    for pos in terrain.all_ground_positions():
        columns[pos.x].append(column_from_ground_point(terrain, pos))

    logger.debug("Column index built: %d columns over %d lines",
                 sum(len(line) for line in columns), terrain.width)
    return tuple(tuple(line) for line in columns)
