"""
Grid geometry primitives.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """
    Integer cell position on the tile grid.

    ``x`` grows to the right and ``y`` grows upward, so row 0 is the
    lowest row of the map. Instances are hashable and compare by value,
    which makes them usable as graph-node identities.
    """
    x: int
    y: int

    def __repr__(self) -> str:
        return f"Coordinate({self.x}, {self.y})"


def manhattan_distance(a: Coordinate, b: Coordinate) -> int:
    """
    Manhattan distance between two cells.

    Args:
        a: First cell
        b: Second cell

    Returns:
        |dx| + |dy|
    """
    return abs(a.x - b.x) + abs(a.y - b.y)
