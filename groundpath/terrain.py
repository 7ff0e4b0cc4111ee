"""
Terrain grid and ground detection for side-view tile maps.
"""

import logging
from typing import Iterable, Iterator, List

import numpy as np

from .config import TerrainConfig
from .geometry import Coordinate

logger = logging.getLogger(__name__)

# Cell states
EMPTY = 0
OBSTACLE = 1
GROUND = 2


def build_grid(width: int, height: int, obstacles: Iterable[Coordinate]) -> np.ndarray:
    """
    Create the raw cell grid.

    Args:
        width: Number of cells along x
        height: Number of cells along y
        obstacles: Obstacle cell positions, all inside the map; out-of-range
            positions are undefined (negative ones wrap to the far edge)

    Returns:
        int8 array of shape (width, height), indexed [x, y], with obstacle
        cells set to OBSTACLE and everything else EMPTY
    """
    cells = np.zeros((width, height), dtype=np.int8)
    for pt in obstacles:
        cells[pt.x, pt.y] = OBSTACLE
    return cells


def detect_ground(cells: np.ndarray, handle_floor_line: bool = False) -> np.ndarray:
    """
    Find standable cells by edge detection along y.

    The obstacle indicator is treated as a function of y and
    differentiated between each cell and the one below it; a positive
    step (obstacle below, open here) marks the top surface of a solid run.

    Args:
        cells: Grid from build_grid, indexed [x, y]
        handle_floor_line: Also treat open cells of row 0 as ground

    Returns:
        Boolean array of the same shape, True where a cell is ground
    """
    solid = (cells == OBSTACLE).astype(np.int8)
    ground = np.zeros(cells.shape, dtype=bool)
    ground[:, 1:] = (solid[:, :-1] - solid[:, 1:]) > 0

    if handle_floor_line:
        ground[:, 0] = solid[:, 0] == 0

    return ground


def _row_major(mask: np.ndarray) -> Iterator[Coordinate]:
    # argwhere over the transposed [y, x] view walks rows bottom-up, x first
    for y, x in np.argwhere(mask.T):
        yield Coordinate(int(x), int(y))


def search_ground(obstacles: Iterable[Coordinate], size: Coordinate,
                  handle_floor_line: bool = False) -> List[Coordinate]:
    """
    Ground positions of a map given only its obstacles.

    Args:
        obstacles: Obstacle cell positions
        size: Map size as Coordinate(width, height)
        handle_floor_line: Also treat open cells of row 0 as ground

    Returns:
        Ground cells in row-major order; empty when there are no obstacles
    """
    obstacles = list(obstacles)
    if not obstacles:
        return []

    cells = build_grid(size.x, size.y, obstacles)
    return list(_row_major(detect_ground(cells, handle_floor_line)))


class TerrainGrid:
    """
    Static tile map with empty, obstacle and ground cells.

    Queries outside the map never fail: out-of-range cells are obstacles
    and never ground, so callers do not need to bounds-check.
    """

    def __init__(self, width: int, height: int, obstacles: Iterable[Coordinate],
                 handle_floor_line: bool = True):
        self.width = width
        self.height = height
        obstacles = list(obstacles)
        self.cells = build_grid(width, height, obstacles)

        # A map without obstacles has no ground, floor line included
        if obstacles:
            self.cells[detect_ground(self.cells, handle_floor_line)] = GROUND

        logger.debug("Terrain %dx%d: %d obstacles, %d ground cells",
                     width, height, len(obstacles), self.ground_count)

    @classmethod
    def from_config(cls, width: int, height: int, obstacles: Iterable[Coordinate],
                    config: TerrainConfig) -> "TerrainGrid":
        return cls(width, height, obstacles, handle_floor_line=config.handle_floor_line)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_obstacle(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return True
        return bool(self.cells[x, y] == OBSTACLE)

    def is_ground(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return bool(self.cells[x, y] == GROUND)

    @property
    def ground_count(self) -> int:
        return int(np.count_nonzero(self.cells == GROUND))

    def all_ground_positions(self) -> Iterator[Coordinate]:
        """Yield every ground cell, row by row from the bottom, x ascending."""
        return _row_major(self.cells == GROUND)
