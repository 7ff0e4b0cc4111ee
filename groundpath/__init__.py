"""
Jump pathfinding between ground tiles of side-view tile maps.
"""

from .geometry import Coordinate, manhattan_distance
from .priority_queue import PriorityQueue, SearchNode
from .astar import AStarSearch, ManhattanDistanceMixin, SearchState, SearchStrategy, reconstruct_path
from .terrain import (
    EMPTY,
    OBSTACLE,
    GROUND,
    TerrainGrid,
    build_grid,
    detect_ground,
    search_ground
)
from .columns import Column, ColumnIndex, column_from_ground_point, column_index
from .jump_points import AStarGround, GroundJumpStrategy, current_column, diagonal_test
from .config import (
    TerrainConfig,
    JumpConfig,
    DEFAULT_TERRAIN_CONFIG,
    DEFAULT_JUMP_CONFIG
)

__all__ = [
    # Geometry
    'Coordinate',
    'manhattan_distance',
    # Search core
    'PriorityQueue',
    'SearchNode',
    'AStarSearch',
    'ManhattanDistanceMixin',
    'SearchState',
    'SearchStrategy',
    'reconstruct_path',
    # Terrain
    'EMPTY',
    'OBSTACLE',
    'GROUND',
    'TerrainGrid',
    'build_grid',
    'detect_ground',
    'search_ground',
    # Columns
    'Column',
    'ColumnIndex',
    'column_from_ground_point',
    'column_index',
    # Jump points
    'AStarGround',
    'GroundJumpStrategy',
    'current_column',
    'diagonal_test',
    # Config
    'TerrainConfig',
    'JumpConfig',
    'DEFAULT_TERRAIN_CONFIG',
    'DEFAULT_JUMP_CONFIG',
]
