"""
Configuration utilities and default settings.
"""

from dataclasses import dataclass


@dataclass
class TerrainConfig:
    """Configuration for terrain construction."""
    handle_floor_line: bool = True  # Open cells of row 0 count as ground


@dataclass
class JumpConfig:
    """Configuration for jump-point neighbour generation."""
    h_range: int = 4           # Max horizontal jump distance in cells
    v_range: int = 5           # Max vertical jump distance in cells
    jump_tolerance: int = 3    # Open height a column needs to be jumped over
    touch_tolerance: int = 2   # Overlap two columns need to connect

    def __post_init__(self):
        for name in ("h_range", "v_range", "jump_tolerance", "touch_tolerance"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")


# Default configurations
DEFAULT_TERRAIN_CONFIG = TerrainConfig()
DEFAULT_JUMP_CONFIG = JumpConfig()
