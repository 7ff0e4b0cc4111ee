# tests/conftest.py

from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest

# Ensure the project root is on sys.path for `import groundpath` without installing.
PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from groundpath import Coordinate, TerrainGrid  # noqa: E402


def parse_level(text: str):
    """
    Turn an ASCII level into (width, height, obstacles).

    '#' is an obstacle and any other character is open. The first line is
    the top row of the map, the last line is row y = 0.
    """
    lines = textwrap.dedent(text).strip("\n").splitlines()
    height = len(lines)
    width = max(len(line) for line in lines)

    obstacles = []
    for row, line in enumerate(lines):
        y = height - 1 - row
        for x, char in enumerate(line):
            if char == "#":
                obstacles.append(Coordinate(x, y))
    return width, height, obstacles


@pytest.fixture
def make_terrain():
    def _make(text: str, handle_floor_line: bool = True) -> TerrainGrid:
        width, height, obstacles = parse_level(text)
        return TerrainGrid(width, height, obstacles, handle_floor_line=handle_floor_line)

    return _make
