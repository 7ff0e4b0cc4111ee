#!/usr/bin/env python3
"""
Example: Planning a jump path across a small platformer level.

This demonstrates how to build a terrain from obstacle cells, inspect
the detected ground, and ask for a path between two ground tiles.
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from groundpath import AStarGround, Coordinate, JumpConfig, TerrainGrid

# Top line is the highest row; '#' marks solid tiles
LEVEL = """
....................
....................
..........####......
....................
......###.......####
....................
###.................
###...#.....#.......
####################
"""


def parse_level(text):
    """Convert an ASCII level into (width, height, obstacles)."""
    lines = text.strip("\n").splitlines()
    height = len(lines)
    width = max(len(line) for line in lines)
    obstacles = [
        Coordinate(x, height - 1 - row)
        for row, line in enumerate(lines)
        for x, char in enumerate(line)
        if char == "#"
    ]
    return width, height, obstacles


def render(terrain, path):
    """Draw the level with ground as '_' and path cells as '*'."""
    on_path = set(path or [])
    rows = []
    for y in reversed(range(terrain.height)):
        row = ""
        for x in range(terrain.width):
            if Coordinate(x, y) in on_path:
                row += "*"
            elif terrain.is_obstacle(x, y):
                row += "#"
            elif terrain.is_ground(x, y):
                row += "_"
            else:
                row += "."
        rows.append(row)
    return "\n".join(rows)


def jump_path_example(start, goal, h_range=4, v_range=5):
    """Example of planning a jump path."""
    width, height, obstacles = parse_level(LEVEL)
    print(f"Level: {width}x{height}, {len(obstacles)} solid tiles")

    terrain = TerrainGrid(width, height, obstacles)
    print(f"  Ground tiles: {terrain.ground_count}")

    finder = AStarGround(terrain, config=JumpConfig(h_range=h_range, v_range=v_range))

    print(f"Planning path {start} -> {goal} (h_range={h_range}, v_range={v_range})...")
    path = finder.find_path(start, goal)

    if path:
        print(f"  ✓ Found path with {len(path)} waypoints")
        for a, b in zip(path, path[1:]):
            print(f"    ({a.x}, {a.y}) -> ({b.x}, {b.y})")
    else:
        print("  ✗ No path found")

    print()
    print(render(terrain, path))
    return path


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Jump path example")
    parser.add_argument("--start", nargs=2, type=int, default=[3, 1],
                       help="Start ground tile (x y, default: 3 1)")
    parser.add_argument("--goal", nargs=2, type=int, default=[17, 5],
                       help="Goal ground tile (x y, default: 17 5)")
    parser.add_argument("--h-range", type=int, default=4,
                       help="Max horizontal jump distance (default: 4)")
    parser.add_argument("--v-range", type=int, default=5,
                       help="Max vertical jump distance (default: 5)")
    parser.add_argument("-v", "--verbose", action="store_true",
                       help="Show search debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    path = jump_path_example(Coordinate(*args.start), Coordinate(*args.goal),
                             args.h_range, args.v_range)
    sys.exit(0 if path else 1)
