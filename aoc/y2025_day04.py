"""2025 day 4: repeatedly remove paper rolls that forklifts can reach."""

from __future__ import annotations

import argparse

from aoc.readers import read_example, read_input

TODAYS_PATH = "./2025/04"
ROLL = "@"
NEIGHBOURS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))

Grid = list[list[bool]]


def parse_grid(text: str) -> Grid:
    """Turn the map into rows of booleans, true where a roll stands."""
    return [[char == ROLL for char in line] for line in text.splitlines()]


def is_accessible(grid: Grid, x: int, y: int) -> bool:
    """A position is accessible when fewer than four neighbours hold a roll."""
    height, width = len(grid), len(grid[0])
    occupied = sum(
        1
        for dy, dx in NEIGHBOURS
        if 0 <= y + dy < height and 0 <= x + dx < width and grid[y + dy][x + dx]
    )
    return occupied < 4


def count_removable(grid: Grid) -> int:
    """Count the rolls removed when accessible rolls are taken until none remain."""
    grid = [row[:] for row in grid]
    removed = 0
    while True:
        reachable = [
            (x, y)
            for y, row in enumerate(grid)
            for x, roll in enumerate(row)
            if roll and is_accessible(grid, x, y)
        ]
        if not reachable:
            return removed
        for x, y in reachable:
            grid[y][x] = False
        removed += len(reachable)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("directory", nargs="?", default=TODAYS_PATH)
    parser.add_argument("--example", action="store_true", help="read example.txt")
    args = parser.parse_args(argv)
    reader = read_example if args.example else read_input
    print(count_removable(parse_grid(reader(args.directory))))
    return 0