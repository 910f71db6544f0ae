"""2024 day 8: count antinodes created by antennas of equal frequency."""

from __future__ import annotations

import argparse
from itertools import product
from pathlib import Path

_EMPTY = "."

Grid = list[str]
Point = tuple[int, int]


def parse(text: str) -> Grid:
    """The map as a list of rows."""
    return text.splitlines()


def _antennas(grid: Grid) -> dict[str, list[Point]]:
    found: dict[str, list[Point]] = {}
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char != _EMPTY:
                found.setdefault(char, []).append((x, y))
    return found


def _in_bounds(grid: Grid, x: int, y: int) -> bool:
    return 0 <= x < len(grid[0]) and 0 <= y < len(grid)


def part1(grid: Grid) -> int:
    """Antinodes at twice the distance, not on an antenna of the same frequency."""
    marked: set[Point] = set()
    for frequency, positions in _antennas(grid).items():
        for (ax, ay), (bx, by) in product(positions, repeat=2):
            x, y = 2 * bx - ax, 2 * by - ay
            if _in_bounds(grid, x, y) and grid[y][x] != frequency:
                marked.add((x, y))
    return len(marked)


def part2(grid: Grid) -> int:
    """Antinodes along each antenna line, up to the edge or a same-frequency antenna."""
    marked: set[Point] = set()
    for frequency, positions in _antennas(grid).items():
        for (ax, ay), (bx, by) in product(positions, repeat=2):
            marked.update(((ax, ay), (bx, by)))
            previous = (bx, by)
            x, y = 2 * bx - ax, 2 * by - ay
            while _in_bounds(grid, x, y) and grid[y][x] != frequency:
                marked.add((x, y))
                (px, py), previous = previous, (x, y)
                x, y = 2 * x - px, 2 * y - py
    return len(marked)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    grid = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(grid)}")
        print(f"PART 2: {part2(grid)}")
    elif args.part == "2":
        print(f"PART 2: {part2(grid)}")
    else:
        print(f"PART 1: {part1(grid)}")
    return 0