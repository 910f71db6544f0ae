"""2024 day 12: price the fences around the garden regions."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))

Grid = list[str]
Point = tuple[int, int]
Region = set[Point]


def parse(text: str) -> Grid:
    """The garden as a list of rows."""
    return [line for line in text.splitlines() if line]


def _regions(grid: Grid) -> Iterator[Region]:
    height, width = len(grid), len(grid[0]) if grid else 0
    seen: set[Point] = set()
    for y, row in enumerate(grid):
        for x, plant in enumerate(row):
            if (x, y) in seen:
                continue
            region = {(x, y)}
            stack = [(x, y)]
            while stack:
                cx, cy = stack.pop()
                for dx, dy in _DIRECTIONS:
                    nx, ny = cx + dx, cy + dy
                    if (
                        0 <= nx < width
                        and 0 <= ny < height
                        and (nx, ny) not in region
                        and grid[ny][nx] == plant
                    ):
                        region.add((nx, ny))
                        stack.append((nx, ny))
            seen |= region
            yield region


def _perimeter(region: Region) -> int:
    return sum(
        1 for x, y in region for dx, dy in _DIRECTIONS if (x + dx, y + dy) not in region
    )


def _sides(region: Region) -> int:
    """A region has as many straight sides as corners."""
    vertices = {(x + dx, y + dy) for x, y in region for dx in (0, 1) for dy in (0, 1)}
    corners = 0
    for vx, vy in vertices:
        top_left = (vx - 1, vy - 1) in region
        top_right = (vx, vy - 1) in region
        bottom_left = (vx - 1, vy) in region
        bottom_right = (vx, vy) in region
        inside = top_left + top_right + bottom_left + bottom_right
        if inside in (1, 3):
            corners += 1
        elif inside == 2 and top_left == bottom_right:
            corners += 2
    return corners


def part1(grid: Grid) -> int:
    """Sum of area times perimeter over all regions."""
    return sum(len(region) * _perimeter(region) for region in _regions(grid))


def part2(grid: Grid) -> int:
    """Sum of area times number of sides over all regions."""
    return sum(len(region) * _sides(region) for region in _regions(grid))


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