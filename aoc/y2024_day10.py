"""2024 day 10: score and rate the hiking trails of a topographic map."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

_DIRECTIONS = ((-1, 0), (0, -1), (1, 0), (0, 1))
_TRAILHEAD = 0
_SUMMIT = 9

Grid = list[list[int]]
Point = tuple[int, int]


def parse(text: str) -> Grid:
    """The map as rows of heights; characters other than digits get no valid height."""
    return [[ord(char) - ord("0") for char in line] for line in text.splitlines() if line]


def _uphill(grid: Grid, x: int, y: int) -> Iterator[Point]:
    height = grid[y][x]
    for dx, dy in _DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= ny < len(grid) and 0 <= nx < len(grid[0]) and grid[ny][nx] == height + 1:
            yield nx, ny


def _trailheads(grid: Grid) -> Iterator[Point]:
    for y, row in enumerate(grid):
        for x, height in enumerate(row):
            if height == _TRAILHEAD:
                yield x, y


def _reachable_summits(grid: Grid, start: Point) -> set[Point]:
    summits: set[Point] = set()
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        if grid[y][x] == _SUMMIT:
            summits.add((x, y))
            continue
        for step in _uphill(grid, x, y):
            if step not in seen:
                seen.add(step)
                stack.append(step)
    return summits


def _trail_count(grid: Grid, point: Point, cache: dict[Point, int]) -> int:
    if point not in cache:
        x, y = point
        if grid[y][x] == _SUMMIT:
            cache[point] = 1
        else:
            cache[point] = sum(_trail_count(grid, step, cache) for step in _uphill(grid, x, y))
    return cache[point]


def part1(grid: Grid) -> int:
    """Sum over trailheads of the number of distinct summits each can reach."""
    return sum(len(_reachable_summits(grid, start)) for start in _trailheads(grid))


def part2(grid: Grid) -> int:
    """Sum over trailheads of the number of distinct trails to a summit."""
    cache: dict[Point, int] = {}
    return sum(_trail_count(grid, start, cache) for start in _trailheads(grid))


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