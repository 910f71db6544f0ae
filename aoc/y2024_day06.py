"""2024 day 6: follow the lab guard and find places to trap it in a loop."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))
_GUARD = "^"
_WALL = "#"

Grid = list[str]
State = tuple[int, int, int]


def parse(text: str) -> Grid:
    """The map as a list of rows."""
    return text.splitlines()


def _find_guard(grid: Grid) -> tuple[int, int]:
    start = None
    for y, row in enumerate(grid):
        x = row.find(_GUARD)
        if x >= 0:
            start = (x, y)
    if start is None:
        raise ValueError("no guard on the map")
    return start


def _states(
    grid: Grid, start: tuple[int, int], extra: tuple[int, int] | None = None
) -> Iterator[State]:
    """Yield position and heading each time the guard stands on a free cell."""
    height, width = len(grid), len(grid[0])
    x, y = start
    heading = 0
    while 0 <= x < width and 0 <= y < height:
        dx, dy = _DIRECTIONS[heading]
        if grid[y][x] == _WALL or (x, y) == extra:
            x, y = x - dx, y - dy
            heading = (heading + 1) % 4
        else:
            yield x, y, heading
        dx, dy = _DIRECTIONS[heading]
        x, y = x + dx, y + dy


def _loops(grid: Grid, start: tuple[int, int], extra: tuple[int, int]) -> bool:
    seen: set[State] = set()
    for state in _states(grid, start, extra):
        if state in seen:
            return True
        seen.add(state)
    return False


def part1(grid: Grid) -> int:
    """Number of distinct cells the guard visits before leaving the map."""
    return len({(x, y) for x, y, _ in _states(grid, _find_guard(grid))})


def part2(grid: Grid) -> int:
    """Number of single extra obstacles that send the guard into a loop."""
    start = _find_guard(grid)
    return sum(
        1
        for y in range(len(grid))
        for x in range(len(grid[0]))
        if _loops(grid, start, (x, y))
    )


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