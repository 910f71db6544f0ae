"""2024 day 20: count the shortcuts through the race condition track."""

from __future__ import annotations

import argparse
from collections import deque
from pathlib import Path

_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))
_WALL = "#"
_MIN_SAVING = 100
_SHORT_CHEAT = 2
_LONG_CHEAT = 20

Grid = list[str]
Point = tuple[int, int]


def parse(text: str) -> Grid:
    """The track as a list of rows."""
    return [line for line in text.splitlines() if line]


def _find(grid: Grid, char: str) -> Point:
    found = [(x, y) for y, row in enumerate(grid) for x, cell in enumerate(row) if cell == char]
    if not found:
        raise ValueError(f"no {char!r} on the track")
    return found[-1]


def _track(grid: Grid) -> dict[Point, int]:
    """Distances from the start of everything reached before the end is taken."""
    start, end = _find(grid, "S"), _find(grid, "E")
    height, width = len(grid), len(grid[0])
    distances = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == end:
            return distances
        x, y = current
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < width
                and 0 <= ny < height
                and grid[ny][nx] != _WALL
                and (nx, ny) not in distances
            ):
                distances[(nx, ny)] = distances[current] + 1
                queue.append((nx, ny))
    return {}


def count_cheats(grid: Grid, max_cheat: int, min_saving: int) -> int:
    """Pairs of track cells within *max_cheat* steps whose shortcut saves enough."""
    distances = _track(grid)
    ordered = 0
    for (x, y), distance in distances.items():
        for dy in range(-max_cheat, max_cheat + 1):
            span = max_cheat - abs(dy)
            for dx in range(-span, span + 1):
                if dx == 0 and dy == 0:
                    continue
                other = distances.get((x + dx, y + dy))
                if other is None:
                    continue
                if abs(other - distance) - abs(dx) - abs(dy) >= min_saving:
                    ordered += 1
    same_cell = len(distances) if max_cheat >= 0 and min_saving <= 0 else 0
    return ordered // 2 + same_cell


def part1(grid: Grid) -> int:
    """Cheats of up to two steps saving at least a hundred."""
    return count_cheats(grid, _SHORT_CHEAT, _MIN_SAVING)


def part2(grid: Grid) -> int:
    """Cheats of up to twenty steps saving at least a hundred."""
    return count_cheats(grid, _LONG_CHEAT, _MIN_SAVING)


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