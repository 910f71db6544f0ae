"""2024 day 18: escape a memory space as bytes fall into it."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable
from pathlib import Path

MEMORY_SIZE = 71
FIRST_FALLEN = 1024
_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))

Point = tuple[int, int]


def parse(text: str) -> list[Point]:
    """One ``x,y`` coordinate per line."""
    points = []
    for line in text.splitlines():
        if not line:
            continue
        x, y = line.split(",")[:2]
        points.append((int(x), int(y)))
    return points


def _in_bounds(point: Point, size: int) -> bool:
    x, y = point
    return 0 <= x < size and 0 <= y < size


def _corrupt(points: list[Point], count: int, size: int = MEMORY_SIZE) -> set[Point]:
    if count > len(points):
        raise ValueError("memory overflow: not enough bytes to write")
    walls: set[Point] = set()
    for point in points[:count]:
        if not _in_bounds(point, size):
            raise ValueError(f"byte {point} is out of memory bounds")
        walls.add(point)
    return walls


def shortest_path(walls: Iterable[Point], size: int = MEMORY_SIZE) -> int | None:
    """Steps from the top-left to the bottom-right corner, or None if blocked."""
    blocked = set(walls)
    start, end = (0, 0), (size - 1, size - 1)
    distances = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == end:
            return distances[current]
        x, y = current
        for dx, dy in _DIRECTIONS:
            neighbour = (x + dx, y + dy)
            if (
                _in_bounds(neighbour, size)
                and neighbour not in blocked
                and neighbour not in distances
            ):
                distances[neighbour] = distances[current] + 1
                queue.append(neighbour)
    return None


def part1(points: list[Point]) -> int | None:
    """Shortest path once the first kilobyte has fallen."""
    return shortest_path(_corrupt(points, FIRST_FALLEN))


def part2(points: list[Point]) -> Point:
    """The first byte whose fall cuts off the exit."""
    if not points:
        raise ValueError("no bytes given")
    lower, upper = 0, len(points) - 1
    while lower < upper:
        pivot = (lower + upper) // 2
        if shortest_path(_corrupt(points, pivot + 1)) is None:
            upper = pivot
        else:
            lower = pivot + 1
    return points[lower]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    points = parse(Path(args.path).read_text())

    def blocker() -> str:
        x, y = part2(points)
        return f"{x},{y}"

    if args.part is None:
        print(f"PART 1: {part1(points)}")
        print(f"PART 2: {blocker()}")
    elif args.part == "2":
        print(f"PART 2: {blocker()}")
    else:
        print(f"PART 1: {part1(points)}")
    return 0