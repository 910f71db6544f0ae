"""2024 day 15: push boxes around a warehouse with a robot."""

from __future__ import annotations

import argparse
from collections import deque
from pathlib import Path

_STEPS = {"^": (0, -1), ">": (1, 0), "v": (0, 1)}
_LEFT = (-1, 0)
_WIDE = {"O": "[]", "@": "@."}
_ROBOT = "@"
_WALL = "#"
_FREE = "."

Grid = list[list[str]]
Point = tuple[int, int]


def parse(text: str) -> tuple[Grid, str]:
    """Split the map from the moves that follow the first blank line."""
    lines = text.split("\n")
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("expected a blank line between the map and the moves") from None
    grid = [list(line) for line in lines[:blank]]
    moves = "".join(lines[blank + 1 :])
    return grid, moves


def widen(grid: Grid) -> Grid:
    """Double every cell; boxes become ``[]`` and the robot ``@.``."""
    return [list("".join(_WIDE.get(char, char * 2) for char in row)) for row in grid]


def _find_robot(grid: Grid) -> Point:
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == _ROBOT:
                return x, y
    raise ValueError("no robot on the map")


def _push(grid: Grid, robot: Point, step: Point) -> Point:
    """Move the robot and everything it pushes, if nothing hits a wall."""
    dx, dy = step
    to_move: list[Point] = []
    seen = {robot}
    queue = deque([robot])
    while queue:
        x, y = queue.popleft()
        to_move.append((x, y))
        nx, ny = x + dx, y + dy
        cell = grid[ny][nx]
        if cell == _WALL:
            return robot
        if cell == _FREE:
            continue
        ahead = [(nx, ny)]
        if dy and cell == "[":
            ahead.append((nx + 1, ny))
        elif dy and cell == "]":
            ahead.append((nx - 1, ny))
        for point in ahead:
            if point not in seen:
                seen.add(point)
                queue.append(point)
    contents = {(x, y): grid[y][x] for x, y in to_move}
    for x, y in to_move:
        grid[y][x] = _FREE
    for (x, y), char in contents.items():
        grid[y + dy][x + dx] = char
    return robot[0] + dx, robot[1] + dy


def _simulate(grid: Grid, moves: str) -> Grid:
    grid = [row[:] for row in grid]
    robot = _find_robot(grid)
    for move in moves:
        robot = _push(grid, robot, _STEPS.get(move, _LEFT))
    return grid


def _gps_sum(grid: Grid, box: str) -> int:
    return sum(
        100 * y + x for y, row in enumerate(grid) for x, char in enumerate(row) if char == box
    )


def part1(grid: Grid, moves: str) -> int:
    """Sum of box coordinates after all moves."""
    return _gps_sum(_simulate(grid, moves), "O")


def part2(grid: Grid, moves: str) -> int:
    """Sum of box coordinates after all moves in the widened warehouse."""
    return _gps_sum(_simulate(widen(grid), moves), "[")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    grid, moves = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(grid, moves)}")
        print(f"PART 2: {part2(grid, moves)}")
    elif args.part == "2":
        print(f"PART 2: {part2(grid, moves)}")
    else:
        print(f"PART 1: {part1(grid, moves)}")
    return 0