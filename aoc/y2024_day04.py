"""2024 day 4: find XMAS in a word search."""

from __future__ import annotations

import argparse
from pathlib import Path

DIRECTIONS = ((0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1))
_CORNER_EXCLUDED = "AX"


def parse(text: str) -> list[str]:
    """The grid as a list of rows."""
    return text.splitlines()


def _at(grid: list[str], x: int, y: int) -> str | None:
    if 0 <= y < len(grid) and 0 <= x < len(grid[0]):
        return grid[y][x]
    return None


def part1(grid: list[str]) -> int:
    """Count XMAS in all eight directions."""
    return sum(
        1
        for y, row in enumerate(grid)
        for x, char in enumerate(row)
        if char == "X"
        for dx, dy in DIRECTIONS
        if all(
            _at(grid, x + dx * step, y + dy * step) == letter
            for step, letter in enumerate("MAS", start=1)
        )
    )


def _corner(grid: list[str], x: int, y: int) -> str | None:
    char = _at(grid, x, y)
    if char is None or char in _CORNER_EXCLUDED:
        return None
    return char


def part2(grid: list[str]) -> int:
    """Count A cells whose diagonal corners cross two MAS words."""
    count = 0
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char != "A":
                continue
            corners = (
                _corner(grid, x - 1, y - 1),
                _corner(grid, x + 1, y - 1),
                _corner(grid, x - 1, y + 1),
                _corner(grid, x + 1, y + 1),
            )
            if None in corners:
                continue
            top_left, top_right, bottom_left, bottom_right = corners
            if bottom_right != top_left and bottom_left != top_right:
                count += 1
    return count


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