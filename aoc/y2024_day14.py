"""2024 day 14: predict where the bathroom security robots end up."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from dataclasses import dataclass
from itertools import product
from math import prod
from pathlib import Path

WIDTH = 101
HEIGHT = 103
PART1_SECONDS = 100

_NUMBER = re.compile(r"-?\d+")

Vector = tuple[int, int]


@dataclass(frozen=True)
class Robot:
    """A robot with a starting position and a constant velocity."""

    position: Vector
    velocity: Vector

    def position_after(self, seconds: int, width: int = WIDTH, height: int = HEIGHT) -> Vector:
        """Where the robot stands after *seconds*, wrapping around the edges."""
        x, y = self.position
        vx, vy = self.velocity
        return (x + seconds * vx) % width, (y + seconds * vy) % height


def parse(text: str) -> list[Robot]:
    """Read lines of the form ``p=x,y v=dx,dy``."""
    robots = []
    for line in text.splitlines():
        if not line:
            continue
        numbers = [int(number) for number in _NUMBER.findall(line)]
        if len(numbers) != 4:
            raise ValueError(f"cannot read robot from {line!r}")
        x, y, vx, vy = numbers
        robots.append(Robot((x, y), (vx, vy)))
    return robots


def _quadrant(position: Vector) -> tuple[bool, bool] | None:
    x, y = position
    middle_x, middle_y = WIDTH // 2, HEIGHT // 2
    if x == middle_x or y == middle_y:
        return None
    return x > middle_x, y > middle_y


def _safety(positions: list[Vector]) -> int:
    counts = Counter(
        quadrant for quadrant in map(_quadrant, positions) if quadrant is not None
    )
    return prod(counts[quadrant] for quadrant in product((False, True), repeat=2))


def part1(robots: list[Robot]) -> int:
    """Safety factor after a hundred seconds."""
    return _safety([robot.position_after(PART1_SECONDS) for robot in robots])


def part2(robots: list[Robot]) -> int:
    """First second, within one full cycle, with the lowest safety factor."""
    best_second = 0
    best_safety: int | None = None
    for second in range(1, WIDTH * HEIGHT + 1):
        safety = _safety([robot.position_after(second) for robot in robots])
        if best_safety is None or safety < best_safety:
            best_safety, best_second = safety, second
    return best_second


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    robots = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(robots)}")
        print(f"PART 2: {part2(robots)}")
    elif args.part == "2":
        print(f"PART 2: {part2(robots)}")
    else:
        print(f"PART 1: {part1(robots)}")
    return 0