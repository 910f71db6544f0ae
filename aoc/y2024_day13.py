"""2024 day 13: win prizes from claw machines with the fewest tokens."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_NUMBER = re.compile(r"-?\d+")
_PRIZE_OFFSET = 10_000_000_000_000
_PRESS_LIMIT = 100

Machine = tuple[int, int, int, int, int, int]


def parse(text: str) -> list[Machine]:
    """Each blank-line separated block gives (ax, ay, bx, by, prize_x, prize_y)."""
    machines: list[Machine] = []
    numbers: list[int] = []
    for line in [*text.splitlines(), ""]:
        if line:
            numbers.extend(int(number) for number in _NUMBER.findall(line.split(":", 1)[1]))
            continue
        if numbers:
            if len(numbers) != 6:
                raise ValueError(f"machine description has {len(numbers)} numbers, expected 6")
            machines.append(tuple(numbers))  # type: ignore[arg-type]
            numbers = []
    return machines


def solve_system(a1: int, b1: int, x: int, a2: int, b2: int, y: int) -> tuple[int, int]:
    """Integer solution of a1*a + b1*b = x and a2*a + b2*b = y, or (0, 0) if none."""
    determinant = a1 * b2 - a2 * b1
    numerator = x * b2 - y * b1
    if numerator % determinant != 0:
        return 0, 0
    a = numerator // determinant
    if (y - a2 * a) % b2 != 0:
        return 0, 0
    b = (y - a2 * a) // b2
    return a, b


def _cheapest_small(machine: Machine) -> int:
    ax, ay, bx, by, want_x, want_y = machine
    for b in range(_PRESS_LIMIT, -1, -1):
        for a in range(_PRESS_LIMIT):
            if want_x == ax * a + bx * b and want_y == ay * a + by * b:
                return 3 * a + b
    return 0


def part1(machines: list[Machine]) -> int:
    """Tokens spent trying at most a hundred presses of each button."""
    return sum(_cheapest_small(machine) for machine in machines)


def part2(machines: list[Machine]) -> int:
    """Tokens spent once every prize is moved far away."""
    total = 0
    for ax, ay, bx, by, want_x, want_y in machines:
        a, b = solve_system(ax, bx, _PRIZE_OFFSET + want_x, ay, by, _PRIZE_OFFSET + want_y)
        total += 3 * a + b
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    machines = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(machines)}")
        print(f"PART 2: {part2(machines)}")
    elif args.part == "2":
        print(f"PART 2: {part2(machines)}")
    else:
        print(f"PART 1: {part1(machines)}")
    return 0