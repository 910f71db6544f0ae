"""2024 day 11: count the stones after repeated blinks."""

from __future__ import annotations

import argparse
from functools import cache
from pathlib import Path

_MULTIPLIER = 2024


def parse(text: str) -> list[int]:
    """The stones written on the first line."""
    first = text.split("\n", 1)[0]
    return [int(number) for number in first.split()]


def blink(stone: int) -> list[int]:
    """The stones that one stone turns into after a single blink."""
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [stone * _MULTIPLIER]


@cache
def count_stones(stone: int, blinks: int) -> int:
    """Number of stones that *stone* becomes after *blinks* blinks."""
    if blinks == 0:
        return 1
    return sum(count_stones(child, blinks - 1) for child in blink(stone))


def part1(stones: list[int]) -> int:
    """Stone count after 25 blinks."""
    return sum(count_stones(stone, 25) for stone in stones)


def part2(stones: list[int]) -> int:
    """Stone count after 75 blinks."""
    return sum(count_stones(stone, 75) for stone in stones)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    stones = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(stones)}")
        print(f"PART 2: {part2(stones)}")
    elif args.part == "2":
        print(f"PART 2: {part2(stones)}")
    else:
        print(f"PART 1: {part1(stones)}")
    return 0