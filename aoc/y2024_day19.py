"""2024 day 19: arrange towels from the available stripe patterns."""

from __future__ import annotations

import argparse
from pathlib import Path


def parse(text: str) -> tuple[list[str], list[str]]:
    """The comma separated patterns, then the towel designs after the blank line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no patterns given")
    return lines[0].split(", "), lines[2:]


def _arrangements(towel: str, patterns: set[str], longest: int) -> int:
    ways = [0] * len(towel) + [1]
    for start in range(len(towel) - 1, -1, -1):
        ways[start] = sum(
            ways[start + size]
            for size in range(1, min(longest, len(towel) - start) + 1)
            if towel[start : start + size] in patterns
        )
    return ways[0]


def _counts(patterns: list[str], towels: list[str]) -> list[int]:
    available = set(patterns)
    longest = max(map(len, patterns), default=0)
    return [_arrangements(towel, available, longest) for towel in towels]


def part1(patterns: list[str], towels: list[str]) -> int:
    """Number of designs that can be made at all."""
    return sum(1 for count in _counts(patterns, towels) if count)


def part2(patterns: list[str], towels: list[str]) -> int:
    """Total number of ways to make every design."""
    return sum(_counts(patterns, towels))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    patterns, towels = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(patterns, towels)}")
        print(f"PART 2: {part2(patterns, towels)}")
    elif args.part == "2":
        print(f"PART 2: {part2(patterns, towels)}")
    else:
        print(f"PART 1: {part1(patterns, towels)}")
    return 0