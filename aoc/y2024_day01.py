"""2024 day 1: compare two columns of location identifiers."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path


def parse(text: str) -> tuple[list[int], list[int]]:
    """Split the two whitespace separated columns."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        if not line:
            continue
        first, second = line.split()
        left.append(int(first))
        right.append(int(second))
    return left, right


def part1(left: list[int], right: list[int]) -> int:
    """Total distance between the columns after sorting both."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(left: list[int], right: list[int]) -> int:
    """Similarity score: each left value times its count on the right."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    left, right = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(left, right)}")
        print(f"PART 2: {part2(left, right)}")
    elif args.part == "2":
        print(f"PART 2: {part2(left, right)}")
    else:
        print(f"PART 1: {part1(left, right)}")
    return 0