"""2025 day 5: count the identifiers covered by the fresh ranges."""

from __future__ import annotations

import argparse

from aoc.readers import read_example, read_input

TODAYS_PATH = "./2025/05"

Range = tuple[int, int]


def parse_ranges(text: str) -> list[Range]:
    """Read the ``low-high`` lines that come before the first blank line."""
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("expected a blank line after the ranges") from None
    ranges = []
    for line in lines[:blank]:
        low, high, *_ = line.split("-")
        first, second = int(low), int(high)
        ranges.append((min(first, second), max(first, second)))
    return ranges


def merge_ranges(ranges: list[Range]) -> list[Range]:
    """Merge overlapping inclusive ranges into sorted disjoint ones."""
    merged: list[Range] = []
    for low, high in sorted(ranges, key=lambda r: r[0]):
        if merged and low <= merged[-1][1]:
            last_low, last_high = merged[-1]
            merged[-1] = (last_low, max(last_high, high))
        else:
            merged.append((low, high))
    return merged


def count_fresh_ids(text: str) -> int:
    """Number of distinct identifiers inside any fresh range."""
    return sum(high - low + 1 for low, high in merge_ranges(parse_ranges(text)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("directory", nargs="?", default=TODAYS_PATH)
    parser.add_argument("--example", action="store_true", help="read example.txt")
    args = parser.parse_args(argv)
    reader = read_example if args.example else read_input
    print(count_fresh_ids(reader(args.directory)))
    return 0