"""2025 day 1: count how often a rotating dial points at zero."""

from __future__ import annotations

import argparse

from aoc.readers import read_example, read_input

TODAYS_PATH = "./2025/01"
DIAL_START = 50
DIAL_SIZE = 100


def count_zero_clicks(text: str) -> int:
    """Count every click at which the dial passes or lands on zero."""
    dial = DIAL_START
    count = 0
    for line in text.split("\n"):
        if not line:
            continue
        clockwise = line[0] == "R"
        distance = int(line[1:])

        count += distance // DIAL_SIZE
        distance %= DIAL_SIZE
        if clockwise:
            if dial and dial + distance > DIAL_SIZE:
                count += 1
            dial = (dial + distance) % DIAL_SIZE
        else:
            if dial and dial - distance < 0:
                count += 1
            dial = (dial - distance) % DIAL_SIZE

        if dial == 0:
            count += 1
    return count


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("directory", nargs="?", default=TODAYS_PATH)
    parser.add_argument("--example", action="store_true", help="read example.txt")
    args = parser.parse_args(argv)
    reader = read_example if args.example else read_input
    print(count_zero_clicks(reader(args.directory)))
    return 0