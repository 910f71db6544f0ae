"""2025 day 3: pick the largest k-digit number from each battery bank."""

from __future__ import annotations

import argparse

from aoc.readers import read_example, read_input

TODAYS_PATH = "./2025/03"
DIGITS_PICKED = 12


def max_joltage(bank: str, k: int = DIGITS_PICKED) -> int:
    """Largest number formed by *k* digits of *bank* kept in their order."""
    picked: list[str] = []
    start = 0
    for pick in range(k):
        need = k - pick - 1
        end = len(bank) - need
        window = bank[start:end] if end > start else ""
        best = max(window, default="0")
        if best > "0":
            index = start + window.index(best)
        else:
            best, index = "0", start
        picked.append(best)
        start = index + 1
    return int("".join(picked) or "0")


def total_joltage(text: str, k: int = DIGITS_PICKED) -> int:
    """Sum the best joltage of every non-empty line."""
    return sum(max_joltage(line, k) for line in text.split("\n") if line)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("directory", nargs="?", default=TODAYS_PATH)
    parser.add_argument("--example", action="store_true", help="read example.txt")
    args = parser.parse_args(argv)
    reader = read_example if args.example else read_input
    print("ans", total_joltage(reader(args.directory)))
    return 0