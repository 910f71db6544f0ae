"""2025 day 2: sum identifiers made of a repeated digit block."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterator

from aoc.readers import read_example, read_input

TODAYS_PATH = "./2025/02"


def is_repeated(number: int) -> bool:
    """Tell whether the digits of *number* are one block repeated two or more times."""
    digits = str(number)
    length = len(digits)
    return any(
        length % size == 0 and digits == digits[:size] * (length // size)
        for size in range(length // 2, 0, -1)
    )


def _id_ranges(text: str) -> Iterator[tuple[int, int]]:
    for field in re.split(r"[,\n]", text):
        if not field:
            continue
        start, end = field.split("-", 1)
        yield int(start), int(end)


def sum_invalid_ids(text: str) -> int:
    """Sum every repeated-block identifier inside the comma separated ranges."""
    return sum(
        number
        for start, end in _id_ranges(text)
        for number in range(start, end + 1)
        if is_repeated(number)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("directory", nargs="?", default=TODAYS_PATH)
    parser.add_argument("--example", action="store_true", help="read example.txt")
    args = parser.parse_args(argv)
    reader = read_example if args.example else read_input
    print(sum_invalid_ids(reader(args.directory)))
    return 0