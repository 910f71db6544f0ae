"""2024 day 3: add up the multiplications in corrupted memory."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_INSTRUCTION = re.compile(r"(don't\(\))|(do\(\))|mul\(([0-9]{1,3}),([0-9]{1,3})\)")


def part1(text: str) -> int:
    """Sum of every well-formed ``mul(a,b)``."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part2(text: str) -> int:
    """Sum of the multiplications not switched off by ``don't()``."""
    total = 0
    enabled = True
    for match in _INSTRUCTION.finditer(text):
        dont, do, a, b = match.groups()
        if dont:
            enabled = False
        elif do:
            enabled = True
        elif enabled:
            total += int(a) * int(b)
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    text = Path(args.path).read_text()
    if args.part is None:
        print(f"PART 1: {part1(text)}")
        print(f"PART 2: {part2(text)}")
    elif args.part == "2":
        print(f"PART 2: {part2(text)}")
    else:
        print(f"PART 1: {part1(text)}")
    return 0