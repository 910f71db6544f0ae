"""2024 day 7: find the calibration equations that can be made true."""

from __future__ import annotations

import argparse
from pathlib import Path

Equation = tuple[int, list[int]]


def parse(text: str) -> list[Equation]:
    """Each line ``result: a b c`` becomes ``(result, [a, b, c])``."""
    equations = []
    for line in text.splitlines():
        if not line:
            continue
        head, _, tail = line.partition(":")
        equations.append((int(head), [int(number) for number in tail.split()]))
    return equations


def _atoi(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _solvable(operands: list[int], target: int, concatenate: bool) -> bool:
    """Work backwards from the last operand, undoing each operator."""
    *rest, last = operands
    if not rest:
        return last == target
    if target % last == 0 and _solvable(rest, target // last, concatenate):
        return True
    if _solvable(rest, target - last, concatenate):
        return True
    if not concatenate:
        return False
    whole, suffix = str(target), str(last)
    if not whole.endswith(suffix):
        return False
    return _solvable(rest, _atoi(whole[: len(whole) - len(suffix)]), concatenate)


def part1(equations: list[Equation]) -> int:
    """Total of the results reachable with ``+`` and ``*``."""
    return sum(result for result, operands in equations if _solvable(operands, result, False))


def part2(equations: list[Equation]) -> int:
    """Total of the results reachable with ``+``, ``*`` and concatenation."""
    return sum(result for result, operands in equations if _solvable(operands, result, True))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    equations = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(equations)}")
        print(f"PART 2: {part2(equations)}")
    elif args.part == "2":
        print(f"PART 2: {part2(equations)}")
    else:
        print(f"PART 1: {part1(equations)}")
    return 0