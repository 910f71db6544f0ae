"""2024 day 2: check which reactor reports are safe."""

from __future__ import annotations

import argparse
from itertools import pairwise
from pathlib import Path

Report = list[int]


def parse(text: str) -> list[Report]:
    """One report of integer levels per line."""
    return [[int(level) for level in line.split()] for line in text.splitlines() if line]


def _step_ok(a: int, b: int, increasing: bool) -> bool:
    delta = b - a if increasing else a - b
    return 1 <= delta <= 3


def _first_violation(report: Report) -> int | None:
    increasing = report[0] < report[1]
    return next(
        (
            index
            for index, (a, b) in enumerate(pairwise(report), start=1)
            if not _step_ok(a, b, increasing)
        ),
        None,
    )


def _require_levels(report: Report) -> None:
    if len(report) < 2:
        raise ValueError("a report needs at least two levels")


def is_safe(report: Report) -> bool:
    """Strictly monotonic with steps of one to three."""
    _require_levels(report)
    if report[0] == report[1]:
        return False
    return _first_violation(report) is None


def _tolerable(report: Report) -> bool:
    _require_levels(report)
    if report[0] == report[1]:
        candidates: tuple[int, ...] = (0, 1)
    else:
        bad = _first_violation(report)
        if bad is None:
            return True
        candidates = (bad - 1, bad) + ((bad - 2,) if bad > 1 else ())
    return any(is_safe(report[:drop] + report[drop + 1 :]) for drop in candidates)


def part1(reports: list[Report]) -> int:
    """Number of safe reports."""
    return sum(1 for report in reports if is_safe(report))


def part2(reports: list[Report]) -> int:
    """Number of reports made safe by dropping a level near the first fault."""
    return sum(1 for report in reports if _tolerable(report))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    reports = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(reports)}")
        print(f"PART 2: {part2(reports)}")
    elif args.part == "2":
        print(f"PART 2: {part2(reports)}")
    else:
        print(f"PART 1: {part1(reports)}")
    return 0