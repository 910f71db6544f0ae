"""2024 day 25: count lock and key pairs that fit together."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from pathlib import Path

_FULL_HEIGHT = 7

Heights = tuple[int, ...]


def _blocks(text: str) -> Iterator[list[str]]:
    block: list[str] = []
    for line in text.splitlines():
        if line:
            block.append(line)
        elif block:
            yield block
            block = []
    if block:
        yield block


def parse(text: str) -> tuple[list[Heights], list[Heights]]:
    """Return the locks and keys as per-column counts of ``#``."""
    locks: list[Heights] = []
    keys: list[Heights] = []
    for block in _blocks(text):
        heights = tuple(column.count("#") for column in zip(*block))
        if "." in block[0]:
            keys.append(heights)
        else:
            locks.append(heights)
    return locks, keys


def can_fit(lock: Heights, key: Heights) -> bool:
    """No column of lock and key together exceeds the full height."""
    return all(a + b <= _FULL_HEIGHT for a, b in zip(lock, key))


def part1(locks: list[Heights], keys: list[Heights]) -> int:
    """Number of lock and key pairs that fit."""
    return sum(1 for lock in locks for key in keys if can_fit(lock, key))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    locks, keys = parse(Path(args.path).read_text())
    print(f"PART 1: {part1(locks, keys)}")
    return 0