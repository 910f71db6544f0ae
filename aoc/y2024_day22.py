"""2024 day 22: simulate the monkeys' pseudorandom secrets and sell bananas."""

from __future__ import annotations

import argparse
from collections import defaultdict
from itertools import pairwise
from pathlib import Path

MODULUS = 16_777_216
SECRET_ROUNDS = 2000
PRICE_COUNT = 2000
_SEQUENCE_LENGTH = 4


def parse(text: str) -> list[int]:
    """One initial secret per line."""
    return [int(line) for line in text.splitlines() if line]


def next_secret(secret: int) -> int:
    """The next number in a buyer's secret sequence."""
    secret = (secret ^ (secret << 6)) % MODULUS
    secret = (secret ^ (secret >> 5)) % MODULUS
    return (secret ^ (secret << 11)) % MODULUS


def nth_secret(secret: int, n: int) -> int:
    """The secret after *n* steps."""
    for _ in range(n):
        secret = next_secret(secret)
    return secret


def _prices(secret: int, count: int) -> list[int]:
    prices = [secret % 10]
    for _ in range(count - 1):
        secret = next_secret(secret)
        prices.append(secret % 10)
    return prices


def part1(secrets: list[int]) -> int:
    """Sum of every buyer's two-thousandth secret."""
    return sum(nth_secret(secret, SECRET_ROUNDS) for secret in secrets)


def part2(secrets: list[int]) -> int:
    """Most bananas obtainable with a single sequence of four price changes."""
    totals: defaultdict[tuple[int, ...], int] = defaultdict(int)
    for secret in secrets:
        prices = _prices(secret, PRICE_COUNT)
        changes = [0, *(b - a for a, b in pairwise(prices))]
        seen: set[tuple[int, ...]] = set()
        for end in range(_SEQUENCE_LENGTH, len(prices)):
            sequence = tuple(changes[end - _SEQUENCE_LENGTH + 1 : end + 1])
            if sequence in seen:
                continue
            seen.add(sequence)
            totals[sequence] += prices[end]
    return max(totals.values(), default=0)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    secrets = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(secrets)}")
        print(f"PART 2: {part2(secrets)}")
    elif args.part == "2":
        print(f"PART 2: {part2(secrets)}")
    else:
        print(f"PART 1: {part1(secrets)}")
    return 0