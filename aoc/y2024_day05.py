"""2024 day 5: check and repair the page order of safety manual updates."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_RULE = re.compile(r"[1-9]{2}\|[1-9]{2}")
_UPDATE = re.compile(r"\d+(?:,\d+)+")
_NOTHING: frozenset[int] = frozenset()

Rules = dict[int, set[int]]
Update = list[int]


def parse(text: str) -> tuple[list[Update], Rules]:
    """Return the updates and, for every page, the pages that must follow it."""
    rules: Rules = {}
    for rule in _RULE.findall(text):
        before, after = rule.split("|")
        rules.setdefault(int(before), set()).add(int(after))
    updates = [[int(page) for page in line.split(",")] for line in _UPDATE.findall(text)]
    return updates, rules


def _first_violation(update: Update, rules: Rules) -> int | None:
    for index, page in enumerate(update):
        if not set(update[index + 1 :]) <= rules.get(page, _NOTHING):
            return index
    return None


def is_valid(update: Update, rules: Rules) -> bool:
    """Every page is allowed to come before all the pages after it."""
    return _first_violation(update, rules) is None


def _middle(update: Update) -> int:
    return update[(len(update) - 1) // 2]


def _reordered_middle(update: Update, rules: Rules, start: int) -> int:
    """Swap pages forward from *start* until the update is valid; return its middle."""
    line = list(update)
    index = start
    while True:
        if index >= len(line):
            raise ValueError(f"update {update} cannot be put in order")
        current = line[index]
        rest = line[index + 1 :]
        for offset, page in enumerate(rest):
            allowed = rules.get(page)
            if allowed is None:
                continue
            others = rest[:offset] + rest[offset + 1 :] + [current]
            if set(others) <= allowed:
                target = index + 1 + offset
                line[index], line[target] = page, current
                if is_valid(line, rules):
                    return _middle(line)
                break
        index += 1


def part1(updates: list[Update], rules: Rules) -> int:
    """Sum of the middle pages of the updates already in order."""
    return sum(_middle(update) for update in updates if is_valid(update, rules))


def part2(updates: list[Update], rules: Rules) -> int:
    """Sum of the middle pages of the out-of-order updates once repaired."""
    total = 0
    for update in updates:
        bad = _first_violation(update, rules)
        if bad is not None:
            total += _reordered_middle(update, rules, bad)
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    updates, rules = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(updates, rules)}")
        print(f"PART 2: {part2(updates, rules)}")
    elif args.part == "2":
        print(f"PART 2: {part2(updates, rules)}")
    else:
        print(f"PART 1: {part1(updates, rules)}")
    return 0