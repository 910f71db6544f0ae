"""2024 day 21: type door codes through a chain of directional keypads."""

from __future__ import annotations

import argparse
import re
from itertools import pairwise
from pathlib import Path

NUMPAD = ("789", "456", "123", "#0A")
DIRPAD = ("#^A", "<v>")
_NUMPAD_START = (2, 3)
_DIRPAD_START = (2, 0)
_PART1_ROBOTS = 2
_PART2_ROBOTS = 25
_NUMBER = re.compile(r"\d+")

Point = tuple[int, int]
Memo = dict[tuple[str, str, int], int]

# Moves, ending with a press, that take an arm from one key to the next.
_MOVES: dict[tuple[str, str], str] = {
    ("A", "0"): "<A",
    ("0", "A"): ">A",
    ("A", "1"): "^<<A",
    ("1", "A"): ">>vA",
    ("A", "2"): "<^A",
    ("2", "A"): "v>A",
    ("A", "3"): "^A",
    ("3", "A"): "vA",
    ("A", "4"): "^^<<A",
    ("4", "A"): ">>vvA",
    ("A", "5"): "<^^A",
    ("5", "A"): "vv>A",
    ("A", "6"): "^^A",
    ("6", "A"): "vvA",
    ("A", "7"): "^^^<<A",
    ("7", "A"): ">>vvvA",
    ("A", "8"): "<^^^A",
    ("8", "A"): "vvv>A",
    ("A", "9"): "^^^A",
    ("9", "A"): "vvvA",
    ("0", "1"): "^<A",
    ("1", "0"): ">vA",
    ("0", "2"): "^A",
    ("2", "0"): "vA",
    ("0", "3"): "^>A",
    ("3", "0"): "<vA",
    ("0", "4"): "^<^A",
    ("4", "0"): ">vvA",
    ("0", "5"): "^^A",
    ("5", "0"): "vvA",
    ("0", "6"): "^^>A",
    ("6", "0"): "<vvA",
    ("0", "7"): "^^^<A",
    ("7", "0"): ">vvvA",
    ("0", "8"): "^^^A",
    ("8", "0"): "vvvA",
    ("0", "9"): "^^^>A",
    ("9", "0"): "<vvvA",
    ("1", "2"): ">A",
    ("2", "1"): "<A",
    ("1", "3"): ">>A",
    ("3", "1"): "<<A",
    ("1", "4"): "^A",
    ("4", "1"): "vA",
    ("1", "5"): "^>A",
    ("5", "1"): "<vA",
    ("1", "6"): "^>>A",
    ("6", "1"): "<<vA",
    ("1", "7"): "^^A",
    ("7", "1"): "vvA",
    ("1", "8"): "^^>A",
    ("8", "1"): "<vvA",
    ("1", "9"): "^^>>A",
    ("9", "1"): "<<vvA",
    ("2", "3"): ">A",
    ("3", "2"): "<A",
    ("2", "4"): "<^A",
    ("4", "2"): "v>A",
    ("2", "5"): "^A",
    ("5", "2"): "vA",
    ("2", "6"): "^>A",
    ("6", "2"): "<vA",
    ("2", "7"): "<^^A",
    ("7", "2"): "vv>A",
    ("2", "8"): "^^A",
    ("8", "2"): "vvA",
    ("2", "9"): "^^>A",
    ("9", "2"): "<vvA",
    ("3", "4"): "<<^A",
    ("4", "3"): "v>>A",
    ("3", "5"): "<^A",
    ("5", "3"): "v>A",
    ("3", "6"): "^A",
    ("6", "3"): "vA",
    ("3", "7"): "<<^^A",
    ("7", "3"): "vv>>A",
    ("3", "8"): "<^^A",
    ("8", "3"): "vv>A",
    ("3", "9"): "^^A",
    ("9", "3"): "vvA",
    ("4", "5"): ">A",
    ("5", "4"): "<A",
    ("4", "6"): ">>A",
    ("6", "4"): "<<A",
    ("4", "7"): "^A",
    ("7", "4"): "vA",
    ("4", "8"): "^>A",
    ("8", "4"): "<vA",
    ("4", "9"): "^>>A",
    ("9", "4"): "<<vA",
    ("5", "6"): ">A",
    ("6", "5"): "<A",
    ("5", "7"): "<^A",
    ("7", "5"): "v>A",
    ("5", "8"): "^A",
    ("8", "5"): "vA",
    ("5", "9"): "^>A",
    ("9", "5"): "<vA",
    ("6", "7"): "<<^A",
    ("7", "6"): "v>>A",
    ("6", "8"): "<^A",
    ("8", "6"): "v>A",
    ("6", "9"): "^A",
    ("9", "6"): "vA",
    ("7", "8"): ">A",
    ("8", "7"): "<A",
    ("7", "9"): ">>A",
    ("9", "7"): "<<A",
    ("8", "9"): ">A",
    ("9", "8"): "<A",
    ("<", "^"): ">^A",
    ("^", "<"): "v<A",
    ("<", "v"): ">A",
    ("v", "<"): "<A",
    ("<", ">"): ">>A",
    (">", "<"): "<<A",
    ("<", "A"): ">>^A",
    ("A", "<"): "v<<A",
    ("^", "v"): "vA",
    ("v", "^"): "^A",
    ("^", ">"): "v>A",
    (">", "^"): "<^A",
    ("^", "A"): ">A",
    ("A", "^"): "<A",
    ("v", ">"): ">A",
    (">", "v"): "<A",
    ("v", "A"): "^>A",
    ("A", "v"): "<vA",
    (">", "A"): "^A",
    ("A", ">"): "vA",
    ("A", "A"): "A",
    ("0", "0"): "A",
    ("1", "1"): "A",
    ("2", "2"): "A",
    ("3", "3"): "A",
    ("4", "4"): "A",
    ("5", "5"): "A",
    ("6", "6"): "A",
    ("7", "7"): "A",
    ("8", "8"): "A",
    ("9", "9"): "A",
    ("<", "<"): "A",
    ("^", "^"): "A",
    ("v", "v"): "A",
    (">", ">"): "A",
}


def parse(text: str) -> list[str]:
    """One door code per line."""
    return [line for line in text.splitlines() if line]


def _locate(pad: tuple[str, ...], key: str) -> Point:
    for y, row in enumerate(pad):
        x = row.find(key)
        if x >= 0:
            return x, y
    return 0, 0


def _steps(count: int, negative: str, positive: str) -> str:
    return (negative if count < 0 else positive) * abs(count)


def _finish(moves: str, dx: int, dy: int, vertical_first: bool) -> str:
    horizontal = _steps(dx, "<", ">")
    vertical = _steps(dy, "^", "v")
    return moves + (vertical + horizontal if vertical_first else horizontal + vertical) + "A"


def _numpad_moves(code: str) -> str:
    """Directional presses that make the numeric keypad arm type *code*."""
    x, y = _NUMPAD_START
    presses = []
    for key in code:
        end_x, end_y = _locate(NUMPAD, key)
        moves = ""
        if x > 0 and y + 1 == end_y:
            y += 1
            moves += "v"
        if x == 0 and end_x != 0:
            x += 1
            moves += ">"
        elif y == 3 and end_y != 3:
            if x == 2 and end_x == 1:
                x -= 1
                moves += "<"
            y -= 1
            moves += "^"
        presses.append(_finish(moves, end_x - x, end_y - y, moves.endswith("^")))
        x, y = end_x, end_y
    return "".join(presses)


def _dirpad_moves(sequence: str) -> str:
    """Directional presses that make a directional keypad arm type *sequence*."""
    x, y = _DIRPAD_START
    presses = []
    for key in sequence:
        end_x, end_y = _locate(DIRPAD, key)
        moves = ""
        if x == 0 and end_y != 1:
            x += 1
            moves += ">"
        elif y == 0 and end_y != 0:
            if end_x == x - 1:
                x -= 1
                moves += "<"
            y += 1
            moves += "v"
        presses.append(_finish(moves, end_x - x, end_y - y, moves.endswith("v")))
        x, y = end_x, end_y
    return "".join(presses)


def _expand(sequence: str) -> str:
    """Presses, from the move table, that type *sequence* starting from ``A``."""
    return "".join(_MOVES.get(pair, "") for pair in pairwise("A" + sequence))


def _press_count(first: str, second: str, depth: int, memo: Memo) -> int:
    """Presses needed, *depth* keypads up, to move from *first* to *second* and press."""
    key = (first, second, depth)
    if key in memo:
        return memo[key]
    moves = _MOVES.get((first, second), "")
    if depth == 1:
        return len(moves)
    length = sum(_press_count(a, b, depth - 1, memo) for a, b in pairwise("A" + moves))
    memo[key] = length
    return length


def _sequence_length(code: str, robots: int, memo: Memo) -> int:
    inputs = "A" + _expand(code)
    return sum(_press_count(a, b, robots, memo) for a, b in pairwise(inputs))


def _numeric_part(code: str) -> int:
    match = _NUMBER.search(code)
    return int(match.group()) if match else 0


def part1(codes: list[str]) -> int:
    """Sum of complexities with two robots on directional keypads."""
    total = 0
    for code in codes:
        moves = _numpad_moves(code)
        for _ in range(_PART1_ROBOTS):
            moves = _dirpad_moves(moves)
        total += len(moves) * _numeric_part(code)
    return total


def part2(codes: list[str]) -> int:
    """Sum of complexities with twenty-five robots on directional keypads."""
    memo: Memo = {}
    return sum(
        _sequence_length(code, _PART2_ROBOTS, memo) * _numeric_part(code) for code in codes
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    codes = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(codes)}")
        print(f"PART 2: {part2(codes)}")
    elif args.part == "2":
        print(f"PART 2: {part2(codes)}")
    else:
        print(f"PART 1: {part1(codes)}")
    return 0