import pytest

from aoc.y2024_day21 import (
    DIRPAD,
    NUMPAD,
    _dirpad_moves,
    _expand,
    _numpad_moves,
    _press_count,
    parse,
    part1,
    part2,
)

EXAMPLE_CODES = ["029A", "980A", "179A", "456A", "379A"]


def _type(pad, start_key, moves, avoid_gap=False):
    """Follow *moves* on *pad* from *start_key*; return the keys pressed."""
    y = next(i for i, row in enumerate(pad) if start_key in row)
    x = pad[y].index(start_key)
    steps = {"<": (-1, 0), ">": (1, 0), "^": (0, -1), "v": (0, 1)}
    typed = []
    for move in moves:
        if move == "A":
            typed.append(pad[y][x])
            continue
        dx, dy = steps[move]
        x, y = x + dx, y + dy
        assert 0 <= y < len(pad) and 0 <= x < len(pad[0])
        if avoid_gap:
            assert pad[y][x] != "#"
    return "".join(typed)


def test_parse_reads_codes():
    assert parse("029A\n980A\n") == ["029A", "980A"]


def test_numpad_moves_for_example_code():
    assert _numpad_moves("029A") == "<A^A>^^AvvvA"


@pytest.mark.parametrize("code", EXAMPLE_CODES)
def test_numpad_moves_type_the_code(code):
    assert _type(NUMPAD, "A", _numpad_moves(code)) == code


@pytest.mark.parametrize("code", EXAMPLE_CODES)
def test_dirpad_moves_type_the_sequence(code):
    sequence = _numpad_moves(code)
    assert _type(DIRPAD, "A", _dirpad_moves(sequence)) == sequence


@pytest.mark.parametrize("code", EXAMPLE_CODES)
def test_table_moves_type_the_code_without_touching_the_gap(code):
    assert _type(NUMPAD, "A", _expand(code), avoid_gap=True) == code
    sequence = _expand(code)
    assert _type(DIRPAD, "A", _expand(sequence), avoid_gap=True) == sequence


def test_press_count_at_first_depth_is_table_length():
    assert _press_count("A", "<", 1, {}) == len("v<<A")


@pytest.mark.parametrize("depth", [1, 2, 10, 25])
def test_pressing_same_key_costs_one(depth):
    assert _press_count("A", "A", depth, {}) == 1


def test_press_count_grows_with_depth():
    memo = {}
    assert _press_count("A", "<", 3, memo) > _press_count("A", "<", 2, memo)


def test_code_without_digits_has_no_complexity():
    assert part1(["A"]) == 0
    assert part2(["A"]) == 0


def test_part1_is_multiple_of_numeric_part():
    assert part1(["029A"]) % 29 == 0
    assert part1(["980A"]) % 980 == 0


def test_part1_is_additive():
    assert part1(EXAMPLE_CODES) == sum(part1([code]) for code in EXAMPLE_CODES)


def test_part2_is_additive_and_multiple_of_numeric_part():
    assert part2(EXAMPLE_CODES) == sum(part2([code]) for code in EXAMPLE_CODES)
    assert part2(["379A"]) % 379 == 0


def test_more_robots_need_more_presses():
    assert part2(EXAMPLE_CODES) > part1(EXAMPLE_CODES)