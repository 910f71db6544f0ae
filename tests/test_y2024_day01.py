import random

from aoc.y2024_day01 import main, parse, part1, part2

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_columns():
    assert parse(EXAMPLE) == ([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3])


def test_worked_example():
    left, right = parse(EXAMPLE)
    assert part1(left, right) == 11
    assert part2(left, right) == 31


def test_part1_is_symmetric():
    left, right = parse(EXAMPLE)
    assert part1(left, right) == part1(right, left)


def test_part1_identical_columns():
    values = [5, 1, 9, 9, 2]
    assert part1(values, values[::-1]) == 0


def test_part1_ignores_order():
    left, right = parse(EXAMPLE)
    rng = random.Random(7)
    shuffled = left[:]
    rng.shuffle(shuffled)
    assert part1(shuffled, right) == part1(left, right)


def test_part1_does_not_sort_inputs():
    left, right = parse(EXAMPLE)
    original = (left[:], right[:])
    part1(left, right)
    assert (left, right) == original


def test_part2_counts_repeats():
    assert part2([7], [7, 7, 7, 2]) == 7 * 3


def test_part2_without_matches():
    assert part2([1, 2, 3], [4, 5, 6]) == 0


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    left, right = parse(EXAMPLE)
    expected = f"PART 1: {part1(left, right)}\nPART 2: {part2(left, right)}\n"
    assert capsys.readouterr().out == expected


def test_main_selects_part_two(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path), "2"])
    assert capsys.readouterr().out == f"PART 2: {part2(*parse(EXAMPLE))}\n"