import pytest

from aoc.y2024_day03 import main, part1, part2

EXAMPLE_1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_worked_example_part1():
    assert part1(EXAMPLE_1) == 161


def test_worked_example_part2():
    assert part2(EXAMPLE_2) == 48


@pytest.mark.parametrize("a, b", [(1, 1), (12, 34), (999, 999), (7, 0)])
def test_single_mul(a, b):
    text = f"junk mul({a},{b}) more"
    assert part1(text) == a * b
    assert part2(text) == a * b


def test_four_digit_operands_ignored():
    assert part1("mul(1234,5)") == 0


def test_spaces_break_instruction():
    assert part1("mul( 2,3)mul(2 ,3)") == 0


def test_dont_disables_only_in_part2():
    text = "don't()mul(2,3)"
    assert part1(text) == 2 * 3
    assert part2(text) == 0


def test_do_reenables():
    text = "don't()mul(2,3)do()mul(4,5)"
    assert part2(text) == 4 * 5


def test_without_switches_parts_agree():
    assert part2(EXAMPLE_1) == part1(EXAMPLE_1)


def test_main_prints_both(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE_2)
    main([str(path)])
    expected = f"PART 1: {part1(EXAMPLE_2)}\nPART 2: {part2(EXAMPLE_2)}\n"
    assert capsys.readouterr().out == expected