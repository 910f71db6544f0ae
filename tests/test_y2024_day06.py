import pytest

from aoc.y2024_day06 import main, parse, part1, part2

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_parse_keeps_rows():
    grid = parse(EXAMPLE)
    assert len(grid) == 10
    assert grid[6][4] == "^"


def test_part1_example():
    assert part1(parse(EXAMPLE)) == 41


def test_part2_example():
    assert part2(parse(EXAMPLE)) == 6


def test_part1_open_grid_walks_straight_up():
    grid = parse("...\n.^.\n...\n")
    assert part1(grid) == 2


def test_part1_bounded_by_cell_count():
    grid = parse(EXAMPLE)
    assert 1 <= part1(grid) <= len(grid) * len(grid[0])


def test_missing_guard_raises():
    with pytest.raises(ValueError):
        part1(parse("...\n...\n"))


def test_main_single_part(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path), "1"])
    assert capsys.readouterr().out.strip() == "PART 1: 41"