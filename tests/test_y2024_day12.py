import pytest

from aoc.y2024_day12 import main, parse, part1, part2

EXAMPLE = """\
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""


def _transpose(grid):
    return ["".join(column) for column in zip(*grid)]


def _mirror(grid):
    return [row[::-1] for row in grid]


def test_parse_skips_blank_lines():
    assert parse("AB\nCD\n\n") == ["AB", "CD"]


def test_example_part1():
    assert part1(parse(EXAMPLE)) == 1930


def test_example_part2():
    assert part2(parse(EXAMPLE)) == 1206


@pytest.mark.parametrize("width,height", [(1, 1), (3, 2), (4, 4)])
def test_single_rectangle(width, height):
    grid = ["A" * width] * height
    area = width * height
    assert part1(grid) == area * 2 * (width + height)
    assert part2(grid) == area * 4


def test_all_distinct_plants_are_unit_squares():
    grid = parse("AB\nCD\n")
    cells = 4
    assert part1(grid) == 4 * cells
    assert part2(grid) == 4 * cells


def test_sides_never_exceed_perimeter():
    grid = parse(EXAMPLE)
    assert part2(grid) <= part1(grid)


def test_symmetry_does_not_change_price():
    grid = parse(EXAMPLE)
    for transformed in (_transpose(grid), _mirror(grid)):
        assert part1(transformed) == part1(grid)
        assert part2(transformed) == part2(grid)


def test_diagonal_touch_is_not_one_region():
    grid = parse("AB\nBA\n")
    assert part1(grid) == part1(parse("AC\nDE\n"))
    assert part2(grid) == part2(parse("AC\nDE\n"))


def test_main_part_two(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path), "2"]) == 0
    assert capsys.readouterr().out.strip() == f"PART 2: {part2(parse(EXAMPLE))}"