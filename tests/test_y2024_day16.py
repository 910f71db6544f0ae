import pytest

from aoc.y2024_day16 import main, parse, part1, part2

EXAMPLE = """###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""

CORRIDOR = "#####\n#S.E#\n#####\n"


def test_parse_drops_empty_lines():
    assert parse(CORRIDOR) == ["#####", "#S.E#", "#####"]


def test_part1_example():
    assert part1(parse(EXAMPLE)) == 7036


def test_part2_example():
    assert part2(parse(EXAMPLE)) == 45


def test_part1_straight_corridor():
    assert part1(parse(CORRIDOR)) == 2


def test_part2_corridor_covers_every_open_tile():
    maze = parse(CORRIDOR)
    open_tiles = sum(cell != "#" for row in maze for cell in row)
    assert part2(maze) == open_tiles


def test_part2_never_exceeds_open_tiles():
    maze = parse(EXAMPLE)
    open_tiles = sum(cell != "#" for row in maze for cell in row)
    assert part2(maze) <= open_tiles


def test_unreachable_end_raises():
    with pytest.raises(ValueError):
        part1(parse("#####\n#S#E#\n#####\n"))


def test_missing_start_raises():
    with pytest.raises(ValueError):
        part1(parse("#####\n#..E#\n#####\n"))


def test_main_prints_part_two(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(CORRIDOR)
    main([str(path), "2"])
    assert capsys.readouterr().out.strip() == f"PART 2: {part2(parse(CORRIDOR))}"