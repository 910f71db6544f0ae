from aoc.y2024_day08 import main, parse, part1, part2

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def test_parse_rows():
    grid = parse(EXAMPLE)
    assert len(grid) == 12
    assert grid[1][8] == "0"


def test_part1_example():
    assert part1(parse(EXAMPLE)) == 14


def test_part2_covers_part1():
    grid = parse(EXAMPLE)
    assert part2(grid) >= part1(grid)


def test_part1_symmetric_under_reflection():
    grid = parse(".aa..")
    mirrored = parse("..aa.")
    assert part1(grid) == part1(mirrored)


def test_part2_line_reaches_edges():
    assert part2(parse(".aa..")) == 5


def test_same_frequency_antenna_blocks_antinode():
    assert part1(parse("aaa")) == 0


def test_lone_antenna_counts_in_part2_only():
    grid = parse("...\n.b.\n...")
    assert part2(grid) == 1
    assert part1(grid) == 0


def test_main_writes_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path), "1"])
    assert capsys.readouterr().out.strip() == "PART 1: 14"