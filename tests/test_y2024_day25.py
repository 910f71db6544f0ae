from aoc.y2024_day25 import can_fit, main, parse, part1

EXAMPLE = """#####
.####
.####
.####
.#.#.
.#...
.....

#####
##.##
.#.##
...##
...#.
...#.
.....

.....
#....
#....
#...#
#.#.#
#.###
#####

.....
.....
#.#..
###..
###.#
###.#
#####

.....
.....
.....
#....
#.#..
#.#.#
#####
"""


def test_parse_splits_locks_and_keys():
    locks, keys = parse(EXAMPLE)
    assert len(locks) + len(keys) == 5
    assert all(column >= 1 for lock in locks for column in lock)
    assert all(column >= 1 for key in keys for column in key)


def test_can_fit_boundary():
    assert can_fit((3, 3, 3, 3, 3), (4, 4, 4, 4, 4))
    assert not can_fit((4, 3, 3, 3, 3), (4, 4, 4, 4, 4))


def test_part1_example():
    locks, keys = parse(EXAMPLE)
    assert part1(locks, keys) == 3


def test_part1_without_keys():
    locks, _ = parse(EXAMPLE)
    assert part1(locks, []) == 0


def test_main_prints_part_one(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    assert capsys.readouterr().out.strip() == "PART 1: 3"