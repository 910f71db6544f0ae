import pytest

from aoc.y2024_day09 import expand_disk, main, parse, part1, part2

EXAMPLE = "2333133121414131402\n"


def test_parse_digits():
    assert parse("12345\n") == [1, 2, 3, 4, 5]


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse("12a4")


def test_expand_disk_matches_layout():
    assert expand_disk(parse("12345")) == [
        0, None, None, 1, 1, 1, None, None, None, None, 2, 2, 2, 2, 2,
    ]


def test_expand_disk_length_is_sum_of_digits():
    disk_map = parse(EXAMPLE)
    assert len(expand_disk(disk_map)) == sum(disk_map)


def test_part1_example():
    assert part1(parse(EXAMPLE)) == 1928


def test_part2_example():
    assert part2(parse(EXAMPLE)) == 2858


def test_compact_disk_unchanged_by_both_parts():
    disk_map = parse("90909")
    assert part1(disk_map) == part2(disk_map)


def test_pinned_file_is_not_moved_by_part2():
    disk_map = parse("10" * 45 + "111")
    assert part2(disk_map) > part1(disk_map)


def test_main_part_two(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path), "2"])
    assert capsys.readouterr().out.strip() == "PART 2: 2858"