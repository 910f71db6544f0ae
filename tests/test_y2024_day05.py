import pytest

from aoc.y2024_day05 import is_valid, main, parse, part1, part2

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


@pytest.fixture
def example():
    return parse(EXAMPLE)


def test_parse_reads_rules_and_updates(example):
    updates, rules = example
    assert updates[0] == [75, 47, 61, 53, 29]
    assert len(updates) == 6
    assert 53 in rules[47]
    assert 13 in rules[97]


def test_is_valid(example):
    updates, rules = example
    assert is_valid(updates[0], rules)
    assert not is_valid([75, 97, 47, 61, 53], rules)


def test_part1_example(example):
    updates, rules = example
    assert part1(updates, rules) == 143


def test_part2_example(example):
    updates, rules = example
    assert part2(updates, rules) == 123


def test_part2_ignores_valid_updates(example):
    updates, rules = example
    valid = [update for update in updates if is_valid(update, rules)]
    assert part2(valid, rules) == 0
    assert part1(valid, rules) == part1(updates, rules)


def test_part2_unfixable_update_raises():
    rules = {11: {22}}
    with pytest.raises(ValueError):
        part2([[22, 11, 33]], {22: set(), **rules})


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    out = capsys.readouterr().out
    assert "PART 1: 143" in out
    assert "PART 2: 123" in out