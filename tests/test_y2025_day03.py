import pytest

from aoc.y2025_day03 import main, max_joltage, total_joltage

BANKS = ["987654321111111", "811111111111119", "234234234234278", "818181911112111"]
EXAMPLE = "\n".join(BANKS) + "\n"


def _is_subsequence(small, big):
    remaining = iter(big)
    return all(char in remaining for char in small)


def test_worked_example_twelve_digits():
    assert total_joltage(EXAMPLE) == 3121910778619


def test_worked_example_two_digits():
    assert total_joltage(EXAMPLE, 2) == 357


@pytest.mark.parametrize("bank", BANKS)
@pytest.mark.parametrize("k", [1, 2, 5, 12])
def test_result_is_k_digit_subsequence(bank, k):
    result = str(max_joltage(bank, k))
    assert len(result) == k
    assert _is_subsequence(result, bank)


@pytest.mark.parametrize("bank", BANKS)
@pytest.mark.parametrize("k", [2, 6, 12])
def test_result_beats_prefix_and_suffix(bank, k):
    result = max_joltage(bank, k)
    assert result >= int(bank[:k])
    assert result >= int(bank[-k:])


@pytest.mark.parametrize("bank", BANKS)
def test_single_digit_is_the_maximum(bank):
    assert max_joltage(bank, 1) == int(max(bank))


@pytest.mark.parametrize("bank", BANKS)
def test_picking_all_digits_keeps_bank(bank):
    assert max_joltage(bank, len(bank)) == int(bank)


def test_total_is_sum_of_banks():
    assert total_joltage(EXAMPLE, 3) == sum(max_joltage(bank, 3) for bank in BANKS)


def test_main_prints_answer(tmp_path, capsys):
    (tmp_path / "input.txt").write_text(EXAMPLE)
    main([str(tmp_path)])
    assert capsys.readouterr().out == f"ans {total_joltage(EXAMPLE)}\n"