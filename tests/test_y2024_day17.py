import pytest

from aoc.y2024_day17 import Registers, main, parse, part1, part2, run

EXAMPLE = "Register A: 729\nRegister B: 0\nRegister C: 0\n\nProgram: 0,1,5,4,3,0\n"
EXAMPLE_OUTPUT = "4,6,3,5,6,3,5,2,1,0"

# bst A, bxl 6, cdv B, bxc, bxl 7, out B, adv 3, jnz 0
SEARCHED_PROGRAM = [2, 4, 1, 6, 7, 5, 4, 4, 1, 7, 5, 5, 0, 3, 3, 0]


def test_parse_reads_registers_and_program():
    registers, program = parse(EXAMPLE)
    assert (registers.a, registers.b, registers.c) == (729, 0, 0)
    assert program == [0, 1, 5, 4, 3, 0]


def test_parse_rejects_short_input():
    with pytest.raises(ValueError):
        parse("Register A: 1\n")


def test_part1_example():
    registers, program = parse(EXAMPLE)
    assert part1(registers, program) == EXAMPLE_OUTPUT


def test_bst_with_literal_operand():
    registers = Registers()
    run(registers, [2, 3])
    assert registers.b == 3
    assert registers.ip == 2


def test_bxl_xors_literal():
    registers = Registers(b=0)
    run(registers, [1, 7])
    assert registers.b == 7


def test_out_literal_and_register():
    assert run(Registers(), [5, 3]) == [3]
    assert run(Registers(a=5), [5, 4]) == [5]


def test_jnz_falls_through_when_a_is_zero():
    assert run(Registers(a=0), [3, 0, 5, 1]) == [1]


def test_invalid_combo_operand_raises():
    with pytest.raises(ValueError):
        run(Registers(), [5, 7])


def test_unknown_opcode_raises():
    with pytest.raises(ValueError):
        run(Registers(), [8, 0])


def test_part2_empty_program():
    assert part2([]) == 0


def test_part2_finds_register_reproducing_output():
    target = run(Registers(a=12345), SEARCHED_PROGRAM)
    found = part2(target)
    assert run(Registers(a=found), SEARCHED_PROGRAM) == target
    assert 0 < found <= 12345


def test_main_prints_part1(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path), "1"]) == 0
    assert capsys.readouterr().out.strip() == f"PART 1: {EXAMPLE_OUTPUT}"