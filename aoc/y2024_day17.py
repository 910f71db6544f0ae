"""2024 day 17: run the three-bit computer and find a self-printing input."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path

_OCTAL = 8


def _trunc_div(value: int, exponent: int) -> int:
    quotient = abs(value) // (1 << exponent)
    return quotient if value >= 0 else -quotient


def _trunc_mod8(value: int) -> int:
    remainder = abs(value) % _OCTAL
    return remainder if value >= 0 else -remainder


@dataclass
class Registers:
    """The machine state: three registers, the instruction pointer and the output."""

    a: int = 0
    b: int = 0
    c: int = 0
    ip: int = 0
    output: list[int] = field(default_factory=list)

    def combo(self, operand: int) -> int:
        """Value of a combo operand: a literal up to 3, else a register."""
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"operand {operand} is not recognized")

    def execute(self, opcode: int, operand: int) -> None:
        """Carry out one instruction and move the instruction pointer."""
        if opcode == 0:
            self.a = _trunc_div(self.a, self.combo(operand))
        elif opcode == 1:
            self.b ^= operand
        elif opcode == 2:
            self.b = _trunc_mod8(self.combo(operand))
        elif opcode == 3:
            if self.a != 0:
                self.ip = operand
                return
        elif opcode == 4:
            self.b ^= self.c
        elif opcode == 5:
            self.output.append(_trunc_mod8(self.combo(operand)))
        elif opcode == 6:
            self.b = _trunc_div(self.a, self.combo(operand))
        elif opcode == 7:
            self.c = _trunc_div(self.a, self.combo(operand))
        else:
            raise ValueError(f"opcode {opcode} is not recognized")
        self.ip += 2


def parse(text: str) -> tuple[Registers, list[int]]:
    """Read the three registers and the program."""
    lines = text.split("\n")
    if len(lines) < 5:
        raise ValueError("expected three registers, a blank line and a program")
    try:
        a, b, c = (int(line.split(": ", 1)[1]) for line in lines[:3])
        program = [int(number) for number in lines[4].split(": ", 1)[1].split(",")]
    except (IndexError, ValueError) as error:
        raise ValueError("malformed computer description") from error
    return Registers(a=a, b=b, c=c), program


def run(registers: Registers, program: list[int]) -> list[int]:
    """Execute *program* until the pointer leaves it; return everything output."""
    while 0 <= registers.ip < len(program):
        if registers.ip + 1 >= len(program):
            raise ValueError("program ends in the middle of an instruction")
        registers.execute(program[registers.ip], program[registers.ip + 1])
    return list(registers.output)


def part1(registers: Registers, program: list[int]) -> str:
    """The program output joined with commas."""
    return ",".join(str(value) for value in run(registers, program))


def _search(program: list[int], answer: int) -> int:
    if not program:
        return answer
    for low in range(_OCTAL):
        a = answer << 3 | low
        b = low ^ 6
        c = a >> b
        b ^= c
        b ^= 7
        if b % _OCTAL == program[-1]:
            found = _search(program[:-1], a)
            if found:
                return found
    return 0


def part2(program: list[int]) -> int:
    """Smallest register A that makes the puzzle's program print *program*, or 0."""
    return _search(list(program), 0)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    registers, program = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(registers, program)}")
        print(f"PART 2: {part2(program)}")
    elif args.part == "2":
        print(f"PART 2: {part2(program)}")
    else:
        print(f"PART 1: {part1(registers, program)}")
    return 0