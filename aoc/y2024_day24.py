"""2024 day 24: simulate a circuit of logic gates and repair its adder."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

_SWAP_ROUNDS = 4

Circuit = dict[str, "Gate"]


@dataclass(frozen=True)
class Gate:
    """A gate combining two input wires into an output wire."""

    left: str
    op: str
    right: str
    out: str

    def apply(self, left: int, right: int) -> int:
        """The gate's output for the given input bits."""
        if self.op == "AND":
            return left & right
        if self.op == "OR":
            return left | right
        if self.op == "XOR":
            return left ^ right
        raise ValueError(f"gate {self.op!r} not expected")

    def has_inputs(self, first: str, second: str) -> bool:
        """The gate reads exactly *first* and *second*, in either order."""
        return (self.left, self.right) in ((first, second), (second, first))


def parse(text: str) -> tuple[dict[str, int], list[Gate]]:
    """Return the initial wire values and the gates."""
    lines = text.splitlines()
    values: dict[str, int] = {}
    index = 0
    for index, line in enumerate(lines):
        if not line:
            index += 1
            break
        wire, _, value = line.partition(": ")
        try:
            values[wire] = int(value)
        except ValueError:
            raise ValueError(f"cannot read value {value!r} in line {line!r}") from None
    else:
        index = len(lines)
    gates = []
    for line in lines[index:]:
        if not line:
            continue
        expression, _, out = line.partition(" -> ")
        try:
            left, op, right = expression.split(" ")
        except ValueError:
            raise ValueError(f"cannot read gate from {line!r}") from None
        gates.append(Gate(left, op, right, out))
    return values, gates


def _evaluate(values: dict[str, int], gates: list[Gate]) -> dict[str, int]:
    """Fire ready gates, always the first in list order, until none can fire."""
    values = dict(values)
    pending = list(gates)
    while True:
        ready = next(
            (i for i, gate in enumerate(pending) if gate.left in values and gate.right in values),
            None,
        )
        if ready is None:
            return values
        gate = pending.pop(ready)
        values[gate.out] = gate.apply(values[gate.left], values[gate.right])


def part1(values: dict[str, int], gates: list[Gate]) -> int:
    """The number formed by the ``z`` wires, ``z00`` being the lowest bit."""
    final = _evaluate(values, gates)
    z_wires = sorted(wire for wire in final if wire.startswith("z"))
    result = 0
    for bit, wire in enumerate(z_wires):
        result |= final[wire] << bit
    return result


def _wire(prefix: str, num: int) -> str:
    return f"{prefix}{num:02d}"


def _verify_z(circuit: Circuit, wire: str, num: int) -> bool:
    gate = circuit.get(wire)
    if gate is None or gate.op != "XOR":
        return False
    if num == 0:
        return gate.has_inputs("x00", "y00")
    return (
        _verify_inter(circuit, gate.left, num) and _verify_carry(circuit, gate.right, num)
    ) or (_verify_inter(circuit, gate.right, num) and _verify_carry(circuit, gate.left, num))


def _verify_inter(circuit: Circuit, wire: str, num: int) -> bool:
    gate = circuit.get(wire)
    if gate is None or gate.op != "XOR":
        return False
    return gate.has_inputs(_wire("x", num), _wire("y", num))


def _verify_carry(circuit: Circuit, wire: str, num: int) -> bool:
    gate = circuit.get(wire)
    if gate is None:
        return False
    if num == 1:
        return gate.op == "AND" and gate.has_inputs("x00", "y00")
    if gate.op != "OR":
        return False
    return (
        _verify_direct(circuit, gate.left, num - 1)
        and _verify_recarry(circuit, gate.right, num - 1)
    ) or (
        _verify_direct(circuit, gate.right, num - 1)
        and _verify_recarry(circuit, gate.left, num - 1)
    )


def _verify_direct(circuit: Circuit, wire: str, num: int) -> bool:
    gate = circuit.get(wire)
    if gate is None or gate.op != "AND":
        return False
    return gate.has_inputs(_wire("x", num), _wire("y", num))


def _verify_recarry(circuit: Circuit, wire: str, num: int) -> bool:
    gate = circuit.get(wire)
    if gate is None or gate.op != "AND":
        return False
    return (
        _verify_inter(circuit, gate.left, num) and _verify_carry(circuit, gate.right, num)
    ) or (_verify_inter(circuit, gate.right, num) and _verify_carry(circuit, gate.left, num))


def _progress(circuit: Circuit) -> int:
    """Number of low output bits that are wired as a correct ripple-carry adder."""
    bit = 0
    while _verify_z(circuit, _wire("z", bit), bit):
        bit += 1
    return bit


def _swap(circuit: Circuit, first: str, second: str) -> None:
    circuit[first], circuit[second] = circuit[second], circuit[first]


def _improving_swap(circuit: Circuit) -> tuple[str, str] | None:
    baseline = _progress(circuit)
    wires = list(circuit)
    for first in wires:
        for second in wires:
            if first == second:
                continue
            _swap(circuit, first, second)
            if _progress(circuit) > baseline:
                return first, second
            _swap(circuit, first, second)
    return None


def part2(gates: list[Gate]) -> str:
    """The sorted, comma joined output wires that must be swapped to fix the adder."""
    circuit: Circuit = {gate.out: gate for gate in gates}
    swaps: list[str] = []
    for _ in range(_SWAP_ROUNDS):
        pair = _improving_swap(circuit)
        if pair is not None:
            swaps.extend(pair)
    return ",".join(sorted(swaps))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part")
    args = parser.parse_args(argv)
    values, gates = parse(Path(args.path).read_text())
    if args.part == "2":
        print(f"PART 2: {part2(gates)}")
    else:
        print(f"PART 1: {part1(values, gates)}")
    return 0