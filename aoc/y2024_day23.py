"""2024 day 23: find groups of interconnected computers at the LAN party."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from itertools import combinations
from pathlib import Path

Connections = dict[str, list[str]]
Graph = dict[str, set[str]]


def parse(text: str) -> Connections:
    """Map each computer to the computers linked with it."""
    connections: Connections = {}
    for line in text.splitlines():
        if not line:
            continue
        first, second = line.split("-")[:2]
        connections.setdefault(first, []).append(second)
        connections.setdefault(second, []).append(first)
    return connections


def part1(connections: Connections) -> int:
    """Number of triangles with at least one computer whose name starts with t."""
    graph = {pc: set(near) for pc, near in connections.items()}
    triangles: set[tuple[str, ...]] = set()
    for pc, near in graph.items():
        for first, second in combinations(sorted(near), 2):
            if second in graph.get(first, ()):
                triangles.add(tuple(sorted((pc, first, second))))
    return sum(1 for triangle in triangles if any(pc.startswith("t") for pc in triangle))


def _maximal_cliques(graph: Graph) -> Iterator[frozenset[str]]:
    def expand(
        clique: frozenset[str], candidates: set[str], excluded: set[str]
    ) -> Iterator[frozenset[str]]:
        if not candidates and not excluded:
            yield clique
            return
        pivot = max(candidates | excluded, key=lambda pc: len(graph[pc] & candidates))
        for pc in sorted(candidates - graph[pivot]):
            yield from expand(clique | {pc}, candidates & graph[pc], excluded & graph[pc])
            candidates = candidates - {pc}
            excluded = excluded | {pc}

    yield from expand(frozenset(), set(graph), set())


def part2(connections: Connections) -> str:
    """The password: the largest fully connected group, sorted and comma joined."""
    graph = {pc: set(near) - {pc} for pc, near in connections.items()}
    keys = sorted(",".join(sorted(clique)) for clique in _maximal_cliques(graph) if clique)
    return max(keys, key=len, default="")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    connections = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(connections)}")
        print(f"PART 2: {part2(connections)}")
    elif args.part == "2":
        print(f"PART 2: {part2(connections)}")
    else:
        print(f"PART 1: {part1(connections)}")
    return 0