"""2024 day 16: find the cheapest routes through the reindeer maze."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

_HEADINGS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_EAST = 0
_STEP_COST = 1
_TURN_COST = 1000
_WALL = "#"

Maze = list[str]
State = tuple[int, int, int]
Edges = Callable[[Maze, State], Iterator[tuple[State, int]]]


def parse(text: str) -> Maze:
    """The maze as a list of rows."""
    return [line for line in text.splitlines() if line]


def _positions(maze: Maze, char: str) -> list[tuple[int, int]]:
    return [(x, y) for y, row in enumerate(maze) for x, cell in enumerate(row) if cell == char]


def _start(maze: Maze) -> State:
    starts = _positions(maze, "S")
    if not starts:
        raise ValueError("maze has no start")
    x, y = starts[0]
    return x, y, _EAST


def _ends(maze: Maze) -> list[State]:
    ends = [(x, y, heading) for x, y in _positions(maze, "E") for heading in range(4)]
    if not ends:
        raise ValueError("maze has no end")
    return ends


def _turns(state: State) -> Iterator[tuple[State, int]]:
    x, y, heading = state
    yield (x, y, (heading + 1) % 4), _TURN_COST
    yield (x, y, (heading - 1) % 4), _TURN_COST


def _forward(maze: Maze, state: State) -> Iterator[tuple[State, int]]:
    x, y, heading = state
    dx, dy = _HEADINGS[heading]
    if maze[y + dy][x + dx] != _WALL:
        yield (x + dx, y + dy, heading), _STEP_COST
    yield from _turns(state)


def _backward(maze: Maze, state: State) -> Iterator[tuple[State, int]]:
    x, y, heading = state
    dx, dy = _HEADINGS[heading]
    if maze[y - dy][x - dx] != _WALL:
        yield (x - dx, y - dy, heading), _STEP_COST
    yield from _turns(state)


def _distances(maze: Maze, sources: Iterable[State], edges: Edges) -> dict[State, int]:
    distances = {source: 0 for source in sources}
    heap = [(0, source) for source in distances]
    heapq.heapify(heap)
    while heap:
        distance, state = heapq.heappop(heap)
        if distance > distances[state]:
            continue
        for following, cost in edges(maze, state):
            total = distance + cost
            if total < distances.get(following, total + 1):
                distances[following] = total
                heapq.heappush(heap, (total, following))
    return distances


def _best(from_start: dict[State, int], ends: list[State]) -> int:
    scores = [from_start[end] for end in ends if end in from_start]
    if not scores:
        raise ValueError("the end cannot be reached")
    return min(scores)


def part1(maze: Maze) -> int:
    """Lowest score from the start, facing east, to the end."""
    return _best(_distances(maze, [_start(maze)], _forward), _ends(maze))


def part2(maze: Maze) -> int:
    """Number of tiles that lie on at least one lowest-score route."""
    ends = _ends(maze)
    from_start = _distances(maze, [_start(maze)], _forward)
    best = _best(from_start, ends)
    to_end = _distances(maze, ends, _backward)
    return len(
        {
            (x, y)
            for (x, y, heading), distance in from_start.items()
            if (x, y, heading) in to_end and distance + to_end[(x, y, heading)] == best
        }
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path")
    parser.add_argument("part", nargs="?")
    args = parser.parse_args(argv)
    maze = parse(Path(args.path).read_text())
    if args.part is None:
        print(f"PART 1: {part1(maze)}")
        print(f"PART 2: {part2(maze)}")
    elif args.part == "2":
        print(f"PART 2: {part2(maze)}")
    else:
        print(f"PART 1: {part1(maze)}")
    return 0