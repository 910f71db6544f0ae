# aoc

Solutions to Advent of Code puzzles: every day of 2024 and the first five
days of 2025. Each day is a module you can import, and each has a console
command that solves your puzzle input. There are no third-party
dependencies.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## 2024 commands

The 2024 commands (`aoc-2024-day01` to `aoc-2024-day25`) take the path of
your puzzle input. With no further argument both parts are solved; pass `2`
to solve only the second part, or any other value to solve only the first:

    aoc-2024-day01 input.txt
    aoc-2024-day01 input.txt 2

Output looks like:

    PART 1: 11
    PART 2: 31

Two days differ: `aoc-2024-day24` requires the part argument, and
`aoc-2024-day25` has only a first part and always prints it.
`aoc-2024-day18` prints its second answer as `x,y`.

## 2025 commands

The 2025 commands (`aoc-2025-day01` to `aoc-2025-day05`) solve the second
part of their day. Each reads `input.txt` from a directory, by default the
day's own directory relative to where you run it (`./2025/01` and so on).
Give another directory as an argument, and add `--example` to read
`example.txt` instead:

    aoc-2025-day03 puzzles/day03
    aoc-2025-day03 puzzles/day03 --example

They print the bare answer; `aoc-2025-day03` prefixes it with `ans`.

The file loading is available as `aoc.readers.read_input(directory)` and
`aoc.readers.read_example(directory)`.

## Library use

Every module is named after its year and day, for example
`aoc.y2024_day22` or `aoc.y2025_day03`:

```python
from aoc.y2024_day22 import next_secret
from aoc.y2025_day03 import max_joltage

next_secret(123)                       # 15887950
max_joltage("987654321111111", 12)     # 987654321111
```

The 2024 modules offer `parse(text)` to turn the raw input into Python
values, and `part1` / `part2` to compute the answers from them (day 25 has
only `part1`). A few expose helpers as well, such as
`aoc.y2024_day11.count_stones`, `aoc.y2024_day13.solve_system`,
`aoc.y2024_day17.run` with its `Registers` class,
`aoc.y2024_day18.shortest_path` and `aoc.y2024_day20.count_cheats`.

The 2025 modules expose one function per day that takes the raw text:
`count_zero_clicks`, `sum_invalid_ids`, `total_joltage`,
`count_removable` (after `parse_grid`) and `count_fresh_ids`.

## Limitations

- The 2025 modules and commands solve only the second part of each day.
  For day 3 the first part can be had by calling `total_joltage(text, 2)`.
- `aoc.y2024_day17.part2` does not run the given program; it searches with
  one fixed program's arithmetic built in, so it only answers inputs whose
  program behaves that way, and returns 0 otherwise.
- Grid sizes and thresholds are fixed to the puzzle's values, for example
  the 101 by 103 room of 2024 day 14 and the 71 by 71 memory of day 18.