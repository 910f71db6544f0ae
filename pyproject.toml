[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc"
version = "0.1.0"
description = "Advent of Code puzzle solutions for 2024 and 2025"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc-2025-day01 = "aoc.y2025_day01:main"
aoc-2025-day02 = "aoc.y2025_day02:main"
aoc-2025-day03 = "aoc.y2025_day03:main"
aoc-2025-day04 = "aoc.y2025_day04:main"
aoc-2025-day05 = "aoc.y2025_day05:main"
aoc-2024-day01 = "aoc.y2024_day01:main"
aoc-2024-day02 = "aoc.y2024_day02:main"
aoc-2024-day03 = "aoc.y2024_day03:main"
aoc-2024-day04 = "aoc.y2024_day04:main"
aoc-2024-day05 = "aoc.y2024_day05:main"
aoc-2024-day06 = "aoc.y2024_day06:main"
aoc-2024-day07 = "aoc.y2024_day07:main"
aoc-2024-day08 = "aoc.y2024_day08:main"
aoc-2024-day09 = "aoc.y2024_day09:main"
aoc-2024-day10 = "aoc.y2024_day10:main"
aoc-2024-day11 = "aoc.y2024_day11:main"
aoc-2024-day12 = "aoc.y2024_day12:main"
aoc-2024-day13 = "aoc.y2024_day13:main"
aoc-2024-day14 = "aoc.y2024_day14:main"
aoc-2024-day15 = "aoc.y2024_day15:main"
aoc-2024-day16 = "aoc.y2024_day16:main"
aoc-2024-day17 = "aoc.y2024_day17:main"
aoc-2024-day18 = "aoc.y2024_day18:main"
aoc-2024-day19 = "aoc.y2024_day19:main"
aoc-2024-day20 = "aoc.y2024_day20:main"
aoc-2024-day21 = "aoc.y2024_day21:main"
aoc-2024-day22 = "aoc.y2024_day22:main"
aoc-2024-day23 = "aoc.y2024_day23:main"
aoc-2024-day24 = "aoc.y2024_day24:main"
aoc-2024-day25 = "aoc.y2024_day25:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
