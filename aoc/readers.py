"""Loading of puzzle input files stored next to each day's solution."""

from __future__ import annotations

import os
from pathlib import Path

EXAMPLE_FILE = "example.txt"
INPUT_FILE = "input.txt"


def _read(todays_path: str | os.PathLike[str], file_name: str) -> str:
    return (Path(todays_path) / file_name).read_text()


def read_example(todays_path: str | os.PathLike[str]) -> str:
    """Return the contents of ``example.txt`` inside *todays_path*."""
    return _read(todays_path, EXAMPLE_FILE)


def read_input(todays_path: str | os.PathLike[str]) -> str:
    """Return the contents of ``input.txt`` inside *todays_path*."""
    return _read(todays_path, INPUT_FILE)