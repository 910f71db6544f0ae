"""Advent of Code puzzle solutions for every day of 2024 and days 1 to 5 of 2025."""

__version__ = "0.1.0"