"""Solutions to selected Advent of Code puzzles from 2022, 2023 and 2024."""

__version__ = "0.1.0"