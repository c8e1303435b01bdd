"""Mirage maintenance: extrapolating sequences by repeated differences."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from itertools import pairwise
from pathlib import Path


def differences(numbers: Sequence[int]) -> list[int]:
    return [after - before for before, after in pairwise(numbers)]


def build_triangle(numbers: Sequence[int]) -> list[list[int]]:
    """The sequence followed by its differences, down to a row of zeros."""
    triangle = [list(numbers)]
    while not all(number == 0 for number in triangle[-1]):
        triangle.append(differences(triangle[-1]))
    return triangle


def predict_next_value(triangle: Sequence[Sequence[int]]) -> int:
    value = 0
    for row in reversed(triangle):
        value = row[-1] + value
    return value


def predict_previous_value(triangle: Sequence[Sequence[int]]) -> int:
    value = 0
    for row in reversed(triangle):
        value = row[0] - value
    return value


def parse_lines(text: str) -> list[list[int]]:
    return [[int(number) for number in line.split(" ")] for line in text.splitlines()]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Extrapolate sensor histories.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day9"))
    args = parser.parse_args(argv)
    histories = parse_lines(args.input.read_text())

    print(f"Part 1: {sum(predict_next_value(build_triangle(h)) for h in histories)}")
    print(
        f"Part 2: {sum(predict_previous_value(build_triangle(h)) for h in histories)}"
    )


if __name__ == "__main__":
    main()