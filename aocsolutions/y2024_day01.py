"""Historian location lists: pairwise distances and similarity scores."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path


def parse_columns(text: str) -> tuple[list[int], list[int]]:
    """Split the input into its left and right number columns."""
    lefts: list[int] = []
    rights: list[int] = []
    for line in text.splitlines():
        left, right = line.split()[:2]
        lefts.append(int(left))
        rights.append(int(right))
    return lefts, rights


def sum_distances(text: str) -> int:
    """Sum the distances between the sorted left and right columns."""
    lefts, rights = parse_columns(text)
    return sum(abs(left - right) for left, right in zip(sorted(lefts), sorted(rights)))


def sum_similarities(text: str) -> int:
    """Sum each left number multiplied by its count in the right column."""
    lefts, rights = parse_columns(text)
    counts = Counter(rights)
    return sum(left * counts[left] for left in lefts)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compare two location lists.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day1"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {sum_distances(text)}")
    print(f"Part 2: {sum_similarities(text)}")


if __name__ == "__main__":
    main()