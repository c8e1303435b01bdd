"""Calorie counting: the elves carrying the most food."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_CALORIES = re.compile(r"\+?[0-9]+")


def _calories(line: str) -> int:
    return int(line) if _CALORIES.fullmatch(line) else 0


def inventory_totals(text: str) -> list[int]:
    """Total calories per inventory; lines that are not numbers count as 0."""
    return [
        sum(_calories(line) for line in inventory.split("\n"))
        for inventory in text.split("\n\n")
    ]


def max_calories(text: str) -> int:
    return max(inventory_totals(text))


def top_three_calories(text: str) -> int:
    return sum(sorted(inventory_totals(text), reverse=True)[:3])


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count the elves' calories.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data.txt"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {max_calories(text)}")
    print(f"Part 2: {top_three_calories(text)}")


if __name__ == "__main__":
    main()