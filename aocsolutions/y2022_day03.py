"""Rucksack reorganisation: items shared between compartments and groups."""

from __future__ import annotations

import argparse
from pathlib import Path


def priority(item: str) -> int:
    """Lowercase items score 1 to 26, everything else 27 onwards."""
    if item.islower():
        return ord(item) - 96
    return ord(item) - 64 + 26


def common_item(first: str, second: str, third: str) -> str:
    """The first item of `first` that also appears in the other two."""
    for item in first:
        if item in second and item in third:
            return item
    raise ValueError("rucksacks share no item")


def sum_compartment_priorities(text: str) -> int:
    """Sum the priorities of the item shared by each rucksack's two halves."""
    total = 0
    for rucksack in text.splitlines():
        half = len(rucksack) // 2
        left, right = rucksack[:half], rucksack[half:]
        item = next((item for item in left if item in right), None)
        if item is None:
            raise ValueError(f"compartments share no item: {rucksack!r}")
        total += priority(item)
    return total


def sum_group_priorities(text: str) -> int:
    """Sum the priorities of the badge shared by each group of three."""
    rucksacks = text.splitlines()
    if len(rucksacks) % 3:
        raise ValueError("rucksacks do not form groups of three")
    groups = zip(*[iter(rucksacks)] * 3)
    return sum(priority(common_item(*group)) for group in groups)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Prioritise rucksack items.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data.txt"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {sum_compartment_priorities(text)}")
    print(f"Part 2: {sum_group_priorities(text)}")


if __name__ == "__main__":
    main()