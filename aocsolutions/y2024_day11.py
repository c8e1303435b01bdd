"""Plutonian pebbles: stones that change every time you blink."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterator
from pathlib import Path


def has_even_digits(stone: int) -> bool:
    return len(str(stone)) % 2 == 0


def split_stone(stone: int) -> tuple[int, int]:
    """Split a stone's digits into a left and a right half."""
    digits = str(stone)
    half = len(digits) // 2
    return int(digits[:half]), int(digits[half:])


class Stones:
    """A multiset of stones, with the results of earlier blinks cached."""

    def __init__(self, stones: list[int]) -> None:
        self.stones: Counter[int] = Counter(stones)
        self.cache: dict[int, list[int]] = {}

    def __str__(self) -> str:
        return " ".join(str(stone) for stone in self.iter_stones())

    def blink_stone(self, stone: int) -> list[int]:
        """The stones a single stone turns into after one blink."""
        cached = self.cache.get(stone)
        if cached is not None:
            return list(cached)
        if stone == 0:
            return [1]
        if has_even_digits(stone):
            return list(split_stone(stone))
        return [stone * 2024]

    def blink(self) -> int:
        """Blink once and return the number of stones afterwards."""
        for stone, count in list(self.stones.items()):
            if count <= 0:
                continue
            self.stones[stone] -= count
            results = self.blink_stone(stone)
            for result in results:
                self.stones[result] += count
            self.cache[stone] = results
        return self.count_stones()

    def blink_times(self, times: int) -> Stones:
        for _ in range(times):
            self.blink()
        return self

    def count_stones(self) -> int:
        return sum(self.stones.values())

    def iter_stones(self) -> Iterator[int]:
        """Yield every stone, repeated as often as it occurs."""
        for stone, count in self.stones.items():
            if count > 0:
                yield from [stone] * count


def parse_stones(text: str) -> Stones:
    return Stones([int(stone) for stone in text.split(" ")])


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count stones after blinking.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day11"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {parse_stones(text).blink_times(25).count_stones()}")
    print(f"Part 2: {parse_stones(text).blink_times(75).count_stones()}")


if __name__ == "__main__":
    main()