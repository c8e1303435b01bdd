"""Resonant collinearity: antinodes of antennas sharing a frequency."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import permutations
from pathlib import Path


@dataclass(frozen=True, order=True)
class Coordinate:
    """A grid position that supports vector arithmetic."""

    x: int
    y: int

    def __add__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Coordinate:
        return Coordinate(self.x * factor, self.y * factor)


def first_antinodes(first: Coordinate, second: Coordinate) -> tuple[Coordinate, Coordinate]:
    """The two antinodes at twice the distance from each antenna of a pair."""
    return first + (first - second), second + (second - first)


def _unique(coordinates: Iterable[Coordinate]) -> Iterator[Coordinate]:
    seen: set[Coordinate] = set()
    for coordinate in coordinates:
        if coordinate not in seen:
            seen.add(coordinate)
            yield coordinate


@dataclass
class AntennaMap:
    """Antenna positions by frequency, within a bounded grid."""

    antennas: dict[str, set[Coordinate]]
    height: int
    width: int

    def first_antinodes(self) -> Iterator[Coordinate]:
        """Distinct in-bounds antinodes of every same-frequency antenna pair."""
        candidates = (
            antinode
            for positions in self.antennas.values()
            for first, second in permutations(positions, 2)
            for antinode in first_antinodes(first, second)
        )
        return _unique(c for c in candidates if not self.is_out_of_bounds(c))

    def antinodes(self) -> Iterator[Coordinate]:
        """Distinct in-bounds antinodes in line with any same-frequency pair."""
        candidates = (
            antinode
            for positions in self.antennas.values()
            for first, second in permutations(positions, 2)
            for antinode in self.antinodes_for_pair(first, second)
        )
        return _unique(c for c in candidates if not self.is_out_of_bounds(c))

    def antinodes_for_pair(
        self, first: Coordinate, second: Coordinate
    ) -> Iterator[Coordinate]:
        """Points at whole multiples of the pair's distance, in both directions."""
        # Going up to the height reaches far enough to cover the whole map.
        for n in range(self.height):
            yield first + (first - second) * n
            yield second + (second - first) * n

    def is_out_of_bounds(self, coordinate: Coordinate) -> bool:
        return (
            coordinate.x < 0
            or coordinate.y < 0
            or coordinate.x >= self.width
            or coordinate.y >= self.height
        )

    def __str__(self) -> str:
        antinodes = set(self.antinodes())

        def symbol(x: int, y: int) -> str:
            position = Coordinate(x, y)
            if position in antinodes:
                return "#"
            for frequency, positions in self.antennas.items():
                if position in positions:
                    return frequency
            return "."

        return "\n".join(
            "".join(symbol(x, y) for x in range(self.width)) for y in range(self.height)
        )


def parse_map(text: str) -> AntennaMap:
    """Read antenna positions; every character other than '.' is an antenna."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("map has no lines")
    antennas: dict[str, set[Coordinate]] = {}
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char != ".":
                antennas.setdefault(char, set()).add(Coordinate(x, y))
    return AntennaMap(antennas, height=len(lines), width=len(lines[0]))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Locate antenna antinodes.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day8"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {len(list(parse_map(text).first_antinodes()))}")
    print(f"Part 2: {len(list(parse_map(text).antinodes()))}")


if __name__ == "__main__":
    main()