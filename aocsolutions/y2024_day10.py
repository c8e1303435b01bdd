"""Hoof it: hiking trails on a topographic map."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

Coordinate = tuple[int, int]
Trail = list[Coordinate]

_DIGITS = "0123456789"


@dataclass
class TopoMap:
    """A grid of heights from 0 to 9; any other character is impassable."""

    text: str
    _rows: list[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._rows = self.text.splitlines()

    def get_tile(self, coordinate: Coordinate) -> int | None:
        """The height at a coordinate, or None outside the map or off a digit."""
        x, y = coordinate
        if x < 0 or y < 0 or y >= len(self._rows):
            return None
        row = self._rows[y]
        if x >= len(row):
            return None
        char = row[x]
        return int(char) if char in _DIGITS else None

    def neighbours(self, coordinate: Coordinate) -> list[Coordinate]:
        """The four orthogonal neighbours: right, up, left, down."""
        x, y = coordinate
        return [(x + 1, y), (x, y - 1), (x - 1, y), (x, y + 1)]

    def trailheads(self, coordinate: Coordinate) -> list[Trail]:
        """Every trail climbing one step at a time from here up to a 9."""
        current = self.get_tile(coordinate)
        if current is None:
            return []
        if current == 9:
            return [[coordinate]]
        return [
            [coordinate, *trail]
            for neighbour in self.neighbours(coordinate)
            if self.get_tile(neighbour) == current + 1
            for trail in self.trailheads(neighbour)
        ]

    def unique_trailheads(self, coordinate: Coordinate) -> Iterator[Trail]:
        """The first trail found to each distinct summit."""
        seen: set[Coordinate] = set()
        for trail in self.trailheads(coordinate):
            summit = trail[-1]
            if summit not in seen:
                seen.add(summit)
                yield trail

    def _starting_positions(self) -> Iterator[Coordinate]:
        if not self._rows:
            raise ValueError("map has no lines")
        width = len(self._rows[0])
        for y in range(len(self._rows)):
            for x in range(width):
                if self.get_tile((x, y)) == 0:
                    yield x, y


def sum_trailhead_scores(text: str) -> int:
    """Sum, over every 0, the number of distinct summits it reaches."""
    topo = TopoMap(text)
    return sum(
        sum(1 for _ in topo.unique_trailheads(start))
        for start in topo._starting_positions()
    )


def sum_trailhead_ratings(text: str) -> int:
    """Sum, over every 0, the number of distinct trails starting there."""
    topo = TopoMap(text)
    return sum(len(topo.trailheads(start)) for start in topo._starting_positions())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Score hiking trailheads.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day10"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {sum_trailhead_scores(text)}")
    print(f"Part 2: {sum_trailhead_ratings(text)}")


if __name__ == "__main__":
    main()