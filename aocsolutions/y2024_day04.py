"""Ceres word search: counting XMAS and crossed MAS occurrences."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from itertools import count
from pathlib import Path

Coordinate = tuple[int, int]

_XMAS = "XMAS"


class Diagonal(Enum):
    """Direction in which a diagonal runs."""

    MAIN = "main"  # towards the north-east
    ANTI = "anti"  # towards the north-west


@dataclass
class WordSearch:
    """A rectangular grid of letters."""

    text: str
    _rows: list[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._rows = self.text.splitlines()

    def count_xmas(self) -> int:
        """Count XMAS forwards and backwards along every line, column and diagonal."""
        sequences = (
            *self.diagonals(Diagonal.MAIN),
            *self.diagonals(Diagonal.ANTI),
            *self.columns(),
            *self.lines(),
        )
        return sum(
            line.count(_XMAS) + line[::-1].count(_XMAS) for line in sequences
        )

    def count_cross_mas(self) -> int:
        """Count the places where two diagonal MAS words cross on their A."""
        centres = Counter(
            coordinate
            for direction in (Diagonal.MAIN, Diagonal.ANTI)
            for index, line in enumerate(self.diagonals(direction))
            for coordinate in self.mas_coordinates(line, index, direction)
        )
        return sum(1 for occurrences in centres.values() if occurrences > 1)

    def mas_coordinates(
        self, line: str, diagonal: int, direction: Diagonal
    ) -> list[Coordinate]:
        """Grid coordinates of the A of each MAS or SAM on a diagonal."""
        starts = [match.start() for match in re.finditer("MAS", line)]
        starts += [match.start() for match in re.finditer("SAM", line)]
        return [
            self.coordinate_from_diagonal(diagonal, start + 1, direction)
            for start in starts
        ]

    def coordinate_from_diagonal(
        self, diagonal: int, position: int, direction: Diagonal
    ) -> Coordinate:
        """Map a position along a numbered diagonal back to (x, y)."""
        width = self.width()
        if direction is Diagonal.ANTI:
            padding = 0 if diagonal < width else diagonal - width + 1
            return diagonal - position - padding, position + padding
        if diagonal < width:
            return (width - 1) - diagonal + position, position
        return position, diagonal - (width - 1) + position

    def get_letter(self, x: int, y: int) -> str | None:
        """The letter at (x, y), or None outside the grid."""
        if x < 0 or y < 0 or y >= len(self._rows):
            return None
        row = self._rows[y]
        return row[x] if x < len(row) else None

    def diagonal(self, position: int, direction: Diagonal) -> str | None:
        """The letters of one diagonal, or None once past the grid."""
        width = self.width()
        if direction is Diagonal.ANTI:
            reach = position + 1
            pairs = zip(range(reach - 1, -1, -1), range(reach))
        else:
            pairs = zip(range(width - 1 - position, width), range(self.height()))
        letters = "".join(
            letter
            for x, y in pairs
            if (letter := self.get_letter(x, y)) is not None
        )
        return letters or None

    def diagonals(self, direction: Diagonal) -> Iterator[str]:
        """Yield every diagonal running in the given direction."""
        for position in count():
            line = self.diagonal(position, direction)
            if line is None:
                return
            yield line

    def columns(self) -> Iterator[str]:
        height = self.height()
        for x in range(self.width()):
            yield "".join(
                letter
                for y in range(height)
                if (letter := self.get_letter(x, y)) is not None
            )

    def lines(self) -> Iterator[str]:
        yield from self._rows

    def height(self) -> int:
        return len(self._rows)

    def width(self) -> int:
        if not self._rows:
            raise ValueError("word search has no lines")
        return len(self._rows[0])


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Search the word grid.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day4"))
    args = parser.parse_args(argv)
    word_search = WordSearch(args.input.read_text())

    print(f"Part 1: {word_search.count_xmas()}")
    print(f"Part 2: {word_search.count_cross_mas()}")


if __name__ == "__main__":
    main()