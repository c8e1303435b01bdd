"""Gear ratios: part numbers next to symbols in an engine schematic."""

from __future__ import annotations

import argparse
from pathlib import Path

_ADJACENT = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def _is_digit(char: str) -> bool:
    return char in "0123456789"


class Engine:
    """An engine schematic: a grid of digits, dots and symbols."""

    def __init__(self, text: str) -> None:
        self.schematic: list[str] = text.splitlines()

    def get(self, x: int, y: int) -> str | None:
        """The character at (x, y), or None outside the schematic."""
        if x < 0 or y < 0 or y >= len(self.schematic):
            return None
        row = self.schematic[y]
        return row[x] if x < len(row) else None

    def adjacent_characters(self, x: int, y: int) -> list[str | None]:
        """The eight surrounding characters, None where off the grid."""
        return [self.get(x + dx, y + dy) for dx, dy in _ADJACENT]

    def has_adjacent_symbol(self, x: int, y: int) -> bool:
        return any(
            char is not None and char != "." and not _is_digit(char)
            for char in self.adjacent_characters(x, y)
        )

    def parse_line(self, line_index: int) -> list[int]:
        """The part numbers on one line of the schematic."""
        if not self.schematic:
            raise ValueError("schematic has no lines")
        size = len(self.schematic[0])
        numbers: list[int] = []
        digits = ""
        found_adjacent = False
        for x in range(size):
            char = self.get(x, line_index)
            if char is None:
                raise IndexError(f"no character at ({x}, {line_index})")
            if _is_digit(char):
                digits += char
                if self.has_adjacent_symbol(x, line_index):
                    found_adjacent = True
            else:
                if found_adjacent:
                    numbers.append(int(digits))
                digits = ""
                found_adjacent = False
        if found_adjacent and digits:
            numbers.append(int(digits))
        return numbers

    def parse(self) -> list[int]:
        """All part numbers, line by line."""
        return [
            number
            for y in range(len(self.schematic))
            for number in self.parse_line(y)
        ]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum engine part numbers.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day3"))
    args = parser.parse_args(argv)
    engine = Engine(args.input.read_text())

    print(f"Part 1: {sum(engine.parse())}")


if __name__ == "__main__":
    main()