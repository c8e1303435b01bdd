"""Camp cleanup: section assignments that contain or overlap each other."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


def _split_in_two(text: str, separator: str) -> tuple[str, str]:
    parts = text.split(separator)
    if len(parts) < 2:
        raise ValueError(f"expected {separator!r} in {text!r}")
    return parts[0], parts[1]


@dataclass(frozen=True)
class SectionRange:
    """An inclusive range of section IDs."""

    left: int
    right: int

    @classmethod
    def from_string(cls, text: str) -> SectionRange:
        left, right = _split_in_two(text, "-")
        return cls(int(left), int(right))

    def contains(self, other: SectionRange) -> bool:
        return self.left <= other.left and self.right >= other.right

    def overlaps(self, other: SectionRange) -> bool:
        return self.right >= other.left and self.left <= other.right


def _pairs(text: str) -> Iterator[tuple[SectionRange, SectionRange]]:
    for line in text.splitlines():
        left, right = _split_in_two(line, ",")
        yield SectionRange.from_string(left), SectionRange.from_string(right)


def count_containing(text: str) -> int:
    """Count pairs where one range fully contains the other."""
    return sum(
        1 for left, right in _pairs(text) if right.contains(left) or left.contains(right)
    )


def count_overlapping(text: str) -> int:
    """Count pairs whose ranges overlap at all."""
    return sum(1 for left, right in _pairs(text) if right.overlaps(left))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compare cleanup assignments.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data.txt"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {count_containing(text)}")
    print(f"Part 2: {count_overlapping(text)}")


if __name__ == "__main__":
    main()