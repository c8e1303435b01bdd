"""Reactor safety reports, with and without the problem dampener."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from itertools import pairwise
from pathlib import Path


def parse_reports(text: str) -> Iterator[list[int]]:
    """Yield each report as a list of levels."""
    for line in text.splitlines():
        yield [int(level) for level in line.split()]


def _is_monotonic(report: Sequence[int]) -> bool:
    pairs = list(pairwise(report))
    return all(a <= b for a, b in pairs) or all(a >= b for a, b in pairs)


def is_safe(report: Sequence[int]) -> bool:
    """A report is safe when it is monotonic and each step is 1 to 3."""
    if not _is_monotonic(report):
        return False
    return all(1 <= abs(a - b) <= 3 for a, b in pairwise(report))


def is_safe_dampened(report: Sequence[int]) -> bool:
    """A report is safe if removing any single level makes it safe."""
    return any(
        is_safe([*report[:skip], *report[skip + 1 :]]) for skip in range(len(report))
    )


def count_safe_reports(text: str) -> int:
    return sum(1 for report in parse_reports(text) if is_safe(report))


def count_safe_reports_dampened(text: str) -> int:
    return sum(
        1
        for report in parse_reports(text)
        if is_safe(report) or is_safe_dampened(report)
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count safe reactor reports.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day2"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {count_safe_reports(text)}")
    print(f"Part 2: {count_safe_reports_dampened(text)}")


if __name__ == "__main__":
    main()