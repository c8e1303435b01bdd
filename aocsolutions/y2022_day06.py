"""Tuning trouble: finding the first run of distinct characters in a signal."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path


def has_duplicate(signal: Sequence[str]) -> bool:
    return len(set(signal)) != len(signal)


def first_unique_window_end(signal: str, size: int) -> int:
    """Position just after the first `size` characters that are all different."""
    if size < 1:
        raise ValueError("window size must be at least 1")
    for start in range(len(signal) - size + 1):
        if not has_duplicate(signal[start : start + size]):
            return start + size
    raise ValueError(f"no window of {size} distinct characters")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find signal markers.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data.txt"))
    args = parser.parse_args(argv)
    signal = args.input.read_text()

    print(f"Part 1: {first_unique_window_end(signal, 4)}")
    print(f"Part 2: {first_unique_window_end(signal, 14)}")


if __name__ == "__main__":
    main()