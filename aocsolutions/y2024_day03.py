"""Corrupted memory: summing mul(a,b) instructions, optionally toggled."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_U32_MAX = 2**32 - 1


def _parse_mul(text: str, position: int) -> tuple[int, int] | None:
    match = _MUL.match(text, position)
    if match is None:
        return None
    left, right = int(match.group(1)), int(match.group(2))
    if left > _U32_MAX or right > _U32_MAX:
        return None
    return left, right


def _parse_toggle(text: str, position: int) -> bool | None:
    if text.startswith("don't", position):
        return False
    if text.startswith("do", position):
        return True
    return None


def parse_muls(text: str) -> list[tuple[int, int]]:
    """Find every well-formed mul instruction in the text."""
    return [mul for position in range(len(text)) if (mul := _parse_mul(text, position))]


def parse_muls_with_toggles(text: str) -> list[tuple[int, int]]:
    """Find mul instructions, honouring do and don't toggles."""
    enabled = True
    muls: list[tuple[int, int]] = []
    for position in range(len(text)):
        toggle = _parse_toggle(text, position)
        if toggle is not None:
            enabled = toggle
            continue
        if not enabled:
            continue
        mul = _parse_mul(text, position)
        if mul is not None:
            muls.append(mul)
    return muls


def sum_multiplications(text: str) -> int:
    return sum(left * right for left, right in parse_muls(text))


def sum_multiplications_with_toggles(text: str) -> int:
    return sum(left * right for left, right in parse_muls_with_toggles(text))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum multiplications in memory.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day3"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {sum_multiplications(text)}")
    print(f"Part 2: {sum_multiplications_with_toggles(text)}")


if __name__ == "__main__":
    main()