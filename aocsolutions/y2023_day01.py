"""Trebuchet calibration: first and last digits, spelled or written."""

from __future__ import annotations

import argparse
from pathlib import Path

_LITERALS = {
    "1": "1",
    "2": "2",
    "3": "3",
    "4": "4",
    "5": "5",
    "6": "6",
    "7": "7",
    "8": "8",
    "9": "9",
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
}


def digits_in(text: str) -> list[str]:
    """Every digit, written or spelled out, in order of where it starts."""
    digits: list[str] = []
    for offset in range(len(text)):
        digit = next(
            (
                value
                for literal, value in _LITERALS.items()
                if text.startswith(literal, offset)
            ),
            None,
        )
        if digit is not None:
            digits.append(digit)
    return digits


def first_digit(text: str) -> str | None:
    digits = digits_in(text)
    return digits[0] if digits else None


def last_digit(text: str) -> str | None:
    digits = digits_in(text)
    return digits[-1] if digits else None


def extract_number(line: str) -> int:
    """The two-digit number made of the line's first and last digit."""
    first, last = first_digit(line), last_digit(line)
    if first is None or last is None:
        raise ValueError(f"no digit in line {line!r}")
    return int(first + last)


def sum_calibration_values(text: str) -> int:
    return sum(extract_number(line) for line in text.splitlines())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Sum calibration values.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day1"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Day 1.2: {sum_calibration_values(text)}")


if __name__ == "__main__":
    main()