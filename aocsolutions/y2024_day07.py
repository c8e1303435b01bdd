"""Bridge repair: calibration equations with inserted operators."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
from itertools import product
from pathlib import Path


class Operator(Enum):
    ADDITION = "+"
    MULTIPLICATION = "*"
    CONCATENATION = "||"

    def execute(self, left: int, right: int) -> int:
        if self is Operator.ADDITION:
            return left + right
        if self is Operator.MULTIPLICATION:
            return left * right
        return int(f"{left}{right}")


@dataclass
class Expression:
    """Right-hand side of an equation, evaluated strictly left to right."""

    numbers: list[int]
    operators: list[Operator]

    def evaluate(self) -> int:
        head, *tail = self.numbers
        result = head
        for number, operator in zip(tail, self.operators):
            result = operator.execute(result, number)
        return result


def parse_calibration_equations(text: str) -> Iterator[tuple[int, list[int]]]:
    """Yield (expected result, numbers) for each equation line."""
    for line in text.splitlines():
        expected, sep, numbers = line.partition(": ")
        if not sep:
            raise ValueError(f"malformed equation: {line!r}")
        yield int(expected), [int(number) for number in numbers.split(" ")]


def operator_permutations(
    operators: Sequence[Operator], length: int
) -> Iterator[list[Operator]]:
    """Yield every sequence of the given operators of the given length."""
    for combination in product(operators, repeat=length):
        yield list(combination)


def equation_is_valid(
    expected: int, numbers: Sequence[int], operators: Sequence[Operator]
) -> bool:
    return any(
        Expression(list(numbers), ops).evaluate() == expected
        for ops in operator_permutations(operators, len(numbers) - 1)
    )


def _sum_valid(text: str, operators: Sequence[Operator]) -> int:
    return sum(
        expected
        for expected, numbers in parse_calibration_equations(text)
        if equation_is_valid(expected, numbers, operators)
    )


def sum_valid_equations(text: str) -> int:
    return _sum_valid(text, (Operator.ADDITION, Operator.MULTIPLICATION))


def sum_valid_equations_with_concatenation(text: str) -> int:
    return _sum_valid(text, tuple(Operator))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Check calibration equations.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day7"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {sum_valid_equations(text)}")
    print(f"Part 2: {sum_valid_equations_with_concatenation(text)}")


if __name__ == "__main__":
    main()