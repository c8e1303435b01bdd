"""Boat races: charge-up times that beat the record distance."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from math import prod
from pathlib import Path


@dataclass(frozen=True)
class Race:
    time: int
    record_distance: int

    def run(self, charge_up_time: int) -> int:
        """Distance travelled after holding the button for `charge_up_time`."""
        return charge_up_time * (self.time - charge_up_time)

    def best_charge_up_times(self) -> Iterator[int]:
        """Every charge-up time that beats the record."""
        return (
            charge
            for charge in range(1, self.time)
            if self.run(charge) > self.record_distance
        )


def parse_line(line: str) -> list[int]:
    """The numbers after the line's label."""
    _, sep, numbers = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in {line!r}")
    return [int(number) for number in numbers.split()]


def _two_lines(text: str) -> tuple[str, str]:
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected a time line and a distance line")
    return lines[0], lines[1]


def parse_races(text: str) -> list[Race]:
    times, distances = _two_lines(text)
    return [
        Race(time, distance)
        for time, distance in zip(parse_line(times), parse_line(distances))
    ]


def join_numbers(numbers: Iterable[int]) -> int:
    """Write the numbers next to each other and read the result as one number."""
    joined = "".join(str(number) for number in numbers)
    if not joined:
        raise ValueError("no numbers to join")
    return int(joined)


def parse_single_race(text: str) -> Race:
    """Read the input as one race, ignoring the spaces between numbers."""
    times, distances = _two_lines(text)
    return Race(join_numbers(parse_line(times)), join_numbers(parse_line(distances)))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Count ways to win boat races.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day6"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    product = prod(
        sum(1 for _ in race.best_charge_up_times()) for race in parse_races(text)
    )
    print(f"Part 1: {product}")
    race = parse_single_race(text)
    print(f"Part 2: {sum(1 for _ in race.best_charge_up_times())}")


if __name__ == "__main__":
    main()