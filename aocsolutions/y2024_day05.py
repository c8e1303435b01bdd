"""Print queue: page ordering rules and update validation."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")

Rule = tuple[int, int]


@dataclass(frozen=True)
class Page:
    """A page number ordered by the shared rule set."""

    number: int
    rules: frozenset[Rule] = field(default=frozenset(), compare=False, repr=False)

    def __lt__(self, other: Page) -> bool:
        if (self.number, other.number) in self.rules:
            return True
        if (other.number, self.number) in self.rules:
            return False
        raise ValueError(
            f"no ordering rule between pages {self.number} and {other.number}"
        )


def _parse_rule(rule: str) -> Rule:
    before, sep, after = rule.partition("|")
    if not sep:
        raise ValueError(f"malformed rule: {rule!r}")
    return int(before), int(after)


def parse(text: str) -> list[list[Page]]:
    """Parse the rules and page lines into lists of pages."""
    rules_text, sep, pages_text = text.partition("\n\n")
    if not sep:
        raise ValueError("input must separate rules and pages with a blank line")
    rules = frozenset(_parse_rule(line) for line in rules_text.splitlines())
    return [
        [Page(int(number), rules) for number in line.split(",")]
        for line in pages_text.splitlines()
    ]


def is_valid_page_line(pages: Sequence[Page]) -> bool:
    """True if no page is followed by a page that must come before it."""
    for index, page in enumerate(pages):
        trailing = {later.number for later in pages[index + 1 :]}
        if any(
            before in trailing for before, after in page.rules if after == page.number
        ):
            return False
    return True


def valid_page_lines(text: str) -> Iterator[list[Page]]:
    return (line for line in parse(text) if is_valid_page_line(line))


def invalid_page_lines(text: str) -> Iterator[list[Page]]:
    return (line for line in parse(text) if not is_valid_page_line(line))


def sort_pages(pages: Sequence[Page]) -> list[Page]:
    """Return the pages in the order the rules require."""
    return sorted(pages)


def line_middle(line: Sequence[T]) -> T:
    return line[len(line) // 2]


def sum_middle_page_numbers(text: str) -> int:
    return sum(line_middle(line).number for line in valid_page_lines(text))


def sum_middle_of_sorted_page_numbers(text: str) -> int:
    return sum(
        line_middle(sort_pages(line)).number for line in invalid_page_lines(text)
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Validate print queue updates.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day5"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {sum_middle_page_numbers(text)}")
    print(f"Part 2: {sum_middle_of_sorted_page_numbers(text)}")


if __name__ == "__main__":
    main()