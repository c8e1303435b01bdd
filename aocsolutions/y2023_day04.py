"""Scratchcards: winning numbers and cards that win copies of later cards."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Card:
    """How many numbers a card wins and how many copies of it are held."""

    wins: int
    count: int = 1


class Pile:
    """Scratchcards numbered from 1, in order."""

    def __init__(self, winning_numbers: Iterable[Sequence[int]] = ()) -> None:
        self.cards: dict[int, Card] = {
            card_id: Card(wins=len(numbers))
            for card_id, numbers in enumerate(winning_numbers, start=1)
        }

    def __repr__(self) -> str:
        fields = ", ".join(f"{card_id}: {card!r}" for card_id, card in self.cards.items())
        return f"Pile({{{fields}}})"

    def generate_cards(self) -> None:
        """Let every card win copies of the cards following it."""
        for card_id in list(self.cards):
            card = self.cards[card_id]
            for copy_id in range(card_id + 1, card_id + card.wins + 1):
                try:
                    self.cards[copy_id].count += card.count
                except KeyError:
                    raise ValueError(f"card {copy_id} does not exist") from None

    def count_card_copies(self) -> int:
        return sum(card.count for card in self.cards.values())


def to_numbers(text: str) -> list[int]:
    return [int(number) for number in text.split()]


def find_winning_numbers(
    winning_numbers: Sequence[int], your_numbers: Sequence[int]
) -> list[int]:
    """Your numbers that are also winning numbers, in your order."""
    winning = set(winning_numbers)
    return [number for number in your_numbers if number in winning]


def parse_winning_numbers(line: str) -> list[int]:
    """Parse one card line and return the numbers on it that win."""
    card, sep, number_list = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in card line {line!r}")
    left_list, sep, right_list = number_list.partition("|")
    if not sep:
        raise ValueError(f"missing '|' in card line {line!r}")
    card_words = card.split()
    if len(card_words) < 2:
        raise ValueError(f"missing card number in {line!r}")
    int(card_words[1])
    return find_winning_numbers(to_numbers(left_list), to_numbers(right_list))


def card_value(numbers: Sequence[int]) -> int:
    """One point for the first winning number, doubled for each further one."""
    if not numbers:
        return 0
    return 2 ** (len(numbers) - 1)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Score scratchcards.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day4"))
    args = parser.parse_args(argv)
    cards = [parse_winning_numbers(line) for line in args.input.read_text().splitlines()]

    print(f"Day 1: {sum(card_value(card) for card in cards)}")

    pile = Pile(cards)
    pile.generate_cards()
    print(f"Day 2: {pile.count_card_copies()}")


if __name__ == "__main__":
    main()