"""Camel cards: ranking poker-like hands where J is a joker."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from pathlib import Path


class Card(IntEnum):
    """Card values, weakest first; the joker is the weakest card."""

    J = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    T = 9
    Q = 10
    K = 11
    A = 12

    @classmethod
    def from_char(cls, char: str) -> Card:
        try:
            return _CARDS_BY_CHAR[char]
        except KeyError:
            raise ValueError(f"unrecognized card {char!r} found") from None


_CARDS_BY_CHAR = {
    "2": Card.TWO,
    "3": Card.THREE,
    "4": Card.FOUR,
    "5": Card.FIVE,
    "6": Card.SIX,
    "7": Card.SEVEN,
    "8": Card.EIGHT,
    "9": Card.NINE,
    "T": Card.T,
    "J": Card.J,
    "Q": Card.Q,
    "K": Card.K,
    "A": Card.A,
}


@total_ordering
@dataclass(frozen=True)
class Hand:
    """Five cards, ordered by hand type and then card by card."""

    cards: tuple[Card, ...]

    def __post_init__(self) -> None:
        if len(self.cards) != 5:
            raise ValueError(f"a hand holds five cards, got {len(self.cards)}")

    @classmethod
    def from_string(cls, text: str) -> Hand:
        if len(text) != 5:
            raise ValueError(f"a hand holds five cards: {text!r}")
        return cls(tuple(Card.from_char(char) for char in text))

    def find_n_of_a_kind(self, n: int) -> set[Card]:
        """Cards that, together with the jokers, occur at least n times."""
        return {
            card
            for card in self.cards
            if sum(1 for other in self.cards if other == card or other is Card.J) >= n
        }

    def has_n_of_a_kind(self, n: int) -> bool:
        return bool(self.find_n_of_a_kind(n))

    def has_full_house(self) -> bool:
        # May be False when the jokers already make the hand four of a kind.
        counts = Counter(self.cards)
        jokers = counts.pop(Card.J, 0)
        ranked = sorted(counts.values(), reverse=True)
        if not ranked:
            raise ValueError("hand holds only jokers")
        if ranked[0] + jokers == 3:
            return len(ranked) > 1 and ranked[1] == 2
        return False

    def has_two_pair(self) -> bool:
        # Ignores some cases where the hand would be better than two pair.
        ranked = sorted(Counter(self.cards).items(), key=lambda item: item[1], reverse=True)
        top_card, top_count = ranked[0]
        if top_card is not Card.J and top_count >= 2:
            if len(ranked) < 2:
                raise ValueError("hand holds a single kind of card")
            second_card, second_count = ranked[1]
            return second_card is Card.J or second_count >= 2
        return False

    def has_one_pair(self) -> bool:
        return bool(self.find_n_of_a_kind(2))

    def has_high_card(self) -> bool:
        return len(self.find_n_of_a_kind(1)) == 5

    def strength(self) -> int:
        """The hand type, from 7 for five of a kind down to 1 for high card."""
        if self.has_n_of_a_kind(5):
            return 7
        if self.has_n_of_a_kind(4):
            return 6
        if self.has_full_house():
            return 5
        if self.has_n_of_a_kind(3):
            return 4
        if self.has_two_pair():
            return 3
        if self.has_one_pair():
            return 2
        if self.has_high_card():
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        mine, theirs = self.strength(), other.strength()
        if mine != theirs:
            return mine < theirs
        for own_card, other_card in zip(self.cards, other.cards):
            if own_card != other_card:
                return own_card < other_card
        return False


def parse_line(line: str) -> tuple[Hand, int]:
    hand, sep, bid = line.partition(" ")
    if not sep:
        raise ValueError(f"expected a hand and a bid: {line!r}")
    return Hand.from_string(hand), int(bid)


def get_rankings(
    hands: Iterable[tuple[Hand, int]],
) -> list[tuple[int, tuple[Hand, int]]]:
    """Pair each hand and bid with its rank, weakest hand ranked 1."""
    ordered = sorted(hands, key=lambda pair: pair[0])
    return list(enumerate(ordered, start=1))


def total_winnings(text: str) -> int:
    rankings = get_rankings(parse_line(line) for line in text.splitlines())
    return sum(rank * bid for rank, (_, bid) in rankings)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Rank camel card hands.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day7"))
    args = parser.parse_args(argv)

    print(f"Part 2 = {total_winnings(args.input.read_text())}")


if __name__ == "__main__":
    main()