"""Rock paper scissors: scoring a strategy guide two ways."""

from __future__ import annotations

import argparse
from enum import Enum
from pathlib import Path


class Action(Enum):
    """A hand shape, valued at the points it scores."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @classmethod
    def from_string(cls, text: str) -> Action:
        try:
            return _ACTIONS_BY_LETTER[text.lower()]
        except KeyError:
            raise ValueError(f"got unexpected character: {text!r}") from None

    def points(self) -> int:
        return self.value


class Outcome(Enum):
    """The result of a round, valued at the points it scores."""

    WIN = 6
    DRAW = 3
    LOSS = 0

    @classmethod
    def from_string(cls, text: str) -> Outcome:
        try:
            return _OUTCOMES_BY_LETTER[text.lower()]
        except KeyError:
            raise ValueError(f"got unexpected character: {text!r}") from None

    def points(self) -> int:
        return self.value


_ACTIONS_BY_LETTER = {
    "a": Action.ROCK,
    "x": Action.ROCK,
    "b": Action.PAPER,
    "y": Action.PAPER,
    "c": Action.SCISSORS,
    "z": Action.SCISSORS,
}

_OUTCOMES_BY_LETTER = {"x": Outcome.LOSS, "y": Outcome.DRAW, "z": Outcome.WIN}

# Each action beats the action it maps to.
_BEATS = {
    Action.ROCK: Action.SCISSORS,
    Action.PAPER: Action.ROCK,
    Action.SCISSORS: Action.PAPER,
}
_BEATEN_BY = {loser: winner for winner, loser in _BEATS.items()}


def simulate_game(opponent: Action, me: Action) -> Outcome:
    """The outcome for me of playing `me` against `opponent`."""
    if me is opponent:
        return Outcome.DRAW
    return Outcome.WIN if _BEATS[me] is opponent else Outcome.LOSS


def action_for_outcome(opponent: Action, outcome: Outcome) -> Action:
    """The action that gives `outcome` against `opponent`."""
    if outcome is Outcome.WIN:
        return _BEATEN_BY[opponent]
    if outcome is Outcome.LOSS:
        return _BEATS[opponent]
    return opponent


def _split_round(line: str) -> tuple[str, str]:
    left, sep, right = line.lower().partition(" ")
    if not sep:
        raise ValueError(f"expected two columns: {line!r}")
    return left, right


def score_by_actions(text: str) -> int:
    """Total score reading the second column as my action."""
    total = 0
    for line in text.splitlines():
        left, right = _split_round(line)
        opponent, me = Action.from_string(left), Action.from_string(right)
        total += me.points() + simulate_game(opponent, me).points()
    return total


def score_by_outcomes(text: str) -> int:
    """Total score reading the second column as the wanted outcome."""
    total = 0
    for line in text.splitlines():
        left, right = _split_round(line)
        opponent, outcome = Action.from_string(left), Outcome.from_string(right)
        total += action_for_outcome(opponent, outcome).points() + outcome.points()
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Score a strategy guide.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data.txt"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {score_by_actions(text)}")
    print(f"Part 2: {score_by_outcomes(text)}")


if __name__ == "__main__":
    main()