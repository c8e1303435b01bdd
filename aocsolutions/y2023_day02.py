"""Cube conundrum: games of coloured cubes drawn from a bag."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


Draw = dict[Color, int]


class _ParseError(ValueError):
    """Input did not match the expected syntax."""


@dataclass
class Game:
    """A numbered game and the draws made in it."""

    id: int = 0
    draws: list[Draw] = field(default_factory=list)

    def __add__(self, draw: Draw) -> Game:
        return Game(self.id, [*self.draws, draw])

    def max_count(self, color: Color) -> int:
        """The largest number of cubes of a colour shown in any draw."""
        if not self.draws:
            raise ValueError("game contains no draws")
        return max(draw.get(color, 0) for draw in self.draws)


_GAME_ID = re.compile(r"Game (\d+): ")
_COLOR = re.compile(r"(\d+) ([A-Za-z]+)")


def parse_game_id(text: str) -> tuple[str, int]:
    """Parse 'Game N: ' and return the remaining text and N."""
    match = _GAME_ID.match(text)
    if match is None:
        raise _ParseError(f"expected a game id at {text!r}")
    return text[match.end() :], int(match.group(1))


def parse_color(text: str) -> tuple[str, tuple[int, Color]]:
    """Parse 'N colour' and return the remaining text and (N, colour)."""
    match = _COLOR.match(text)
    if match is None:
        raise _ParseError(f"expected a cube count at {text!r}")
    name = match.group(2)
    try:
        color = Color(name)
    except ValueError:
        raise ValueError(f"unexpected color {name!r} found") from None
    return text[match.end() :], (int(match.group(1)), color)


def _separated(
    parse: Callable[[str], tuple[str, T]], separator: str, text: str
) -> tuple[str, list[T]]:
    rest, item = parse(text)
    items = [item]
    while rest.startswith(separator):
        try:
            next_rest, item = parse(rest[len(separator) :])
        except _ParseError:
            break
        items.append(item)
        rest = next_rest
    return rest, items


def _parse_draw(text: str) -> tuple[str, Draw]:
    rest, colors = _separated(parse_color, ", ", text)
    return rest, {color: count for count, color in colors}


def parse_line(line: str) -> Game:
    rest, game_id = parse_game_id(line)
    _, draws = _separated(_parse_draw, "; ", rest)
    game = Game(game_id)
    for draw in draws:
        game = game + draw
    return game


def possible_games(text: str) -> list[int]:
    """Ids of games possible with 12 red, 13 green and 14 blue cubes."""
    return [
        game.id
        for game in map(parse_line, text.splitlines())
        if game.max_count(Color.RED) <= 12
        and game.max_count(Color.GREEN) <= 13
        and game.max_count(Color.BLUE) <= 14
    ]


def game_powers(text: str) -> list[int]:
    """The product of the minimal cube counts for each game."""
    return [
        game.max_count(Color.RED)
        * game.max_count(Color.GREEN)
        * game.max_count(Color.BLUE)
        for game in map(parse_line, text.splitlines())
    ]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Analyse cube games.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day2"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {sum(possible_games(text))}")
    print(f"Part 2: {sum(game_powers(text))}")


if __name__ == "__main__":
    main()