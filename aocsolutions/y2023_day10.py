"""Pipe maze: following a loop of pipes from the start tile."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int

    def __add__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x + other.x, self.y + other.y)


class Direction(Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    def delta(self) -> Coordinate:
        return _DELTAS[self]

    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS = {
    Direction.NORTH: Coordinate(0, -1),
    Direction.EAST: Coordinate(1, 0),
    Direction.SOUTH: Coordinate(0, 1),
    Direction.WEST: Coordinate(-1, 0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}


@dataclass(frozen=True)
class Pipe:
    """A pipe connecting two directions."""

    first: Direction
    second: Direction

    def end_direction(self, direction: Direction) -> Direction:
        """The direction flow leaves in when it enters travelling `direction`."""
        if direction.opposite() == self.first:
            return self.second
        return self.first

    def has_direction(self, direction: Direction) -> bool:
        return direction in (self.first, self.second)

    def __str__(self) -> str:
        try:
            return _PIPE_SYMBOLS[(self.first, self.second)]
        except KeyError:
            raise ValueError(
                f"unexpected pipe '{self.first.name}/{self.second.name}' found"
            ) from None


_PIPE_SYMBOLS = {
    (Direction.NORTH, Direction.SOUTH): "║",
    (Direction.EAST, Direction.WEST): "═",
    (Direction.NORTH, Direction.EAST): "╚",
    (Direction.NORTH, Direction.WEST): "╝",
    (Direction.SOUTH, Direction.WEST): "╗",
    (Direction.SOUTH, Direction.EAST): "╔",
}


class _Tile(Enum):
    GROUND = " "
    START = "S"

    def __str__(self) -> str:
        return self.value


GROUND = _Tile.GROUND
START = _Tile.START

_TILES_BY_CHAR: dict[str, Pipe | _Tile] = {
    "|": Pipe(Direction.NORTH, Direction.SOUTH),
    "-": Pipe(Direction.EAST, Direction.WEST),
    "L": Pipe(Direction.NORTH, Direction.EAST),
    "J": Pipe(Direction.NORTH, Direction.WEST),
    "7": Pipe(Direction.SOUTH, Direction.WEST),
    "F": Pipe(Direction.SOUTH, Direction.EAST),
    ".": GROUND,
    "S": START,
}


def _tile_from_char(char: str) -> Pipe | _Tile:
    try:
        return _TILES_BY_CHAR[char]
    except KeyError:
        raise ValueError(f"unexpected character {char!r} found") from None


class Maze:
    """A grid of pipes, ground and one start tile."""

    def __init__(self, text: str) -> None:
        self.tiles: list[list[Pipe | _Tile]] = [
            [_tile_from_char(char) for char in line] for line in text.splitlines()
        ]

    def __str__(self) -> str:
        return "\n".join("".join(str(tile) for tile in row) for row in self.tiles)

    def get_tile(self, coordinate: Coordinate) -> Pipe | _Tile | None:
        x, y = coordinate.x, coordinate.y
        if x < 0 or y < 0 or y >= len(self.tiles):
            return None
        row = self.tiles[y]
        return row[x] if x < len(row) else None

    def get_connected_pipe(
        self, coordinate: Coordinate, direction: Direction
    ) -> Coordinate | None:
        """The neighbour in `direction` if it connects back to this tile."""
        neighbour = coordinate + direction.delta()
        tile = self.get_tile(neighbour)
        if isinstance(tile, Pipe):
            return neighbour if tile.has_direction(direction.opposite()) else None
        if tile is START:
            return neighbour
        return None

    def find_start(self) -> Coordinate:
        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                if tile is START:
                    return Coordinate(x, y)
        raise ValueError("maze has no start tile")

    def follow_pipe(
        self, coordinate: Coordinate, direction: Direction
    ) -> Iterator[Coordinate]:
        """Yield the tiles along a pipe, ending with the start tile if reached."""
        flow = direction
        while True:
            tile = self.get_tile(coordinate)
            if tile is None or tile is GROUND:
                return
            if tile is START:
                yield coordinate
                return
            assert isinstance(tile, Pipe)
            flow = tile.end_direction(flow)
            neighbour = self.get_connected_pipe(coordinate, flow)
            if neighbour is None:
                return
            yield coordinate
            coordinate = neighbour

    def loop_length(self, start: Coordinate, direction: Direction) -> int | None:
        """Steps from the start around the loop heading off in `direction`."""
        last: tuple[int, Coordinate] | None = None
        for index, coordinate in enumerate(
            self.follow_pipe(start + direction.delta(), direction)
        ):
            last = (index, coordinate)
        if last is None or self.get_tile(last[1]) is not START:
            return None
        return last[0]

    def find_loop(self) -> int | None:
        start = self.find_start()
        # The loop comes back round, so half of the directions suffice.
        for direction in (Direction.NORTH, Direction.EAST):
            length = self.loop_length(start, direction)
            if length is not None:
                return length
        return None


def divide_rounding_up(a: int, b: int) -> int:
    """Truncating division, moved one away from zero when there is a remainder."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    remainder = a - b * quotient
    return quotient + (remainder > 0) - (remainder < 0)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Follow the pipe loop.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day10"))
    args = parser.parse_args(argv)
    maze = Maze(args.input.read_text())

    loop_length = maze.find_loop()
    if loop_length is None:
        raise ValueError("no loop found from the start tile")
    print(f"Part 1: {divide_rounding_up(loop_length, 2)}")


if __name__ == "__main__":
    main()