"""Guard gallivant: simulating a patrolling guard and finding loop-causing obstacles."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum
from itertools import dropwhile
from pathlib import Path

Coordinate = tuple[int, int]


class Direction(Enum):
    """Facing of the guard, shown by its arrow character."""

    UP = "^"
    RIGHT = ">"
    DOWN = "v"
    LEFT = "<"

    def turn_right(self) -> Direction:
        return _RIGHT_TURNS[self]

    def __str__(self) -> str:
        return self.value


_RIGHT_TURNS = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}

_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


class Tile(Enum):
    """A square of the lab floor, shown by its map character."""

    OBSTACLE = "#"
    VISITED = "X"
    UNVISITED = "."

    def __str__(self) -> str:
        return self.value


_TILES_BY_CHAR = {".": Tile.UNVISITED, "#": Tile.OBSTACLE, "^": Tile.VISITED}


def _tile_from_char(char: str) -> Tile:
    try:
        return _TILES_BY_CHAR[char]
    except KeyError:
        raise ValueError(f"invalid input character {char!r}") from None


class State(Enum):
    """Outcome of a simulation step."""

    SIMULATING = "simulating"
    GUARD_LEFT = "guard left"
    LOOP_FOUND = "loop found"


@dataclass
class Guard:
    """The guard's position, facing and the states it has been in."""

    position: Coordinate
    direction: Direction = Direction.UP
    visited_states: set[tuple[Coordinate, Direction]] = field(default_factory=set)

    def turn_right(self) -> None:
        self.direction = self.direction.turn_right()

    def has_looped(self) -> bool:
        """True if the guard is in a position and facing it has been in before."""
        return (self.position, self.direction) in self.visited_states


class Lab:
    """The lab floor together with the guard walking on it."""

    def __init__(self, text: str) -> None:
        self.tiles: list[list[Tile]] = [
            [_tile_from_char(char) for char in line] for line in text.splitlines()
        ]
        # The guard stands on the only visited tile of a fresh map.
        position = next(
            (
                (x, y)
                for y, row in enumerate(self.tiles)
                for x, tile in enumerate(row)
                if tile is Tile.VISITED
            ),
            None,
        )
        if position is None:
            raise ValueError("map has no guard")
        self.guard = Guard(position, Direction.UP, {(position, Direction.UP)})
        self.guard_start_state = Guard(
            position, Direction.UP, set(self.guard.visited_states)
        )

    @property
    def width(self) -> int:
        if not self.tiles:
            raise ValueError("map has no tiles")
        return len(self.tiles[0])

    @property
    def height(self) -> int:
        return len(self.tiles)

    def __str__(self) -> str:
        return "\n".join(
            "".join(
                str(self.guard.direction) if self.guard.position == (x, y) else str(tile)
                for x, tile in enumerate(row)
            )
            for y, row in enumerate(self.tiles)
        )

    def move_guard(self) -> State:
        """Step the guard forward, or turn it when an obstacle is ahead."""
        new_position = self.next_guard_coordinate()
        if new_position is None:
            return State.GUARD_LEFT
        if self.get_tile(new_position) is Tile.OBSTACLE:
            self.guard.turn_right()
        else:
            self.guard.position = new_position
        return State.SIMULATING

    def simulate_guard_looping(self) -> State:
        """Walk the guard until it leaves the lab or repeats a state."""
        while True:
            state = self.move_guard()
            if state is State.GUARD_LEFT:
                return state
            if self.guard.has_looped():
                return State.LOOP_FOUND
            self.guard.visited_states.add((self.guard.position, self.guard.direction))
            self.set_tile_visited(self.guard.position)

    def next_guard_coordinate(self) -> Coordinate | None:
        """The square in front of the guard, or None if it is outside the lab."""
        x, y = self.guard.position
        dx, dy = _DELTAS[self.guard.direction]
        new_x, new_y = x + dx, y + dy
        if new_x < 0 or new_y < 0 or new_x >= self.width or new_y >= self.height:
            return None
        return new_x, new_y

    def _check(self, coordinate: Coordinate) -> Coordinate:
        x, y = coordinate
        if not (0 <= y < self.height and 0 <= x < len(self.tiles[y])):
            raise IndexError(f"coordinate {coordinate} is outside the map")
        return coordinate

    def get_tile(self, coordinate: Coordinate) -> Tile:
        x, y = self._check(coordinate)
        return self.tiles[y][x]

    def set_tile_visited(self, coordinate: Coordinate) -> None:
        x, y = self._check(coordinate)
        self.tiles[y][x] = Tile.VISITED

    def place_obstacle(self, coordinate: Coordinate) -> None:
        x, y = self._check(coordinate)
        self.tiles[y][x] = Tile.OBSTACLE


def count_visited_tiles(text: str) -> int:
    """Count the distinct squares the guard visits before leaving."""
    lab = Lab(text)
    while lab.move_guard() is State.SIMULATING:
        lab.set_tile_visited(lab.guard.position)
    return sum(row.count(Tile.VISITED) for row in lab.tiles)


def count_looping_obstacle_placements(text: str) -> int:
    """Count the squares where one extra obstacle traps the guard in a loop."""
    lab = Lab(text)
    start = lab.guard_start_state.position
    total = 0
    for y in range(lab.height):
        for x in dropwhile(lambda x, y=y: (x, y) == start, range(lab.width)):
            trial = Lab(text)
            trial.place_obstacle((x, y))
            if trial.simulate_guard_looping() is State.LOOP_FOUND:
                total += 1
    return total


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Simulate the patrolling guard.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day6"))
    args = parser.parse_args(argv)
    text = args.input.read_text()

    print(f"Part 1: {count_visited_tiles(text)}")
    print(f"Part 2: {count_looping_obstacle_placements(text)}")


if __name__ == "__main__":
    main()