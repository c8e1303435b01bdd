"""Seed almanac: following seeds through a chain of range maps."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path

Triple = tuple[int, int, int]
RawMap = tuple[str, list[Triple]]


@dataclass(frozen=True)
class MappingRange:
    """Maps `count` numbers starting at `source_start` onto `destination_start`."""

    destination_start: int
    source_start: int
    count: int

    def __contains__(self, value: int) -> bool:
        return self.source_start <= value < self.source_start + self.count


@dataclass
class AlmanacMap:
    """One category map, such as seed-to-soil."""

    source: str
    destination: str
    mappings: list[MappingRange] = field(default_factory=list)

    def map_number(self, value: int) -> int:
        """Map a number through the first range holding it, or keep it as is."""
        for mapping in self.mappings:
            if value in mapping:
                return mapping.destination_start + (value - mapping.source_start)
        return value


@dataclass
class Almanac:
    """Category maps keyed by the category they map from."""

    maps: dict[str, AlmanacMap]

    @classmethod
    def from_raw(cls, raw_maps: list[RawMap]) -> Almanac:
        maps: dict[str, AlmanacMap] = {}
        for name, triples in raw_maps:
            source, sep, destination = name.partition("-to-")
            if not sep:
                raise ValueError(f"map name {name!r} has no '-to-'")
            maps[source] = AlmanacMap(
                source, destination, [MappingRange(*triple) for triple in triples]
            )
        return cls(maps)

    def seed_to_location(self, seed: int) -> int:
        """Follow a seed through every map, starting from 'seed'."""
        current = self.maps.get("seed")
        number = seed
        while current is not None:
            number = current.map_number(number)
            current = self.maps.get(current.destination)
        return number

    def seeds_to_locations(self, start: int, count: int) -> list[int]:
        return [self.seed_to_location(seed) for seed in range(start, start + count)]


def _numbers(text: str) -> list[int]:
    words = text.split()
    if not words or not all(word.isdigit() for word in words):
        raise ValueError(f"expected numbers, got {text!r}")
    return [int(word) for word in words]


def _parse_map(block: str) -> RawMap:
    header, *lines = block.splitlines()
    name, sep, rest = header.partition(" map:")
    if not sep or rest or not name or " " in name:
        raise ValueError(f"malformed map header {header!r}")
    if not lines:
        raise ValueError(f"map {name!r} has no ranges")
    triples: list[Triple] = []
    for line in lines:
        numbers = _numbers(line)
        if len(numbers) != 3:
            raise ValueError(f"map line must hold three numbers: {line!r}")
        triples.append((numbers[0], numbers[1], numbers[2]))
    return name, triples


def parse_almanac(text: str) -> tuple[list[int], list[RawMap]]:
    """Parse the seed list and the raw maps, in the order they appear."""
    seeds_block, *map_blocks = text.rstrip("\n").split("\n\n")
    prefix = "seeds: "
    if not seeds_block.startswith(prefix):
        raise ValueError("almanac must start with 'seeds: '")
    if not map_blocks:
        raise ValueError("almanac has no maps")
    seeds = _numbers(seeds_block[len(prefix) :])
    return seeds, [_parse_map(block) for block in map_blocks]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Find the lowest seed location.")
    parser.add_argument("input", nargs="?", type=Path, default=Path("data/day5"))
    args = parser.parse_args(argv)
    seeds, raw_maps = parse_almanac(args.input.read_text())
    almanac = Almanac.from_raw(raw_maps)

    print(f"Part 1: {min(almanac.seed_to_location(seed) for seed in seeds)}")
    lowest = min(
        location
        for start, count in zip(seeds[::2], seeds[1::2])
        for location in almanac.seeds_to_locations(start, count)
    )
    print(f"Part 2: {lowest}")


if __name__ == "__main__":
    main()