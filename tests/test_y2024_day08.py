import pytest

from aocsolutions.y2024_day08 import Coordinate, first_antinodes, parse_map

ANTENNAS = "\n".join(
    [
        "............",
        "........0...",
        ".....0......",
        ".......0....",
        "....0.......",
        "......A.....",
        "............",
        "............",
        "........A...",
        ".........A..",
        "............",
        "............",
    ]
) + "\n"


def _coords(pairs):
    return sorted(Coordinate(x, y) for x, y in pairs)


def test_parses_map():
    antenna_map = parse_map(ANTENNAS)

    assert sorted(antenna_map.antennas["0"]) == _coords([(8, 1), (5, 2), (7, 3), (4, 4)])
    assert sorted(antenna_map.antennas["A"]) == _coords([(6, 5), (8, 8), (9, 9)])
    assert antenna_map.height == 12
    assert antenna_map.width == 12


def test_gets_first_antinodes():
    assert first_antinodes(Coordinate(4, 3), Coordinate(5, 5)) == (
        Coordinate(3, 1),
        Coordinate(6, 7),
    )


def test_gets_first_antinodes_from_map():
    text = "\n".join(
        [
            "..........",
            "..........",
            "..........",
            "....a.....",
            "..........",
            ".....a....",
            "..........",
            "..........",
            "..........",
            "..........",
        ]
    )
    antenna_map = parse_map(text)
    assert sorted(antenna_map.first_antinodes()) == [Coordinate(3, 1), Coordinate(6, 7)]


def test_counts_first_antinodes():
    assert len(list(parse_map(ANTENNAS).first_antinodes())) == 14


def test_gets_all_antinodes():
    text = "\n".join(
        [
            "T...........",
            "...T........",
            ".T..........",
            "............",
            "............",
            "............",
            "............",
            "............",
            "............",
            "............",
        ]
    )
    assert len(list(parse_map(text).antinodes())) == 9


def test_antinodes_are_unique_and_in_bounds():
    antenna_map = parse_map(ANTENNAS)
    antinodes = list(antenna_map.antinodes())
    assert len(antinodes) == len(set(antinodes))
    assert not any(antenna_map.is_out_of_bounds(c) for c in antinodes)


def test_is_out_of_bounds():
    antenna_map = parse_map(ANTENNAS)
    assert antenna_map.is_out_of_bounds(Coordinate(-1, 0))
    assert antenna_map.is_out_of_bounds(Coordinate(0, 12))
    assert antenna_map.is_out_of_bounds(Coordinate(12, 0))
    assert not antenna_map.is_out_of_bounds(Coordinate(11, 11))


def test_coordinate_arithmetic():
    assert Coordinate(4, 3) - Coordinate(5, 5) == Coordinate(-1, -2)
    assert Coordinate(1, 2) + Coordinate(3, 4) == Coordinate(4, 6)
    assert Coordinate(1, -2) * 3 == Coordinate(3, -6)


def test_empty_map_is_rejected():
    with pytest.raises(ValueError):
        parse_map("")