import pytest

from aocsolutions.y2023_day02 import (
    Color,
    Game,
    game_powers,
    parse_color,
    parse_game_id,
    parse_line,
    possible_games,
)


def test_parses_color():
    assert parse_color("1 blue") == ("", (1, Color.BLUE))


def test_parses_game_id():
    assert parse_game_id("Game 1: 3 blue, 4 red") == ("3 blue, 4 red", 1)


def test_parses_line():
    game = parse_line("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
    assert game.id == 1
    assert game.max_count(Color.RED) == 4
    assert game.max_count(Color.GREEN) == 2
    assert game.max_count(Color.BLUE) == 6


def test_adds_color_to_game():
    game = Game()
    game = game + {Color.RED: 2}
    assert game.max_count(Color.RED) == 2
    assert game.max_count(Color.GREEN) == 0
    assert game.max_count(Color.BLUE) == 0

    game = game + {Color.BLUE: 9}
    assert game.max_count(Color.RED) == 2
    assert game.max_count(Color.GREEN) == 0
    assert game.max_count(Color.BLUE) == 9


def test_empty_game_has_no_max():
    with pytest.raises(ValueError):
        Game().max_count(Color.RED)


def test_unknown_color():
    with pytest.raises(ValueError, match="purple"):
        parse_line("Game 1: 3 purple")


def test_bad_game_id():
    with pytest.raises(ValueError):
        parse_game_id("Round 1: 3 blue")


def test_possible_games_limits():
    text = "Game 7: 12 red, 13 green, 14 blue\nGame 8: 13 red\nGame 9: 15 blue"
    assert possible_games(text) == [7]


def test_power_with_missing_color_is_zero():
    assert game_powers("Game 1: 2 red, 4 blue") == [0]