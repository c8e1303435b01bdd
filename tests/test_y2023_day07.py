import pytest

from aocsolutions.y2023_day07 import (
    Card,
    Hand,
    get_rankings,
    parse_line,
    total_winnings,
)

DATA = "32T3K 765\nT55J5 684\nKK677 28\nKTJJT 220\nQQQJA 483\n"

K, Q, A, T, J = Card.K, Card.Q, Card.A, Card.T, Card.J
TWO, THREE, FIVE, SIX, SEVEN, EIGHT = (
    Card.TWO,
    Card.THREE,
    Card.FIVE,
    Card.SIX,
    Card.SEVEN,
    Card.EIGHT,
)


def test_finds_n_of_a_kind():
    assert Hand((K,) * 5).has_n_of_a_kind(5)
    assert Hand((K, K, K, K, TWO)).has_n_of_a_kind(4)


def test_finds_full_house():
    assert Hand((EIGHT, EIGHT, Q, Q, Q)).has_full_house()
    assert not Hand((EIGHT, TWO, Q, Q, Q)).has_full_house()


def test_finds_two_pair():
    assert Hand((EIGHT, EIGHT, Q, Q, FIVE)).has_two_pair()


def test_finds_one_pair():
    assert Hand((EIGHT, EIGHT, K, Q, A)).has_one_pair()


def test_finds_high_card():
    assert Hand((T, K, A, THREE, TWO)).has_high_card()


def test_parses_lines():
    result = [parse_line(line) for line in DATA.splitlines()]
    assert result == [
        (Hand((THREE, TWO, T, THREE, K)), 765),
        (Hand((T, FIVE, FIVE, J, FIVE)), 684),
        (Hand((K, K, SIX, SEVEN, SEVEN)), 28),
        (Hand((K, T, J, J, T)), 220),
        (Hand((Q, Q, Q, J, A)), 483),
    ]


def test_compares_more_hands():
    assert Hand.from_string("KK677") < Hand.from_string("KTJJT")
    assert Hand.from_string("T55J5") < Hand.from_string("QQQJA")
    assert Hand.from_string("KTJJT") > Hand.from_string("QQQJA")


def test_sorts_lines():
    rankings = get_rankings(parse_line(line) for line in DATA.splitlines())
    assert [pair for _, pair in rankings] == [
        (Hand((THREE, TWO, T, THREE, K)), 765),
        (Hand((K, K, SIX, SEVEN, SEVEN)), 28),
        (Hand((T, FIVE, FIVE, J, FIVE)), 684),
        (Hand((Q, Q, Q, J, A)), 483),
        (Hand((K, T, J, J, T)), 220),
    ]
    assert [rank for rank, _ in rankings] == [1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    ("text", "n"),
    [
        ("JJJJJ", 5),
        ("KJJJJ", 5),
        ("T55J5", 4),
        ("KTJJT", 4),
        ("QQQJA", 4),
        ("JKKKT", 4),
        ("JKK5T", 3),
        ("KJJQQ", 4),
        ("JJ627", 3),
        ("47TJ4", 3),
        ("5825J", 3),
        ("QJ777", 4),
        ("KJKKK", 5),
        ("JK9T3", 2),
        ("82J22", 4),
        ("Q266J", 3),
        ("682J6", 3),
        ("9J999", 5),
        ("K269J", 2),
        ("77JJJ", 5),
    ],
)
def test_handles_jokers_n_of_a_kind(text, n):
    assert Hand.from_string(text).has_n_of_a_kind(n)


@pytest.mark.parametrize("text", ["KKJQQ", "22299", "2J299", "J8228", "33663"])
def test_handles_jokers_full_house(text):
    assert Hand.from_string(text).has_full_house()


@pytest.mark.parametrize("text", ["9JT3K", "32T3K", "J9285", "8JA6Q"])
def test_handles_jokers_one_pair(text):
    assert Hand.from_string(text).has_one_pair()


def test_handles_jokers_other_types():
    assert Hand.from_string("KK677").has_two_pair()
    assert Hand.from_string("J2345").has_high_card()


def test_handles_cards_from_real_data():
    assert Hand.from_string("2J299") > Hand.from_string("47TJ4")
    assert not Hand.from_string("47TJ4").has_full_house()


def test_identical_hands_are_not_less():
    hand = Hand.from_string("KK677")
    assert not hand < Hand.from_string("KK677")
    assert hand == Hand.from_string("KK677")


def test_single_hand_wins_its_bid():
    assert total_winnings("32T3K 765") == 765


def test_rejects_unknown_card():
    with pytest.raises(ValueError):
        Card.from_char("X")


def test_rejects_wrong_hand_size():
    with pytest.raises(ValueError):
        Hand.from_string("KK67")


def test_rejects_line_without_bid():
    with pytest.raises(ValueError):
        parse_line("KK677")