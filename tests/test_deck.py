"""Tests for cards, deck construction and boundary parsing."""
import random

import pytest

from powersuit.deck import (
    Card,
    Rank,
    Suit,
    cards_point_total,
    make_deck_52,
    parse_card,
    parse_suit,
    shuffled,
    trimmed_deck,
)
from powersuit.errors import InvalidCard, InvalidSuit


def test_deck_52_unique_and_ordered():
    deck = make_deck_52()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert deck[0] == Card(Suit.SPADES, Rank.ACE)
    assert deck[12] == Card(Suit.SPADES, Rank.TWO)
    assert deck[13] == Card(Suit.HEARTS, Rank.ACE)
    assert deck[-1] == Card(Suit.CLUBS, Rank.TWO)


def test_full_deck_is_worth_250():
    assert cards_point_total(make_deck_52()) == 250


def test_card_values_and_power():
    assert Card(Suit.SPADES, Rank.THREE).value == 30
    assert Card(Suit.HEARTS, Rank.THREE).value == 0
    assert Card(Suit.CLUBS, Rank.FIVE).value == 5
    assert Card(Suit.DIAMONDS, Rank.KING).value == 10
    assert Card(Suit.HEARTS, Rank.TEN).value == 10
    assert Card(Suit.SPADES, Rank.NINE).value == 0
    assert Card(Suit.SPADES, Rank.ACE).power == 14
    assert Card(Suit.SPADES, Rank.TWO).power == 2


def test_trimmed_deck_divides_evenly():
    full = make_deck_52()
    for n in range(1, 11):
        deck = trimmed_deck(n)
        assert len(deck) % n == 0
        assert len(deck) == 52 - 52 % n
        assert deck == full[: len(deck)]


def test_shuffled_is_permutation():
    deck = trimmed_deck(4)
    out = shuffled(deck, random.Random(1))
    assert sorted(out, key=lambda c: (c.suit, c.rank)) == sorted(deck, key=lambda c: (c.suit, c.rank))
    assert deck == trimmed_deck(4)  # input untouched


def test_parse_card_from_payload():
    assert parse_card({"suit": "Hearts", "number": "10"}) == Card(Suit.HEARTS, Rank.TEN)
    assert parse_card({"suit": "spades", "number": "Ace", "power": 1, "value": 99}) == Card(Suit.SPADES, Rank.ACE)
    assert parse_card({"suit": "Clubs", "number": 5}) == Card(Suit.CLUBS, Rank.FIVE)
    card = Card(Suit.DIAMONDS, Rank.JACK)
    assert parse_card(card) is card


@pytest.mark.parametrize(
    "payload",
    [
        {"suit": "Stars", "number": "10"},
        {"suit": "Hearts", "number": "1"},
        {"suit": "Hearts"},
        "Ace of Spades",
        None,
    ],
)
def test_parse_card_rejects_garbage(payload):
    with pytest.raises(InvalidCard):
        parse_card(payload)


def test_parse_suit():
    assert parse_suit("Diamonds") == Suit.DIAMONDS
    assert parse_suit(" clubs ") == Suit.CLUBS
    assert parse_suit(Suit.HEARTS) == Suit.HEARTS
    with pytest.raises(InvalidSuit):
        parse_suit("Trumps")


def test_card_to_dict():
    assert Card(Suit.SPADES, Rank.THREE).to_dict() == {
        "suit": "Spades",
        "number": "3",
        "power": 3,
        "value": 30,
    }
    assert str(Card(Suit.HEARTS, Rank.QUEEN)) == "Queen of Hearts"
