"""
Standard 52-card deck: 4 suits x 13 ranks.
Each card has a rank power (Ace=14 .. 2=2) used inside a trick and a point
value counted when a trick is won. The full deck is worth 250 points.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Mapping

from .errors import InvalidCard, InvalidSuit


class Suit(IntEnum):
    """Deck order: Spades, Hearts, Diamonds, Clubs."""
    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3


class Rank(IntEnum):
    """Value of each rank is its power within a trick."""
    ACE = 14
    KING = 13
    QUEEN = 12
    JACK = 11
    TEN = 10
    NINE = 9
    EIGHT = 8
    SEVEN = 7
    SIX = 6
    FIVE = 5
    FOUR = 4
    THREE = 3
    TWO = 2


SUIT_NAMES = {
    Suit.SPADES: "Spades",
    Suit.HEARTS: "Hearts",
    Suit.DIAMONDS: "Diamonds",
    Suit.CLUBS: "Clubs",
}

RANK_NAMES = {
    Rank.ACE: "Ace",
    Rank.KING: "King",
    Rank.QUEEN: "Queen",
    Rank.JACK: "Jack",
}
RANK_NAMES.update({r: str(int(r)) for r in Rank if r <= Rank.TEN})

_SUITS_BY_NAME = {name.lower(): s for s, name in SUIT_NAMES.items()}
_RANKS_BY_NAME = {name.lower(): r for r, name in RANK_NAMES.items()}

# Rank-descending, the order cards appear within a suit in the deck.
RANKS = sorted(Rank, reverse=True)

HONOURS = (Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN)

THREE_OF_SPADES_POINTS = 30
FIVE_POINTS = 5
HONOUR_POINTS = 10


def card_value(suit: Suit, rank: Rank) -> int:
    """Points for a card. Checked in order: 3 of Spades, any 5, honours, the rest."""
    if rank == Rank.THREE and suit == Suit.SPADES:
        return THREE_OF_SPADES_POINTS
    if rank == Rank.FIVE:
        return FIVE_POINTS
    if rank in HONOURS:
        return HONOUR_POINTS
    return 0


@dataclass(frozen=True)
class Card:
    """A single card. Identity is (suit, rank); power and value are derived."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        assert isinstance(self.suit, Suit) and isinstance(self.rank, Rank)

    @property
    def power(self) -> int:
        return int(self.rank)

    @property
    def value(self) -> int:
        return card_value(self.suit, self.rank)

    @property
    def suit_name(self) -> str:
        return SUIT_NAMES[self.suit]

    @property
    def rank_name(self) -> str:
        return RANK_NAMES[self.rank]

    def to_dict(self) -> dict[str, Any]:
        return {
            "suit": self.suit_name,
            "number": self.rank_name,
            "power": self.power,
            "value": self.value,
        }

    def __str__(self) -> str:
        return f"{self.rank_name} of {self.suit_name}"

    def __repr__(self) -> str:
        return str(self)


def parse_suit(name: Any) -> Suit:
    """Accept a Suit or its display name (case-insensitive)."""
    if isinstance(name, Suit):
        return name
    suit = _SUITS_BY_NAME.get(str(name).strip().lower())
    if suit is None:
        raise InvalidSuit(f"Unknown suit: {name!r}")
    return suit


def parse_card(payload: Card | Mapping[str, Any]) -> Card:
    """
    Turn a client payload ``{"suit": "Hearts", "number": "10"}`` into a Card.
    Extra keys (power, value) are ignored; they are always recomputed.
    """
    if isinstance(payload, Card):
        return payload
    if not isinstance(payload, Mapping):
        raise InvalidCard(f"Not a card: {payload!r}")
    try:
        suit = parse_suit(payload.get("suit"))
    except InvalidSuit as exc:
        raise InvalidCard(str(exc)) from exc
    rank = _RANKS_BY_NAME.get(str(payload.get("number")).strip().lower())
    if rank is None:
        raise InvalidCard(f"Unknown card number: {payload.get('number')!r}")
    return Card(suit, rank)


def make_deck_52() -> list[Card]:
    """Full deck, suit-major and rank-descending within each suit."""
    return [Card(s, r) for s in Suit for r in RANKS]


def trimmed_deck(player_count: int) -> list[Card]:
    """Drop cards from the end of the deck so it divides evenly among players."""
    assert player_count >= 1
    deck = make_deck_52()
    return deck[: len(deck) - len(deck) % player_count]


def shuffled(deck: list[Card], rng: random.Random | None = None) -> list[Card]:
    if rng is None:
        rng = random.Random()
    out = list(deck)
    rng.shuffle(out)
    return out


def cards_point_total(cards: list[Card]) -> int:
    return sum(c.value for c in cards)
