"""
Distribution: the trimmed deck is shuffled once and dealt one card at a time
round the table, card i going to seat i % player_count. Every hand ends up
the same size.
"""
from __future__ import annotations

import random
from typing import NamedTuple, Sequence

from .deck import Card, shuffled, trimmed_deck
from .errors import InvalidRoster


class Deal(NamedTuple):
    """Result of a deal. Hands are lists (mutated during play)."""
    hands: dict[str, list[Card]]
    deck: list[Card]  # trimmed, unshuffled reference deck


def validate_roster(players: Sequence[str], min_players: int = 1) -> None:
    if len(players) < max(1, min_players):
        raise InvalidRoster(f"Need at least {max(1, min_players)} players, got {len(players)}")
    if len(set(players)) != len(players):
        raise InvalidRoster("Player names must be unique")


def deal_round_robin(deck: Sequence[Card], players: Sequence[str]) -> dict[str, list[Card]]:
    """Card i goes to players[i % len(players)]."""
    if not players:
        raise InvalidRoster("Cannot deal to an empty roster")
    hands: dict[str, list[Card]] = {p: [] for p in players}
    count = len(players)
    for i, card in enumerate(deck):
        hands[players[i % count]].append(card)
    return hands


def deal_hands(players: Sequence[str], rng: random.Random | None = None) -> Deal:
    """Trim, shuffle and deal a fresh deck for this roster."""
    validate_roster(players)
    deck = trimmed_deck(len(players))
    hands = deal_round_robin(shuffled(deck, rng), players)
    return Deal(hands=hands, deck=deck)
