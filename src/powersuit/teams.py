"""
Trump (power suit) and hidden partner selection.

The auction winner names a power suit, then up to ceil(n / 2) - 1 partner
cards. Whoever holds a named card joins the winner on team Alpha; everyone
else is on Beta. Holders are found by looking at the hands server-side and
are never announced.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, NamedTuple

from .deck import Card, Suit, SUIT_NAMES
from .errors import TooManyPartners
from .state import GameState, Stage

logger = logging.getLogger(__name__)


class SelectionOutcome(NamedTuple):
    messages: list[str]
    partner_count: int


def partner_count_for(player_count: int) -> int:
    """Number of partner cards the auction winner may name (4p: 1, 5p: 2, 6p: 2)."""
    return math.ceil(player_count / 2) - 1


def select_power_suit(state: GameState, player: str, suit: Suit) -> SelectionOutcome:
    state.power_suit = suit
    state.stage = Stage.PARTNER_SELECTION
    count = partner_count_for(state.player_count)
    logger.debug("%s chose %s as power suit", player, SUIT_NAMES[suit])
    return SelectionOutcome([f"{player} selected {SUIT_NAMES[suit]} as the power suit"], count)


def form_teams(
    players: Iterable[str],
    hands: dict[str, list[Card]],
    selector: str,
    partner_cards: list[Card],
) -> tuple[set[str], set[str]]:
    """Split the roster into (alpha, beta) from who holds the partner cards."""
    wanted = set(partner_cards)
    alpha = {selector}
    for p in players:
        if p == selector:
            continue
        if any(c in wanted for c in hands[p]):
            alpha.add(p)
    beta = {p for p in players if p not in alpha}
    return alpha, beta


def select_partners(state: GameState, player: str, partner_cards: list[Card]) -> SelectionOutcome:
    """
    Record the partner cards and form the teams. The selector leads the first
    trick. Raises TooManyPartners (state untouched) if too many cards are named.
    """
    allowed = partner_count_for(state.player_count)
    if len(partner_cards) > allowed:
        raise TooManyPartners(f"Too many partners: at most {allowed} allowed, got {len(partner_cards)}")

    messages = [f"{player} selected {card} as a partner" for card in partner_cards]
    state.partners = list(partner_cards)
    state.alpha, state.beta = form_teams(state.players, state.hands, player, state.partners)
    state.stage = Stage.PLAYING
    state.turn_index = state.seat_of(player)
    logger.debug("teams formed: alpha=%d players, beta=%d players", len(state.alpha), len(state.beta))
    return SelectionOutcome(messages, allowed)
