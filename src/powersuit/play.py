"""
Trick-taking: legal moves, effective power, winner, scoring.
Players must follow the lead suit when they can. A card's power in a trick is
its rank power plus 1000 if it is trump, or plus 100 if it is of the lead suit,
so any trump beats any non-trump and lead-suit cards beat discards.

A completed trick stays on the table until finalize_trick() is called; the
winner then leads the next one.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Sequence

from .config import DEFAULT_RULES, RulesConfig
from .deck import Card, Suit, SUIT_NAMES
from .errors import CardNotInHand, MustFollowSuit, TrickIncomplete, TrickPending, WrongTurn
from .scoring import check_game_over
from .state import GameState, TrickEntry

logger = logging.getLogger(__name__)


class PlayOutcome(NamedTuple):
    messages: list[str]
    trick_complete: bool
    winners: list[str] | None  # set when this play ended the game


def has_suit(hand: Sequence[Card], suit: Suit) -> bool:
    return any(c.suit == suit for c in hand)


def legal_plays(hand: Sequence[Card], trick: Sequence[TrickEntry]) -> list[Card]:
    """Cards from hand that may be played on the current trick."""
    if not trick:
        return list(hand)
    lead = trick[0].card.suit
    if has_suit(hand, lead):
        return [c for c in hand if c.suit == lead]
    return list(hand)


def effective_power(
    card: Card,
    lead_suit: Suit | None,
    power_suit: Suit | None,
    config: RulesConfig = DEFAULT_RULES,
) -> int:
    """
    Rank power plus boost. ``lead_suit`` is None for the opening card, which
    sets the lead suit and so counts as lead suit itself.
    """
    if card.suit == power_suit:
        return card.power + config.trump_boost
    if lead_suit is None or card.suit == lead_suit:
        return card.power + config.lead_boost
    return card.power


def trick_score(trick: Sequence[TrickEntry]) -> int:
    return sum(e.card.value for e in trick)


def trick_winner(trick: Sequence[TrickEntry]) -> TrickEntry:
    """Entry with the highest effective power (first one wins an exact tie)."""
    best = trick[0]
    for entry in trick[1:]:
        if entry.power > best.power:
            best = entry
    return best


def play_card(state: GameState, player: str, card: Card) -> PlayOutcome:
    """
    Validate and apply one card play. Raises WrongTurn, TrickPending,
    CardNotInHand or MustFollowSuit with state untouched.
    """
    if state.trick_is_complete():
        raise TrickPending("Wait for the current trick to be collected")
    current = state.current_player()
    if current != player:
        raise WrongTurn("Not your turn to play")

    hand = state.hands[player]
    if card not in hand:
        raise CardNotInHand(f"Card {card} not found in hand")

    lead = state.lead_suit()
    if lead is not None and card.suit != lead and has_suit(hand, lead):
        raise MustFollowSuit(f"{player} must follow suit {SUIT_NAMES[lead]}")

    hand.remove(card)
    power = effective_power(card, lead, state.power_suit, state.config)
    state.trick.append(TrickEntry(player, card, power))
    state.turn_index = (state.seat_of(player) + 1) % state.player_count
    messages = [f"{player} played {card}"]

    if not state.trick_is_complete():
        return PlayOutcome(messages, False, None)

    score = trick_score(state.trick)
    winner = trick_winner(state.trick).player
    state.player_scores[winner] += score
    if winner in state.alpha:
        state.alpha_score += score
    else:
        state.beta_score += score
    state.tricks_played += 1
    state.trick_winner = winner
    state.score_to_collect = score
    messages.append(f"{winner} won {score} points")
    logger.debug("trick %d won by %s for %d", state.tricks_played, winner, score)

    winners = check_game_over(state)
    if winners is not None:
        messages.append(f"{', '.join(winners)} win!")
    return PlayOutcome(messages, True, winners)


def finalize_trick(state: GameState) -> list[str]:
    """
    Clear a completed trick and hand the lead to its winner. Raises
    TrickIncomplete if there is no completed trick on the table, so a second
    call never credits anything twice.
    """
    if not state.trick_is_complete() or state.trick_winner is None:
        raise TrickIncomplete("No completed trick to collect")
    winner = state.trick_winner
    state.trick = []
    state.turn_index = state.seat_of(winner)
    state.trick_winner = None
    state.score_to_collect = None
    return [f"It's {winner}'s turn!"]
