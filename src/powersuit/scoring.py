"""
Win evaluation after every trick.
Alpha (the auction winner's side) needs at least the bid; Beta wins as soon
as it holds more than 250 - bid, which makes the bid unreachable.
"""
from __future__ import annotations

import logging

from .state import GameState, Stage

logger = logging.getLogger(__name__)


def beta_threshold(highest_bid: int, max_bid: int = 250) -> int:
    """Beta must score strictly more than this."""
    return max_bid - highest_bid


def check_game_over(state: GameState) -> list[str] | None:
    """
    Latch game over on the first satisfied condition (Alpha first, then Beta).
    Once every hand is empty with neither threshold reached, the bid has failed
    and Beta wins. Returns the winners if the game ended on this call.
    """
    if state.is_over():
        return None

    winners: list[str] | None = None
    if state.alpha_score >= state.highest_bid:
        winners = _ordered(state, state.alpha)
    elif state.beta_score > beta_threshold(state.highest_bid, state.config.max_bid):
        winners = _ordered(state, state.beta)
    elif state.hands_exhausted() and state.trick_is_complete():
        winners = _ordered(state, state.beta)

    if winners is not None:
        state.game_winners = winners
        state.stage = Stage.GAME_OVER
        logger.debug(
            "game over: alpha=%d beta=%d bid=%d", state.alpha_score, state.beta_score, state.highest_bid
        )
    return winners


def _ordered(state: GameState, team: set[str]) -> list[str]:
    return [p for p in state.players if p in team]
