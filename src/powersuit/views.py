"""
JSON-compatible views of a GameState for the transport layer.

``public_view`` is safe to broadcast to the whole room. ``player_view`` adds a
single player's hand and must only be sent to that player. Team membership is
never included; ``gameWinners`` appears once the game is over.
"""
from __future__ import annotations

from typing import Any, Dict

from .deck import SUIT_NAMES
from .state import GameState, TrickEntry


def _entry_to_dict(entry: TrickEntry) -> Dict[str, Any]:
    return {
        "playerName": entry.player,
        "card": entry.card.to_dict(),
        "power": entry.power,
    }


def public_view(state: GameState) -> Dict[str, Any]:
    view: Dict[str, Any] = {
        "stage": state.stage.value,
        "players": list(state.players),
        "playerCount": state.player_count,
        "bidders": list(state.bidders),
        "currentBidIndex": state.current_bid_index,
        "highestBid": state.highest_bid,
        "highestBidder": state.highest_bidder,
        "powerSuit": SUIT_NAMES[state.power_suit] if state.power_suit is not None else None,
        "partners": [c.to_dict() for c in state.partners],
        "round": [_entry_to_dict(e) for e in state.trick],
        "playerScores": dict(state.player_scores),
        "turnIndex": state.turn_index,
        "defaultDeck": [c.to_dict() for c in state.default_deck],
        "gameWinners": list(state.game_winners) if state.game_winners is not None else None,
    }
    # Transient fields, only present while a completed trick is on the table
    if state.trick_winner is not None:
        view["roundWinner"] = state.trick_winner
        view["scoreToCollect"] = state.score_to_collect
    return view


def player_view(state: GameState, player: str) -> Dict[str, Any]:
    """Public view plus ``player``'s own hand."""
    return {
        "public": public_view(state),
        "playerGameState": {"hand": [c.to_dict() for c in state.hands[player]]},
    }


__all__ = ["public_view", "player_view"]
