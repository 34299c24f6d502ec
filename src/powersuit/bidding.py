"""
Auction (bidding).
Bidders speak in a fixed circular order starting from a random seat. A bid
higher than the current high bid is a raise; anything else is a pass and
removes the player from the auction for good. The auction ends when:
  - someone bids the maximum (250),
  - only the high bidder is left,
  - or everybody passed, in which case a random player takes it at 125.
"""
from __future__ import annotations

import logging
from typing import Any, NamedTuple

from .errors import InvalidBid, NoBidders, WrongTurn
from .state import GameState, Stage

logger = logging.getLogger(__name__)


class BidOutcome(NamedTuple):
    messages: list[str]
    auction_won: bool


def coerce_bid(amount: Any) -> int:
    """
    Client bids arrive loosely typed; anything non-numeric counts as 0 (a pass).
    Fractional or non-finite amounts are rejected with InvalidBid.
    """
    if isinstance(amount, bool):
        return 0
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return 0
    if not value.is_integer():
        raise InvalidBid(f"Bids must be whole numbers, got {amount!r}")
    return int(value)


def get_current_bidder(state: GameState) -> str | None:
    if not state.bidders:
        return None
    return state.bidders[state.current_bid_index % len(state.bidders)]


def _auction_won(state: GameState, winner: str, messages: list[str]) -> BidOutcome:
    state.stage = Stage.POWER_SUIT_SELECTION
    state.highest_bidder = winner
    messages.append(f"{winner} wins the auction")
    logger.debug("auction won by %s at %d", winner, state.highest_bid)
    return BidOutcome(messages, True)


def place_bid(state: GameState, player: str, amount: Any) -> BidOutcome:
    """
    Apply one bid or pass for ``player``. Raises before mutating state if the
    player is out of turn or the amount is over the maximum.
    """
    if not state.bidders:
        raise NoBidders("No bidders")
    current = get_current_bidder(state)
    if current != player:
        raise WrongTurn(f"Not your turn. It's {current}'s turn to bid")

    max_bid = state.config.max_bid
    bid = coerce_bid(amount)
    if bid > max_bid:
        raise InvalidBid(f"Bids cannot exceed {max_bid}")

    messages: list[str] = []

    if bid > state.highest_bid:
        state.highest_bid = bid
        state.highest_bidder = player
        messages.append(f"{player} placed a bid of {bid}")
        if bid == max_bid:
            return _auction_won(state, player, messages)
        state.current_bid_index = (state.current_bid_index + 1) % len(state.bidders)
        if len(state.bidders) == 1:
            return _auction_won(state, player, messages)
        return BidOutcome(messages, False)

    # Pass
    messages.append(f"{player} passes")
    state.bidders.remove(player)
    if state.bidders:
        state.current_bid_index %= len(state.bidders)
    else:
        state.current_bid_index = 0

    if not state.bidders:
        state.highest_bid = state.config.default_bid
        winner = state.rng.choice(state.players)
        messages.append("All players passed, selecting winner at random")
        return _auction_won(state, winner, messages)

    # The last bidder only wins outright if they hold the high bid; a bidder
    # who has not spoken yet still gets their turn.
    if len(state.bidders) == 1 and state.highest_bidder == state.bidders[0]:
        return _auction_won(state, state.bidders[0], messages)

    return BidOutcome(messages, False)
