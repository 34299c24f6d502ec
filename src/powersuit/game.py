"""
Game operations called by the room / transport layer.

Flow: initial_game_state -> start_auction -> place_bid* -> select_power_suit
-> select_partners -> (play_card* -> finalize_trick)* until game over.

Every operation except initial_game_state returns an ActionResult. Rule
violations come back as ``status=<error kind>`` with a single message meant for
the offending player; the state is left exactly as it was. Callers must not
run two operations on the same GameState at once.
"""
from __future__ import annotations

import collections.abc
import logging
import random
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from .bidding import get_current_bidder as _current_bidder
from .bidding import place_bid as _place_bid
from .config import DEFAULT_RULES, RulesConfig
from .deal import deal_hands, validate_roster
from .deck import Card, parse_card, parse_suit
from .errors import EngineError, GameOver, InvalidCard, WrongStage, WrongTurn
from .play import finalize_trick as _finalize_trick
from .play import play_card as _play_card
from .state import GameState, Stage
from .teams import select_partners as _select_partners
from .teams import select_power_suit as _select_power_suit

logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    """Outcome of one operation: status, messages for broadcast, and op-specific data."""

    status: str = "ok"
    messages: list[str] = field(default_factory=list)
    auction_won: bool = False
    trick_complete: bool = False
    partner_count: int | None = None
    winners: list[str] | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def _rejected(exc: EngineError) -> ActionResult:
    logger.info("rejected (%s): %s", exc.kind, exc)
    return ActionResult(status=exc.kind, messages=[str(exc)])


def _require_stage(state: GameState, expected: Stage) -> None:
    if state.is_over():
        raise GameOver("The game is over")
    if state.stage != expected:
        raise WrongStage(f"Wrong game stage: expected {expected.value}, currently {state.stage.value}")


def _require_auction_winner(state: GameState, player: str) -> None:
    if player != state.highest_bidder:
        raise WrongTurn(f"Only {state.highest_bidder} can choose now")


def initial_game_state(
    players: Sequence[str],
    rng: random.Random | None = None,
    config: RulesConfig | None = None,
) -> GameState:
    """
    Deal a new game for ``players`` (seat order). Raises InvalidRoster for an
    empty, too-small or duplicate-name roster. The returned state is in the
    ``dealing`` stage; call start_auction once the deal has been shown.
    """
    config = config or DEFAULT_RULES
    rng = rng or random.Random()
    validate_roster(players, config.min_players)
    deal = deal_hands(players, rng=rng)
    state = GameState(players, deal, rng, config)
    state.stage = Stage.DEALING
    logger.debug("dealt %d cards to %d players", len(deal.deck), len(players))
    return state


def start_auction(state: GameState) -> ActionResult:
    try:
        _require_stage(state, Stage.DEALING)
    except EngineError as exc:
        return _rejected(exc)
    state.stage = Stage.AUCTION
    return ActionResult(messages=[f"{_current_bidder(state)}'s turn to bid"])


def get_current_bidder(state: GameState) -> str | None:
    return _current_bidder(state)


def current_player(state: GameState) -> str | None:
    """Whose turn it is to play a card, if anyone's."""
    return state.current_player()


def place_bid(state: GameState, player: str, amount: Any) -> ActionResult:
    try:
        _require_stage(state, Stage.AUCTION)
        outcome = _place_bid(state, player, amount)
    except EngineError as exc:
        return _rejected(exc)
    messages = list(outcome.messages)
    if not outcome.auction_won:
        messages.append(f"{_current_bidder(state)}'s turn to bid")
    return ActionResult(messages=messages, auction_won=outcome.auction_won)


def select_power_suit(state: GameState, player: str, suit: Any) -> ActionResult:
    try:
        _require_stage(state, Stage.POWER_SUIT_SELECTION)
        _require_auction_winner(state, player)
        outcome = _select_power_suit(state, player, parse_suit(suit))
    except EngineError as exc:
        return _rejected(exc)
    return ActionResult(messages=outcome.messages, partner_count=outcome.partner_count)


def select_partners(
    state: GameState,
    player: str,
    cards: Sequence[Card | Mapping[str, Any]],
) -> ActionResult:
    try:
        _require_stage(state, Stage.PARTNER_SELECTION)
        _require_auction_winner(state, player)
        if not isinstance(cards, collections.abc.Sequence) or isinstance(cards, (str, bytes)):
            raise InvalidCard("Partners must be a list of cards")
        partner_cards = [parse_card(c) for c in cards]
        outcome = _select_partners(state, player, partner_cards)
    except EngineError as exc:
        return _rejected(exc)
    messages = outcome.messages + [f"It's {state.current_player()}'s turn!"]
    return ActionResult(messages=messages, partner_count=outcome.partner_count)


def play_card(state: GameState, player: str, card: Card | Mapping[str, Any]) -> ActionResult:
    try:
        _require_stage(state, Stage.PLAYING)
        outcome = _play_card(state, player, parse_card(card))
    except EngineError as exc:
        return _rejected(exc)
    messages = list(outcome.messages)
    if not outcome.trick_complete:
        messages.append(f"It's {state.current_player()}'s turn!")
    return ActionResult(
        messages=messages,
        trick_complete=outcome.trick_complete,
        winners=outcome.winners,
    )


def finalize_trick(state: GameState) -> ActionResult:
    """Collect the completed trick once the caller is done displaying it."""
    try:
        _require_stage(state, Stage.PLAYING)
        messages = _finalize_trick(state)
    except EngineError as exc:
        return _rejected(exc)
    return ActionResult(messages=messages)
