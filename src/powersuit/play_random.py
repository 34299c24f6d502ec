"""
Tiny CLI to play complete random games through the public game operations.

Usage (from project root, after installing in editable mode):
    python -m powersuit.play_random --players 5 --games 3 --seed 42
"""
from __future__ import annotations

import argparse
import logging
import random

from .agents import RandomAgent
from .game import (
    finalize_trick,
    get_current_bidder,
    initial_game_state,
    place_bid,
    play_card,
    select_partners,
    select_power_suit,
    start_auction,
)
from .state import GameState, Stage
from .views import player_view

logger = logging.getLogger(__name__)

MAX_STEPS = 10_000


def _expect_ok(result, what: str) -> None:
    if not result.ok:
        raise RuntimeError(f"{what} rejected ({result.status}): {result.messages}")


def run_random_game(player_count: int, seed: int) -> GameState:
    """Play one game with a RandomAgent per seat and return the final state."""
    rng = random.Random(seed)
    players = [f"P{i + 1}" for i in range(player_count)]
    agents = {p: RandomAgent(seed=seed * 100 + i) for i, p in enumerate(players)}
    state = initial_game_state(players, rng=rng)
    _expect_ok(start_auction(state), "start_auction")

    steps = 0
    while state.stage == Stage.AUCTION and steps < MAX_STEPS:
        bidder = get_current_bidder(state)
        result = place_bid(state, bidder, agents[bidder].bid(player_view(state, bidder)))
        _expect_ok(result, "bid")
        steps += 1

    taker = state.highest_bidder
    view = player_view(state, taker)
    result = select_power_suit(state, taker, agents[taker].choose_suit(view))
    _expect_ok(result, "select_power_suit")
    view = player_view(state, taker)
    _expect_ok(
        select_partners(state, taker, agents[taker].choose_partners(view, result.partner_count)),
        "select_partners",
    )

    while state.stage == Stage.PLAYING and steps < MAX_STEPS:
        player = state.current_player()
        result = play_card(state, player, agents[player].choose_card(player_view(state, player)))
        _expect_ok(result, "play_card")
        if result.trick_complete and state.stage == Stage.PLAYING:
            _expect_ok(finalize_trick(state), "finalize_trick")
        steps += 1

    return state


def main() -> None:
    parser = argparse.ArgumentParser(description="Play random power-suit games.")
    parser.add_argument(
        "--players",
        type=int,
        default=4,
        help="Number of seats at the table.",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=1,
        help="Number of games to play.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help='Logging level, e.g. "DEBUG" or "INFO".',
    )
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level.upper())

    for g in range(args.games):
        state = run_random_game(args.players, seed=args.seed + g)
        print(
            f"game {g + 1}: bid={state.highest_bid} by {state.highest_bidder}, "
            f"tricks={state.tricks_played}, alpha={state.alpha_score}, beta={state.beta_score}, "
            f"winners={state.game_winners}"
        )


if __name__ == "__main__":
    main()
