"""
Game state: one mutable object per game, owned by whoever hosts the room.

The public part (stage, bidding, trump, current trick, scores) may be shown to
everyone. Hands are private to their owner. The Alpha/Beta team split is never
published; only the winning side is revealed at game over.
"""
from __future__ import annotations

import random
from enum import Enum
from typing import NamedTuple, Sequence

from .config import DEFAULT_RULES, RulesConfig
from .deal import Deal
from .deck import Card, Suit


class Stage(str, Enum):
    PRE_GAME = "preGame"
    DEALING = "dealing"
    AUCTION = "auction"
    POWER_SUIT_SELECTION = "powerSuitSelection"
    PARTNER_SELECTION = "partnerSelection"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


class TrickEntry(NamedTuple):
    player: str
    card: Card
    power: int  # rank power plus trump / lead-suit boost


class GameState:
    """Mutable state for one game: roster, hands, auction, teams, trick and scores."""

    def __init__(
        self,
        players: Sequence[str],
        deal: Deal,
        rng: random.Random,
        config: RulesConfig = DEFAULT_RULES,
    ):
        self.config = config
        self.rng = rng
        self.players: list[str] = list(players)
        self.default_deck: list[Card] = list(deal.deck)
        self.hands: dict[str, list[Card]] = {p: list(h) for p, h in deal.hands.items()}
        self.stage: Stage = Stage.PRE_GAME

        # Auction
        self.bidders: list[str] = list(players)
        self.current_bid_index: int = rng.randrange(len(self.players))
        self.highest_bid: int = 0
        self.highest_bidder: str | None = None

        # Trump and partner cards (public); teams (hidden)
        self.power_suit: Suit | None = None
        self.partners: list[Card] = []
        self.alpha: set[str] = set()
        self.beta: set[str] = set()
        self.alpha_score: int = 0
        self.beta_score: int = 0

        # Play
        self.trick: list[TrickEntry] = []
        self.turn_index: int | None = None
        self.player_scores: dict[str, int] = {p: 0 for p in self.players}
        self.tricks_played: int = 0
        # Set when a trick completes, cleared by finalize_trick()
        self.trick_winner: str | None = None
        self.score_to_collect: int | None = None

        self.game_winners: list[str] | None = None

    @property
    def player_count(self) -> int:
        return len(self.players)

    def seat_of(self, player: str) -> int:
        return self.players.index(player)

    def current_player(self) -> str | None:
        if self.turn_index is None:
            return None
        return self.players[self.turn_index]

    def lead_suit(self) -> Suit | None:
        return self.trick[0].card.suit if self.trick else None

    def trick_is_complete(self) -> bool:
        return len(self.trick) == self.player_count

    def hands_exhausted(self) -> bool:
        return all(not h for h in self.hands.values())

    def is_over(self) -> bool:
        return self.stage == Stage.GAME_OVER

    def team_of(self, player: str) -> str:
        return "alpha" if player in self.alpha else "beta"
