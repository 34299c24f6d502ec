"""
Baseline agents that play through the same views a remote client receives.

``RandomAgent`` picks uniformly among legal choices at every decision point.
It is used by the ``play_random`` CLI and by tests that drive whole games.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Protocol

from .deck import SUIT_NAMES, parse_card
from .play import legal_plays
from .state import TrickEntry

BID_STEP = 5


class Agent(Protocol):
    """Decision interface; every method receives ``views.player_view`` output."""

    def bid(self, view: Mapping[str, Any]) -> int: ...

    def choose_suit(self, view: Mapping[str, Any]) -> str: ...

    def choose_partners(self, view: Mapping[str, Any], count: int) -> List[Dict[str, Any]]: ...

    def choose_card(self, view: Mapping[str, Any]) -> Dict[str, Any]: ...


@dataclass
class RandomAgent:
    """
    Baseline agent making uniform random legal choices.

    Usage:
        agent = RandomAgent(seed=42)
        amount = agent.bid(player_view(state, name))
    """

    seed: int | None = None
    pass_probability: float = 0.5

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def bid(self, view: Mapping[str, Any]) -> int:
        """Pass (bid 0) or raise by a random multiple of 5, up to 250."""
        highest = view["public"]["highestBid"]
        if highest >= 250 or self._rng.random() < self.pass_probability:
            return 0
        steps = (250 - highest) // BID_STEP
        return highest + BID_STEP * self._rng.randint(1, max(1, steps))

    def choose_suit(self, view: Mapping[str, Any]) -> str:
        return self._rng.choice(list(SUIT_NAMES.values()))

    def choose_partners(self, view: Mapping[str, Any], count: int) -> List[Dict[str, Any]]:
        """Name ``count`` cards the agent does not hold itself."""
        own = {(c["suit"], c["number"]) for c in view["playerGameState"]["hand"]}
        candidates = [
            c for c in view["public"]["defaultDeck"] if (c["suit"], c["number"]) not in own
        ]
        return self._rng.sample(candidates, min(count, len(candidates)))

    def choose_card(self, view: Mapping[str, Any]) -> Dict[str, Any]:
        hand = [parse_card(c) for c in view["playerGameState"]["hand"]]
        if not hand:
            raise ValueError("No cards left to play for RandomAgent")
        trick = [
            TrickEntry(e["playerName"], parse_card(e["card"]), e["power"])
            for e in view["public"]["round"]
        ]
        return self._rng.choice(legal_plays(hand, trick)).to_dict()


__all__ = ["Agent", "RandomAgent"]
