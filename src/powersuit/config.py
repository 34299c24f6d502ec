"""House-rule constants for the power-suit engine."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RulesConfig:
    """
    Tunable rule constants. Defaults match the standard table rules:

    - bids run up to ``max_bid``; a bid of exactly ``max_bid`` wins the auction outright
    - if everybody passes, a random player takes the contract at ``default_bid``
    - trump cards get ``trump_boost`` and lead-suit cards ``lead_boost`` on top of
      their rank power when a trick is resolved
    """

    max_bid: int = 250
    default_bid: int = 125
    trump_boost: int = 1000
    lead_boost: int = 100
    min_players: int = 1


DEFAULT_RULES = RulesConfig()


__all__ = ["RulesConfig", "DEFAULT_RULES"]
