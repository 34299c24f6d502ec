"""
Rule violations raised by the engine.

Every error carries a ``kind`` string (the status reported back to the caller)
and a human-readable message meant for the offending player only. Engine
functions raise before touching state, so a rejected action never leaves a
half-applied transition behind.
"""
from __future__ import annotations


class EngineError(Exception):
    """Base class for rejected actions."""

    kind: str = "error"


class InvalidRoster(EngineError):
    kind = "invalidRoster"


class NoBidders(EngineError):
    kind = "noBidders"


class WrongStage(EngineError):
    kind = "wrongStage"


class GameOver(EngineError):
    kind = "gameOver"


class WrongTurn(EngineError):
    kind = "wrongTurn"


class InvalidBid(EngineError):
    kind = "invalidBid"


class InvalidCard(EngineError):
    kind = "invalidCard"


class InvalidSuit(EngineError):
    kind = "invalidSuit"


class CardNotInHand(EngineError):
    kind = "cardNotInHand"


class MustFollowSuit(EngineError):
    kind = "mustFollowSuit"


class TooManyPartners(EngineError):
    kind = "tooManyPartners"


class TrickPending(EngineError):
    """A completed trick is still on the table waiting for finalize_trick()."""

    kind = "trickPending"


class TrickIncomplete(EngineError):
    """finalize_trick() called before every player has played to the trick."""

    kind = "trickIncomplete"


__all__ = [
    "EngineError",
    "InvalidRoster",
    "NoBidders",
    "WrongStage",
    "GameOver",
    "WrongTurn",
    "InvalidBid",
    "InvalidCard",
    "InvalidSuit",
    "CardNotInHand",
    "MustFollowSuit",
    "TooManyPartners",
    "TrickPending",
    "TrickIncomplete",
]
