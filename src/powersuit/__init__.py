"""Power-suit rules engine: auction, hidden partners, trump trick play."""

__version__ = "0.1.0"

from .config import RulesConfig, DEFAULT_RULES
from .deck import Card, Rank, Suit, make_deck_52, parse_card, parse_suit, trimmed_deck
from .deal import deal_hands, deal_round_robin, Deal
from .errors import EngineError
from .state import GameState, Stage, TrickEntry
from .play import legal_plays, trick_winner
from .game import (
    ActionResult,
    current_player,
    finalize_trick,
    get_current_bidder,
    initial_game_state,
    place_bid,
    play_card,
    select_partners,
    select_power_suit,
    start_auction,
)
from .views import public_view, player_view
