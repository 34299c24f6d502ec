"""Tests for baseline agents."""
import random

from powersuit.agents import RandomAgent
from powersuit.deck import parse_card
from powersuit.game import initial_game_state
from powersuit.play import legal_plays
from powersuit.state import Stage, TrickEntry
from powersuit.views import player_view


def test_random_agent_bids_in_range():
    agent = RandomAgent(seed=123)
    view = {"public": {"highestBid": 130}}
    for _ in range(50):
        bid = agent.bid(view)
        assert bid == 0 or (130 < bid <= 250 and bid % 5 == 0)
    assert agent.bid({"public": {"highestBid": 250}}) == 0


def test_random_agent_only_plays_legal_cards():
    state = initial_game_state(["A", "B", "C", "D"], rng=random.Random(9))
    state.stage = Stage.PLAYING
    state.turn_index = 0
    agent = RandomAgent(seed=1)
    lead = state.hands["A"][0]
    state.hands["A"].remove(lead)
    state.trick = [TrickEntry("A", lead, lead.power + 100)]
    view = player_view(state, "B")
    allowed = legal_plays(state.hands["B"], state.trick)
    for _ in range(30):
        assert parse_card(agent.choose_card(view)) in allowed


def test_random_agent_partners_exclude_own_hand():
    state = initial_game_state(["A", "B", "C", "D", "E"], rng=random.Random(11))
    agent = RandomAgent(seed=2)
    view = player_view(state, "A")
    picks = agent.choose_partners(view, 2)
    assert len(picks) == 2
    own = set(state.hands["A"])
    assert all(parse_card(c) not in own for c in picks)
