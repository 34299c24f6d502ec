"""Tests for power suit selection and hidden team formation."""
import random

from powersuit.deal import Deal
from powersuit.deck import Card, Rank, Suit, trimmed_deck
from powersuit.game import select_partners, select_power_suit
from powersuit.state import GameState, Stage
from powersuit.teams import form_teams, partner_count_for

H10 = Card(Suit.HEARTS, Rank.TEN)
SA = Card(Suit.SPADES, Rank.ACE)
DK = Card(Suit.DIAMONDS, Rank.KING)
C2 = Card(Suit.CLUBS, Rank.TWO)
S3 = Card(Suit.SPADES, Rank.THREE)


def make_state(hands, winner="A", stage=Stage.POWER_SUIT_SELECTION):
    players = list(hands)
    state = GameState(players, Deal(hands=hands, deck=trimmed_deck(len(players))), random.Random(0))
    state.stage = stage
    state.highest_bidder = winner
    state.highest_bid = 150
    return state


def four_hands():
    return {"A": [H10], "B": [SA], "C": [DK], "D": [C2]}


def test_partner_count():
    assert partner_count_for(2) == 0
    assert partner_count_for(3) == 1
    assert partner_count_for(4) == 1
    assert partner_count_for(5) == 2
    assert partner_count_for(6) == 2
    assert partner_count_for(7) == 3


def test_select_power_suit():
    state = make_state(four_hands())
    result = select_power_suit(state, "A", "Spades")
    assert result.ok
    assert result.partner_count == 1
    assert state.power_suit == Suit.SPADES
    assert state.stage == Stage.PARTNER_SELECTION
    assert result.messages == ["A selected Spades as the power suit"]


def test_only_auction_winner_selects_suit():
    state = make_state(four_hands())
    result = select_power_suit(state, "B", "Hearts")
    assert result.status == "wrongTurn"
    assert state.power_suit is None


def test_unknown_suit_rejected():
    state = make_state(four_hands())
    result = select_power_suit(state, "A", "Stars")
    assert result.status == "invalidSuit"
    assert state.stage == Stage.POWER_SUIT_SELECTION


def test_partner_holder_joins_alpha():
    state = make_state(four_hands(), stage=Stage.PARTNER_SELECTION)
    result = select_partners(state, "A", [{"suit": "Diamonds", "number": "King"}])
    assert result.ok
    assert state.alpha == {"A", "C"}
    assert state.beta == {"B", "D"}
    assert state.partners == [DK]
    assert state.stage == Stage.PLAYING
    assert state.turn_index == 0
    assert result.messages[0] == "A selected King of Diamonds as a partner"


def test_no_partner_cards_puts_everyone_else_on_beta():
    state = make_state(four_hands(), stage=Stage.PARTNER_SELECTION)
    assert select_partners(state, "A", []).ok
    assert state.alpha == {"A"}
    assert state.beta == {"B", "C", "D"}


def test_partner_card_in_own_hand_plays_alone():
    state = make_state(four_hands(), stage=Stage.PARTNER_SELECTION)
    assert select_partners(state, "A", [H10]).ok
    assert state.alpha == {"A"}
    assert state.beta == {"B", "C", "D"}


def test_too_many_partners_rejected_state_unchanged():
    state = make_state(four_hands(), stage=Stage.PARTNER_SELECTION)
    result = select_partners(state, "A", [SA, DK])
    assert result.status == "tooManyPartners"
    assert state.partners == []
    assert state.alpha == set() and state.beta == set()
    assert state.stage == Stage.PARTNER_SELECTION
    assert state.turn_index is None


def test_teams_partition_roster():
    hands = {"A": [H10], "B": [SA], "C": [DK], "D": [C2], "E": [S3]}
    alpha, beta = form_teams(list(hands), hands, "C", [SA, S3])
    assert alpha == {"C", "B", "E"}
    assert beta == {"A", "D"}
    assert alpha | beta == set(hands)
    assert not alpha & beta


def test_selector_not_first_seat_leads():
    state = make_state(four_hands(), winner="C", stage=Stage.PARTNER_SELECTION)
    assert select_partners(state, "C", [SA]).ok
    assert state.current_player() == "C"
    assert state.alpha == {"C", "B"}


def test_partners_wrong_stage():
    state = make_state(four_hands())
    result = select_partners(state, "A", [SA])
    assert result.status == "wrongStage"


def test_partner_payload_must_be_a_list():
    for payload in (None, 5, True, "King of Diamonds", {"suit": "Diamonds", "number": "King"}):
        state = make_state(four_hands(), stage=Stage.PARTNER_SELECTION)
        result = select_partners(state, "A", payload)
        assert result.status == "invalidCard"
        assert result.messages == ["Partners must be a list of cards"]
        assert state.stage == Stage.PARTNER_SELECTION
        assert state.partners == []
        assert state.alpha == set() and state.beta == set()
