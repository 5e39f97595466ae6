"""Tests for hand ordering and Schweinerei detection."""
import copy
import itertools
import random

from doppelkopf.config import RulesConfig
from doppelkopf.deck import Suit, deal_4p, make_deck_48, parse_cards
from doppelkopf.sorting import (
    find_schweinerei_player,
    has_schweinerei,
    schweinerei_active_for,
    sort_hand,
)
from doppelkopf.trump import TrumpMode

ALL_MODES = [TrumpMode.JACKS, TrumpMode.JACKS_ONLY, TrumpMode.QUEENS_ONLY, TrumpMode.NONE, *Suit]


def _codes(cards):
    return [c.code for c in cards]


def test_normal_game_hand_order():
    hand = parse_cards(["S9", "DA", "CQ", "H10", "HA", "CJ", "CA", "D9", "SA", "HK", "DA"])
    assert _codes(sort_hand(hand, TrumpMode.JACKS)) == [
        "H10", "CQ", "CJ", "DA", "DA", "D9", "CA", "HA", "HK", "SA", "S9",
    ]


def test_schweinerei_moves_diamond_aces_to_the_top():
    hand = parse_cards(["S9", "DA", "CQ", "H10", "HA", "CJ", "CA", "D9", "SA", "HK", "DA"])
    assert _codes(sort_hand(hand, TrumpMode.JACKS, schweinerei=True)) == [
        "DA", "DA", "H10", "CQ", "CJ", "D9", "CA", "HA", "HK", "SA", "S9",
    ]


def test_plain_suits_follow_display_order():
    hand = parse_cards(["DA", "S10", "H9", "C9", "DK"])
    # Karo is plain in a clubs solo and comes last.
    assert _codes(sort_hand(hand, Suit.CLUBS)) == ["C9", "H9", "S10", "DA", "DK"]


def test_jacks_solo_hand_order():
    hand = parse_cards(["CQ", "CJ", "DA", "HJ", "C10", "D9"])
    assert _codes(sort_hand(hand, TrumpMode.JACKS_ONLY)) == ["CJ", "HJ", "C10", "CQ", "DA", "D9"]


def test_no_trump_hand_order():
    hand = parse_cards(["DA", "CJ", "CQ", "H9", "C9"])
    assert _codes(sort_hand(hand, TrumpMode.NONE)) == ["CQ", "CJ", "C9", "H9", "DA"]


def test_equal_faces_keep_input_order():
    hand = parse_cards(["CQ", "H10", "CQ", "H10"])
    ordered = sort_hand(hand, TrumpMode.JACKS)
    assert [c.id for c in ordered] == [hand[1].id, hand[3].id, hand[0].id, hand[2].id]


def test_sort_is_idempotent():
    rng = random.Random(11)
    deck = make_deck_48()
    for trump, schweinerei in itertools.product(ALL_MODES, (False, True)):
        hand = rng.sample(deck, 12)
        once = sort_hand(hand, trump, schweinerei)
        assert sort_hand(once, trump, schweinerei) == once


def test_sort_returns_new_list_and_leaves_input_alone():
    hand = parse_cards(["S9", "DA", "CQ", "H10"])
    snapshot = copy.deepcopy(hand)
    ordered = sort_hand(hand, TrumpMode.JACKS, True)
    assert hand == snapshot
    assert ordered is not hand
    assert sorted(c.id for c in ordered) == sorted(c.id for c in hand)


def test_has_schweinerei():
    assert has_schweinerei(parse_cards(["DA", "CQ", "DA"]))
    assert not has_schweinerei(parse_cards(["DA", "CQ", "D10"]))


def test_find_schweinerei_player():
    hands = {
        "a": parse_cards(["DA", "S9"]),
        "b": parse_cards(["DA", "DA"]),
    }
    assert find_schweinerei_player(hands) == "b"
    assert find_schweinerei_player(hands, RulesConfig(schweinerei=False)) is None
    assert find_schweinerei_player({"a": parse_cards(["DA"]), "b": parse_cards(["DA"])}) is None


def test_find_schweinerei_player_on_a_deal():
    hands = deal_4p(["a", "b", "c", "d"], rng=random.Random(5))
    owner = find_schweinerei_player(hands)
    if owner is None:
        assert not any(has_schweinerei(h) for h in hands.values())
    else:
        assert has_schweinerei(hands[owner])


def test_schweinerei_active_for():
    assert schweinerei_active_for("a", "a")
    assert not schweinerei_active_for("a", "b")
    assert not schweinerei_active_for(None, "a")
