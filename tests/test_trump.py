"""Tests for trump membership and card valuation."""
import itertools

import pytest

from doppelkopf.bidding import ContractType
from doppelkopf.deck import Rank, Suit, make_deck_48, parse_card
from doppelkopf.trump import (
    Tier,
    TrumpMode,
    card_value,
    contract_to_trump_mode,
    is_trump,
    parse_trump,
    plain_rank_order,
    trump_tier,
)

ALL_MODES = [TrumpMode.JACKS, TrumpMode.JACKS_ONLY, TrumpMode.QUEENS_ONLY, TrumpMode.NONE, *Suit]


def _faces():
    seen = {}
    for c in make_deck_48():
        seen.setdefault((c.suit, c.rank), c)
    return list(seen.values())


def _values(codes, trump, schweinerei=False):
    return [card_value(parse_card(code), trump, schweinerei) for code in codes]


def _strictly_decreasing(values):
    return all(a > b for a, b in zip(values, values[1:]))


def test_queens_ordered_by_suit_in_normal_game():
    assert _strictly_decreasing(_values(["CQ", "SQ", "HQ", "DQ"], TrumpMode.JACKS))


def test_normal_game_trump_order_without_schweinerei():
    order = ["H10", "CQ", "SQ", "HQ", "DQ", "CJ", "SJ", "HJ", "DJ", "DA", "D10", "DK", "D9"]
    assert _strictly_decreasing(_values(order, TrumpMode.JACKS))


def test_normal_game_trump_order_with_schweinerei():
    order = ["DA", "H10", "CQ", "SQ", "HQ", "DQ", "CJ", "SJ", "HJ", "DJ", "D10", "DK", "D9"]
    assert _strictly_decreasing(_values(order, TrumpMode.JACKS, schweinerei=True))
    assert trump_tier(parse_card("DA"), TrumpMode.JACKS, True) == Tier.SCHWEINEREI


def test_normal_game_trump_partition():
    faces = _faces()
    plain_max = max(card_value(c, TrumpMode.JACKS) for c in faces if not is_trump(c, TrumpMode.JACKS))
    for schweinerei in (False, True):
        above = {
            c.code
            for c in faces
            if card_value(c, TrumpMode.JACKS, schweinerei) > plain_max
        }
        expected = {"H10", "DA", "D10", "DK", "D9"}
        expected |= {f"{s}{r}" for s in "CSHD" for r in "QJ"}
        assert above == expected


def test_trump_order_is_strict_in_every_mode():
    faces = _faces()
    for trump, schweinerei in itertools.product(ALL_MODES, (False, True)):
        trumps = [c for c in faces if is_trump(c, trump)]
        values = [card_value(c, trump, schweinerei) for c in trumps]
        assert len(set(values)) == len(values), trump


def test_plain_order_is_strict_within_a_suit():
    faces = _faces()
    for trump in ALL_MODES:
        for s in Suit:
            plain = [c for c in faces if c.suit == s and not is_trump(c, trump)]
            values = [card_value(c, trump) for c in plain]
            assert len(set(values)) == len(values)


def test_every_trump_beats_every_plain_card():
    faces = _faces()
    for trump in ALL_MODES:
        trumps = [card_value(c, trump, True) for c in faces if is_trump(c, trump)]
        plain = [card_value(c, trump, True) for c in faces if not is_trump(c, trump)]
        if trumps and plain:
            assert min(trumps) > max(plain)


def test_normal_game_plain_suit_order():
    assert _strictly_decreasing(_values(["CA", "C10", "CK", "C9"], TrumpMode.JACKS))
    assert not is_trump(parse_card("HA"), TrumpMode.JACKS)
    assert is_trump(parse_card("H10"), TrumpMode.JACKS)


def test_jacks_solo():
    assert _strictly_decreasing(_values(["CJ", "SJ", "HJ", "DJ"], TrumpMode.JACKS_ONLY))
    assert not is_trump(parse_card("H10"), TrumpMode.JACKS_ONLY)
    assert not is_trump(parse_card("DA"), TrumpMode.JACKS_ONLY)
    assert not is_trump(parse_card("CQ"), TrumpMode.JACKS_ONLY)
    assert _strictly_decreasing(_values(["CA", "C10", "CK", "CQ", "C9"], TrumpMode.JACKS_ONLY))


def test_queens_solo():
    assert _strictly_decreasing(_values(["CQ", "SQ", "HQ", "DQ"], TrumpMode.QUEENS_ONLY))
    assert not is_trump(parse_card("CJ"), TrumpMode.QUEENS_ONLY)
    assert _strictly_decreasing(_values(["DA", "D10", "DK", "DJ", "D9"], TrumpMode.QUEENS_ONLY))


def test_no_trump_game():
    assert not any(is_trump(c, TrumpMode.NONE) for c in _faces())
    assert _strictly_decreasing(_values(["HA", "H10", "HK", "HQ", "HJ", "H9"], TrumpMode.NONE))
    assert plain_rank_order(TrumpMode.NONE) == (
        Rank.ACE, Rank.TEN, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.NINE,
    )


def test_colour_solo():
    order = ["H10", "CQ", "SQ", "HQ", "DQ", "CJ", "SJ", "HJ", "DJ", "CA", "C10", "CK", "C9"]
    assert _strictly_decreasing(_values(order, Suit.CLUBS))
    assert not is_trump(parse_card("DA"), Suit.CLUBS)
    assert not is_trump(parse_card("HA"), Suit.CLUBS)
    hearts = ["H10", "CQ", "DJ", "HA", "HK", "H9"]
    assert _strictly_decreasing(_values(hearts, Suit.HEARTS))


def test_diamonds_solo_counts_each_card_once():
    order = ["H10", "CQ", "SQ", "HQ", "DQ", "CJ", "SJ", "HJ", "DJ", "DA", "D10", "DK", "D9"]
    assert _strictly_decreasing(_values(order, Suit.DIAMONDS))
    trumps = [c for c in _faces() if is_trump(c, Suit.DIAMONDS)]
    assert len(trumps) == 13


def test_schweinerei_only_applies_to_normal_game():
    da = parse_card("DA")
    for trump in ALL_MODES:
        if trump == TrumpMode.JACKS:
            assert card_value(da, trump, True) > card_value(da, trump, False)
        else:
            assert card_value(da, trump, True) == card_value(da, trump, False)


def test_valuation_ignores_card_id():
    a = parse_card("CQ", card_id="x")
    b = parse_card("CQ", card_id="y")
    assert card_value(a, TrumpMode.JACKS) == card_value(b, TrumpMode.JACKS)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("jacks", TrumpMode.JACKS),
        ("normal", TrumpMode.JACKS),
        ("queens-only", TrumpMode.QUEENS_ONLY),
        ("jacks_only", TrumpMode.JACKS_ONLY),
        ("none", TrumpMode.NONE),
        ("hearts", Suit.HEARTS),
    ],
)
def test_parse_trump(text, expected):
    assert parse_trump(text) == expected


def test_parse_trump_rejects_unknown():
    with pytest.raises(ValueError):
        parse_trump("kings")


def test_contract_to_trump_mode():
    assert contract_to_trump_mode(ContractType.NORMAL) == TrumpMode.JACKS
    assert contract_to_trump_mode(ContractType.HOCHZEIT) == TrumpMode.JACKS
    assert contract_to_trump_mode(ContractType.SOLO_SPADES) == Suit.SPADES
    assert contract_to_trump_mode(ContractType.SOLO_QUEENS) == TrumpMode.QUEENS_ONLY
    assert contract_to_trump_mode(ContractType.SOLO_JACKS) == TrumpMode.JACKS_ONLY
    assert contract_to_trump_mode(ContractType.SOLO_ACES) == TrumpMode.NONE
