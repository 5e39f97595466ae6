"""
Hand ordering for display.

1. Trumps first, highest to lowest (see trump.card_value)
2. Then plain suits in display order Kreuz, Herz, Pik, Karo
3. Within a suit: the mode's plain rank order, highest first

Whether the Schweinerei applies is decided once, upstream, and passed in as a
boolean; both ways of computing it live here.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from .config import DEFAULT_RULES, RulesConfig
from .deck import Card, Rank, Suit, count_face
from .trump import Trump, card_value, is_trump

DISPLAY_SUIT_ORDER = (Suit.CLUBS, Suit.HEARTS, Suit.SPADES, Suit.DIAMONDS)
_DISPLAY_POS = {s: i for i, s in enumerate(DISPLAY_SUIT_ORDER)}


def has_schweinerei(hand: Iterable[Card]) -> bool:
    """True if the literal hand holds both Karo aces."""
    return count_face(hand, Suit.DIAMONDS, Rank.ACE) >= 2


def find_schweinerei_player(
    hands: Mapping[str, Sequence[Card]],
    rules: RulesConfig = DEFAULT_RULES,
) -> str | None:
    """Player dealt both Karo aces, or None (also when the house rule is off)."""
    if not rules.schweinerei:
        return None
    for pid, hand in hands.items():
        if has_schweinerei(hand):
            return pid
    return None


def schweinerei_active_for(owner_id: str | None, player_id: str) -> bool:
    return owner_id is not None and owner_id == player_id


def sort_key(card: Card, trump: Trump, schweinerei: bool = False) -> tuple[int, int, int]:
    value = card_value(card, trump, schweinerei)
    if is_trump(card, trump):
        return (0, 0, -value)
    return (1, _DISPLAY_POS[card.suit], -value)


def sort_hand(cards: Iterable[Card], trump: Trump, schweinerei: bool = False) -> list[Card]:
    """Return a new, sorted list; equal faces keep their input order."""
    return sorted(cards, key=lambda c: sort_key(c, trump, schweinerei))
