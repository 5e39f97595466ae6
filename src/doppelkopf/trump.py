"""
Trump membership and card valuation for every game mode.

Modes:
- JACKS (Normalspiel, Hochzeit): Herz 10 + Damen + Buben + Karo, optional Schweinerei
- Suit (Farbsolo): Herz 10 + Damen + Buben + chosen suit
- QUEENS_ONLY (Damensolo): only queens
- JACKS_ONLY (Bubensolo): only jacks
- NONE (Fleischloser): no trump

Values are ``tier * 100 + key``. A higher value beats a lower one inside a
trick; values are never compared across modes.
"""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import Union

from .bidding import ContractType
from .deck import Card, Rank, Suit, parse_suit


class TrumpMode(str, Enum):
    NONE = "none"
    JACKS = "jacks"
    JACKS_ONLY = "jacks-only"
    QUEENS_ONLY = "queens-only"


# A colour solo is expressed by the trump suit itself.
Trump = Union[TrumpMode, Suit]


class Tier(IntEnum):
    PLAIN = 1
    SUIT_TRUMP = 2   # Karo in the normal game, the solo suit in a colour solo
    JACK = 3
    QUEEN = 4
    DULLE = 5        # Herz 10
    SCHWEINEREI = 6  # both Karo aces in one hand


TIER_SCALE = 100

# Remaining cards of the trump suit, below queens and jacks.
_SUIT_TRUMP_KEYS = {Rank.ACE: 4, Rank.TEN: 3, Rank.KING: 2, Rank.NINE: 1}

_PLAIN_ORDER_DEFAULT = (Rank.ACE, Rank.TEN, Rank.KING, Rank.JACK, Rank.QUEEN, Rank.NINE)
_PLAIN_ORDER_QUEEN_HIGH = (Rank.ACE, Rank.TEN, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.NINE)


def parse_trump(text: str) -> Trump:
    """Parse a trump mode name (``jacks``, ``none``, ``jacks-only`` ...) or a suit name."""
    t = text.strip().lower().replace("_", "-")
    if t == "normal":
        return TrumpMode.JACKS
    for mode in TrumpMode:
        if mode.value == t:
            return mode
    try:
        return parse_suit(t)
    except ValueError:
        raise ValueError(f"Unknown trump mode: {text!r}") from None


def is_trump(card: Card, trump: Trump) -> bool:
    if trump == TrumpMode.NONE:
        return False
    if trump == TrumpMode.JACKS_ONLY:
        return card.rank == Rank.JACK
    if trump == TrumpMode.QUEENS_ONLY:
        return card.rank == Rank.QUEEN
    if card.is_face(Suit.HEARTS, Rank.TEN):
        return True
    if card.rank in (Rank.QUEEN, Rank.JACK):
        return True
    trump_suit = Suit.DIAMONDS if trump == TrumpMode.JACKS else trump
    return card.suit == trump_suit


def plain_rank_order(trump: Trump) -> tuple[Rank, ...]:
    """
    Descending rank order of non-trump cards within a suit.
    Queens rank above jacks where neither is trump and in the jacks solo.
    """
    if trump in (TrumpMode.NONE, TrumpMode.JACKS_ONLY):
        return _PLAIN_ORDER_QUEEN_HIGH
    return _PLAIN_ORDER_DEFAULT


def _plain_key(rank: Rank, trump: Trump) -> int:
    order = plain_rank_order(trump)
    return len(order) - order.index(rank)


def trump_tier(card: Card, trump: Trump, schweinerei: bool = False) -> Tier:
    if not is_trump(card, trump):
        return Tier.PLAIN
    if trump == TrumpMode.JACKS_ONLY:
        return Tier.JACK
    if trump == TrumpMode.QUEENS_ONLY:
        return Tier.QUEEN
    if schweinerei and trump == TrumpMode.JACKS and card.is_face(Suit.DIAMONDS, Rank.ACE):
        return Tier.SCHWEINEREI
    if card.is_face(Suit.HEARTS, Rank.TEN):
        return Tier.DULLE
    if card.rank == Rank.QUEEN:
        return Tier.QUEEN
    if card.rank == Rank.JACK:
        return Tier.JACK
    return Tier.SUIT_TRUMP


def card_value(card: Card, trump: Trump, schweinerei: bool = False) -> int:
    """
    Total-order value of ``card`` under ``trump``.

    ``schweinerei`` is true when the card's owner holds both Karo aces; it
    promotes those aces above the Herz 10 in the normal game and has no
    effect in any other mode.
    """
    tier = trump_tier(card, trump, schweinerei)
    if tier == Tier.PLAIN:
        key = _plain_key(card.rank, trump)
    elif tier in (Tier.QUEEN, Tier.JACK):
        key = int(card.suit) + 1
    elif tier == Tier.SUIT_TRUMP:
        key = _SUIT_TRUMP_KEYS[card.rank]
    else:
        key = 1
    return int(tier) * TIER_SCALE + key


def contract_to_trump_mode(contract: ContractType) -> Trump:
    return {
        ContractType.NORMAL: TrumpMode.JACKS,
        ContractType.HOCHZEIT: TrumpMode.JACKS,
        ContractType.SOLO_CLUBS: Suit.CLUBS,
        ContractType.SOLO_SPADES: Suit.SPADES,
        ContractType.SOLO_HEARTS: Suit.HEARTS,
        ContractType.SOLO_DIAMONDS: Suit.DIAMONDS,
        ContractType.SOLO_QUEENS: TrumpMode.QUEENS_ONLY,
        ContractType.SOLO_JACKS: TrumpMode.JACKS_ONLY,
        ContractType.SOLO_ACES: TrumpMode.NONE,
    }[contract]


def trump_label(trump: Trump) -> str:
    if isinstance(trump, Suit):
        return f"{trump.name.lower()} solo"
    return trump.value
