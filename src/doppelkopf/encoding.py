"""
Array encodings of hands and legal actions, for bots.

Faces are indexed suit-major (Karo, Herz, Pik, Kreuz) then rank (9 .. Ass),
24 in total. Hands are count vectors because every face exists twice.
Action masks line up with the enum order of the action they cover.
"""
from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .announcements import (
    AnnouncementType,
    AnnouncementWindow,
    STANDARD_WINDOW,
    TeamAnnouncements,
    can_announce,
)
from .bidding import ContractType, Reservation, legal_contracts
from .config import DEFAULT_RULES, RulesConfig
from .deck import Card, Rank, Suit
from .trump import Trump, is_trump

NUM_FACES: int = len(Suit) * len(Rank)  # 24
BID_ACTIONS: tuple[Reservation, ...] = (Reservation.GESUND, Reservation.VORBEHALT)
CONTRACT_ACTIONS: tuple[ContractType, ...] = (ContractType.NORMAL, ContractType.HOCHZEIT)
ANNOUNCEMENT_ACTIONS: tuple[AnnouncementType, ...] = tuple(AnnouncementType)

_RANKS = tuple(Rank)


def card_index(card: Card) -> int:
    return int(card.suit) * len(Rank) + _RANKS.index(card.rank)


def face_at(index: int) -> Card:
    """Inverse of card_index (without id)."""
    suit, rank = divmod(index, len(Rank))
    return Card(suit=Suit(suit), rank=_RANKS[rank])


def encode_hand(hand: Iterable[Card]) -> np.ndarray:
    vec = np.zeros(NUM_FACES, dtype=np.int8)
    for c in hand:
        vec[card_index(c)] += 1
    return vec


def trump_mask(trump: Trump) -> np.ndarray:
    return np.array([is_trump(face_at(i), trump) for i in range(NUM_FACES)], dtype=bool)


def bid_action_mask() -> np.ndarray:
    """
    Both bids are always legal, whatever the hand: a Vorbehalt without a
    special contract counts as Gesund. The mask is constant.
    """
    return np.ones(len(BID_ACTIONS), dtype=bool)


def contract_action_mask(hand: Sequence[Card]) -> np.ndarray:
    legal = set(legal_contracts(hand))
    return np.array([c in legal for c in CONTRACT_ACTIONS], dtype=bool)


def announcement_action_mask(
    team_state: TeamAnnouncements,
    card_count: int,
    window: AnnouncementWindow = STANDARD_WINDOW,
    rules: RulesConfig = DEFAULT_RULES,
) -> np.ndarray:
    return np.array(
        [can_announce(a, team_state, card_count, window, rules) for a in ANNOUNCEMENT_ACTIONS],
        dtype=bool,
    )
