"""
Doppelkopf deck: 48 cards (4 suits × 6 ranks, every face twice).
Card points: 9=0, Bube=2, Dame=3, König=4, 10=10, Ass=11 (240 per deal).
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Sequence

from .config import DEFAULT_RULES, RulesConfig


class Suit(IntEnum):
    """Karo, Herz, Pik, Kreuz. Order is the cross-suit trump order (highest = Kreuz)."""
    DIAMONDS = 0
    HEARTS = 1
    SPADES = 2
    CLUBS = 3


class Rank(IntEnum):
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


SUIT_CODES = {Suit.CLUBS: "C", Suit.SPADES: "S", Suit.HEARTS: "H", Suit.DIAMONDS: "D"}
SUIT_SYMBOLS = {Suit.CLUBS: "♣", Suit.SPADES: "♠", Suit.HEARTS: "♥", Suit.DIAMONDS: "♦"}
RANK_CODES = {
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

_CARD_POINTS = {
    Rank.NINE: 0,
    Rank.JACK: 2,
    Rank.QUEEN: 3,
    Rank.KING: 4,
    Rank.TEN: 10,
    Rank.ACE: 11,
}

_SUIT_ALIASES = {
    **{code.lower(): s for s, code in SUIT_CODES.items()},
    **{sym: s for s, sym in SUIT_SYMBOLS.items()},
    **{s.name.lower(): s for s in Suit},
    "kreuz": Suit.CLUBS,
    "pik": Suit.SPADES,
    "herz": Suit.HEARTS,
    "karo": Suit.DIAMONDS,
}

_RANK_ALIASES = {
    **{code.lower(): r for r, code in RANK_CODES.items()},
    **{r.name.lower(): r for r in Rank},
    "b": Rank.JACK,
    "d": Rank.QUEEN,
    "bube": Rank.JACK,
    "dame": Rank.QUEEN,
    "könig": Rank.KING,
    "ass": Rank.ACE,
}


@dataclass(frozen=True)
class Card:
    """
    A single Doppelkopf card. Every face exists twice in the deck, so ``id``
    tells the two copies apart for selection. Rules never look at ``id``.
    """

    suit: Suit
    rank: Rank
    id: str = ""

    def same_face(self, other: "Card") -> bool:
        return self.suit == other.suit and self.rank == other.rank

    def is_face(self, suit: Suit, rank: Rank) -> bool:
        return self.suit == suit and self.rank == rank

    @property
    def code(self) -> str:
        """Short text form: suit letter + rank, e.g. ``CQ``, ``H10``, ``DA``."""
        return f"{SUIT_CODES[self.suit]}{RANK_CODES[self.rank]}"

    def points(self) -> int:
        return _CARD_POINTS[self.rank]

    def __str__(self) -> str:
        return f"{RANK_CODES[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return str(self)


def parse_suit(text: str) -> Suit:
    s = _SUIT_ALIASES.get(text.strip().lower())
    if s is None:
        raise ValueError(f"Unknown suit: {text!r}")
    return s


def parse_rank(text: str) -> Rank:
    r = _RANK_ALIASES.get(text.strip().lower())
    if r is None:
        raise ValueError(f"Unknown rank: {text!r}")
    return r


def parse_card(text: str, card_id: str = "") -> Card:
    """
    Parse a short card code. The suit comes first as a letter or symbol,
    the rank follows: ``CQ``, ``H10``, ``♦A``, ``sj``.
    """
    t = text.strip()
    if len(t) < 2:
        raise ValueError(f"Unknown card: {text!r}")
    try:
        return Card(suit=parse_suit(t[0]), rank=parse_rank(t[1:]), id=card_id)
    except ValueError:
        raise ValueError(f"Unknown card: {text!r}") from None


def parse_cards(texts: Iterable[str]) -> list[Card]:
    """Parse several codes, numbering ids so equal faces stay distinct."""
    cards: list[Card] = []
    for i, t in enumerate(texts):
        c = parse_card(t)
        cards.append(Card(suit=c.suit, rank=c.rank, id=f"{c.code}-{i}"))
    return cards


def make_deck_48() -> list[Card]:
    """Build the full 48-card deck (two copies of each face, unshuffled)."""
    deck: list[Card] = []
    for s in Suit:
        for r in Rank:
            for copy in range(2):
                deck.append(Card(suit=s, rank=r, id=f"{s.name.lower()}-{r.name.lower()}-{copy}"))
    return deck


def deal_4p(
    player_ids: Sequence[str],
    deck: list[Card] | None = None,
    rng: random.Random | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> dict[str, list[Card]]:
    """
    Shuffle and deal ``rules.cards_per_player`` cards to each player in
    block order: the first player gets the first block of the shuffled pack.
    Raises ValueError if the deck is too small to give everyone a full hand.
    """
    if deck is None:
        deck = make_deck_48()
    n = rules.cards_per_player
    if n * len(player_ids) > len(deck):
        raise ValueError(
            f"Cannot deal {n} cards to {len(player_ids)} players from {len(deck)} cards"
        )
    if rng is None:
        rng = random.Random()
    deck = list(deck)
    rng.shuffle(deck)

    return {pid: deck[i * n:(i + 1) * n] for i, pid in enumerate(player_ids)}


def count_face(hand: Iterable[Card], suit: Suit, rank: Rank) -> int:
    return sum(1 for c in hand if c.is_face(suit, rank))


def card_points(card: Card) -> int:
    return card.points()


def cards_point_total(cards: Iterable[Card]) -> int:
    return sum(c.points() for c in cards)
