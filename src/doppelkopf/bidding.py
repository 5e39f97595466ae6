"""
Reservation round (Vorbehaltsabfrage) for 4 players.
Each player in turn says Gesund or Vorbehalt. A Vorbehalt must be followed by a
contract declaration from the same player; without a legal special contract it
counts as Gesund. A declared Hochzeit fixes the round's contract.

Every function returns a new BiddingPhase; inputs are never modified. Whose
turn it is gets enforced by the session owner, not here.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Mapping, NamedTuple, Sequence

from .deck import Card, Rank, Suit, count_face

logger = logging.getLogger(__name__)


class Reservation(str, Enum):
    GESUND = "gesund"
    VORBEHALT = "vorbehalt"


class ContractType(str, Enum):
    NORMAL = "normal"
    HOCHZEIT = "hochzeit"
    SOLO_CLUBS = "solo-clubs"
    SOLO_SPADES = "solo-spades"
    SOLO_HEARTS = "solo-hearts"
    SOLO_DIAMONDS = "solo-diamonds"
    SOLO_QUEENS = "solo-queens"
    SOLO_JACKS = "solo-jacks"
    SOLO_ACES = "solo-aces"


CONTRACT_LABELS = {
    ContractType.NORMAL: "Normal",
    ContractType.HOCHZEIT: "Hochzeit",
    ContractType.SOLO_CLUBS: "Kreuz-Solo",
    ContractType.SOLO_SPADES: "Pik-Solo",
    ContractType.SOLO_HEARTS: "Herz-Solo",
    ContractType.SOLO_DIAMONDS: "Karo-Solo",
    ContractType.SOLO_QUEENS: "Damen-Solo",
    ContractType.SOLO_JACKS: "Buben-Solo",
    ContractType.SOLO_ACES: "Fleischloser",
}


def is_solo_contract(contract: ContractType) -> bool:
    return contract.value.startswith("solo-")


@dataclass(frozen=True)
class BiddingPhase:
    """
    Snapshot of the reservation round.

    players: seat order of player ids; current_bidder_index walks it.
    bids: player id -> Reservation, at most one entry per player.
    awaiting_declaration: player who said Vorbehalt and still has to declare.
    contract / declarer: set once a special contract is fixed.
    """

    players: tuple[str, ...]
    current_bidder_index: int = 0
    bids: Mapping[str, Reservation] = field(default_factory=dict)
    awaiting_declaration: str | None = None
    contract: ContractType | None = None
    declarer: str | None = None


class BiddingResult(NamedTuple):
    contract: ContractType
    declarer: str | None
    bids: Dict[str, Reservation]


def forehand_index(round_number: int, player_count: int = 4) -> int:
    """Seat that opens round ``round_number`` (1-based); moves one seat per round."""
    return (round_number - 1) % player_count


def start_bidding(players: Sequence[str], forehand: int = 0) -> BiddingPhase:
    return BiddingPhase(players=tuple(players), current_bidder_index=forehand % len(players))


def current_bidder(phase: BiddingPhase) -> str | None:
    """Player expected to act next, or None once the round is complete."""
    if is_complete(phase):
        return None
    if phase.awaiting_declaration is not None:
        return phase.awaiting_declaration
    return phase.players[phase.current_bidder_index]


def can_declare_hochzeit(hand: Sequence[Card]) -> bool:
    """A Hochzeit needs both Kreuz-Damen."""
    return count_face(hand, Suit.CLUBS, Rank.QUEEN) >= 2


def legal_contracts(hand: Sequence[Card]) -> list[ContractType]:
    contracts = [ContractType.NORMAL]
    if can_declare_hochzeit(hand):
        contracts.append(ContractType.HOCHZEIT)
    return contracts


def has_special_contract(hand: Sequence[Card]) -> bool:
    return len(legal_contracts(hand)) > 1


def default_bid(hand: Sequence[Card]) -> Reservation:
    """Pre-selected choice: Vorbehalt when a special contract is available."""
    return Reservation.VORBEHALT if has_special_contract(hand) else Reservation.GESUND


def default_contract(hand: Sequence[Card]) -> ContractType | None:
    """Pre-selected declaration: the strongest legal special contract, if any."""
    special = [c for c in legal_contracts(hand) if c != ContractType.NORMAL]
    return special[-1] if special else None


def _next_index(phase: BiddingPhase, player_id: str) -> int:
    n = len(phase.players)
    if player_id in phase.players:
        return (phase.players.index(player_id) + 1) % n
    return (phase.current_bidder_index + 1) % n


def place_bid(
    phase: BiddingPhase,
    player_id: str,
    bid: Reservation,
    hand: Sequence[Card],
) -> BiddingPhase:
    """
    Record ``bid`` for ``player_id``.

    Gesund advances to the next seat. Vorbehalt waits for the same player's
    declaration when a special contract is legal for ``hand``; otherwise it is
    downgraded to Gesund and bidding advances.
    """
    bids = dict(phase.bids)

    if bid == Reservation.VORBEHALT and has_special_contract(hand):
        bids[player_id] = Reservation.VORBEHALT
        logger.debug("bidding: %s reserved, awaiting declaration", player_id)
        return replace(phase, bids=bids, awaiting_declaration=player_id)

    if bid == Reservation.VORBEHALT:
        logger.debug("bidding: %s has no special contract, Vorbehalt counts as Gesund", player_id)
    else:
        logger.debug("bidding: %s is gesund", player_id)
    bids[player_id] = Reservation.GESUND
    return replace(phase, bids=bids, current_bidder_index=_next_index(phase, player_id))


def declare_contract(
    phase: BiddingPhase,
    player_id: str,
    contract: ContractType,
) -> BiddingPhase:
    """
    Resolve a pending Vorbehalt. The caller has already checked that
    ``contract`` is in ``legal_contracts`` for this player's hand.

    Any non-normal contract is fixed for the round. Normal counts as Gesund and
    bidding resumes with the next seat.
    """
    if contract != ContractType.NORMAL:
        logger.debug("bidding: %s declared %s", player_id, contract.value)
        return replace(
            phase,
            awaiting_declaration=None,
            contract=contract,
            declarer=player_id,
        )

    bids = dict(phase.bids)
    bids[player_id] = Reservation.GESUND
    logger.debug("bidding: %s withdrew the Vorbehalt", player_id)
    return replace(
        phase,
        bids=bids,
        awaiting_declaration=None,
        current_bidder_index=_next_index(phase, player_id),
    )


def is_complete(phase: BiddingPhase) -> bool:
    if phase.contract is not None:
        return True
    if phase.awaiting_declaration is not None:
        return False
    return all(p in phase.bids for p in phase.players)


def resolve_contract(phase: BiddingPhase) -> BiddingResult:
    """Contract of a complete round: the fixed special contract or a normal game."""
    if phase.contract is not None:
        return BiddingResult(phase.contract, phase.declarer, dict(phase.bids))
    return BiddingResult(ContractType.NORMAL, None, dict(phase.bids))


def assign_teams(
    hands: Mapping[str, Sequence[Card]],
    contract: ContractType,
    declarer: str | None = None,
) -> Dict[str, str]:
    """
    Initial team per player ("re" / "kontra").
    Normal game: holders of a Kreuz-Dame play Re. Hochzeit and solos: the
    declarer plays Re alone until a Hochzeit partner is found.
    """
    if contract == ContractType.NORMAL or declarer is None:
        return {
            pid: "re" if count_face(hand, Suit.CLUBS, Rank.QUEEN) > 0 else "kontra"
            for pid, hand in hands.items()
        }
    return {pid: "re" if pid == declarer else "kontra" for pid in hands}
