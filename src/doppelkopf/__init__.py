"""Doppelkopf rules engine (trump order, hand sorting, reservations, announcements)."""

__version__ = "0.1.0"

from .config import RulesConfig, DEFAULT_RULES, load_rules
from .deck import Card, Rank, Suit, make_deck_48, deal_4p, parse_card, parse_cards
from .trump import TrumpMode, Tier, is_trump, card_value, contract_to_trump_mode, parse_trump
from .sorting import sort_hand, has_schweinerei, find_schweinerei_player, schweinerei_active_for
from .bidding import (
    Reservation,
    ContractType,
    BiddingPhase,
    BiddingResult,
    start_bidding,
    current_bidder,
    place_bid,
    declare_contract,
    is_complete,
    resolve_contract,
    can_declare_hochzeit,
    legal_contracts,
)
from .announcements import (
    Team,
    AnnouncementType,
    TeamAnnouncements,
    AnnouncementWindow,
    can_announce,
    check_announcement,
    available_announcements,
    default_announcement,
    reconcile_selection,
)
