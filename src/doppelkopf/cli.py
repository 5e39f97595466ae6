"""
Command-line interface for inspecting the Doppelkopf rules.

Usage examples:

    python -m doppelkopf.cli deal --seed 7
    python -m doppelkopf.cli sort CQ H10 DA DA S9 --trump jacks --schweinerei
    python -m doppelkopf.cli announce --team re --cards 10 --announced
"""
from __future__ import annotations

import argparse
import logging
import random
from typing import Optional

from .announcements import (
    ANNOUNCEMENT_LABELS,
    AnnouncementType,
    Team,
    TeamAnnouncements,
    candidate_announcements,
    check_announcement,
    default_announcement,
)
from .bidding import can_declare_hochzeit, default_bid
from .config import DEFAULT_RULES, RulesConfig, load_rules
from .deck import deal_4p, parse_cards
from .sorting import find_schweinerei_player, schweinerei_active_for, sort_hand
from .trump import TrumpMode, parse_trump, trump_label

PLAYER_IDS = ("p1", "p2", "p3", "p4")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--rules",
        type=str,
        default=None,
        help="Path to a rules JSON file (defaults to the standard rules).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level, e.g. DEBUG or INFO.",
    )


def _rules(args: argparse.Namespace) -> RulesConfig:
    path = getattr(args, "rules", None)
    return load_rules(path) if path else DEFAULT_RULES


def _add_deal_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("deal", help="Deal a seeded round and show sorted hands.")
    parser.add_argument("--seed", type=int, default=0, help="Random seed for the shuffle.")
    parser.add_argument(
        "--trump",
        type=parse_trump,
        default=TrumpMode.JACKS,
        help='Trump mode: "jacks", "none", "jacks-only", "queens-only" or a suit.',
    )
    _add_common_arguments(parser)
    parser.set_defaults(func=_cmd_deal)


def _cmd_deal(args: argparse.Namespace) -> None:
    rules = _rules(args)
    hands = deal_4p(PLAYER_IDS, rng=random.Random(args.seed), rules=rules)
    owner = find_schweinerei_player(hands, rules)
    print(f"Trump: {trump_label(args.trump)}")
    for pid in PLAYER_IDS:
        hand = sort_hand(hands[pid], args.trump, schweinerei_active_for(owner, pid))
        flags = []
        if owner == pid:
            flags.append("Schweinerei")
        if can_declare_hochzeit(hand):
            flags.append("Hochzeit possible")
        suffix = f"  [{', '.join(flags)}]" if flags else ""
        print(f"{pid} ({default_bid(hand).value}): {' '.join(c.code for c in hand)}{suffix}")


def _add_sort_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("sort", help="Sort a hand given as card codes (CQ, H10, DA ...).")
    parser.add_argument("cards", nargs="+", help="Card codes: suit letter then rank.")
    parser.add_argument("--trump", type=parse_trump, default=TrumpMode.JACKS, help="Trump mode.")
    parser.add_argument(
        "--schweinerei",
        action="store_true",
        help="The hand's owner holds the Schweinerei.",
    )
    _add_common_arguments(parser)
    parser.set_defaults(func=_cmd_sort)


def _cmd_sort(args: argparse.Namespace) -> None:
    schweinerei = args.schweinerei and _rules(args).schweinerei
    hand = sort_hand(parse_cards(args.cards), args.trump, schweinerei)
    print(" ".join(c.code for c in hand))


def _add_announce_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("announce", help="List which announcements are legal right now.")
    parser.add_argument("--team", type=Team, required=True, help="re or kontra.")
    parser.add_argument("--cards", type=int, required=True, help="Cards left in the player's hand.")
    parser.add_argument(
        "--announced",
        action="store_true",
        help="The team has already announced Re/Kontra.",
    )
    parser.add_argument(
        "--declared",
        type=AnnouncementType,
        nargs="*",
        default=[],
        help="Point announcements the team has already made (no90, no60, no30, schwarz).",
    )
    _add_common_arguments(parser)
    parser.set_defaults(func=_cmd_announce)


def _cmd_announce(args: argparse.Namespace) -> None:
    rules = _rules(args)
    state = TeamAnnouncements(
        team=args.team,
        identity_announced=args.announced,
        declared=frozenset(args.declared),
    )
    for a in candidate_announcements(args.team):
        check = check_announcement(a, state, args.cards, rules=rules)
        status = "yes" if check.allowed else f"no ({check.reason})"
        print(f"{ANNOUNCEMENT_LABELS[a]:<9} {status}")
    default = default_announcement(state, args.cards, rules=rules)
    print(f"Default: {ANNOUNCEMENT_LABELS[default] if default else '-'}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="doppelkopf", description="Doppelkopf rules CLI.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_deal_parser(subparsers)
    _add_sort_parser(subparsers)
    _add_announce_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(message)s",
    )
    try:
        args.func(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
