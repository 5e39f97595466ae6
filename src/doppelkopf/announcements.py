"""
Announcements (Ansagen): Re / Kontra, then the point ladder
Keine 90 < Keine 60 < Keine 30 < Schwarz.

Each announcement needs a minimum number of cards left in the announcing
player's hand (11 / 10 / 9 / 8 / 7 with a 12-card deal). Ladder levels may be
skipped only while every skipped level could still be announced right now.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import NamedTuple

from .bidding import ContractType
from .config import DEFAULT_RULES, RulesConfig


class Team(str, Enum):
    RE = "re"
    KONTRA = "kontra"


class AnnouncementType(str, Enum):
    RE = "re"
    KONTRA = "kontra"
    NO90 = "no90"
    NO60 = "no60"
    NO30 = "no30"
    SCHWARZ = "schwarz"


IDENTITY_ANNOUNCEMENTS = (AnnouncementType.RE, AnnouncementType.KONTRA)
POINT_LADDER = (
    AnnouncementType.NO90,
    AnnouncementType.NO60,
    AnnouncementType.NO30,
    AnnouncementType.SCHWARZ,
)

ANNOUNCEMENT_LABELS = {
    AnnouncementType.RE: "Re",
    AnnouncementType.KONTRA: "Kontra",
    AnnouncementType.NO90: "Keine 90",
    AnnouncementType.NO60: "Keine 60",
    AnnouncementType.NO30: "Keine 30",
    AnnouncementType.SCHWARZ: "Schwarz",
}


def identity_announcement(team: Team) -> AnnouncementType:
    return AnnouncementType.RE if team == Team.RE else AnnouncementType.KONTRA


@dataclass(frozen=True)
class TeamAnnouncements:
    """What one team has announced so far."""

    team: Team
    identity_announced: bool = False
    declared: frozenset[AnnouncementType] = field(default_factory=frozenset)

    def with_announcement(self, announcement: AnnouncementType) -> "TeamAnnouncements":
        if announcement in IDENTITY_ANNOUNCEMENTS:
            return replace(self, identity_announced=True)
        return replace(self, declared=self.declared | {announcement})


@dataclass(frozen=True)
class AnnouncementWindow:
    """
    Adjustments to the minimum card counts.

    reduction: lowers every threshold (late Hochzeit clarification).
    identity_blocked: Re/Kontra not allowed yet (Hochzeit partner unknown).
    counter_bonus: Re/Kontra answers the opponent's, one card later is fine.
    """

    reduction: int = 0
    identity_blocked: bool = False
    counter_bonus: bool = False


STANDARD_WINDOW = AnnouncementWindow()


def announcement_window(
    contract: ContractType = ContractType.NORMAL,
    *,
    hochzeit_pending: bool = False,
    clarification_trick: int | None = None,
    opponent_identity_announced: bool = False,
) -> AnnouncementWindow:
    """
    Window for the current moment of the round. In a Hochzeit the first
    Re/Kontra waits for the clarification trick; a clarification in trick 2
    or 3 shifts every threshold down by 1 or 2 cards.
    """
    reduction = 0
    blocked = False
    if contract == ContractType.HOCHZEIT:
        if clarification_trick == 2:
            reduction = 1
        elif clarification_trick == 3:
            reduction = 2
        blocked = hochzeit_pending and clarification_trick is None
    return AnnouncementWindow(
        reduction=reduction,
        identity_blocked=blocked,
        counter_bonus=opponent_identity_announced,
    )


class AnnouncementCheck(NamedTuple):
    allowed: bool
    reason: str | None = None


def min_cards(
    announcement: AnnouncementType,
    window: AnnouncementWindow = STANDARD_WINDOW,
    rules: RulesConfig = DEFAULT_RULES,
) -> int:
    n = rules.min_cards[announcement.value] - window.reduction
    if window.counter_bonus and announcement in IDENTITY_ANNOUNCEMENTS:
        n -= 1
    return max(0, n)


def check_announcement(
    announcement: AnnouncementType,
    team_state: TeamAnnouncements,
    card_count: int,
    window: AnnouncementWindow = STANDARD_WINDOW,
    rules: RulesConfig = DEFAULT_RULES,
) -> AnnouncementCheck:
    """Whether the announcing player's team may make ``announcement`` now, and why not."""
    own_identity = identity_announcement(team_state.team)
    label = ANNOUNCEMENT_LABELS[announcement]

    if announcement in IDENTITY_ANNOUNCEMENTS:
        if announcement != own_identity:
            return AnnouncementCheck(
                False, f"Team {ANNOUNCEMENT_LABELS[own_identity]} can only announce {ANNOUNCEMENT_LABELS[own_identity]}."
            )
        if team_state.identity_announced:
            return AnnouncementCheck(False, f"{label} has already been announced.")
        if window.identity_blocked:
            return AnnouncementCheck(False, f"{label} is not allowed before the Hochzeit clarification trick.")
        needed = min_cards(announcement, window, rules)
        if card_count < needed:
            return AnnouncementCheck(False, f"Too late: {label} needs at least {needed} cards.")
        return AnnouncementCheck(True)

    if not team_state.identity_announced:
        return AnnouncementCheck(False, f"Announce {ANNOUNCEMENT_LABELS[own_identity]} first.")
    if announcement in team_state.declared:
        return AnnouncementCheck(False, f"{label} has already been announced.")
    needed = min_cards(announcement, window, rules)
    if card_count < needed:
        return AnnouncementCheck(False, f"Too late: {label} needs at least {needed} cards.")

    for skipped in POINT_LADDER[:POINT_LADDER.index(announcement)]:
        if skipped in team_state.declared:
            continue
        skipped_needed = min_cards(skipped, window, rules)
        if card_count < skipped_needed:
            return AnnouncementCheck(
                False,
                f"Too late: skipping to {label} requires that "
                f"{ANNOUNCEMENT_LABELS[skipped]} is still possible "
                f"(at least {skipped_needed} cards).",
            )
    return AnnouncementCheck(True)


def can_announce(
    announcement: AnnouncementType,
    team_state: TeamAnnouncements,
    card_count: int,
    window: AnnouncementWindow = STANDARD_WINDOW,
    rules: RulesConfig = DEFAULT_RULES,
) -> bool:
    return check_announcement(announcement, team_state, card_count, window, rules).allowed


def candidate_announcements(team: Team) -> list[AnnouncementType]:
    return [identity_announcement(team), *POINT_LADDER]


def available_announcements(
    team_state: TeamAnnouncements,
    card_count: int,
    window: AnnouncementWindow = STANDARD_WINDOW,
    rules: RulesConfig = DEFAULT_RULES,
) -> list[AnnouncementType]:
    """Legal announcements in ladder order; empty means offer none."""
    return [
        a
        for a in candidate_announcements(team_state.team)
        if can_announce(a, team_state, card_count, window, rules)
    ]


def default_announcement(
    team_state: TeamAnnouncements,
    card_count: int,
    window: AnnouncementWindow = STANDARD_WINDOW,
    rules: RulesConfig = DEFAULT_RULES,
) -> AnnouncementType | None:
    """The weakest legal announcement, or None."""
    available = available_announcements(team_state, card_count, window, rules)
    return available[0] if available else None


def reconcile_selection(
    selected: AnnouncementType | None,
    team_state: TeamAnnouncements,
    card_count: int,
    window: AnnouncementWindow = STANDARD_WINDOW,
    rules: RulesConfig = DEFAULT_RULES,
) -> AnnouncementType | None:
    """Keep ``selected`` while it stays legal; otherwise fall back to the default."""
    available = available_announcements(team_state, card_count, window, rules)
    if selected in available:
        return selected
    return available[0] if available else None
