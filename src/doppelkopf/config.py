"""
House-rule configuration.

Rules are a small frozen dataclass so they can be shared between callers and
saved next to game history as JSON.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

RULES_SCHEMA_VERSION = 1
PLAYER_COUNT = 4
DECK_SIZE = 48

# Minimum cards the announcing player must still hold (12-card deal).
DEFAULT_MIN_CARDS: Dict[str, int] = {
    "re": 11,
    "kontra": 11,
    "no90": 10,
    "no60": 9,
    "no30": 8,
    "schwarz": 7,
}


@dataclass(frozen=True)
class RulesConfig:
    """
    A partial ``min_cards`` table is merged over the default table; the
    result is read-only. Raises ValueError for unknown announcements or a
    hand size the 48-card deck cannot deal to four players.
    """

    schweinerei: bool = True
    cards_per_player: int = 12
    min_cards: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        merged = dict(DEFAULT_MIN_CARDS)
        for key, value in dict(self.min_cards).items():
            if key not in DEFAULT_MIN_CARDS:
                raise ValueError(f"Unknown announcement in min_cards: {key!r}")
            merged[key] = int(value)
        object.__setattr__(self, "min_cards", MappingProxyType(merged))

        if self.cards_per_player <= 0:
            raise ValueError(f"cards_per_player must be positive, got {self.cards_per_player}")
        if self.cards_per_player * PLAYER_COUNT > DECK_SIZE:
            raise ValueError(
                f"cards_per_player={self.cards_per_player} needs "
                f"{self.cards_per_player * PLAYER_COUNT} cards, the deck has {DECK_SIZE}"
            )


DEFAULT_RULES = RulesConfig()


def rules_to_dict(rules: RulesConfig) -> Dict[str, Any]:
    return {
        "schema_version": RULES_SCHEMA_VERSION,
        "schweinerei": rules.schweinerei,
        "cards_per_player": rules.cards_per_player,
        "min_cards": dict(rules.min_cards),
    }


def rules_from_dict(d: Dict[str, Any]) -> RulesConfig:
    """
    Build a RulesConfig from a dict (e.g. parsed JSON). Missing keys take the
    defaults; unknown top-level keys are ignored.
    """
    return RulesConfig(
        schweinerei=bool(d.get("schweinerei", True)),
        cards_per_player=int(d.get("cards_per_player", 12)),
        min_cards=dict(d.get("min_cards", {})),
    )


def rules_to_json(rules: RulesConfig) -> str:
    return json.dumps(rules_to_dict(rules), indent=2)


def rules_from_json(s: str) -> RulesConfig:
    return rules_from_dict(json.loads(s))


def load_rules(path: str | Path) -> RulesConfig:
    """Load rules from a JSON file."""
    with Path(path).open("r", encoding="utf-8") as f:
        return rules_from_dict(json.load(f))


__all__ = [
    "RulesConfig",
    "DEFAULT_RULES",
    "DEFAULT_MIN_CARDS",
    "RULES_SCHEMA_VERSION",
    "rules_to_dict",
    "rules_from_dict",
    "rules_to_json",
    "rules_from_json",
    "load_rules",
]
