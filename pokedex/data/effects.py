"""Structured item effects.

Each catalog item carries one `Effect`, resolved a single time when the item
enters the catalog. Inventory code dispatches on `Effect.kind` and never
looks at the free-text effect description again.

Category -> kind:
  Vitamin, Feather        -> STAT_BOOST (stat + amount)
  Leveling Item           -> LEVEL_UP
  Evolution Stone         -> EVOLUTION_STONE
  Accessory, Poké Ball    -> HOLD
  anything else           -> UNUSABLE
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from pokedex.data.stats import Stat

STAT_BOOST_CATEGORIES = frozenset({"Vitamin", "Feather"})
LEVELING_CATEGORY = "Leveling Item"
STONE_CATEGORY = "Evolution Stone"
HOLDABLE_CATEGORIES = frozenset({"Accessory", "Poké Ball"})

class EffectKind(str, Enum):
    STAT_BOOST = "StatBoost"
    LEVEL_UP = "LevelUp"
    EVOLUTION_STONE = "EvolutionStone"
    HOLD = "Hold"
    UNUSABLE = "Unusable"

@dataclass(frozen=True)
class Effect:
    kind: EffectKind
    stat: Optional[Stat] = None
    amount: int = 0

    @property
    def holdable(self) -> bool:
        return self.kind is EffectKind.HOLD

    @property
    def usable(self) -> bool:
        return self.kind is not EffectKind.UNUSABLE

    def describe(self) -> str:
        if self.kind is EffectKind.STAT_BOOST:
            if self.stat is None:
                return "no effect"
            return f"+{self.amount} {self.stat.value} EV"
        return self.kind.value

# Text markers in scan order; the first marker present decides the stat.
# "Special Defense EV" contains "Defense EV" and therefore lands on DEFENSE.
_STAT_MARKERS = (
    ("HP EV", Stat.HP),
    ("Attack EV", Stat.ATTACK),
    ("Defense EV", Stat.DEFENSE),
    ("Speed EV", Stat.SPEED),
)

def parse_stat_boost(text: str) -> Effect:
    """Scan a legacy effect description such as ``"+10 HP EVs"``."""
    for marker, stat in _STAT_MARKERS:
        if marker in text:
            if "+10" in text:
                return Effect(EffectKind.STAT_BOOST, stat, 10)
            if "+1" in text:
                return Effect(EffectKind.STAT_BOOST, stat, 1)
            return Effect(EffectKind.STAT_BOOST)
    return Effect(EffectKind.STAT_BOOST)

def resolve_effect(category: str, effect_text: str = "", boost: Optional[Mapping[str, Any]] = None) -> Effect:
    """Turn an item's category (and, for boosts, its effect) into an `Effect`.

    `boost` is an explicit ``{"stat": ..., "amount": ...}`` descriptor; when
    given it wins over scanning `effect_text`.
    """
    if category in STAT_BOOST_CATEGORIES:
        if boost:
            return Effect(EffectKind.STAT_BOOST, Stat.parse(boost["stat"]), int(boost["amount"]))
        return parse_stat_boost(effect_text or "")
    if category == LEVELING_CATEGORY:
        return Effect(EffectKind.LEVEL_UP)
    if category == STONE_CATEGORY:
        return Effect(EffectKind.EVOLUTION_STONE)
    if category in HOLDABLE_CATEGORIES:
        return Effect(EffectKind.HOLD)
    return Effect(EffectKind.UNUSABLE)

__all__ = [
    "Effect", "EffectKind", "resolve_effect", "parse_stat_boost",
    "STAT_BOOST_CATEGORIES", "LEVELING_CATEGORY", "STONE_CATEGORY", "HOLDABLE_CATEGORIES",
]
