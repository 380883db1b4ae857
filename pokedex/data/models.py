"""Immutable reference records shared by every trainer.

Catalog entries are frozen dataclasses; a Creature may point at a MoveDef or
ItemDef without ever being able to change it.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple

from pokedex.data.effects import Effect
from pokedex.data.stats import Stat, Stats

@dataclass(frozen=True)
class SpeciesDef:
    id: int
    name: str
    type1: str
    type2: Optional[str] = None
    base_level: int = 1
    evolves_from: Optional[int] = None
    evolves_to: Optional[int] = None
    evolution_level: int = 0
    base: Stats = field(default_factory=Stats)

    @property
    def types(self) -> Tuple[str, ...]:
        return (self.type1,) if not self.type2 else (self.type1, self.type2)

    def matches(self, query: str) -> bool:
        q = query.lower()
        return q in self.name.lower() or any(q in t.lower() for t in self.types)

MOVE_CLASSES = ("TM", "HM")

@dataclass(frozen=True)
class MoveDef:
    name: str
    description: str
    classification: str
    type1: str
    type2: Optional[str] = None

    @property
    def is_hm(self) -> bool:
        return self.classification == "HM"

    @property
    def types(self) -> Tuple[str, ...]:
        return (self.type1,) if not self.type2 else (self.type1, self.type2)

    def matches(self, query: str) -> bool:
        q = query.lower()
        return (q in self.name.lower() or q in self.description.lower()
                or q in self.classification.lower()
                or any(q in t.lower() for t in self.types))

@dataclass(frozen=True)
class ItemDef:
    name: str
    category: str
    description: str
    effect_text: str
    effect: Effect
    buy_price: int = 0
    sell_price: int = 0

    @property
    def purchasable(self) -> bool:
        return self.buy_price != 0

    @property
    def holdable(self) -> bool:
        return self.effect.holdable

    def matches(self, query: str) -> bool:
        q = query.lower()
        return any(q in f.lower() for f in (self.name, self.category, self.description, self.effect_text))

# Every freshly created creature knows exactly these two.
TACKLE = MoveDef("Tackle", "A basic physical attack that damages the opponent", "TM", "Normal")
DEFEND = MoveDef("Defend", "Increases the user's defense temporarily", "TM", "Normal")
DEFAULT_MOVES: Tuple[MoveDef, ...] = (TACKLE, DEFEND)

__all__ = [
    "Stat", "Stats", "SpeciesDef", "MoveDef", "ItemDef", "MOVE_CLASSES",
    "TACKLE", "DEFEND", "DEFAULT_MOVES",
]
