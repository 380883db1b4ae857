"""Owned creature instances.

A `Creature` is a trainer's own, mutable copy of a species: its level,
current stats, EVs, up to four moves and one held item. Catalog data
(`SpeciesDef`, `MoveDef`, `ItemDef`) is immutable and may be shared, but the
creature itself is never aliased: rosters store copies and hand out copies.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, TYPE_CHECKING

from pokedex.core.types import format_types
from pokedex.data.models import DEFAULT_MOVES, ItemDef, MoveDef, SpeciesDef
from pokedex.data.stats import Stat, Stats

if TYPE_CHECKING:
    from pokedex.data.catalog import Catalog

MAX_MOVES = 4
LEVEL_UP_FACTOR = 1.10

@dataclass
class Creature:
    species_id: int
    name: str
    type1: str
    type2: Optional[str]
    base_level: int
    evolves_from: Optional[int]
    evolves_to: Optional[int]
    evolution_level: int
    base: Stats
    level: int
    stats: Stats
    evs: Stats = field(default_factory=Stats)
    moves: List[MoveDef] = field(default_factory=list)
    held_item: Optional[ItemDef] = None

    @classmethod
    def from_species(cls, species: SpeciesDef) -> "Creature":
        """Fresh creature: base level, stats equal to base, Tackle + Defend."""
        return cls(
            species_id=species.id,
            name=species.name,
            type1=species.type1,
            type2=species.type2,
            base_level=species.base_level,
            evolves_from=species.evolves_from,
            evolves_to=species.evolves_to,
            evolution_level=species.evolution_level,
            base=species.base,
            level=species.base_level,
            stats=species.base,
            moves=list(DEFAULT_MOVES),
        )

    def copy(self) -> "Creature":
        # Stats and catalog defs are frozen; only the move list needs its own storage.
        return Creature(
            species_id=self.species_id,
            name=self.name,
            type1=self.type1,
            type2=self.type2,
            base_level=self.base_level,
            evolves_from=self.evolves_from,
            evolves_to=self.evolves_to,
            evolution_level=self.evolution_level,
            base=self.base,
            level=self.level,
            stats=self.stats,
            evs=self.evs,
            moves=list(self.moves),
            held_item=self.held_item,
        )

    # --- queries ----------------------------------------------------------
    @property
    def types(self) -> Tuple[str, ...]:
        return (self.type1,) if not self.type2 else (self.type1, self.type2)

    @property
    def move_count(self) -> int:
        return len(self.moves)

    @property
    def has_free_move_slot(self) -> bool:
        return len(self.moves) < MAX_MOVES

    def move_names(self) -> List[str]:
        return [m.name for m in self.moves]

    def can_evolve_by_level(self) -> bool:
        return self.evolves_to is not None and self.level >= self.evolution_level

    # --- mutations (owned instance only) ----------------------------------
    def apply_stat_boost(self, stat: Stat, amount: int):
        self.evs = self.evs.plus(stat, amount)
        self.stats = self.stats.plus(stat, amount)

    def level_up(self) -> bool:
        """Gain one level; every current stat grows by 10% (truncated).

        Returns True when a level-triggered evolution is now due.
        """
        self.level += 1
        self.stats = self.stats.scaled(LEVEL_UP_FACTOR)
        return self.can_evolve_by_level()

    def merge_species(self, target: SpeciesDef):
        """Take on `target`'s identity, keeping any stat that is already higher.

        Level, base level, EVs, moves and the held item are untouched.
        """
        self.stats = self.stats.max_with(target.base)
        self.species_id = target.id
        self.name = target.name
        self.type1 = target.type1
        self.type2 = target.type2
        self.base = target.base
        self.evolves_from = target.evolves_from
        self.evolves_to = target.evolves_to
        self.evolution_level = target.evolution_level

    def hold(self, item: ItemDef) -> Optional[ItemDef]:
        """Give the creature `item` to hold; returns whatever it held before."""
        previous = self.held_item
        self.held_item = item
        return previous

    def take_item(self) -> Optional[ItemDef]:
        previous = self.held_item
        self.held_item = None
        return previous

    def describe(self) -> str:
        lines = [
            f"#{self.species_id:03} {self.name} [{format_types(self.types)}]",
            f"Level: {self.level}",
            f"Stats - HP: {self.stats.hp}, Attack: {self.stats.attack}, "
            f"Defense: {self.stats.defense}, Speed: {self.stats.speed}",
            f"Moves: {', '.join(self.move_names())}",
        ]
        if self.held_item is not None:
            lines.append(f"Held Item: {self.held_item.name}")
        return "\n".join(lines)

def spawn(catalog: "Catalog", identifier: int | str) -> Optional[Creature]:
    """New creature of the species named (or numbered) `identifier`, if known."""
    species = catalog.lookup_species(identifier)
    return None if species is None else Creature.from_species(species)

__all__ = ["Creature", "spawn", "MAX_MOVES", "LEVEL_UP_FACTOR"]
