"""Evolution: level-triggered and stone-triggered species changes.

Both paths end in the same species merge (`Creature.merge_species`). A target
species missing from the catalog is not an error: the evolution is reported
as pending and the creature is left exactly as it was.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional

from pokedex.core.logging import logger
from pokedex.core.result import Reason
from pokedex.core.types import normalize_type
from pokedex.creature.creature import Creature
from pokedex.data.catalog import Catalog
from pokedex.data.models import ItemDef

class EvolutionStatus(str, Enum):
    EVOLVED = "Evolved"
    PENDING = "Pending"      # due, but the target species is not in the catalog
    NO_EFFECT = "NoEffect"   # stone does not fit this creature
    NOT_READY = "NotReady"   # level threshold not reached / no evolution

@dataclass(frozen=True)
class EvolutionResult:
    status: EvolutionStatus
    from_name: str
    to_name: Optional[str] = None
    reason: Optional[Reason] = None

    @property
    def evolved(self) -> bool:
        return self.status is EvolutionStatus.EVOLVED

    def message(self) -> str:
        if self.status is EvolutionStatus.EVOLVED:
            return f"{self.from_name} evolved into {self.to_name}!"
        if self.status is EvolutionStatus.PENDING:
            return f"{self.from_name} is ready to evolve, but evolution data was not found."
        if self.status is EvolutionStatus.NO_EFFECT:
            return f"It has no effect on {self.from_name}."
        return f"{self.from_name} is not ready to evolve."

class StoneTable:
    """Stone name -> primary type a creature must have for the stone to work."""

    def __init__(self, mapping: Optional[Mapping[str, str]] = None):
        self._required: Dict[str, str] = {}
        for stone, type_name in (mapping or {}).items():
            self.register(stone, type_name)

    @classmethod
    def default(cls) -> "StoneTable":
        from pokedex.data.loader import default_stone_map
        return cls(default_stone_map())

    def register(self, stone: str, type_name: str):
        self._required[stone.lower()] = normalize_type(type_name)

    def required_type(self, stone: str) -> Optional[str]:
        return self._required.get(stone.lower())

    def compatible(self, stone: str, creature: Creature) -> bool:
        required = self.required_type(stone)
        return required is not None and creature.type1 == required

    def __len__(self) -> int:
        return len(self._required)

class EvolutionEngine:
    def __init__(self, catalog: Catalog, stones: Optional[StoneTable] = None):
        self.catalog = catalog
        self.stones = stones if stones is not None else StoneTable.default()

    def _merge_into_target(self, creature: Creature, trigger: str) -> EvolutionResult:
        old_name = creature.name
        target = self.catalog.lookup_species_by_id(creature.evolves_to)
        if target is None:
            logger.info("EvolutionPending", creature=old_name, target=creature.evolves_to, trigger=trigger)
            return EvolutionResult(EvolutionStatus.PENDING, old_name, reason=Reason.SPECIES_NOT_FOUND)
        creature.merge_species(target)
        logger.info("CreatureEvolved", creature=old_name, into=target.name, trigger=trigger)
        return EvolutionResult(EvolutionStatus.EVOLVED, old_name, target.name)

    def evolve_by_level(self, creature: Creature) -> EvolutionResult:
        if not creature.can_evolve_by_level():
            return EvolutionResult(EvolutionStatus.NOT_READY, creature.name)
        return self._merge_into_target(creature, "level")

    def evolve_by_stone(self, creature: Creature, stone: ItemDef) -> EvolutionResult:
        if not self.stones.compatible(stone.name, creature):
            logger.debug("StoneNoEffect", stone=stone.name, creature=creature.name, type1=creature.type1)
            return EvolutionResult(EvolutionStatus.NO_EFFECT, creature.name, reason=Reason.INCOMPATIBLE_TYPE)
        if creature.evolves_to is None:
            logger.debug("StoneNoEffect", stone=stone.name, creature=creature.name, evolves_to=None)
            return EvolutionResult(EvolutionStatus.NO_EFFECT, creature.name)
        return self._merge_into_target(creature, stone.name)

__all__ = ["EvolutionEngine", "EvolutionResult", "EvolutionStatus", "StoneTable"]
