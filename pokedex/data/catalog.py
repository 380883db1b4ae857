"""In-memory reference catalog (species, moves, items).

A `Catalog` is filled once (seed files, CSV import or tests), then frozen and
handed to every component that needs lookups. Entries are immutable, so the
same catalog is safely shared by all trainers.

Name lookups are case-insensitive; ids are the dex numbers.
"""
from __future__ import annotations
from typing import Dict, Iterable, Optional, Tuple

from pokedex.core.errors import CatalogFrozenError
from pokedex.core.logging import logger
from pokedex.data.models import ItemDef, MoveDef, SpeciesDef

class Catalog:
    def __init__(self):
        self._species: Dict[int, SpeciesDef] = {}
        self._species_names: Dict[str, int] = {}
        self._moves: Dict[str, MoveDef] = {}
        self._items: Dict[str, ItemDef] = {}
        self._frozen = False

    # --- building ---------------------------------------------------------
    def _check_open(self, kind: str, name: str):
        if self._frozen:
            raise CatalogFrozenError(kind, name)

    def add_species(self, species: SpeciesDef) -> bool:
        """Register a species; False on duplicate id or name."""
        self._check_open("species", species.name)
        key = species.name.lower()
        if species.id in self._species or key in self._species_names:
            logger.debug("SpeciesRejectedDuplicate", id=species.id, name=species.name)
            return False
        self._species[species.id] = species
        self._species_names[key] = species.id
        return True

    def add_move(self, move: MoveDef) -> bool:
        self._check_open("move", move.name)
        key = move.name.lower()
        if key in self._moves:
            logger.debug("MoveRejectedDuplicate", name=move.name)
            return False
        self._moves[key] = move
        return True

    def add_item(self, item: ItemDef) -> bool:
        self._check_open("item", item.name)
        key = item.name.lower()
        if key in self._items:
            logger.debug("ItemRejectedDuplicate", name=item.name)
            return False
        self._items[key] = item
        return True

    def extend(self, species: Iterable[SpeciesDef] = (), moves: Iterable[MoveDef] = (),
               items: Iterable[ItemDef] = ()) -> int:
        """Bulk add; returns the number of entries accepted."""
        added = 0
        for sp in species:
            added += self.add_species(sp)
        for mv in moves:
            added += self.add_move(mv)
        for it in items:
            added += self.add_item(it)
        return added

    def freeze(self) -> "Catalog":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # --- lookups ----------------------------------------------------------
    def lookup_species_by_id(self, species_id: Optional[int]) -> Optional[SpeciesDef]:
        if species_id is None:
            return None
        return self._species.get(species_id)

    def lookup_species_by_name(self, name: str) -> Optional[SpeciesDef]:
        sid = self._species_names.get(str(name).strip().lower())
        return None if sid is None else self._species[sid]

    def lookup_species(self, identifier: int | str) -> Optional[SpeciesDef]:
        """Accept a dex id, a digit string or a species name."""
        if isinstance(identifier, int):
            return self.lookup_species_by_id(identifier)
        s = str(identifier).strip()
        if s.isdigit():
            return self.lookup_species_by_id(int(s))
        return self.lookup_species_by_name(s)

    def lookup_move_by_name(self, name: str) -> Optional[MoveDef]:
        return self._moves.get(str(name).strip().lower())

    def lookup_item_by_name(self, name: str) -> Optional[ItemDef]:
        return self._items.get(str(name).strip().lower())

    # --- listing & search -------------------------------------------------
    def species(self) -> Tuple[SpeciesDef, ...]:
        return tuple(self._species.values())

    def moves(self) -> Tuple[MoveDef, ...]:
        return tuple(self._moves.values())

    def items(self) -> Tuple[ItemDef, ...]:
        return tuple(self._items.values())

    def search_species(self, query: str) -> Tuple[SpeciesDef, ...]:
        return tuple(sp for sp in self._species.values() if sp.matches(query))

    def search_moves(self, query: str) -> Tuple[MoveDef, ...]:
        return tuple(mv for mv in self._moves.values() if mv.matches(query))

    def search_items(self, query: str) -> Tuple[ItemDef, ...]:
        return tuple(it for it in self._items.values() if it.matches(query))

    def __len__(self) -> int:
        return len(self._species) + len(self._moves) + len(self._items)

    def __repr__(self) -> str:
        return (f"Catalog(species={len(self._species)}, moves={len(self._moves)}, "
                f"items={len(self._items)}, frozen={self._frozen})")

__all__ = ["Catalog"]
