"""Trainer aggregate: one wallet, one roster, one inventory.

All mutation goes through the methods here, each holding the trainer's
re-entrant lock across its whole check-then-act sequence.
"""
from __future__ import annotations
import threading
from typing import Any, Dict, Optional, Tuple

from pokedex.core.result import Outcome, Reason
from pokedex.creature.creature import Creature
from pokedex.creature.evolution import EvolutionEngine, StoneTable
from pokedex.creature.moves import MoveLearner
from pokedex.data.catalog import Catalog
from pokedex.data.models import ItemDef, MoveDef
from pokedex.trainer.inventory import Inventory
from pokedex.trainer.roster import DEFAULT_MAX_STORAGE, Roster
from pokedex.trainer.wallet import Wallet

STARTING_MONEY = 1_000_000

class Trainer:
    def __init__(self, trainer_id: int, name: str, catalog: Catalog, *,
                 birthdate: str = "", sex: str = "", hometown: str = "", description: str = "",
                 money: int = STARTING_MONEY, max_storage: int = DEFAULT_MAX_STORAGE,
                 stones: Optional[StoneTable] = None):
        self.trainer_id = trainer_id
        self.name = name
        self.birthdate = birthdate
        self.sex = sex
        self.hometown = hometown
        self.description = description
        self.catalog = catalog
        self._lock = threading.RLock()
        self._wallet = Wallet(money)
        self._roster = Roster(max_storage=max_storage)
        self._evolution = EvolutionEngine(catalog, stones)
        self._learner = MoveLearner()
        self._inventory = Inventory(self._wallet, self._evolution)

    # --- queries ----------------------------------------------------------
    @property
    def money(self) -> int:
        return self._wallet.balance

    @property
    def max_storage(self) -> int:
        return self._roster.max_storage

    def lineup(self) -> Tuple[Creature, ...]:
        with self._lock:
            return self._roster.lineup()

    def storage(self) -> Tuple[Creature, ...]:
        with self._lock:
            return self._roster.storage()

    def inventory(self) -> Dict[str, int]:
        with self._lock:
            return self._inventory.snapshot()

    def inventory_entries(self) -> Tuple[Tuple[ItemDef, int], ...]:
        with self._lock:
            return self._inventory.entries()

    def item_quantity(self, name: str) -> int:
        with self._lock:
            return self._inventory.quantity(name)

    def summary(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "id": self.trainer_id,
                "name": self.name,
                "birthdate": self.birthdate,
                "sex": self.sex,
                "hometown": self.hometown,
                "description": self.description,
                "money": self.money,
                "lineup": [c.name for c in self._roster.lineup_slots],
                "storage": [c.name for c in self._roster.storage_slots],
                "items": self._inventory.snapshot(),
            }

    def matches(self, query: str) -> bool:
        q = query.strip().lower()
        if not q:
            return True
        if q == str(self.trainer_id):
            return True
        return any(q in field.lower() for field in (self.name, self.hometown, self.description))

    # --- roster -----------------------------------------------------------
    def add_to_lineup(self, creature: Creature) -> Outcome:
        with self._lock:
            return self._roster.add_to_lineup(creature)

    def add_to_storage(self, creature: Creature) -> Outcome:
        with self._lock:
            return self._roster.add_to_storage(creature)

    def swap(self, storage_index: int, lineup_index: int) -> Outcome:
        with self._lock:
            return self._roster.swap(storage_index, lineup_index)

    def release(self, lineup_index: int) -> Outcome:
        with self._lock:
            return self._roster.release(lineup_index)

    def release_from_storage(self, storage_index: int) -> Outcome:
        with self._lock:
            return self._roster.release_from_storage(storage_index)

    def move_to_storage(self, lineup_index: int) -> Outcome:
        with self._lock:
            return self._roster.move_to_storage(lineup_index)

    def move_to_lineup(self, storage_index: int) -> Outcome:
        with self._lock:
            return self._roster.move_to_lineup(storage_index)

    # --- items ------------------------------------------------------------
    def buy(self, item: ItemDef, qty: int = 1) -> Outcome:
        with self._lock:
            return self._inventory.buy(item, qty)

    def sell(self, item: ItemDef, qty: int = 1) -> Outcome:
        with self._lock:
            return self._inventory.sell(item, qty)

    def grant_item(self, item: ItemDef, qty: int = 1) -> Outcome:
        with self._lock:
            return self._inventory.grant(item, qty)

    def use_item(self, item: ItemDef, lineup_index: int) -> Outcome:
        """Use `item` on the lineup member at `lineup_index`."""
        with self._lock:
            target = self._roster.lineup_member(lineup_index)
            if target is None:
                return Outcome.failure(Reason.INDEX_OUT_OF_RANGE, "Invalid lineup index!")
            return self._inventory.use(item, target)

    def use_item_on_stored(self, item: ItemDef, storage_index: int) -> Outcome:
        with self._lock:
            target = self._roster.storage_member(storage_index)
            if target is None:
                return Outcome.failure(Reason.INDEX_OUT_OF_RANGE, "Invalid storage index!")
            return self._inventory.use(item, target)

    # --- moves ------------------------------------------------------------
    def teach_move(self, lineup_index: int, move: MoveDef, replace_index: Optional[int] = None) -> Outcome:
        with self._lock:
            target = self._roster.lineup_member(lineup_index)
            if target is None:
                return Outcome.failure(Reason.INDEX_OUT_OF_RANGE, "Invalid lineup index!")
            return self._learner.learn(target, move, replace_index)

    def __repr__(self) -> str:
        return (f"Trainer(id={self.trainer_id}, name={self.name!r}, money={self.money}, "
                f"lineup={self._roster.lineup_size}, storage={self._roster.storage_size})")

__all__ = ["Trainer", "STARTING_MONEY"]
