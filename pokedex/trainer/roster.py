"""Lineup (max 6) and storage box management.

Creatures enter the roster as deep copies and leave it (through queries) as
deep copies, so nothing outside the roster can reach an owned instance.
"""
from __future__ import annotations
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from pokedex.core.logging import logger
from pokedex.core.result import Outcome, Reason
from pokedex.creature.creature import Creature

MAX_LINEUP = 6
DEFAULT_MAX_STORAGE = 100

T = TypeVar("T")

class BoundedList(Generic[T]):
    """Ordered sequence that refuses to grow past `capacity`."""

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: List[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        if not self.in_range(index):
            raise IndexError(index)
        return self._items[index]

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def in_range(self, index: int) -> bool:
        return isinstance(index, int) and 0 <= index < len(self._items)

    def append(self, item: T) -> bool:
        if self.is_full:
            return False
        self._items.append(item)
        return True

    def pop(self, index: int) -> T:
        """Remove and return the entry at `index`; later entries shift left."""
        if not self.in_range(index):
            raise IndexError(index)
        return self._items.pop(index)

    def replace(self, index: int, item: T) -> T:
        previous = self[index]
        self._items[index] = item
        return previous

    def snapshot(self) -> Tuple[T, ...]:
        return tuple(self._items)

class Roster:
    def __init__(self, max_lineup: int = MAX_LINEUP, max_storage: int = DEFAULT_MAX_STORAGE):
        self.lineup_slots: BoundedList[Creature] = BoundedList(max_lineup)
        self.storage_slots: BoundedList[Creature] = BoundedList(max_storage)

    # --- queries ----------------------------------------------------------
    @property
    def lineup_size(self) -> int:
        return len(self.lineup_slots)

    @property
    def storage_size(self) -> int:
        return len(self.storage_slots)

    @property
    def max_lineup(self) -> int:
        return self.lineup_slots.capacity

    @property
    def max_storage(self) -> int:
        return self.storage_slots.capacity

    def lineup(self) -> Tuple[Creature, ...]:
        return tuple(c.copy() for c in self.lineup_slots)

    def storage(self) -> Tuple[Creature, ...]:
        return tuple(c.copy() for c in self.storage_slots)

    def lineup_member(self, index: int) -> Optional[Creature]:
        """Owned instance at `index` (engine use only), or None when out of range."""
        return self.lineup_slots[index] if self.lineup_slots.in_range(index) else None

    def storage_member(self, index: int) -> Optional[Creature]:
        return self.storage_slots[index] if self.storage_slots.in_range(index) else None

    # --- mutations --------------------------------------------------------
    def add_to_lineup(self, creature: Creature) -> Outcome:
        if self.lineup_slots.is_full:
            logger.debug("LineupFull", creature=creature.name, size=self.lineup_size)
            return Outcome.failure(Reason.CAPACITY_EXCEEDED,
                                   f"Lineup is full! Maximum {self.max_lineup} Pokémon allowed.")
        self.lineup_slots.append(creature.copy())
        logger.info("LineupAdded", creature=creature.name, size=self.lineup_size)
        return Outcome.success(f"{creature.name} has been added to your lineup!")

    def add_to_storage(self, creature: Creature) -> Outcome:
        if self.storage_slots.is_full:
            logger.debug("StorageFull", creature=creature.name, size=self.storage_size)
            return Outcome.failure(Reason.CAPACITY_EXCEEDED, "Storage is full!")
        self.storage_slots.append(creature.copy())
        logger.info("StorageAdded", creature=creature.name, size=self.storage_size)
        return Outcome.success(f"{creature.name} has been added to storage!")

    def swap(self, storage_index: int, lineup_index: int) -> Outcome:
        if not self.storage_slots.in_range(storage_index):
            return Outcome.failure(Reason.INDEX_OUT_OF_RANGE, "Invalid storage index!")
        if not self.lineup_slots.in_range(lineup_index):
            return Outcome.failure(Reason.INDEX_OUT_OF_RANGE, "Invalid lineup index!")
        incoming = self.storage_slots[storage_index]
        outgoing = self.lineup_slots.replace(lineup_index, incoming)
        self.storage_slots.replace(storage_index, outgoing)
        logger.info("RosterSwapped", into_lineup=incoming.name, into_storage=outgoing.name)
        return Outcome.success(f"Switched {outgoing.name} with {incoming.name}!")

    def release(self, lineup_index: int) -> Outcome:
        if not self.lineup_slots.in_range(lineup_index):
            return Outcome.failure(Reason.INDEX_OUT_OF_RANGE, "Invalid lineup index!")
        gone = self.lineup_slots.pop(lineup_index)
        logger.info("CreatureReleased", creature=gone.name, source="lineup")
        return Outcome.success(f"{gone.name} has been released!")

    def release_from_storage(self, storage_index: int) -> Outcome:
        if not self.storage_slots.in_range(storage_index):
            return Outcome.failure(Reason.INDEX_OUT_OF_RANGE, "Invalid storage index!")
        gone = self.storage_slots.pop(storage_index)
        logger.info("CreatureReleased", creature=gone.name, source="storage")
        return Outcome.success(f"{gone.name} has been released from storage!")

    def move_to_storage(self, lineup_index: int) -> Outcome:
        if not self.lineup_slots.in_range(lineup_index):
            return Outcome.failure(Reason.INDEX_OUT_OF_RANGE, "Invalid lineup index!")
        if self.storage_slots.is_full:
            return Outcome.failure(Reason.CAPACITY_EXCEEDED, "Storage is full!")
        moved = self.lineup_slots.pop(lineup_index)
        self.storage_slots.append(moved)
        logger.info("MovedToStorage", creature=moved.name)
        return Outcome.success(f"{moved.name} moved to storage!")

    def move_to_lineup(self, storage_index: int) -> Outcome:
        if not self.storage_slots.in_range(storage_index):
            return Outcome.failure(Reason.INDEX_OUT_OF_RANGE, "Invalid storage index!")
        if self.lineup_slots.is_full:
            return Outcome.failure(Reason.CAPACITY_EXCEEDED,
                                   f"Lineup is full! Maximum {self.max_lineup} Pokémon allowed.")
        moved = self.storage_slots.pop(storage_index)
        self.lineup_slots.append(moved)
        logger.info("MovedToLineup", creature=moved.name)
        return Outcome.success(f"{moved.name} joined the lineup!")

__all__ = ["Roster", "BoundedList", "MAX_LINEUP", "DEFAULT_MAX_STORAGE"]
