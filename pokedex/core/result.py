"""Result values returned by every mutating engine operation.

A rejected operation reports *why* through `Reason` and guarantees that no
state was touched. Callers test the outcome directly (`if outcome:`) or
inspect `outcome.reason`.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from pokedex.creature.evolution import EvolutionResult

class Reason(str, Enum):
    CAPACITY_EXCEEDED = "CapacityExceeded"
    TOTAL_CAPACITY_EXCEEDED = "TotalCapacityExceeded"
    UNIQUE_SLOT_EXCEEDED = "UniqueSlotExceeded"
    INSUFFICIENT_FUNDS = "InsufficientFunds"
    INSUFFICIENT_QUANTITY = "InsufficientQuantity"
    INVALID_QUANTITY = "InvalidQuantity"
    ITEM_NOT_HELD = "ItemNotHeld"
    NOT_PURCHASABLE = "NotPurchasable"
    NOT_USABLE = "NotUsable"
    INCOMPATIBLE_TYPE = "IncompatibleType"
    CANNOT_FORGET_HM = "CannotForgetHM"
    INVALID_REPLACE_INDEX = "InvalidReplaceIndex"
    INDEX_OUT_OF_RANGE = "IndexOutOfRange"
    SPECIES_NOT_FOUND = "SpeciesNotFound"

    def __str__(self) -> str:
        return self.value

@dataclass(frozen=True)
class Outcome:
    ok: bool
    reason: Optional[Reason] = None
    message: str = ""
    evolution: Optional["EvolutionResult"] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str = "", evolution: Optional["EvolutionResult"] = None) -> "Outcome":
        return cls(True, None, message, evolution)

    @classmethod
    def failure(cls, reason: Reason, message: str = "") -> "Outcome":
        return cls(False, reason, message or str(reason))

__all__ = ["Reason", "Outcome"]
