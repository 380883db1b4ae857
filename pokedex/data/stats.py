"""Per-creature stat block: HP, Attack, Defense, Speed."""
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

class Stat(str, Enum):
    HP = "hp"
    ATTACK = "attack"
    DEFENSE = "defense"
    SPEED = "speed"

    @classmethod
    def parse(cls, raw: str) -> "Stat":
        key = str(raw).strip().lower().replace(" ", "_")
        aliases = {"atk": "attack", "def": "defense", "spe": "speed"}
        return cls(aliases.get(key, key))

@dataclass(frozen=True)
class Stats:
    hp: int = 0
    attack: int = 0
    defense: int = 0
    speed: int = 0

    def get(self, stat: Stat) -> int:
        return getattr(self, stat.value)

    def plus(self, stat: Stat, amount: int) -> "Stats":
        return replace(self, **{stat.value: self.get(stat) + amount})

    def scaled(self, factor: float) -> "Stats":
        # int() truncates toward zero
        return Stats(*(int(v * factor) for v in self.as_tuple()))

    def max_with(self, other: "Stats") -> "Stats":
        return Stats(*(max(a, b) for a, b in zip(self.as_tuple(), other.as_tuple())))

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.hp, self.attack, self.defense, self.speed)

    def as_dict(self) -> dict[str, int]:
        return {s.value: self.get(s) for s in Stat}

__all__ = ["Stat", "Stats"]
