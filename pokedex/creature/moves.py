"""Move learning: type compatibility, the four-move cap and HM lock-in."""
from __future__ import annotations
from typing import Optional

from pokedex.core.logging import logger
from pokedex.core.result import Outcome, Reason
from pokedex.creature.creature import Creature, MAX_MOVES
from pokedex.data.models import MoveDef

NORMAL = "Normal"

def is_compatible(creature: Creature, move: MoveDef) -> bool:
    """Normal moves fit everyone; otherwise a move type must match a creature type."""
    if move.type1 == NORMAL:
        return True
    own = set(creature.types)
    return any(t in own for t in move.types)

class MoveLearner:
    def learn(self, creature: Creature, move: MoveDef, replace_index: Optional[int] = None) -> Outcome:
        """Teach `move`, appending while there is room.

        With four moves known, `replace_index` picks the slot to overwrite;
        HM moves cannot be overwritten. A rejected call leaves the move set
        untouched.
        """
        if not is_compatible(creature, move):
            logger.debug("MoveRejected", creature=creature.name, move=move.name, reason=Reason.INCOMPATIBLE_TYPE)
            return Outcome.failure(Reason.INCOMPATIBLE_TYPE, f"{creature.name} cannot learn {move.name}!")
        if creature.has_free_move_slot:
            creature.moves.append(move)
            logger.info("MoveLearned", creature=creature.name, move=move.name)
            return Outcome.success(f"{creature.name} learned {move.name}!")
        if not isinstance(replace_index, int) or not 0 <= replace_index < MAX_MOVES:
            return Outcome.failure(Reason.INVALID_REPLACE_INDEX,
                                   f"Choose a move slot 0-{MAX_MOVES - 1} to replace.")
        forgotten = creature.moves[replace_index]
        if forgotten.is_hm:
            logger.debug("MoveRejected", creature=creature.name, move=move.name, reason=Reason.CANNOT_FORGET_HM)
            return Outcome.failure(Reason.CANNOT_FORGET_HM, f"{forgotten.name} is an HM move and cannot be forgotten.")
        creature.moves[replace_index] = move
        logger.info("MoveLearned", creature=creature.name, move=move.name, forgot=forgotten.name)
        return Outcome.success(f"{creature.name} forgot {forgotten.name} and learned {move.name}!")

__all__ = ["MoveLearner", "is_compatible"]
