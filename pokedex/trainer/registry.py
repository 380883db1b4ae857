from __future__ import annotations
from typing import Dict, List, Optional, TYPE_CHECKING

from pokedex.core.ids import IdAllocator
from pokedex.core.logging import logger
from pokedex.data.catalog import Catalog
from pokedex.trainer.roster import DEFAULT_MAX_STORAGE
from pokedex.trainer.trainer import STARTING_MONEY, Trainer

if TYPE_CHECKING:
    from pokedex.system.settings import Settings

class TrainerRegistry:
    """Creates trainers and owns the id sequence they are numbered from."""

    def __init__(self, catalog: Catalog, settings: Optional["Settings"] = None):
        self.catalog = catalog
        self.settings = settings
        self.ids = IdAllocator()
        self._trainers: Dict[int, Trainer] = {}

    def create(self, name: str, *, birthdate: str = "", sex: str = "", hometown: str = "",
               description: str = "", money: Optional[int] = None,
               trainer_id: Optional[int] = None) -> Trainer:
        data = self.settings.data if self.settings is not None else None
        if money is None:
            money = data.starting_money if data is not None else STARTING_MONEY
        max_storage = data.max_storage if data is not None else DEFAULT_MAX_STORAGE
        if trainer_id is None:
            trainer_id = self.ids.allocate()
        else:
            self.ids.reserve(trainer_id)
        if trainer_id in self._trainers:
            raise ValueError(f"trainer id {trainer_id} already registered")
        trainer = Trainer(trainer_id, name, self.catalog, birthdate=birthdate, sex=sex,
                          hometown=hometown, description=description,
                          money=money, max_storage=max_storage)
        self._trainers[trainer_id] = trainer
        logger.info("TrainerCreated", id=trainer_id, name=name, money=money)
        return trainer

    def get(self, trainer_id: int) -> Optional[Trainer]:
        return self._trainers.get(trainer_id)

    def all(self) -> List[Trainer]:
        return list(self._trainers.values())

    def search(self, query: str) -> List[Trainer]:
        return [t for t in self._trainers.values() if t.matches(query)]

    def __len__(self) -> int:
        return len(self._trainers)
