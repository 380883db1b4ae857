"""
Trainer-side state: roster, wallet, bag and the aggregate that binds them.
Modules:
- roster.py (lineup of six, storage box)
- wallet.py (money ledger)
- inventory.py (bounded bag, buy/sell/use)
- trainer.py (aggregate root)
- registry.py (trainer creation and ids)
"""
from .trainer import Trainer
from .registry import TrainerRegistry
__all__ = ["Trainer", "TrainerRegistry"]
