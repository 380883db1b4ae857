from __future__ import annotations

def _check_amount(amount):
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"money amounts must be int, got {type(amount).__name__}")

class Wallet:
    """Money ledger; the balance never goes below zero."""

    def __init__(self, balance: int = 0):
        if balance < 0:
            raise ValueError("balance must be non-negative")
        self._balance = int(balance)

    @property
    def balance(self) -> int:
        return self._balance

    def can_afford(self, amount: int) -> bool:
        return 0 <= amount <= self._balance

    def debit(self, amount: int):
        # callers check can_afford first; overdrawing here is a bug
        _check_amount(amount)
        if amount < 0 or amount > self._balance:
            raise ValueError(f"cannot debit {amount} from balance {self._balance}")
        self._balance -= amount

    def credit(self, amount: int):
        _check_amount(amount)
        if amount < 0:
            raise ValueError(f"cannot credit negative amount {amount}")
        self._balance += amount

    def __repr__(self) -> str:
        return f"Wallet({self._balance})"
