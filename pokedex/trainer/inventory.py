"""Bounded item bag: at most `max_unique` distinct items, `max_total` units.

Every operation checks all of its preconditions before touching money or
quantities, so a rejected call leaves wallet and bag exactly as they were.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from pokedex.core.logging import logger
from pokedex.core.result import Outcome, Reason
from pokedex.creature.creature import Creature
from pokedex.creature.evolution import EvolutionEngine
from pokedex.data.effects import EffectKind
from pokedex.data.models import ItemDef
from pokedex.trainer.wallet import Wallet

MAX_UNIQUE = 10
MAX_TOTAL = 50

@dataclass
class ItemStack:
    item: ItemDef
    quantity: int

class Inventory:
    def __init__(self, wallet: Wallet, evolution: EvolutionEngine,
                 max_unique: int = MAX_UNIQUE, max_total: int = MAX_TOTAL):
        self.wallet = wallet
        self.evolution = evolution
        self.max_unique = max_unique
        self.max_total = max_total
        self._stacks: List[ItemStack] = []

    # --- queries ----------------------------------------------------------
    def _find(self, name: str) -> Optional[ItemStack]:
        key = name.lower()
        for stack in self._stacks:
            if stack.item.name.lower() == key:
                return stack
        return None

    def quantity(self, name: str) -> int:
        stack = self._find(name)
        return stack.quantity if stack else 0

    def holds(self, name: str) -> bool:
        return self.quantity(name) > 0

    @property
    def total_quantity(self) -> int:
        return sum(s.quantity for s in self._stacks)

    @property
    def unique_count(self) -> int:
        return len(self._stacks)

    def snapshot(self) -> Dict[str, int]:
        return {s.item.name: s.quantity for s in self._stacks}

    def entries(self) -> Tuple[Tuple[ItemDef, int], ...]:
        return tuple((s.item, s.quantity) for s in self._stacks)

    # --- internals --------------------------------------------------------
    @staticmethod
    def _bad_quantity(qty) -> Optional[Outcome]:
        if isinstance(qty, bool) or not isinstance(qty, int) or qty <= 0:
            return Outcome.failure(Reason.INVALID_QUANTITY, "Quantity must be a whole number of at least 1.")
        return None

    def _capacity_check(self, item: ItemDef, qty: int) -> Optional[Outcome]:
        if self.total_quantity + qty > self.max_total:
            return Outcome.failure(Reason.TOTAL_CAPACITY_EXCEEDED,
                                   f"Cannot carry more than {self.max_total} items in total.")
        if self._find(item.name) is None and self.unique_count >= self.max_unique:
            return Outcome.failure(Reason.UNIQUE_SLOT_EXCEEDED,
                                   f"No room for a new kind of item (limit {self.max_unique}).")
        return None

    def _upsert(self, item: ItemDef, qty: int):
        stack = self._find(item.name)
        if stack is None:
            self._stacks.append(ItemStack(item, qty))
        else:
            stack.quantity += qty

    def _consume(self, item: ItemDef, qty: int = 1):
        stack = self._find(item.name)
        if stack is None or stack.quantity < qty:
            raise ValueError("Not enough items")
        stack.quantity -= qty
        if stack.quantity <= 0:
            self._stacks.remove(stack)

    # --- money operations -------------------------------------------------
    def buy(self, item: ItemDef, qty: int = 1) -> Outcome:
        bad = self._bad_quantity(qty)
        if bad is not None:
            return bad
        if not item.purchasable:
            logger.debug("BuyRejected", item=item.name, reason=Reason.NOT_PURCHASABLE)
            return Outcome.failure(Reason.NOT_PURCHASABLE, f"{item.name} cannot be bought.")
        cost = qty * item.buy_price
        if not self.wallet.can_afford(cost):
            logger.debug("BuyRejected", item=item.name, cost=cost, balance=self.wallet.balance,
                         reason=Reason.INSUFFICIENT_FUNDS)
            return Outcome.failure(Reason.INSUFFICIENT_FUNDS, f"You need ${cost} but have ${self.wallet.balance}.")
        full = self._capacity_check(item, qty)
        if full is not None:
            logger.debug("BuyRejected", item=item.name, qty=qty, reason=full.reason)
            return full
        self.wallet.debit(cost)
        self._upsert(item, qty)
        logger.info("ItemBought", item=item.name, qty=qty, cost=cost, balance=self.wallet.balance)
        return Outcome.success(f"Bought {qty} {item.name} for ${cost}.")

    def sell(self, item: ItemDef, qty: int = 1) -> Outcome:
        bad = self._bad_quantity(qty)
        if bad is not None:
            return bad
        held = self.quantity(item.name)
        if held == 0:
            return Outcome.failure(Reason.ITEM_NOT_HELD, f"You don't have any {item.name}.")
        if held < qty:
            return Outcome.failure(Reason.INSUFFICIENT_QUANTITY, f"You only have {held} {item.name}.")
        earned = qty * item.sell_price
        self._consume(item, qty)
        self.wallet.credit(earned)
        logger.info("ItemSold", item=item.name, qty=qty, earned=earned, balance=self.wallet.balance)
        return Outcome.success(f"Sold {qty} {item.name} for ${earned}.")

    def grant(self, item: ItemDef, qty: int = 1) -> Outcome:
        """Add items without paying for them (starter kits, loaded records)."""
        bad = self._bad_quantity(qty)
        if bad is not None:
            return bad
        full = self._capacity_check(item, qty)
        if full is not None:
            return full
        self._upsert(item, qty)
        logger.debug("ItemGranted", item=item.name, qty=qty)
        return Outcome.success(f"Received {qty} {item.name}.")

    # --- item use ---------------------------------------------------------
    def use(self, item: ItemDef, creature: Creature) -> Outcome:
        """Apply `item` to `creature` (an owned instance) and consume one unit.

        Stones are spent even when they do nothing; a leveling item is spent
        even when the evolution it triggers cannot be applied.
        """
        stack = self._find(item.name)
        if stack is None or stack.quantity <= 0:
            return Outcome.failure(Reason.ITEM_NOT_HELD, f"You don't have any {item.name}.")
        # the held stack's definition decides the effect
        item = stack.item
        effect = item.effect
        kind = effect.kind
        if kind is EffectKind.STAT_BOOST:
            if effect.stat is not None:
                creature.apply_stat_boost(effect.stat, effect.amount)
            self._consume(item)
            logger.info("ItemUsed", item=item.name, creature=creature.name, effect=effect.describe())
            return Outcome.success(f"Used {item.name} on {creature.name}.")
        if kind is EffectKind.LEVEL_UP:
            due = creature.level_up()
            self._consume(item)
            logger.info("ItemUsed", item=item.name, creature=creature.name, level=creature.level)
            message = f"{creature.name} grew to level {creature.level}!"
            if not due:
                return Outcome.success(message)
            result = self.evolution.evolve_by_level(creature)
            return Outcome.success(f"{message} {result.message()}", evolution=result)
        if kind is EffectKind.EVOLUTION_STONE:
            result = self.evolution.evolve_by_stone(creature, item)
            self._consume(item)
            # spent whatever the stone did
            logger.info("ItemUsed", item=item.name, creature=creature.name, status=result.status.value)
            return Outcome.success(result.message(), evolution=result)
        if kind is EffectKind.HOLD:
            previous = creature.hold(item)
            self._consume(item)
            logger.info("ItemHeld", item=item.name, creature=creature.name,
                        replaced=previous.name if previous else None)
            return Outcome.success(f"{creature.name} is now holding {item.name}.")
        logger.debug("UseRejected", item=item.name, category=item.category, reason=Reason.NOT_USABLE)
        return Outcome.failure(Reason.NOT_USABLE, f"{item.name} can't be used here.")

__all__ = ["Inventory", "ItemStack", "MAX_UNIQUE", "MAX_TOTAL"]
