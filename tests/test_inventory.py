from dataclasses import replace

import pytest

from pokedex.core.result import Reason
from pokedex.creature.creature import spawn
from pokedex.creature.evolution import EvolutionEngine, EvolutionStatus
from pokedex.data.effects import Effect, EffectKind
from pokedex.data.stats import Stat, Stats
from pokedex.trainer.inventory import Inventory
from pokedex.trainer.wallet import Wallet


@pytest.fixture
def bag(catalog):
    return Inventory(Wallet(1_000_000), EvolutionEngine(catalog))


def item(catalog, name):
    return catalog.lookup_item_by_name(name)


def test_buy_debits_and_stacks(catalog, bag):
    assert bag.buy(item(catalog, "Protein"), 2)
    assert bag.buy(item(catalog, "Protein"), 1)
    assert bag.quantity("Protein") == 3
    assert bag.unique_count == 1
    assert bag.wallet.balance == 1_000_000 - 30_000


def test_buy_rejections_leave_state_untouched(catalog):
    bag = Inventory(Wallet(5_000), EvolutionEngine(catalog))
    assert bag.buy(item(catalog, "Rare Candy")).reason is Reason.NOT_PURCHASABLE
    assert bag.buy(item(catalog, "Protein")).reason is Reason.INSUFFICIENT_FUNDS
    assert bag.buy(item(catalog, "Fire Stone"), 0).reason is Reason.INVALID_QUANTITY
    assert bag.wallet.balance == 5_000
    assert bag.snapshot() == {}


def test_non_integer_quantities_rejected(catalog):
    bag = Inventory(Wallet(5_000), EvolutionEngine(catalog))
    stone = item(catalog, "Fire Stone")
    for qty in (1.5, 1.0, True, "2"):
        assert bag.buy(stone, qty).reason is Reason.INVALID_QUANTITY
        assert bag.grant(stone, qty).reason is Reason.INVALID_QUANTITY
    bag.grant(stone, 1)
    assert bag.sell(stone, 0.5).reason is Reason.INVALID_QUANTITY
    assert bag.wallet.balance == 5_000
    assert bag.snapshot() == {"Fire Stone": 1}


def test_wallet_refuses_non_int_amounts():
    wallet = Wallet(100)
    with pytest.raises(TypeError):
        wallet.debit(1.5)
    with pytest.raises(TypeError):
        wallet.credit(True)
    assert wallet.balance == 100


def test_total_capacity_checked_before_debit(catalog, bag):
    assert bag.buy(item(catalog, "Health Feather"), 50)
    balance = bag.wallet.balance
    out = bag.buy(item(catalog, "Health Feather"), 1)
    assert out.reason is Reason.TOTAL_CAPACITY_EXCEEDED
    assert bag.wallet.balance == balance
    assert bag.total_quantity == 50


def test_unique_slots_capped_at_ten(catalog, bag):
    names = ["HP Up", "Protein", "Iron", "Carbos", "Zinc", "Health Feather",
             "Muscle Feather", "Resist Feather", "Swift Feather", "Fire Stone"]
    for name in names:
        assert bag.buy(item(catalog, name))
    out = bag.buy(item(catalog, "Water Stone"))
    assert out.reason is Reason.UNIQUE_SLOT_EXCEEDED
    # existing slot still grows
    assert bag.buy(item(catalog, "Protein"))
    assert bag.unique_count == 10


def test_buy_then_sell_costs_the_spread(catalog, bag):
    stone = item(catalog, "Fire Stone")
    bag.buy(stone, 4)
    assert bag.sell(stone, 4)
    assert bag.wallet.balance == 1_000_000 - (3000 - 1500) * 4
    assert bag.snapshot() == {}


def test_sell_failures(catalog, bag):
    stone = item(catalog, "Fire Stone")
    assert bag.sell(stone).reason is Reason.ITEM_NOT_HELD
    bag.buy(stone, 1)
    assert bag.sell(stone, 2).reason is Reason.INSUFFICIENT_QUANTITY
    assert bag.quantity("Fire Stone") == 1


def test_sell_drops_slot_and_keeps_order(catalog, bag):
    for name in ("Protein", "Iron", "Carbos"):
        bag.buy(item(catalog, name))
    bag.sell(item(catalog, "Iron"))
    assert list(bag.snapshot()) == ["Protein", "Carbos"]


def test_use_requires_the_item(catalog, bag):
    c = spawn(catalog, "Eevee")
    assert bag.use(item(catalog, "Protein"), c).reason is Reason.ITEM_NOT_HELD


def test_vitamin_and_feather(catalog, bag):
    c = spawn(catalog, "Eevee")  # 55/55/50/55
    bag.buy(item(catalog, "HP Up"))
    bag.buy(item(catalog, "Swift Feather"))
    assert bag.use(item(catalog, "HP Up"), c)
    assert bag.use(item(catalog, "Swift Feather"), c)
    assert c.stats == Stats(65, 55, 50, 56)
    assert c.evs == Stats(10, 0, 0, 1)
    assert bag.snapshot() == {}


def test_zinc_lands_on_defense(catalog, bag):
    c = spawn(catalog, "Eevee")
    bag.buy(item(catalog, "Zinc"))
    bag.use(item(catalog, "Zinc"), c)
    assert c.stats.defense == 60
    assert c.evs.defense == 10


def test_rare_candy_levels_and_evolves(catalog, bag):
    c = spawn(catalog, "Charmander")
    c.level = 15
    bag.grant(item(catalog, "Rare Candy"), 1)
    out = bag.use(item(catalog, "Rare Candy"), c)
    assert out
    assert out.evolution.evolved
    assert c.name == "Charmeleon"
    assert c.level == 16
    assert bag.quantity("Rare Candy") == 0


def test_rare_candy_pending_evolution_still_spent(catalog, bag):
    c = spawn(catalog, "Magikarp")
    c.level = 19
    bag.grant(item(catalog, "Rare Candy"), 2)
    out = bag.use(item(catalog, "Rare Candy"), c)
    assert out
    assert out.evolution.status is EvolutionStatus.PENDING
    assert c.name == "Magikarp"
    assert c.level == 20
    assert bag.quantity("Rare Candy") == 1


def test_stone_consumed_even_without_effect(catalog, bag):
    c = spawn(catalog, "Growlithe")
    bag.buy(item(catalog, "Water Stone"), 2)
    before = c.copy()
    out = bag.use(item(catalog, "Water Stone"), c)
    assert out.evolution.status is EvolutionStatus.NO_EFFECT
    assert c == before
    assert bag.quantity("Water Stone") == 1


def test_holdable_replaces_held_item(catalog, bag):
    c = spawn(catalog, "Snorlax")
    bag.buy(item(catalog, "Soothe Bell"))
    bag.grant(item(catalog, "Leftovers"))
    bag.use(item(catalog, "Soothe Bell"), c)
    bag.use(item(catalog, "Leftovers"), c)
    assert c.held_item.name == "Leftovers"
    assert bag.snapshot() == {}


def test_master_ball_is_not_usable(catalog, bag):
    c = spawn(catalog, "Snorlax")
    bag.buy(item(catalog, "Master Ball"))
    out = bag.use(item(catalog, "Master Ball"), c)
    assert out.reason is Reason.NOT_USABLE
    assert bag.quantity("Master Ball") == 1
    assert c.held_item is None


def test_grant_respects_limits(catalog, bag):
    assert bag.grant(item(catalog, "Rare Candy"), 50)
    assert bag.grant(item(catalog, "Rare Candy"), 1).reason is Reason.TOTAL_CAPACITY_EXCEEDED
    assert bag.wallet.balance == 1_000_000


def test_use_applies_the_held_item_effect(catalog, bag):
    c = spawn(catalog, "Growlithe")
    bag.buy(item(catalog, "Fire Stone"))
    forged = replace(item(catalog, "Fire Stone"), category="Vitamin",
                     effect=Effect(EffectKind.STAT_BOOST, Stat.HP, 10))
    out = bag.use(forged, c)
    assert out.evolution.evolved
    assert c.name == "Arcanine"
    assert bag.quantity("Fire Stone") == 0
