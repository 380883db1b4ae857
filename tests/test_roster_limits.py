import pytest

from pokedex.core.result import Reason
from pokedex.creature.creature import spawn
from pokedex.trainer.roster import BoundedList, Roster


def _fill_lineup(roster, catalog, names=("Bulbasaur", "Charmander", "Squirtle", "Pikachu", "Vulpix", "Eevee")):
    for name in names:
        assert roster.add_to_lineup(spawn(catalog, name))


def test_lineup_capped_at_six(catalog):
    roster = Roster()
    _fill_lineup(roster, catalog)
    out = roster.add_to_lineup(spawn(catalog, "Snorlax"))
    assert out.reason is Reason.CAPACITY_EXCEEDED
    assert roster.lineup_size == 6


def test_storage_capacity_is_configurable(catalog):
    roster = Roster(max_storage=2)
    assert roster.add_to_storage(spawn(catalog, "Eevee"))
    assert roster.add_to_storage(spawn(catalog, "Eevee"))
    assert roster.add_to_storage(spawn(catalog, "Eevee")).reason is Reason.CAPACITY_EXCEEDED
    assert roster.storage_size == 2


def test_added_creature_is_a_copy(catalog):
    roster = Roster()
    c = spawn(catalog, "Pikachu")
    roster.add_to_lineup(c)
    c.level_up()
    assert roster.lineup()[0].level == 5
    snapshot = roster.lineup()[0]
    snapshot.level_up()
    assert roster.lineup()[0].level == 5


def test_swap_exchanges_entries(catalog):
    roster = Roster()
    _fill_lineup(roster, catalog, ("Bulbasaur", "Charmander"))
    roster.add_to_storage(spawn(catalog, "Snorlax"))
    assert roster.swap(0, 1)
    assert [c.name for c in roster.lineup()] == ["Bulbasaur", "Snorlax"]
    assert [c.name for c in roster.storage()] == ["Charmander"]


@pytest.mark.parametrize("storage_index,lineup_index", [(1, 0), (0, 2), (-1, 0)])
def test_swap_bounds(catalog, storage_index, lineup_index):
    roster = Roster()
    _fill_lineup(roster, catalog, ("Bulbasaur", "Charmander"))
    roster.add_to_storage(spawn(catalog, "Snorlax"))
    out = roster.swap(storage_index, lineup_index)
    assert out.reason is Reason.INDEX_OUT_OF_RANGE
    assert [c.name for c in roster.lineup()] == ["Bulbasaur", "Charmander"]


def test_release_shifts_left(catalog):
    roster = Roster()
    _fill_lineup(roster, catalog, ("Bulbasaur", "Charmander", "Squirtle"))
    assert roster.release(0)
    assert [c.name for c in roster.lineup()] == ["Charmander", "Squirtle"]
    assert roster.release(5).reason is Reason.INDEX_OUT_OF_RANGE


def test_release_from_storage(catalog):
    roster = Roster()
    for name in ("Eevee", "Snorlax", "Dratini"):
        roster.add_to_storage(spawn(catalog, name))
    assert roster.release_from_storage(1)
    assert [c.name for c in roster.storage()] == ["Eevee", "Dratini"]
    assert roster.release_from_storage(2).reason is Reason.INDEX_OUT_OF_RANGE


def test_move_to_storage_checks_source_then_capacity(catalog):
    roster = Roster(max_storage=1)
    _fill_lineup(roster, catalog, ("Bulbasaur", "Charmander"))
    assert roster.move_to_storage(7).reason is Reason.INDEX_OUT_OF_RANGE
    assert roster.move_to_storage(0)
    assert [c.name for c in roster.lineup()] == ["Charmander"]
    assert roster.move_to_storage(0).reason is Reason.CAPACITY_EXCEEDED
    assert roster.lineup_size == 1


def test_move_to_lineup_respects_six(catalog):
    roster = Roster()
    _fill_lineup(roster, catalog)
    roster.add_to_storage(spawn(catalog, "Snorlax"))
    assert roster.move_to_lineup(0).reason is Reason.CAPACITY_EXCEEDED
    roster.release(5)
    assert roster.move_to_lineup(0)
    assert roster.lineup()[-1].name == "Snorlax"
    assert roster.storage_size == 0


def test_bounded_list_basics():
    bl = BoundedList(2)
    assert bl.append("a") and bl.append("b")
    assert not bl.append("c")
    assert bl.is_full
    assert bl.replace(0, "z") == "a"
    assert bl.pop(0) == "z"
    assert bl.snapshot() == ("b",)
    with pytest.raises(IndexError):
        bl.pop(3)
