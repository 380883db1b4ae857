from dataclasses import replace

from pokedex.core.result import Reason
from pokedex.creature.creature import spawn
from pokedex.creature.evolution import EvolutionEngine, EvolutionStatus, StoneTable
from pokedex.data.stats import Stats


def _engine(catalog):
    return EvolutionEngine(catalog)


def test_level_path_not_ready_below_threshold(catalog):
    c = spawn(catalog, "Bulbasaur")
    c.level = 15
    res = _engine(catalog).evolve_by_level(c)
    assert res.status is EvolutionStatus.NOT_READY
    assert c.name == "Bulbasaur"


def test_level_path_merges_into_target(catalog):
    c = spawn(catalog, "Bulbasaur")
    c.level = 16
    c.moves.append(catalog.lookup_move_by_name("Vine Whip"))
    res = _engine(catalog).evolve_by_level(c)
    assert res.evolved
    assert (res.from_name, res.to_name) == ("Bulbasaur", "Ivysaur")
    assert c.species_id == 2
    assert c.types == ("Grass", "Poison")
    assert c.stats == Stats(60, 62, 63, 60)
    assert c.evolves_from == 1 and c.evolves_to == 3 and c.evolution_level == 32
    assert c.move_names() == ["Tackle", "Defend", "Vine Whip"]
    assert c.level == 16


def test_level_path_missing_target_is_pending(catalog):
    c = spawn(catalog, "Magikarp")
    c.level = 20
    before = c.copy()
    res = _engine(catalog).evolve_by_level(c)
    assert res.status is EvolutionStatus.PENDING
    assert res.reason is Reason.SPECIES_NOT_FOUND
    assert c == before


def test_final_stage_never_evolves(catalog):
    c = spawn(catalog, "Dragonair")
    c.level = 99
    assert _engine(catalog).evolve_by_level(c).status is EvolutionStatus.NOT_READY


def test_stone_path_requires_primary_type(catalog):
    engine = _engine(catalog)
    fire = catalog.lookup_item_by_name("Fire Stone")
    water = catalog.lookup_item_by_name("Water Stone")
    vulpix = spawn(catalog, "Vulpix")
    res = engine.evolve_by_stone(vulpix, water)
    assert res.status is EvolutionStatus.NO_EFFECT
    assert res.reason is Reason.INCOMPATIBLE_TYPE
    assert vulpix.name == "Vulpix"
    res = engine.evolve_by_stone(vulpix, fire)
    assert res.evolved
    assert vulpix.name == "Ninetales"


def test_stone_checks_type1_only(catalog):
    # Exeggcute is Grass/Psychic
    exeggcute = spawn(catalog, "Exeggcute")
    engine = _engine(catalog)
    engine.stones.register("Psychic Stone", "Psychic")
    psychic_res = engine.evolve_by_stone(exeggcute, _stone(catalog, "Psychic Stone"))
    assert psychic_res.status is EvolutionStatus.NO_EFFECT
    leaf_res = engine.evolve_by_stone(exeggcute, catalog.lookup_item_by_name("Leaf Stone"))
    assert leaf_res.evolved


def test_stone_on_species_without_target(catalog):
    eevee = spawn(catalog, "Eevee")
    table = StoneTable({"Moon Stone": "Normal"})
    engine = EvolutionEngine(catalog, table)
    res = engine.evolve_by_stone(eevee, catalog.lookup_item_by_name("Moon Stone"))
    assert res.status is EvolutionStatus.NO_EFFECT
    assert res.reason is None
    assert eevee.name == "Eevee"


def test_default_stone_table():
    table = StoneTable.default()
    assert table.required_type("fire stone") == "Fire"
    assert table.required_type("Thunder Stone") == "Electric"
    assert table.required_type("Leaf Stone") == "Grass"
    assert table.required_type("Ice Stone") is None
    assert len(table) == 4


def _stone(catalog, name):
    return replace(catalog.lookup_item_by_name("Fire Stone"), name=name)
