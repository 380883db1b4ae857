from rich.console import Console

from pokedex.cli import build_parser, main
from pokedex.core.logging import logger
from pokedex.creature.creature import spawn
from pokedex.ui.render import catalog_table, render, trainer_panel, roster_table, inventory_table


def _text(renderable) -> str:
    console = Console(record=True, width=160, color_system=None)
    render(renderable, console)
    return console.export_text()


def test_catalog_tables(catalog):
    species = _text(catalog_table("species", catalog.search_species("char")))
    assert "Charmander" in species and "Charizard" in species
    moves = _text(catalog_table("moves", catalog.moves()))
    assert "Rock Smash" in moves and "HM" in moves
    items = _text(catalog_table("items", [catalog.lookup_item_by_name("Zinc")]))
    assert "+10 defense EV" in items


def test_trainer_views(trainer, catalog):
    trainer.add_to_lineup(spawn(catalog, "Vulpix"))
    trainer.buy(catalog.lookup_item_by_name("Fire Stone"), 2)
    panel = _text(trainer_panel(trainer))
    assert "Red" in panel and "$994,000" in panel
    assert "Vulpix" in _text(roster_table(trainer))
    assert "Fire Stone" in _text(inventory_table(trainer))


def test_parser_commands():
    args = build_parser().parse_args(["--log-level", "debug", "moves", "water"])
    assert args.command == "moves"
    assert args.query == "water"
    assert args.log_level == "DEBUG"


def test_main_lists_and_runs_demo(capsys, monkeypatch):
    monkeypatch.setattr(logger, "threshold", logger.threshold)
    assert main(["--log-level", "ERROR", "species", "pika"]) == 0
    assert main(["--log-level", "ERROR", "demo"]) == 0
    out = capsys.readouterr().out
    assert "Pikachu" in out
    assert "Arcanine" in out
