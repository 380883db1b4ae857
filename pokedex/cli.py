from __future__ import annotations
import argparse
from typing import List, Optional

from pokedex.core.errors import PokedexError
from pokedex.core.logging import logger, LEVELS
from pokedex.creature.creature import spawn
from pokedex.data.loader import default_catalog
from pokedex.system.settings import Settings
from pokedex.trainer.registry import TrainerRegistry
from pokedex.ui.render import (
    catalog_table, inventory_table, render, roster_table, trainer_panel,
)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pokedex", description="Creature roster and inventory engine")
    parser.add_argument("--log-level", choices=LEVELS, type=str.upper,
                        help="Override the log level from settings")
    sub = parser.add_subparsers(dest="command", required=True)
    for kind in ("species", "moves", "items"):
        p = sub.add_parser(kind, help=f"List {kind} in the catalog")
        p.add_argument("query", nargs="?", default="", help="Case-insensitive filter")
    sub.add_parser("demo", help="Create a trainer, shop and use a few items")
    return parser

def list_catalog(kind: str, query: str = ""):
    catalog = default_catalog()
    if kind == "species":
        rows = catalog.search_species(query) if query else catalog.species()
    elif kind == "moves":
        rows = catalog.search_moves(query) if query else catalog.moves()
    else:
        rows = catalog.search_items(query) if query else catalog.items()
    render(catalog_table(kind, rows))

def run_demo(settings: Settings):
    catalog = default_catalog()
    registry = TrainerRegistry(catalog, settings)
    ash = registry.create("Ash", birthdate="1997-04-01", sex="Male", hometown="Pallet Town",
                          description="Aspiring champion")
    for name in ("Growlithe", "Charmander", "Pikachu"):
        creature = spawn(catalog, name)
        if creature is not None:
            ash.add_to_lineup(creature)
    steps = [
        ash.buy(catalog.lookup_item_by_name("Fire Stone"), 3),
        ash.buy(catalog.lookup_item_by_name("Protein"), 2),
        ash.grant_item(catalog.lookup_item_by_name("Rare Candy"), 2),
        ash.use_item(catalog.lookup_item_by_name("Fire Stone"), 0),
        ash.use_item(catalog.lookup_item_by_name("Protein"), 1),
        ash.use_item(catalog.lookup_item_by_name("Rare Candy"), 1),
        ash.teach_move(2, catalog.lookup_move_by_name("Thunderbolt")),
    ]
    for outcome in steps:
        style = "green" if outcome else "red"
        render(f"[{style}]{outcome.message}[/{style}]")
    render(trainer_panel(ash))
    render(roster_table(ash))
    render(inventory_table(ash))

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.load()
    if args.log_level:
        settings.data.log_level = args.log_level
    settings.apply()
    try:
        if args.command == "demo":
            run_demo(settings)
        else:
            list_catalog(args.command, args.query)
    except PokedexError as e:
        logger.error("CommandFailed", command=args.command, error=str(e))
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
