"""rich renderers for trainers, creatures and catalog listings.

Everything here reads snapshots (tuples of creature copies, inventory dicts)
and never calls a mutating engine operation.
"""
from __future__ import annotations
from typing import Iterable, Optional, Sequence

from rich.box import ROUNDED
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.table import Table

from pokedex.core.types import type_abbreviation, type_markup
from pokedex.creature.creature import Creature
from pokedex.trainer.roster import MAX_LINEUP

console = Console()

def _types_markup(types: Iterable[Optional[str]], abbreviate: bool = False) -> str:
    parts = [type_markup(t, type_abbreviation(t) if abbreviate else None) for t in types if t]
    return "/".join(parts)

def creature_table(creatures: Sequence[Creature], title: str = "Pokémon") -> Table:
    table = Table(title=f"[bold]{title}[/bold]", box=ROUNDED, style="bright_white")
    table.add_column("#", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Lv", justify="right")
    table.add_column("HP", justify="right")
    table.add_column("Atk", justify="right")
    table.add_column("Def", justify="right")
    table.add_column("Spe", justify="right")
    table.add_column("Moves")
    table.add_column("Held")
    for i, c in enumerate(creatures):
        table.add_row(
            str(i), c.name, _types_markup(c.types, abbreviate=True), str(c.level),
            str(c.stats.hp), str(c.stats.attack), str(c.stats.defense), str(c.stats.speed),
            ", ".join(c.move_names()), c.held_item.name if c.held_item else "-",
        )
    return table

def roster_table(trainer) -> Table:
    return creature_table(trainer.lineup(), title=f"{trainer.name}'s Lineup")

def inventory_table(trainer) -> Table:
    table = Table(title="[bold]Bag[/bold]", box=ROUNDED, style="bright_white")
    table.add_column("Item", style="bold")
    table.add_column("Category")
    table.add_column("Qty", justify="right")
    for item, qty in trainer.inventory_entries():
        table.add_row(item.name, item.category, str(qty))
    return table

def trainer_panel(trainer) -> Panel:
    info = trainer.summary()
    body = (
        f"[bold bright_white]{info['name']}[/bold bright_white] (#{info['id']})\n"
        f"Hometown: {info['hometown'] or '-'}\n"
        f"Money: [green]${info['money']:,}[/green]\n"
        f"Lineup: {len(info['lineup'])}/{MAX_LINEUP}   Storage: {len(info['storage'])}/{trainer.max_storage}\n"
        f"Items: {sum(info['items'].values())} ({len(info['items'])} kinds)"
    )
    return Panel(body, title="[bold]TRAINER[/bold]", box=ROUNDED, padding=(0, 1))

def catalog_table(kind: str, rows: Sequence) -> Table:
    """Listing for `species`, `moves` or `items` catalog entries."""
    table = Table(title=f"[bold]{kind.title()}[/bold]", box=ROUNDED, style="bright_white")
    if kind == "species":
        for col in ("#", "Name", "Type", "Lv", "Evolves To", "HP", "Atk", "Def", "Spe"):
            table.add_column(col)
        for s in rows:
            evo = "-" if s.evolves_to is None else f"#{s.evolves_to:03} (Lv {s.evolution_level})"
            table.add_row(f"{s.id:03}", s.name, _types_markup(s.types), str(s.base_level), evo,
                          str(s.base.hp), str(s.base.attack), str(s.base.defense), str(s.base.speed))
    elif kind == "moves":
        for col in ("Name", "Class", "Type", "Description"):
            table.add_column(col)
        for m in rows:
            table.add_row(m.name, m.classification, _types_markup(m.types), m.description)
    elif kind == "items":
        for col in ("Name", "Category", "Effect", "Buy", "Sell"):
            table.add_column(col)
        for it in rows:
            buy = str(it.buy_price) if it.purchasable else "-"
            table.add_row(it.name, it.category, it.effect.describe(), buy, str(it.sell_price))
    else:
        raise ValueError(f"unknown catalog kind: {kind}")
    return table

def render(renderable: RenderableType, target: Optional[Console] = None):
    (target or console).print(renderable)
