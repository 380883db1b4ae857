"""CSV records for creatures, moves and trainers.

Row layouts (comma separated, one header line):

  creatures: Number,Name,Type1,Type2,BaseLevel,EvolvesFrom,EvolvesTo,
             EvolutionLevel,HP,Attack,Defense,Speed,Moves,HeldItem
  moves:     Name,Description,Classification,Type1,Type2
  trainers:  Name,Birthdate,Sex,Hometown,Description,LineupPokemon,
             StoragePokemon,Items

Lists inside a field are joined with ';' and item stacks are written as
``name:quantity``. Missing optional ids are written as -1, an absent second
type or held item as an empty field. The HP..Speed columns hold the species
base stats.

Readers skip (and log) rows they cannot parse; a missing file raises
`DataLoadError`. Trainers are rebuilt through the normal engine operations,
so a record can never produce a trainer that breaks roster or bag limits.
"""
from __future__ import annotations
import csv
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, TYPE_CHECKING

from pokedex.core.errors import DataLoadError, RecordError
from pokedex.core.logging import logger
from pokedex.core.types import normalize_type
from pokedex.creature.creature import Creature, MAX_MOVES, spawn
from pokedex.data.catalog import Catalog
from pokedex.data.models import MoveDef, SpeciesDef
from pokedex.data.stats import Stats

if TYPE_CHECKING:
    from pokedex.trainer.registry import TrainerRegistry
    from pokedex.trainer.trainer import Trainer

SPECIES_HEADER = ["Number", "Name", "Type1", "Type2", "BaseLevel", "EvolvesFrom", "EvolvesTo",
                  "EvolutionLevel", "HP", "Attack", "Defense", "Speed", "Moves", "HeldItem"]
MOVE_HEADER = ["Name", "Description", "Classification", "Type1", "Type2"]
TRAINER_HEADER = ["Name", "Birthdate", "Sex", "Hometown", "Description",
                  "LineupPokemon", "StoragePokemon", "Items"]

LIST_SEP = ";"
QTY_SEP = ":"
NONE_ID = -1

def _id_field(value: Optional[int]) -> str:
    return str(NONE_ID if value is None else value)

def _parse_id(raw: str) -> Optional[int]:
    value = int(raw)
    return None if value < 0 else value

def _split_list(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(LIST_SEP) if part.strip()]

# --- creatures -----------------------------------------------------------
def creature_to_row(creature: Creature) -> List[str]:
    base = creature.base
    return [
        str(creature.species_id),
        creature.name,
        creature.type1,
        creature.type2 or "",
        str(creature.base_level),
        _id_field(creature.evolves_from),
        _id_field(creature.evolves_to),
        str(creature.evolution_level),
        str(base.hp), str(base.attack), str(base.defense), str(base.speed),
        LIST_SEP.join(creature.move_names()),
        creature.held_item.name if creature.held_item else "",
    ]

def species_from_row(row: Sequence[str]) -> SpeciesDef:
    if len(row) < 12:
        raise RecordError(list(row), f"expected at least 12 fields, got {len(row)}")
    try:
        return SpeciesDef(
            id=int(row[0]),
            name=row[1].strip(),
            type1=normalize_type(row[2]) or row[2].strip(),
            type2=normalize_type(row[3]) if row[3].strip() else None,
            base_level=int(row[4]),
            evolves_from=_parse_id(row[5]),
            evolves_to=_parse_id(row[6]),
            evolution_level=int(row[7]),
            base=Stats(hp=int(row[8]), attack=int(row[9]), defense=int(row[10]), speed=int(row[11])),
        )
    except ValueError as e:
        raise RecordError(list(row), str(e)) from e

def creature_from_row(row: Sequence[str], catalog: Catalog) -> Creature:
    """Fresh creature of the row's species, with its saved moves and held item.

    Move and item names the catalog does not know are dropped with a warning.
    """
    creature = Creature.from_species(species_from_row(row))
    if len(row) > 12 and row[12].strip():
        moves: List[MoveDef] = []
        for name in _split_list(row[12]):
            move = catalog.lookup_move_by_name(name)
            if move is None:
                logger.warn("RecordUnknownMove", creature=creature.name, move=name)
                continue
            moves.append(move)
        if moves:
            creature.moves = moves[:MAX_MOVES]
    if len(row) > 13 and row[13].strip():
        item = catalog.lookup_item_by_name(row[13].strip())
        if item is None:
            logger.warn("RecordUnknownItem", creature=creature.name, item=row[13].strip())
        else:
            creature.hold(item)
    return creature

# --- moves ---------------------------------------------------------------
def move_to_row(move: MoveDef) -> List[str]:
    return [move.name, move.description, move.classification, move.type1, move.type2 or ""]

def move_from_row(row: Sequence[str]) -> MoveDef:
    if len(row) < 4:
        raise RecordError(list(row), f"expected at least 4 fields, got {len(row)}")
    type2 = row[4].strip() if len(row) > 4 else ""
    return MoveDef(
        name=row[0].strip(),
        description=row[1].strip(),
        classification=row[2].strip().upper(),
        type1=normalize_type(row[3]) or row[3].strip(),
        type2=normalize_type(type2) if type2 else None,
    )

# --- trainers ------------------------------------------------------------
def trainer_to_row(trainer: "Trainer") -> List[str]:
    return [
        trainer.name,
        trainer.birthdate,
        trainer.sex,
        trainer.hometown,
        trainer.description,
        LIST_SEP.join(c.name for c in trainer.lineup()),
        LIST_SEP.join(c.name for c in trainer.storage()),
        LIST_SEP.join(f"{item.name}{QTY_SEP}{qty}" for item, qty in trainer.inventory_entries()),
    ]

def trainer_from_row(row: Sequence[str], registry: "TrainerRegistry") -> "Trainer":
    if len(row) < 5:
        raise RecordError(list(row), f"expected at least 5 fields, got {len(row)}")
    fields = list(row) + [""] * (len(TRAINER_HEADER) - len(row))
    trainer = registry.create(fields[0].strip(), birthdate=fields[1].strip(), sex=fields[2].strip(),
                              hometown=fields[3].strip(), description=fields[4].strip())
    catalog = registry.catalog
    for column, add in ((fields[5], trainer.add_to_lineup), (fields[6], trainer.add_to_storage)):
        for name in _split_list(column):
            creature = spawn(catalog, name)
            if creature is None:
                logger.warn("RecordUnknownSpecies", trainer=trainer.name, species=name)
                continue
            outcome = add(creature)
            if not outcome:
                logger.warn("RecordCreatureDropped", trainer=trainer.name, species=name, reason=outcome.reason)
    for entry in _split_list(fields[7]):
        name, sep, qty = entry.rpartition(QTY_SEP)
        item = catalog.lookup_item_by_name(name.strip()) if sep else None
        if item is None or not qty.strip().isdigit():
            logger.warn("RecordBadItem", trainer=trainer.name, entry=entry)
            continue
        outcome = trainer.grant_item(item, int(qty))
        if not outcome:
            logger.warn("RecordItemDropped", trainer=trainer.name, item=item.name, reason=outcome.reason)
    return trainer

# --- files ---------------------------------------------------------------
def _write(path: Path, header: List[str], rows: Iterable[List[str]]) -> int:
    count = 0
    with Path(path).open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(header)
        for row in rows:
            writer.writerow(row)
            count += 1
    logger.debug("RecordsSaved", path=str(path), rows=count)
    return count

def _read(path: Path) -> List[List[str]]:
    path = Path(path)
    if not path.exists():
        raise DataLoadError(str(path), "file not found")
    try:
        with path.open(newline="", encoding="utf-8") as fh:
            rows = list(csv.reader(fh))
    except (OSError, csv.Error, UnicodeDecodeError) as e:
        raise DataLoadError(str(path), str(e)) from e
    return [r for r in rows[1:] if any(cell.strip() for cell in r)]

def save_creatures(path: Path, creatures: Iterable[Creature]) -> int:
    return _write(path, SPECIES_HEADER, (creature_to_row(c) for c in creatures))

def load_creatures(path: Path, catalog: Catalog) -> List[Creature]:
    out: List[Creature] = []
    for row in _read(path):
        try:
            out.append(creature_from_row(row, catalog))
        except RecordError as e:
            logger.warn("RecordSkipped", path=str(path), error=e.detail)
    return out

def load_species_csv(path: Path) -> List[SpeciesDef]:
    out: List[SpeciesDef] = []
    for row in _read(path):
        try:
            out.append(species_from_row(row))
        except RecordError as e:
            logger.warn("RecordSkipped", path=str(path), error=e.detail)
    return out

def save_moves(path: Path, moves: Iterable[MoveDef]) -> int:
    return _write(path, MOVE_HEADER, (move_to_row(m) for m in moves))

def load_moves(path: Path) -> List[MoveDef]:
    out: List[MoveDef] = []
    for row in _read(path):
        try:
            out.append(move_from_row(row))
        except RecordError as e:
            logger.warn("RecordSkipped", path=str(path), error=e.detail)
    return out

def save_trainers(path: Path, trainers: Iterable["Trainer"]) -> int:
    return _write(path, TRAINER_HEADER, (trainer_to_row(t) for t in trainers))

def load_trainers(path: Path, registry: "TrainerRegistry") -> List["Trainer"]:
    out: List["Trainer"] = []
    for row in _read(path):
        try:
            out.append(trainer_from_row(row, registry))
        except RecordError as e:
            logger.warn("RecordSkipped", path=str(path), error=e.detail)
    return out

__all__ = [
    "SPECIES_HEADER", "MOVE_HEADER", "TRAINER_HEADER",
    "creature_to_row", "creature_from_row", "species_from_row",
    "move_to_row", "move_from_row", "trainer_to_row", "trainer_from_row",
    "save_creatures", "load_creatures", "load_species_csv",
    "save_moves", "load_moves", "save_trainers", "load_trainers",
]
