"""Runtime loader for the bundled reference catalog.

Reads the JSON seed documents under assets/catalog, validates each one against
its schema under assets/schema, and builds a frozen `Catalog`. The default
catalog is built once per process and shared.
"""
from __future__ import annotations
import json
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

import jsonschema

from pokedex.core.errors import DataLoadError, ValidationError
from pokedex.core.logging import logger
from pokedex.core.paths import SCHEMA, SPECIES_FILE, MOVES_FILE, ITEMS_FILE, STONES_FILE
from pokedex.core.types import normalize_type
from pokedex.data.catalog import Catalog
from pokedex.data.effects import resolve_effect
from pokedex.data.models import ItemDef, MoveDef, SpeciesDef
from pokedex.data.stats import Stats

def _read_json(path: Path) -> Any:
    if not path.exists():
        raise DataLoadError(str(path), "file not found")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DataLoadError(str(path), str(e)) from e

@lru_cache(maxsize=None)
def _schema(name: str) -> Dict[str, Any]:
    return _read_json(SCHEMA / f"{name}.schema.json")

def _validate(data: Any, schema_name: str, path: Path):
    try:
        jsonschema.validate(data, _schema(schema_name))
    except jsonschema.ValidationError as e:
        raise DataLoadError(str(path), f"schema: {e.message}") from e

def _optional_id(raw: Any) -> Optional[int]:
    # -1 is the legacy "none" marker
    if raw is None:
        return None
    value = int(raw)
    return None if value < 0 else value

def species_from_dict(d: Dict[str, Any]) -> SpeciesDef:
    base = d["base"]
    return SpeciesDef(
        id=int(d["id"]),
        name=d["name"],
        type1=normalize_type(d["type1"]),
        type2=normalize_type(d.get("type2")),
        base_level=int(d.get("base_level", 1)),
        evolves_from=_optional_id(d.get("evolves_from")),
        evolves_to=_optional_id(d.get("evolves_to")),
        evolution_level=int(d.get("evolution_level", 0)),
        base=Stats(hp=base["hp"], attack=base["attack"], defense=base["defense"], speed=base["speed"]),
    )

def move_from_dict(d: Dict[str, Any]) -> MoveDef:
    return MoveDef(
        name=d["name"],
        description=d.get("description", ""),
        classification=d.get("classification", "TM").upper(),
        type1=normalize_type(d["type1"]),
        type2=normalize_type(d.get("type2")),
    )

def item_from_dict(d: Dict[str, Any]) -> ItemDef:
    category = d["category"]
    effect_text = d.get("effect", "")
    return ItemDef(
        name=d["name"],
        category=category,
        description=d.get("description", ""),
        effect_text=effect_text,
        effect=resolve_effect(category, effect_text, d.get("boost")),
        buy_price=int(d.get("buy_price", 0)),
        sell_price=int(d.get("sell_price", 0)),
    )

def _load_list(path: Path, schema_name: str) -> List[Dict[str, Any]]:
    data = _read_json(path)
    _validate(data, schema_name, path)
    return data

def build_catalog(species_path: Path = SPECIES_FILE, moves_path: Path = MOVES_FILE,
                  items_path: Path = ITEMS_FILE, *, freeze: bool = True) -> Catalog:
    """Build a catalog from seed files. Duplicate entries are a data error."""
    catalog = Catalog()
    for raw in _load_list(moves_path, "moves"):
        if not catalog.add_move(move_from_dict(raw)):
            raise ValidationError(f"Duplicate move '{raw['name']}' in {moves_path}")
    for raw in _load_list(items_path, "items"):
        if not catalog.add_item(item_from_dict(raw)):
            raise ValidationError(f"Duplicate item '{raw['name']}' in {items_path}")
    for raw in _load_list(species_path, "species"):
        if not catalog.add_species(species_from_dict(raw)):
            raise ValidationError(f"Duplicate species '{raw['name']}' (#{raw['id']}) in {species_path}")
    logger.debug("CatalogBuilt", species=len(catalog.species()), moves=len(catalog.moves()), items=len(catalog.items()))
    if freeze:
        catalog.freeze()
    return catalog

def load_stone_map(path: Path = STONES_FILE) -> Dict[str, str]:
    data = _read_json(path)
    _validate(data, "stones", path)
    return {stone: normalize_type(t) for stone, t in data.items()}

@lru_cache(maxsize=None)
def default_catalog() -> Catalog:
    return build_catalog()

@lru_cache(maxsize=None)
def default_stone_map() -> Mapping[str, str]:
    return MappingProxyType(load_stone_map())

__all__ = [
    "build_catalog", "default_catalog", "load_stone_map", "default_stone_map",
    "species_from_dict", "move_from_dict", "item_from_dict",
]
