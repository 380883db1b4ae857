"""
Centralized path helpers for bundled data.
"""
from __future__ import annotations
from pathlib import Path

# This file lives at pokedex/core/paths.py
PACKAGE = Path(__file__).resolve().parents[1]
ROOT = PACKAGE.parent
ASSETS = PACKAGE / "assets"
CATALOG = ASSETS / "catalog"
SCHEMA = ASSETS / "schema"
SPECIES_FILE = CATALOG / "species.json"
MOVES_FILE = CATALOG / "moves.json"
ITEMS_FILE = CATALOG / "items.json"
STONES_FILE = CATALOG / "stones.json"
