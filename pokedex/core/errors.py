"""
Error classes for data and programming faults.

Gameplay rejections (full lineup, missing funds, ...) are never raised;
they come back as `pokedex.core.result.Outcome` values.
"""
from __future__ import annotations

class PokedexError(Exception):
    pass

class DataLoadError(PokedexError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed to load {path}: {detail}")
        self.path = path
        self.detail = detail

class ValidationError(PokedexError):
    pass

class CatalogFrozenError(PokedexError):
    def __init__(self, kind: str, name: str):
        super().__init__(f"Catalog is frozen; cannot add {kind} '{name}'")
        self.kind = kind
        self.name = name

class RecordError(PokedexError):
    def __init__(self, row: list[str], detail: str):
        super().__init__(f"Bad record {row!r}: {detail}")
        self.row = row
        self.detail = detail
