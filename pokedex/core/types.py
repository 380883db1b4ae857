"""Creature type metadata: canonical names, colors & abbreviations.

Provides:
  TYPE_NAMES: canonical Title-case type names
  TYPE_COLORS_HEX: mapping type -> hex color string (#RRGGBB)
  TYPE_ABBREVIATIONS: mapping type -> 3-letter abbreviation (upper)
  normalize_type: canonical spelling used for every compatibility check
  helpers for colorized terminal output (ANSI) and rich markup.
"""
from __future__ import annotations
from typing import Dict, Iterable, Optional, Tuple
import os, re

from colorama import Fore, Style

TYPE_NAMES: Tuple[str, ...] = (
    "Normal", "Fire", "Water", "Electric", "Grass", "Ice", "Fighting",
    "Poison", "Ground", "Flying", "Psychic", "Bug", "Rock", "Ghost",
    "Dragon", "Dark", "Steel", "Fairy",
)

_CANONICAL: Dict[str, str] = {t.lower(): t for t in TYPE_NAMES}

TYPE_COLORS_HEX: Dict[str, str] = {
    "normal": "#A8A77A",
    "fire": "#EE8130",
    "water": "#6390F0",
    "electric": "#F7D02C",
    "grass": "#7AC74C",
    "ice": "#96D9D6",
    "fighting": "#C22E28",
    "poison": "#A33EA1",
    "ground": "#E2BF65",
    "flying": "#A98FF3",
    "psychic": "#F95587",
    "bug": "#A6B91A",
    "rock": "#B6A136",
    "ghost": "#735797",
    "dragon": "#6F35FC",
    "dark": "#705746",
    "steel": "#B7B7CE",
    "fairy": "#D685AD",
}

TYPE_ABBREVIATIONS: Dict[str, str] = {
    "normal": "NRM",
    "fire": "FIR",
    "water": "WTR",
    "grass": "GRS",
    "electric": "ELE",
    "ice": "ICE",
    "fighting": "FGT",
    "poison": "PSN",
    "ground": "GRN",
    "flying": "FLY",
    "psychic": "PSY",
    "bug": "BUG",
    "rock": "RCK",
    "ghost": "GHO",
    "dragon": "DRA",
    "dark": "DRK",
    "steel": "STL",
    "fairy": "FAI",
}


_TRUECOLOR = bool(os.environ.get("COLORTERM","" ).lower().find("truecolor") != -1)

_FALLBACK_FORE: Dict[str,str] = {
    "normal": Fore.WHITE,
    "fire": Fore.RED,
    "water": Fore.CYAN,
    "electric": Fore.YELLOW,
    "grass": Fore.GREEN,
    "ice": Fore.CYAN,
    "fighting": Fore.MAGENTA,
    "poison": Fore.MAGENTA,
    "ground": Fore.YELLOW,
    "flying": Fore.WHITE,
    "psychic": Fore.MAGENTA,
    "bug": Fore.GREEN,
    "rock": Fore.YELLOW,
    "ghost": Fore.MAGENTA,
    "dragon": Fore.CYAN,
    "dark": Fore.WHITE,
    "steel": Fore.WHITE,
    "fairy": Fore.MAGENTA,
}

RESET = Style.RESET_ALL

def normalize_type(type_name: Optional[str]) -> Optional[str]:
    """Return the canonical Title-case spelling, or None for blank input.

    Unknown names are title-cased rather than rejected so custom types
    still compare consistently.
    """
    if type_name is None:
        return None
    s = str(type_name).strip()
    if not s:
        return None
    return _CANONICAL.get(s.lower(), s.title())

def _hex_to_rgb(h: str) -> Tuple[int,int,int]:
    h = h.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def color_code(type_name: str) -> str:
    t = type_name.lower()
    hex_val = TYPE_COLORS_HEX.get(t)
    if not hex_val:
        return ''
    if _TRUECOLOR:
        r,g,b = _hex_to_rgb(hex_val)
        return f"\033[38;2;{r};{g};{b}m"
    return _FALLBACK_FORE.get(t,'')

def colorize_type_text(type_name: str, text: str) -> str:
    code = color_code(type_name)
    if not code:
        return text
    return f"{code}{text}{RESET}"

def type_abbreviation(type_name: str) -> str:
    return TYPE_ABBREVIATIONS.get(type_name.lower(), type_name[:3].upper())

def format_types(types: Iterable[Optional[str]]) -> str:
    parts = [colorize_type_text(t, type_abbreviation(t)) for t in types if t]
    return '/'.join(parts)

def type_markup(type_name: str, text: Optional[str] = None) -> str:
    """rich markup for a type, e.g. ``[#EE8130]Fire[/]``; `text` replaces the label."""
    label = type_name if text is None else text
    hex_val = TYPE_COLORS_HEX.get(type_name.lower())
    if not hex_val:
        return label
    return f"[{hex_val}]{label}[/]"

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

def strip_ansi(s: str) -> str:
    return ANSI_ESCAPE_RE.sub('', s)

__all__ = [
    'TYPE_NAMES','TYPE_COLORS_HEX','TYPE_ABBREVIATIONS',
    'normalize_type','colorize_type_text','type_abbreviation','format_types',
    'type_markup','strip_ansi'
]
