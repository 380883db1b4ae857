#!/usr/bin/env python3
"""
Pokédex Engine

Thin entry point around the `pokedex` command line:
- `python main.py species [query]` / `moves` / `items` list catalog entries
- `python main.py demo` walks a trainer through buying and using items

Installed, the same commands are available as `pokedex ...`.
"""

from pokedex.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
