# Ensure project root is on sys.path for tests
import sys, pathlib
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

import pytest

from pokedex.data.loader import default_catalog
from pokedex.trainer.trainer import Trainer

@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    # Settings resolve against ~; keep tests away from the real home directory
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home

@pytest.fixture
def catalog():
    return default_catalog()

@pytest.fixture
def trainer(catalog):
    return Trainer(1, "Red", catalog, hometown="Pallet Town")
