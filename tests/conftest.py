import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from delve.actors.actor import Actor  # noqa: E402
from delve.actors.stats import Stats  # noqa: E402
from delve.dungeon.floor import Floor  # noqa: E402
from delve.dungeon.tiles import Tile  # noqa: E402
from delve.items.catalog import ItemCatalog  # noqa: E402

_GLYPHS = {t.glyph: t for t in Tile}


def build_floor(art: str, index: int = 0) -> Floor:
    """Floor from ASCII art using the tile glyphs; no rooms are recorded."""
    lines = [line for line in art.strip("\n").splitlines()]
    tiles = [[_GLYPHS[ch] for ch in line] for line in lines]
    return Floor(width=len(lines[0]), height=len(lines), tiles=tiles, rows=[], index=index)


def build_actor(pos, hp=15, attack=3, defense=1, speed=2.0, perception=5.0, name="Goblin", **kwargs) -> Actor:
    stats = Stats(hp=hp, max_hp=hp, attack=attack, defense=defense, speed=speed, perception=perception)
    return Actor(x=pos[0], y=pos[1], name=name, symbol=name[0].lower(), color="red", stats=stats, **kwargs)


@pytest.fixture
def floor_from_ascii():
    return build_floor


@pytest.fixture
def make_actor():
    return build_actor


@pytest.fixture(scope="session")
def catalog() -> ItemCatalog:
    return ItemCatalog.load()
