"""Delve: a turn-based, multi-floor dungeon-crawl simulation engine."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("delve")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

from .config import EngineConfig
from .engine import GameEvent, GameState, Intent, IntentKind

__all__ = ["__version__", "EngineConfig", "GameEvent", "GameState", "Intent", "IntentKind"]
