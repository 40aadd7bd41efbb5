from .stats import Stats
from .progression import LevelingSystem, LevelUpEvent, LevelUpResult, Progression
from .actor import Actor, new_monster, new_player

__all__ = [
    "Stats",
    "Progression",
    "LevelingSystem",
    "LevelUpEvent",
    "LevelUpResult",
    "Actor",
    "new_player",
    "new_monster",
]
