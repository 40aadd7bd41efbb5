from .events import GameEvent
from .intents import Intent, IntentKind
from .log import EventLog, LogEntry
from .combat import AttackResult, compute_damage, resolve_attack
from .ai import choose_step, perceives
from .scheduler import TurnScheduler
from .view import WorldView
from .game_state import GameState

__all__ = [
    "GameEvent",
    "Intent",
    "IntentKind",
    "EventLog",
    "LogEntry",
    "AttackResult",
    "compute_damage",
    "resolve_attack",
    "choose_step",
    "perceives",
    "TurnScheduler",
    "WorldView",
    "GameState",
]
