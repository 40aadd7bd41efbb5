from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by GameState to notify the presentation layer."""

    PLAYER_MOVED = auto()
    FLOOR_CHANGED = auto()
    ACTOR_DIED = auto()
    LEVEL_UP = auto()
    ITEM_PICKED_UP = auto()
