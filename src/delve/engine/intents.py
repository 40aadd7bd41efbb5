from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


class IntentKind(Enum):
    """Discrete player intents fed in by the input layer."""

    MOVE_NORTH = auto()
    MOVE_SOUTH = auto()
    MOVE_EAST = auto()
    MOVE_WEST = auto()
    TOGGLE_INVENTORY = auto()
    EQUIP = auto()
    USE = auto()
    DROP = auto()
    DESCEND = auto()
    ASCEND = auto()


DIRECTIONS = {
    IntentKind.MOVE_NORTH: (0, -1),
    IntentKind.MOVE_SOUTH: (0, 1),
    IntentKind.MOVE_EAST: (1, 0),
    IntentKind.MOVE_WEST: (-1, 0),
}

INDEXED = (IntentKind.EQUIP, IntentKind.USE, IntentKind.DROP)


@dataclass(frozen=True)
class Intent:
    """A player intent; inventory intents carry the bag index they act on."""

    kind: IntentKind
    index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind in INDEXED and self.index is None:
            raise ValueError(f"{self.kind.name} requires an item index")

    @property
    def direction(self) -> Optional[Tuple[int, int]]:
        return DIRECTIONS.get(self.kind)

    @classmethod
    def move(cls, kind: IntentKind) -> "Intent":
        if kind not in DIRECTIONS:
            raise ValueError(f"{kind.name} is not a movement intent")
        return cls(kind)

    @classmethod
    def equip(cls, index: int) -> "Intent":
        return cls(IntentKind.EQUIP, index)

    @classmethod
    def use(cls, index: int) -> "Intent":
        return cls(IntentKind.USE, index)

    @classmethod
    def drop(cls, index: int) -> "Intent":
        return cls(IntentKind.DROP, index)


__all__ = ["IntentKind", "Intent", "DIRECTIONS"]
