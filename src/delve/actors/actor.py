from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from ..config import ActorTemplate
from ..dungeon.rooms import Point
from ..items.inventory import Inventory
from .progression import Progression
from .stats import Stats

logger = logging.getLogger(__name__)

_ids = itertools.count(1)


@dataclass
class Actor:
    """Player or monster standing on an integer cell of the current floor."""

    x: int
    y: int
    name: str
    symbol: str
    color: str
    stats: Stats
    is_player: bool = False
    inventory: Optional[Inventory] = None
    progression: Optional[Progression] = None
    eid: int = field(default_factory=lambda: next(_ids))

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    def move_to(self, pos: Point) -> None:
        self.x, self.y = pos

    @property
    def is_alive(self) -> bool:
        return self.stats.is_alive

    @property
    def total_attack(self) -> int:
        bonus = self.inventory.bonuses()[0] if self.inventory is not None else 0
        return self.stats.attack + bonus

    @property
    def total_defense(self) -> int:
        bonus = self.inventory.bonuses()[1] if self.inventory is not None else 0
        return self.stats.defense + bonus

    def can_act(self, now: float) -> bool:
        """True once at least 1 / speed time has passed since the last action."""
        last = self.stats.last_action
        return last is None or now - last >= self.stats.cooldown

    def mark_acted(self, now: float) -> None:
        self.stats.last_action = now

    def distance_to(self, pos: Point) -> float:
        return math.hypot(pos[0] - self.x, pos[1] - self.y)


def _stats_from(template: ActorTemplate) -> Stats:
    return Stats(
        hp=template.hp,
        max_hp=template.hp,
        attack=template.attack,
        defense=template.defense,
        speed=template.speed,
        perception=template.perception,
    )


def new_player(template: ActorTemplate, progression: Progression, pos: Point = (0, 0)) -> Actor:
    return Actor(
        x=pos[0],
        y=pos[1],
        name=template.name,
        symbol=template.symbol,
        color=template.color,
        stats=_stats_from(template),
        is_player=True,
        inventory=Inventory(template.inventory_capacity),
        progression=progression,
    )


def new_monster(template: ActorTemplate, pos: Point) -> Actor:
    return Actor(
        x=pos[0],
        y=pos[1],
        name=template.name,
        symbol=template.symbol,
        color=template.color,
        stats=_stats_from(template),
    )
