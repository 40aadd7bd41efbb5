from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class Stats:
    """Combat and scheduling statistics for an actor.

    Attributes:
        hp: Current hit points; never above max_hp. The actor is dead at hp <= 0.
        max_hp: Maximum hit points.
        attack: Base attack before equipment.
        defense: Base defense before equipment.
        speed: Actions per unit of time; the cooldown between actions is 1 / speed.
        perception: Euclidean radius within which the actor notices the player.
        last_action: Time of the last action, or None if it has never acted.
    """

    hp: int
    max_hp: int
    attack: int
    defense: int
    speed: float
    perception: float
    last_action: Optional[float] = None

    def __post_init__(self) -> None:
        if self.max_hp <= 0:
            raise ValueError("max_hp must be > 0")
        if self.speed <= 0:
            raise ValueError("speed must be > 0")
        if self.hp > self.max_hp:
            self.hp = self.max_hp

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def cooldown(self) -> float:
        return 1.0 / self.speed

    def take_damage(self, amount: int) -> int:
        """Apply damage to HP and return the damage actually dealt."""
        if amount < 0:
            raise ValueError("damage cannot be negative")
        original = self.hp
        self.hp = max(0, self.hp - amount)
        dealt = original - self.hp
        logger.debug("Damage taken: requested=%d, dealt=%d, hp=%d", amount, dealt, self.hp)
        return dealt

    def heal(self, amount: int) -> int:
        """Heal HP up to max_hp and return the amount actually healed."""
        if amount < 0:
            raise ValueError("heal cannot be negative")
        original = self.hp
        self.hp = min(self.max_hp, self.hp + amount)
        return self.hp - original
