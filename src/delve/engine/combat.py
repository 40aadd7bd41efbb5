from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..actors.actor import Actor
from ..actors.progression import LevelingSystem, LevelUpResult

logger = logging.getLogger(__name__)


@dataclass
class AttackResult:
    attacker: Actor
    defender: Actor
    damage: int
    killed: bool
    message: str
    level_up: Optional[LevelUpResult] = None

    @property
    def leveled_up(self) -> bool:
        return self.level_up is not None and self.level_up.levels_gained > 0


def compute_damage(attacker: Actor, defender: Actor) -> int:
    """Melee damage; always at least 1 however strong the defense."""
    return max(1, attacker.total_attack - defender.total_defense)


def apply_hit(
    attacker: Actor,
    defender: Actor,
    damage: int,
    leveling: LevelingSystem,
    xp_per_kill: int,
) -> AttackResult:
    """Deal ``damage`` to ``defender`` and reward the player for a kill.

    The defender is left in place when it dies; removing dead monsters is the
    end-of-tick purge's job.
    """
    was_alive = defender.is_alive
    defender.stats.take_damage(damage)
    killed = was_alive and not defender.is_alive
    message = f"{attacker.name} hits {defender.name} for {damage} damage!"
    result = AttackResult(attacker=attacker, defender=defender, damage=damage, killed=killed, message=message)
    logger.debug("%s (hp=%d/%d)", message, defender.stats.hp, defender.stats.max_hp)

    if killed and attacker.is_player and attacker.progression is not None:
        result.level_up = leveling.award(attacker.progression, attacker.stats, xp_per_kill)
    return result


def resolve_attack(
    attacker: Actor,
    defender: Actor,
    leveling: LevelingSystem,
    xp_per_kill: int,
) -> AttackResult:
    return apply_hit(attacker, defender, compute_damage(attacker, defender), leveling, xp_per_kill)
