from __future__ import annotations

import logging
import random
from typing import Dict, List

from ..actors.actor import Actor
from ..actors.progression import LevelingSystem
from ..dungeon.floor import Floor
from ..dungeon.rooms import Point
from .ai import choose_step, perceives
from .combat import AttackResult, resolve_attack

logger = logging.getLogger(__name__)


class TurnScheduler:
    """Speed-gated monster turns and the end-of-tick purge.

    An actor may act once ``now - last_action >= 1 / speed``; faster actors
    simply get more turns per unit of time. Monsters act one at a time in list
    order. Collisions are checked against the positions every live monster held
    when the tick started, so one monster's move never changes whether another
    may move in the same tick.
    """

    def __init__(self, leveling: LevelingSystem, xp_per_kill: int) -> None:
        self.leveling = leveling
        self.xp_per_kill = xp_per_kill

    def run_monsters(
        self,
        now: float,
        monsters: List[Actor],
        player: Actor,
        floor: Floor,
        rng: random.Random,
    ) -> List[AttackResult]:
        snapshot: Dict[int, Point] = {m.eid: m.position for m in monsters if m.is_alive}
        attacks: List[AttackResult] = []

        for monster in monsters:
            if not monster.is_alive or not monster.can_act(now):
                continue
            if not player.is_alive:
                break

            sees = perceives(monster.position, player.position, monster.stats.perception)
            step = choose_step(monster.position, player.position, sees, floor, rng)
            monster.mark_acted(now)
            if step == monster.position:
                continue

            if step == player.position:
                result = resolve_attack(monster, player, self.leveling, self.xp_per_kill)
                attacks.append(result)
                continue
            if not floor.is_walkable(*step):
                continue
            if any(pos == step for eid, pos in snapshot.items() if eid != monster.eid):
                logger.debug("%s#%d blocked at %s", monster.name, monster.eid, step)
                continue
            monster.move_to(step)
        return attacks

    @staticmethod
    def purge(monsters: List[Actor]) -> List[Actor]:
        """Remove dead monsters in place; returns the removed ones."""
        dead = [m for m in monsters if not m.is_alive]
        if dead:
            monsters[:] = [m for m in monsters if m.is_alive]
            logger.debug("Purged %d dead monsters", len(dead))
        return dead
