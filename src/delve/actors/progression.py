from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import ProgressionSettings
from .stats import Stats

logger = logging.getLogger(__name__)


@dataclass
class Progression:
    """Player-only leveling state. ``xp`` is the amount earned into the current level."""

    level: int = 1
    xp: int = 0
    xp_to_next: int = 100


@dataclass
class LevelUpEvent:
    from_level: int
    to_level: int


@dataclass
class LevelUpResult:
    xp_awarded: int
    levels_gained: int
    events: List[LevelUpEvent] = field(default_factory=list)


class LevelingSystem:
    """Awards XP and applies fixed stat growth on each level-up.

    Leftover XP carries into the next level, and the next threshold grows by
    ``threshold_factor``. A single award can cross several thresholds.
    """

    def __init__(self, settings: Optional[ProgressionSettings] = None) -> None:
        self.settings = settings or ProgressionSettings()

    def new_progression(self) -> Progression:
        return Progression(level=1, xp=0, xp_to_next=self.settings.initial_threshold)

    def award(self, progression: Progression, stats: Stats, amount: int) -> LevelUpResult:
        if amount < 0:
            raise ValueError("XP amount cannot be negative")
        progression.xp += amount
        result = LevelUpResult(xp_awarded=amount, levels_gained=0)
        while progression.xp >= progression.xp_to_next:
            progression.xp -= progression.xp_to_next
            progression.xp_to_next = int(round(progression.xp_to_next * self.settings.threshold_factor))
            from_level = progression.level
            progression.level += 1
            self._grow(stats)
            result.levels_gained += 1
            result.events.append(LevelUpEvent(from_level=from_level, to_level=progression.level))
            logger.info(
                "Level up: L%d -> L%d (xp=%d, next=%d)",
                from_level,
                progression.level,
                progression.xp,
                progression.xp_to_next,
            )
        return result

    def _grow(self, stats: Stats) -> None:
        s = self.settings
        stats.max_hp += s.hp_gain
        stats.hp = stats.max_hp
        stats.attack += s.attack_gain
        stats.defense += s.defense_gain
        stats.perception += s.perception_gain
