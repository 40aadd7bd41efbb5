from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..actors.actor import Actor
from ..config import DungeonSettings
from ..dungeon.floor import Floor
from ..dungeon.generator import FloorGenerator
from ..dungeon.rooms import Point
from .floor_state import FloorState, GroundItem
from .spawning import Populator

logger = logging.getLogger(__name__)


class FloorManager:
    """Owns every generated floor and the live contents of the current one.

    Floors are generated lazily on first visit and cached for the session, so
    stairs coordinates never change. Leaving a floor snapshots its monsters and
    ground items; coming back replaces the live lists with that snapshot.
    """

    def __init__(
        self,
        generator: FloorGenerator,
        populator: Populator,
        settings: Optional[DungeonSettings] = None,
    ) -> None:
        self.generator = generator
        self.populator = populator
        self.settings = settings or generator.settings
        self._floors: Dict[int, Floor] = {}
        self._saved: Dict[int, FloorState] = {}
        self.current_index = 0
        self.live = FloorState()

    # ---- Accessors -------------------------------------------------------
    @property
    def max_depth(self) -> int:
        return self.settings.max_depth

    @property
    def monsters(self) -> List[Actor]:
        return self.live.monsters

    @property
    def items(self) -> List[GroundItem]:
        return self.live.items

    def current_floor(self) -> Floor:
        return self._floors[self.current_index]

    def floor(self, index: int) -> Optional[Floor]:
        return self._floors.get(index)

    def visited(self, index: int) -> bool:
        return index in self._floors

    def saved_state(self, index: int) -> Optional[FloorState]:
        return self._saved.get(index)

    # ---- Lifecycle -------------------------------------------------------
    def start(self) -> Optional[Point]:
        """Generate and populate floor 0; returns the player's spawn point."""
        floor = self._generate(0, inherited_up_stairs=None)
        self.current_index = 0
        self.live = self.populator.populate(floor)
        return floor.spawn_point

    def transition(self, target_index: int) -> Optional[Point]:
        """Move to ``target_index`` and return where the player should stand.

        Returns None, changing nothing, when the target is outside
        [0, max_depth), is the current floor, or generated without rooms. A
        roomless floor stays cached so it is not generated again.
        """
        if not 0 <= target_index < self.max_depth:
            logger.debug("Refused transition to floor %d (max_depth=%d)", target_index, self.max_depth)
            return None
        if target_index == self.current_index:
            logger.debug("Refused transition to current floor %d", target_index)
            return None

        source = self.current_floor()
        floor = self._floors.get(target_index)
        if floor is None:
            inherited = source.down_stairs if target_index == source.index + 1 else None
            floor = self._generate(target_index, inherited_up_stairs=inherited)
        if floor.is_degenerate:
            logger.warning("Refused transition to floor %d: it has no rooms to stand in", target_index)
            return None

        descending = target_index > source.index
        self._saved[source.index] = FloorState.capture(self.live.monsters, self.live.items)
        self.current_index = target_index

        saved = self._saved.get(target_index)
        if saved is not None:
            self.live = saved.restore()
            logger.debug("Restored floor %d: %d monsters, %d items", target_index, len(self.live.monsters), len(self.live.items))
        else:
            self.live = self.populator.populate(floor)

        spawn = floor.up_stairs if descending else floor.down_stairs
        if spawn is None:
            spawn = floor.spawn_point
        logger.info(
            "Moved from floor %d to floor %d; player at %s",
            source.index,
            target_index,
            spawn,
        )
        return spawn

    def _generate(self, index: int, inherited_up_stairs: Optional[Point]) -> Floor:
        floor = self.generator.generate(
            self.settings.width,
            self.settings.height,
            index,
            inherited_up_stairs=inherited_up_stairs,
        )
        self._floors[index] = floor
        return floor
