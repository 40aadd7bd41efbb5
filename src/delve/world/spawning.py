from __future__ import annotations

import logging
from typing import Optional, Set

from ..actors.actor import new_monster
from ..config import ActorTemplate, SpawnSettings
from ..dungeon.floor import Floor
from ..dungeon.rooms import Point
from ..items.catalog import ItemCatalog
from ..rng import RNGManager
from .floor_state import FloorState, GroundItem

logger = logging.getLogger(__name__)


class Populator:
    """Fills a freshly generated floor with monsters and ground items.

    Monsters: for each row, every room after the row's first gets between
    ``monsters_min`` and ``monsters_max`` monsters on walkable inner cells.
    Items: every room rolls ``item_chance`` for one random catalog item.

    Monsters never share a cell with each other, the player's spawn point or
    either stairs cell; items never share a cell with another item. A sampled
    cell that is already taken is skipped rather than resampled.
    """

    def __init__(
        self,
        rngm: RNGManager,
        catalog: ItemCatalog,
        monster: Optional[ActorTemplate] = None,
        settings: Optional[SpawnSettings] = None,
    ) -> None:
        self.rngm = rngm
        self.catalog = catalog
        self.monster = monster or ActorTemplate()
        self.settings = settings or SpawnSettings()

    def populate(self, floor: Floor) -> FloorState:
        rng = self.rngm.context_rng("floor_population", floor.index)
        state = FloorState()

        occupied: Set[Point] = set()
        for reserved in (floor.spawn_point, floor.up_stairs, floor.down_stairs):
            if reserved is not None:
                occupied.add(reserved)

        for row in floor.rows:
            for room in row[1:]:
                count = rng.randint(self.settings.monsters_min, self.settings.monsters_max)
                for _ in range(count):
                    pos = room.random_position(rng)
                    if pos in occupied or not floor.is_walkable(*pos):
                        continue
                    occupied.add(pos)
                    state.monsters.append(new_monster(self.monster, pos))

        item_cells: Set[Point] = set()
        for room in floor.rooms:
            if rng.random() >= self.settings.item_chance:
                continue
            pos = room.random_position(rng)
            item = self.catalog.random_item(rng)
            if pos in item_cells:
                continue
            item_cells.add(pos)
            state.items.append(GroundItem(x=pos[0], y=pos[1], item=item))

        logger.info(
            "Populated floor %d: %d monsters, %d items",
            floor.index,
            len(state.monsters),
            len(state.items),
        )
        return state
