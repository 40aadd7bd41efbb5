from __future__ import annotations

import logging
import random
from typing import List, Optional

from ..config import DungeonSettings
from ..rng import RNGManager
from .floor import Floor
from .rooms import Point, Room, group_rows
from .tiles import Tile

logger = logging.getLogger(__name__)


class FloorGenerator:
    """Rooms-and-corridors generator, deterministic per floor index.

    Rooms are placed by rejection sampling and each accepted room is joined to
    the previously accepted one by an L-shaped corridor. Rooms are then bucketed
    into rows: the first room of the first row is the spawn room, the last room
    of the last row holds the down stairs.

    The random stream is derived from ``(master seed, floor index, attempt)``,
    so asking for the same index again reproduces the same floor.
    """

    def __init__(self, rngm: RNGManager, settings: Optional[DungeonSettings] = None) -> None:
        self.rngm = rngm
        self.settings = settings or DungeonSettings()

    def generate(
        self,
        width: int,
        height: int,
        floor_index: int,
        inherited_up_stairs: Optional[Point] = None,
    ) -> Floor:
        floor = Floor.solid(width, height, floor_index)
        for attempt in range(self.settings.generation_retries + 1):
            rng = self.rngm.context_rng("floor_layout", floor_index, attempt)
            floor = Floor.solid(width, height, floor_index)
            rooms = self._place_rooms(floor, rng)
            if rooms:
                floor.rows = group_rows(rooms, self.settings.row_band)
                floor.generation_attempts = attempt + 1
                break
            logger.debug("Floor %d attempt %d placed no rooms; retrying", floor_index, attempt)
        else:
            logger.warning(
                "Floor %d: no rooms placed after %d attempts; floor is solid wall",
                floor_index,
                self.settings.generation_retries + 1,
            )
            return floor

        self._place_stairs(floor, inherited_up_stairs)
        logger.info(
            "Generated floor %d (%dx%d): %d rooms in %d rows, up=%s down=%s",
            floor_index,
            width,
            height,
            len(floor.rooms),
            len(floor.rows),
            floor.up_stairs,
            floor.down_stairs,
        )
        logger.debug("Floor %d layout:\n%s", floor_index, floor.to_ascii())
        return floor

    def _place_rooms(self, floor: Floor, rng: random.Random) -> List[Room]:
        s = self.settings
        rooms: List[Room] = []
        for _ in range(s.max_rooms):
            w = rng.randint(s.room_min_size, s.room_max_size)
            h = rng.randint(s.room_min_size, s.room_max_size)
            max_x = floor.width - w - 2
            max_y = floor.height - h - 2
            if max_x < 1 or max_y < 1:
                continue
            new_room = Room(rng.randint(1, max_x), rng.randint(1, max_y), w, h)
            if any(new_room.intersects(other) for other in rooms):
                continue

            floor.carve_room(new_room)
            if rooms:
                self._connect(floor, rooms[-1].center(), new_room.center(), rng.random() < 0.5)
            rooms.append(new_room)
        return rooms

    @staticmethod
    def _connect(floor: Floor, a: Point, b: Point, horizontal_first: bool) -> None:
        (x1, y1), (x2, y2) = a, b
        if horizontal_first:
            floor.carve_h_corridor(x1, x2, y1)
            floor.carve_v_corridor(y1, y2, x2)
        else:
            floor.carve_v_corridor(y1, y2, x1)
            floor.carve_h_corridor(x1, x2, y2)

    def _place_stairs(self, floor: Floor, inherited_up_stairs: Optional[Point]) -> None:
        spawn_room = floor.spawn_room
        assert spawn_room is not None

        up: Optional[Point] = None
        if inherited_up_stairs is not None and floor.in_bounds(*inherited_up_stairs):
            up = inherited_up_stairs
            if not floor.is_walkable(*up):
                # Join the stairs to the spawn room so they stay reachable
                self._connect(floor, up, spawn_room.center(), horizontal_first=True)
        elif inherited_up_stairs is not None:
            logger.warning(
                "Inherited up stairs %s outside %dx%d floor; ignoring",
                inherited_up_stairs,
                floor.width,
                floor.height,
            )
        if up is None and floor.index > 0:
            up = spawn_room.center()
        if up is not None:
            floor.set_tile(up[0], up[1], Tile.STAIRS_UP)
            floor.up_stairs = up

        if floor.index >= self.settings.max_depth - 1:
            return
        last_room = floor.rows[-1][-1]
        down = last_room.center()
        if down == up:
            down = next((c for c in last_room.inner_tiles() if c != up), None)
            if down is None:
                logger.warning("Floor %d: no room left for down stairs", floor.index)
                return
        floor.set_tile(down[0], down[1], Tile.STAIRS_DOWN)
        floor.down_stairs = down
