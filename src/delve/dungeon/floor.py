from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .rooms import Point, Room
from .tiles import Tile

logger = logging.getLogger(__name__)


@dataclass
class Floor:
    """One generated dungeon level.

    Coordinates are (x, y) with (0, 0) at top-left; ``tiles[y][x]``. The grid
    is static once the generator returns it.
    """

    width: int
    height: int
    tiles: List[List[Tile]]
    rows: List[List[Room]]
    index: int
    up_stairs: Optional[Point] = None
    down_stairs: Optional[Point] = None
    generation_attempts: int = field(default=1, compare=False)

    @classmethod
    def solid(cls, width: int, height: int, index: int) -> "Floor":
        tiles = [[Tile.WALL for _ in range(width)] for _ in range(height)]
        return cls(width=width, height=height, tiles=tiles, rows=[], index=index)

    # ---- Query -----------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            return Tile.WALL
        return self.tiles[y][x]

    def is_walkable(self, x: int, y: int) -> bool:
        return self.tile_at(x, y).walkable

    def neighbors4(self, x: int, y: int) -> Iterator[Point]:
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield nx, ny

    @property
    def rooms(self) -> List[Room]:
        return [room for row in self.rows for room in row]

    @property
    def spawn_room(self) -> Optional[Room]:
        if not self.rows:
            return None
        return self.rows[0][0]

    @property
    def spawn_point(self) -> Optional[Point]:
        """Center of the spawn room, or its first walkable inner cell."""
        room = self.spawn_room
        if room is None:
            return None
        center = room.center()
        if self.is_walkable(*center):
            return center
        for cell in room.inner_tiles():
            if self.is_walkable(*cell):
                return cell
        return None

    @property
    def is_degenerate(self) -> bool:
        return not self.rows

    def walkable_cells(self) -> List[Point]:
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self.tiles[y][x].walkable
        ]

    # ---- Carving (generation only) ---------------------------------------
    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        if not self.in_bounds(x, y):
            logger.error("Attempt to write out-of-bounds tile at (%d,%d)", x, y)
            return
        self.tiles[y][x] = tile

    def carve_room(self, room: Room) -> None:
        for y in range(room.y, room.y + room.h):
            for x in range(room.x, room.x + room.w):
                self.set_tile(x, y, Tile.FLOOR)

    def carve_h_corridor(self, x1: int, x2: int, y: int) -> None:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self.set_tile(x, y, Tile.FLOOR)

    def carve_v_corridor(self, y1: int, y2: int, x: int) -> None:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self.set_tile(x, y, Tile.FLOOR)

    # ---- Debug -----------------------------------------------------------
    def to_ascii(self) -> str:
        return "\n".join("".join(t.glyph for t in row) for row in self.tiles)

    def signature(self) -> Tuple[str, Tuple[Room, ...], Optional[Point], Optional[Point]]:
        return (self.to_ascii(), tuple(self.rooms), self.up_stairs, self.down_stairs)
