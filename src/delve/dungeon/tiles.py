from __future__ import annotations

from enum import Enum


class Tile(Enum):
    WALL = "#"
    FLOOR = "."
    STAIRS_UP = "<"
    STAIRS_DOWN = ">"

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def walkable(self) -> bool:
        return self is not Tile.WALL

    @property
    def is_stairs(self) -> bool:
        return self in (Tile.STAIRS_UP, Tile.STAIRS_DOWN)
