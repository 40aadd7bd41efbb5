from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

Point = Tuple[int, int]


@dataclass(frozen=True)
class Room:
    x: int
    y: int
    w: int
    h: int

    def center(self) -> Point:
        return (self.x + self.w // 2, self.y + self.h // 2)

    def intersects(self, other: "Room") -> bool:
        """Overlap test that also counts rooms sharing or touching an edge."""
        return (
            self.x <= other.x + other.w
            and self.x + self.w >= other.x
            and self.y <= other.y + other.h
            and self.y + self.h >= other.y
        )

    def contains(self, p: Point) -> bool:
        return self.x <= p[0] < self.x + self.w and self.y <= p[1] < self.y + self.h

    def inner_tiles(self) -> List[Point]:
        """Cells strictly inside the room's outer ring."""
        return [
            (x, y)
            for y in range(self.y + 1, self.y + self.h - 1)
            for x in range(self.x + 1, self.x + self.w - 1)
        ]

    def random_position(self, rng: random.Random) -> Point:
        return (
            rng.randint(self.x + 1, self.x + self.w - 2),
            rng.randint(self.y + 1, self.y + self.h - 2),
        )


def group_rows(rooms: List[Room], band: int) -> List[List[Room]]:
    """Bucket rooms into rows by vertical center, each row ordered left to right.

    A room joins the current row while its vertical center is within ``band``
    of the row's first room; otherwise it opens a new row.
    """
    rows: List[List[Room]] = []
    row_anchor = 0
    for room in sorted(rooms, key=lambda r: (r.center()[1], r.x)):
        cy = room.center()[1]
        if rows and cy - row_anchor <= band:
            rows[-1].append(room)
        else:
            rows.append([room])
            row_anchor = cy
    for row in rows:
        row.sort(key=lambda r: (r.x, r.y))
    return rows
