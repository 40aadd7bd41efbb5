from __future__ import annotations

import math
import random

from ..dungeon.floor import Floor
from ..dungeon.pathfinding import find_path
from ..dungeon.rooms import Point

CARDINALS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def perceives(origin: Point, target: Point, radius: float) -> bool:
    """True when ``target`` is within Euclidean ``radius`` of ``origin``."""
    return math.hypot(target[0] - origin[0], target[1] - origin[1]) <= radius


def choose_step(origin: Point, target: Point, sees_target: bool, floor: Floor, rng: random.Random) -> Point:
    """Pick the cell a monster wants to enter this turn.

    Hunting: the first cell of the shortest path to ``target``; stay put when
    there is none. Wandering: a random cardinal neighbor, which may be a wall
    (the caller rejects it). The result is only a proposal.
    """
    if sees_target:
        path = find_path(floor, origin, target)
        if not path:
            return origin
        return path[0]
    dx, dy = rng.choice(CARDINALS)
    return (origin[0] + dx, origin[1] + dy)
