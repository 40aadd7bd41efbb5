from __future__ import annotations

import heapq
import itertools
from collections import deque
from typing import Dict, List, Optional, Set

from .floor import Floor
from .rooms import Point


def manhattan(a: Point, b: Point) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def find_path(floor: Floor, start: Point, goal: Point) -> Optional[List[Point]]:
    """A* over the static tile grid with 4-directional moves.

    Returns the steps from ``start`` to ``goal`` (start excluded, goal
    included), so ``len(path)`` is the shortest path length. Returns None if
    either end is not walkable or the goal is unreachable. Actors are not
    obstacles; only walls are.
    """
    if not floor.is_walkable(*start) or not floor.is_walkable(*goal):
        return None
    if start == goal:
        return []

    # Counter breaks f-cost ties in insertion order without comparing points
    counter = itertools.count()
    open_heap = [(manhattan(start, goal), next(counter), 0, start)]
    came_from: Dict[Point, Point] = {}
    g_score: Dict[Point, int] = {start: 0}

    while open_heap:
        _, _, g, pos = heapq.heappop(open_heap)
        if pos == goal:
            path = [pos]
            while path[-1] in came_from and came_from[path[-1]] != start:
                path.append(came_from[path[-1]])
            path.reverse()
            return path
        if g > g_score.get(pos, g):
            continue
        for npos in floor.neighbors4(*pos):
            if not floor.is_walkable(*npos):
                continue
            ng = g + 1
            if ng < g_score.get(npos, ng + 1):
                g_score[npos] = ng
                came_from[npos] = pos
                heapq.heappush(open_heap, (ng + manhattan(npos, goal), next(counter), ng, npos))
    return None


def bfs_distance(floor: Floor, start: Point, goal: Point) -> Optional[int]:
    """Breadth-first shortest path length on walkable tiles; None if unreachable."""
    if not floor.is_walkable(*start) or not floor.is_walkable(*goal):
        return None
    q = deque([(start, 0)])
    seen = {start}
    while q:
        pos, d = q.popleft()
        if pos == goal:
            return d
        for npos in floor.neighbors4(*pos):
            if npos not in seen and floor.is_walkable(*npos):
                seen.add(npos)
                q.append((npos, d + 1))
    return None


def connected_region(floor: Floor, start: Point) -> Set[Point]:
    """All walkable cells 4-connected to ``start``."""
    if not floor.is_walkable(*start):
        return set()
    region = {start}
    q = deque([start])
    while q:
        pos = q.popleft()
        for npos in floor.neighbors4(*pos):
            if npos not in region and floor.is_walkable(*npos):
                region.add(npos)
                q.append(npos)
    return region
