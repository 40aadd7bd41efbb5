from .tiles import Tile
from .rooms import Point, Room, group_rows
from .floor import Floor
from .generator import FloorGenerator
from .pathfinding import bfs_distance, connected_region, find_path

__all__ = [
    "Tile",
    "Point",
    "Room",
    "group_rows",
    "Floor",
    "FloorGenerator",
    "find_path",
    "bfs_distance",
    "connected_region",
]
