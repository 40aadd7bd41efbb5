from .floor_state import FloorState, GroundItem
from .spawning import Populator
from .floor_manager import FloorManager

__all__ = ["FloorState", "GroundItem", "Populator", "FloorManager"]
