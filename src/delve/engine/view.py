from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..dungeon.tiles import Tile


@dataclass(frozen=True)
class ActorView:
    eid: int
    name: str
    x: int
    y: int
    symbol: str
    color: str
    alive: bool


@dataclass(frozen=True)
class ItemView:
    name: str
    x: int
    y: int
    symbol: str
    color: str


@dataclass(frozen=True)
class PlayerView:
    hp: int
    max_hp: int
    attack: int
    defense: int
    speed: float
    perception: float
    level: int
    xp: int
    xp_to_next: int
    weapon: Optional[str]
    armor: Optional[str]
    inventory: Tuple[str, ...]


@dataclass(frozen=True)
class WorldView:
    """Read-only picture of the simulation for the presentation layer."""

    floor_index: int
    width: int
    height: int
    tiles: Tuple[Tuple[Tile, ...], ...]
    player: ActorView
    player_stats: PlayerView
    monsters: Tuple[ActorView, ...]
    items: Tuple[ItemView, ...]
    log: Tuple[str, ...]
    inventory_open: bool
    game_over: bool
