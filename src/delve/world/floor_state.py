from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from ..actors.actor import Actor
from ..actors.stats import Stats
from ..dungeon.rooms import Point
from ..items.catalog import ItemDef


@dataclass
class GroundItem:
    x: int
    y: int
    item: ItemDef

    @property
    def position(self) -> Point:
        return (self.x, self.y)


@dataclass
class FloorState:
    """Mutable contents of one floor: its monsters and the items on the ground.

    ``capture`` and ``restore`` deep-copy, so the saved state never aliases
    the live lists. Monsters that died but were not purged yet are not captured.
    """

    monsters: List[Actor] = field(default_factory=list)
    items: List[GroundItem] = field(default_factory=list)

    @classmethod
    def capture(cls, monsters: List[Actor], items: List[GroundItem]) -> "FloorState":
        live = [m for m in monsters if m.is_alive]
        return cls(monsters=copy.deepcopy(live), items=copy.deepcopy(items))

    def restore(self) -> "FloorState":
        return FloorState(monsters=copy.deepcopy(self.monsters), items=copy.deepcopy(self.items))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "monsters": [
                {
                    "eid": m.eid,
                    "x": m.x,
                    "y": m.y,
                    "name": m.name,
                    "symbol": m.symbol,
                    "color": m.color,
                    "stats": asdict(m.stats),
                }
                for m in self.monsters
            ],
            "items": [
                {"x": g.x, "y": g.y, "item": g.item.model_dump(mode="json")}
                for g in self.items
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FloorState":
        monsters = [
            Actor(
                x=int(m["x"]),
                y=int(m["y"]),
                name=m["name"],
                symbol=m["symbol"],
                color=m["color"],
                stats=Stats(**m["stats"]),
                eid=int(m["eid"]),
            )
            for m in data.get("monsters", [])
        ]
        items = [
            GroundItem(x=int(g["x"]), y=int(g["y"]), item=ItemDef.model_validate(g["item"]))
            for g in data.get("items", [])
        ]
        return cls(monsters=monsters, items=items)
