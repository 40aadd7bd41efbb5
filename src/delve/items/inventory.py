from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..exceptions import InvalidItemIndexError, InventoryFullError, WrongItemKindError
from .catalog import ItemDef, ItemKind

logger = logging.getLogger(__name__)


class Inventory:
    """Bag of carried items plus one weapon and one armor slot.

    Equipping moves the item out of the bag into its slot; whatever was in the
    slot goes back into the bag. Equipped items do not count against capacity.
    """

    def __init__(self, capacity: int = 20) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self.items: List[ItemDef] = []
        self.weapon: Optional[ItemDef] = None
        self.armor: Optional[ItemDef] = None

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_full(self) -> bool:
        return len(self.items) >= self.capacity

    def add(self, item: ItemDef) -> None:
        if self.is_full:
            raise InventoryFullError("Inventory is full!")
        self.items.append(item)
        logger.debug("Added %s (%d/%d)", item.id, len(self.items), self.capacity)

    def get(self, index: int) -> ItemDef:
        if not 0 <= index < len(self.items):
            raise InvalidItemIndexError("Invalid item index!")
        return self.items[index]

    def remove(self, index: int) -> ItemDef:
        item = self.get(index)
        del self.items[index]
        logger.debug("Removed %s from slot %d", item.id, index)
        return item

    def equip(self, index: int) -> ItemDef:
        """Equip the item at ``index`` and return it."""
        item = self.get(index)
        if not item.kind.equippable:
            raise WrongItemKindError("This item cannot be equipped!")
        del self.items[index]
        if item.kind == ItemKind.WEAPON:
            previous, self.weapon = self.weapon, item
        else:
            previous, self.armor = self.armor, item
        if previous is not None:
            self.items.append(previous)
        logger.debug("Equipped %s; previous=%s", item.id, previous.id if previous else None)
        return item

    def bonuses(self) -> Tuple[int, int]:
        """(attack bonus, defense bonus) from equipped items."""
        attack = self.weapon.power if self.weapon is not None else 0
        defense = self.armor.power if self.armor is not None else 0
        return attack, defense
