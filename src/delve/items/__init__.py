from .catalog import Effect, ItemCatalog, ItemDef, ItemKind
from .inventory import Inventory

__all__ = ["Effect", "ItemCatalog", "ItemDef", "ItemKind", "Inventory"]
