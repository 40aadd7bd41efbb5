class DelveError(Exception):
    """Base exception for the Delve engine."""


class ConfigError(DelveError):
    """Raised when configuration or catalog data cannot be loaded."""


class InventoryError(DelveError):
    """Raised when inventory operations fail."""


class InventoryFullError(InventoryError):
    """Raised when adding to an inventory that is at capacity."""


class InvalidItemIndexError(InventoryError):
    """Raised for an inventory index that does not exist."""


class WrongItemKindError(InventoryError):
    """Raised when an item does not support the requested operation."""


class ItemUseError(DelveError):
    """Raised when an item cannot be used (no valid target, etc.)."""


class NoTargetError(ItemUseError):
    """Raised when a targeted effect finds no monster in range."""
