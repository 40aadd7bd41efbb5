from __future__ import annotations

import logging
import random
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)


class ItemKind(str, Enum):
    WEAPON = "WEAPON"
    ARMOR = "ARMOR"
    POTION = "POTION"
    SCROLL = "SCROLL"

    @property
    def equippable(self) -> bool:
        return self in (ItemKind.WEAPON, ItemKind.ARMOR)

    @property
    def usable(self) -> bool:
        return self in (ItemKind.POTION, ItemKind.SCROLL)


class Effect(str, Enum):
    LIGHTNING = "LIGHTNING"


class ItemDef(BaseModel):
    """Immutable catalog entry.

    ``power`` means attack bonus for weapons, defense bonus for armor, heal
    amount for potions and damage for scrolls.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    kind: ItemKind
    power: int = Field(ge=0)
    symbol: str
    color: str = "white"
    effect: Optional[Effect] = None
    radius: Optional[float] = Field(default=None, gt=0)

    @field_validator("symbol")
    @classmethod
    def _single_glyph(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("symbol must be a single character")
        return v

    @model_validator(mode="after")
    def _scrolls_need_effect(self) -> "ItemDef":
        if self.kind == ItemKind.SCROLL and (self.effect is None or self.radius is None):
            raise ValueError(f"scroll {self.id} requires both effect and radius")
        if self.kind != ItemKind.SCROLL and self.effect is not None:
            raise ValueError(f"only scrolls carry an effect, got {self.kind.value} {self.id}")
        return self


class ItemCatalog:
    """The fixed set of items that can spawn on the ground."""

    def __init__(self, items: List[ItemDef]) -> None:
        if not items:
            raise ConfigError("Item catalog must not be empty")
        self._items: Dict[str, ItemDef] = {}
        for item in items:
            if item.id in self._items:
                raise ConfigError(f"Duplicate item id in catalog: {item.id}")
            self._items[item.id] = item
        logger.debug("ItemCatalog loaded %d items", len(self._items))

    @classmethod
    def from_dicts(cls, raw_items: List[dict]) -> "ItemCatalog":
        try:
            return cls([ItemDef.model_validate(raw) for raw in raw_items])
        except ValidationError as exc:
            for err in exc.errors():
                logger.error("Item validation error at %s: %s", list(err["loc"]), err["msg"])
            raise ConfigError(f"Invalid item catalog: {exc.error_count()} error(s)") from exc

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "ItemCatalog":
        """Load the catalog from YAML; defaults to the packaged items.yaml."""
        if path is None:
            text = resources.files("delve.data").joinpath("items.yaml").read_text(encoding="utf-8")
            logger.debug("Loaded embedded item catalog resource")
        else:
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise ConfigError(f"Failed to read item catalog {path}: {exc}") from exc
            logger.debug("Loaded item catalog from path: %s", path)
        raw = yaml.safe_load(text) or {}
        return cls.from_dicts(list(raw.get("items", [])))

    def get(self, item_id: str) -> ItemDef:
        try:
            return self._items[item_id]
        except KeyError:
            raise KeyError(f"Unknown item id: {item_id}") from None

    def all(self) -> List[ItemDef]:
        return list(self._items.values())

    def random_item(self, rng: random.Random) -> ItemDef:
        return rng.choice(self.all())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items
