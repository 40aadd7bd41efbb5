from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class DungeonSettings:
    width: int = 50
    height: int = 40
    max_depth: int = 10
    max_rooms: int = 15
    room_min_size: int = 5
    room_max_size: int = 9
    # Rooms whose vertical centers fall within this band share a row
    row_band: int = 4
    generation_retries: int = 3

    def validate(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ConfigError(f"Dungeon must be at least 3x3, got {self.width}x{self.height}")
        if self.max_depth < 1:
            raise ConfigError("max_depth must be >= 1")
        if self.room_min_size < 3 or self.room_max_size < self.room_min_size:
            raise ConfigError(
                f"Invalid room size range [{self.room_min_size}, {self.room_max_size}]"
            )
        if self.max_rooms < 0 or self.generation_retries < 0:
            raise ConfigError("max_rooms and generation_retries must be >= 0")


@dataclass
class ActorTemplate:
    """Starting stat block for a kind of actor."""

    name: str = "Goblin"
    symbol: str = "g"
    color: str = "red"
    hp: int = 15
    attack: int = 3
    defense: int = 1
    speed: float = 2.0
    perception: float = 5.0
    inventory_capacity: int = 0

    def validate(self) -> None:
        if self.hp <= 0:
            raise ConfigError(f"{self.name}: hp must be > 0")
        if self.speed <= 0:
            raise ConfigError(f"{self.name}: speed must be > 0")


def _default_player() -> ActorTemplate:
    return ActorTemplate(
        name="Player",
        symbol="@",
        color="yellow",
        hp=30,
        attack=5,
        defense=2,
        speed=5.0,
        perception=5.0,
        inventory_capacity=20,
    )


@dataclass
class ProgressionSettings:
    xp_per_kill: int = 50
    initial_threshold: int = 100
    threshold_factor: float = 1.5
    hp_gain: int = 10
    attack_gain: int = 2
    defense_gain: int = 1
    perception_gain: int = 1

    def validate(self) -> None:
        if self.initial_threshold <= 0:
            raise ConfigError("initial_threshold must be > 0")
        if self.threshold_factor < 1.0:
            raise ConfigError("threshold_factor must be >= 1.0")


@dataclass
class SpawnSettings:
    monsters_min: int = 0
    monsters_max: int = 2
    item_chance: float = 0.6

    def validate(self) -> None:
        if self.monsters_min < 0 or self.monsters_max < self.monsters_min:
            raise ConfigError(
                f"Invalid monster count range [{self.monsters_min}, {self.monsters_max}]"
            )
        if not 0.0 <= self.item_chance <= 1.0:
            raise ConfigError(f"item_chance must be within [0, 1], got {self.item_chance}")


@dataclass
class SessionSettings:
    log_capacity: int = 5
    # Stepping onto stairs transitions immediately instead of waiting for DESCEND/ASCEND
    auto_stairs: bool = False

    def validate(self) -> None:
        if self.log_capacity <= 0:
            raise ConfigError("log_capacity must be positive")


@dataclass
class EngineConfig:
    """Complete engine configuration.

    Built from the packaged ``delve/data/defaults.yaml`` with an optional user
    YAML file deep-merged on top:

        config = EngineConfig.load()
        config = EngineConfig.load(Path("my_dungeon.yaml"))

    ``DELVE_SEED`` in the environment overrides the master seed.
    """

    seed: Union[int, str, None] = 0
    dungeon: DungeonSettings = field(default_factory=DungeonSettings)
    player: ActorTemplate = field(default_factory=_default_player)
    monster: ActorTemplate = field(default_factory=ActorTemplate)
    progression: ProgressionSettings = field(default_factory=ProgressionSettings)
    spawning: SpawnSettings = field(default_factory=SpawnSettings)
    session: SessionSettings = field(default_factory=SessionSettings)

    def validate(self) -> None:
        self.dungeon.validate()
        self.player.validate()
        self.monster.validate()
        self.progression.validate()
        self.spawning.validate()
        self.session.validate()

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Failed to read config {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a mapping at top level")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        try:
            config = cls(
                seed=data.get("seed", 0),
                dungeon=DungeonSettings(**data.get("dungeon", {})),
                player=ActorTemplate(**{**_default_player().__dict__, **data.get("player", {})}),
                monster=ActorTemplate(**data.get("monster", {})),
                progression=ProgressionSettings(**data.get("progression", {})),
                spawning=SpawnSettings(**data.get("spawning", {})),
                session=SessionSettings(**data.get("session", {})),
            )
        except TypeError as exc:
            raise ConfigError(f"Unknown configuration key: {exc}") from exc
        try:
            config.validate()
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid configuration value: {exc}") from exc
        return config

    @classmethod
    def load(
        cls,
        user_path: Optional[Path] = None,
        env: Optional[Dict[str, str]] = None,
    ) -> "EngineConfig":
        """Load defaults from package resources and overlay an optional user file."""
        env = os.environ if env is None else env
        with resources.files("delve.data").joinpath("defaults.yaml").open("r", encoding="utf-8") as f:
            default_data = yaml.safe_load(f) or {}

        user_data: dict = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user config from %s", user_path)
            else:
                logger.warning("User config file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        seed_override = env.get("DELVE_SEED")
        if seed_override:
            merged["seed"] = int(seed_override) if seed_override.isdigit() else seed_override
            logger.info("Master seed overridden from DELVE_SEED=%s", seed_override)

        config = cls.from_dict(merged)
        logger.debug("Engine config loaded: %s", config)
        return config
