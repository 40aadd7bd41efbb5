from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from ..actors.actor import Actor, new_player
from ..actors.progression import LevelingSystem
from ..config import EngineConfig
from ..dungeon.floor import Floor
from ..dungeon.generator import FloorGenerator
from ..dungeon.rooms import Point
from ..dungeon.tiles import Tile
from ..exceptions import InventoryError, ItemUseError, NoTargetError, WrongItemKindError
from ..items.catalog import Effect, ItemCatalog, ItemDef, ItemKind
from ..rng import RNGManager
from ..world.floor_manager import FloorManager
from ..world.floor_state import GroundItem
from ..world.spawning import Populator
from .combat import AttackResult, apply_hit, resolve_attack
from .events import GameEvent
from .intents import Intent, IntentKind
from .log import EventLog
from .scheduler import TurnScheduler
from .view import ActorView, ItemView, PlayerView, WorldView

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent, "GameState"], None]


class GameState:
    """One play session: the player, the floor manager, and the event log.

    Each call to :meth:`tick` runs to completion in this order: player intents,
    floor transition, monster turns, purge of the dead. ``now`` is the caller's
    monotonic clock; the engine never sleeps or reads a clock itself.
    """

    def __init__(self, config: Optional[EngineConfig] = None, catalog: Optional[ItemCatalog] = None) -> None:
        self.config = config or EngineConfig()
        self.catalog = catalog or ItemCatalog.load()
        self.rngm = RNGManager(self.config.seed)
        self._listeners: List[Listener] = []

        self.leveling = LevelingSystem(self.config.progression)
        self.scheduler = TurnScheduler(self.leveling, self.config.progression.xp_per_kill)
        self.floors = FloorManager(
            FloorGenerator(self.rngm, self.config.dungeon),
            Populator(self.rngm, self.catalog, self.config.monster, self.config.spawning),
        )
        self.log = EventLog(self.config.session.log_capacity)
        self._ai_rng = self.rngm.context_rng("monster_ai")

        self.player: Actor = new_player(self.config.player, self.leveling.new_progression())
        self.inventory_open = False
        self.game_over = False
        self.tick_count = 0

        spawn = self.floors.start()
        if spawn is None:
            logger.warning("Floor 0 has no spawn point; player left at %s", self.player.position)
        else:
            self.player.move_to(spawn)
        logger.info("Initialized GameState on floor 0, player at %s", self.player.position)

    # ---- Listeners -------------------------------------------------------
    def add_listener(self, listener: Listener) -> None:
        """Subscribe to game events (movement, floor change, deaths, level ups, pickups)."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception as ex:
                logger.exception("Listener errored on %s: %s", event, ex)

    # ---- Accessors -------------------------------------------------------
    @property
    def floor(self) -> Floor:
        return self.floors.current_floor()

    @property
    def floor_index(self) -> int:
        return self.floors.current_index

    @property
    def monsters(self) -> List[Actor]:
        return self.floors.monsters

    @property
    def ground_items(self) -> List[GroundItem]:
        return self.floors.items

    def monster_at(self, pos: Point) -> Optional[Actor]:
        for m in self.monsters:
            if m.is_alive and m.position == pos:
                return m
        return None

    def find_closest_monster(self, origin: Point, max_range: float) -> Optional[Actor]:
        in_range = [m for m in self.monsters if m.is_alive and m.distance_to(origin) <= max_range]
        if not in_range:
            return None
        return min(in_range, key=lambda m: m.distance_to(origin))

    def _say(self, message: str, *tags: str) -> None:
        self.log.add(message, tick=self.tick_count, tags=tags)

    # ---- Tick ------------------------------------------------------------
    def tick(self, now: float, intents: Iterable[Intent] = ()) -> None:
        self.tick_count += 1
        if self.game_over:
            return

        target: Optional[int] = None
        for intent in intents:
            requested = self._apply_intent(intent, now)
            if requested is not None:
                target = requested

        if target is not None:
            self._change_floor(target)

        attacks = self.scheduler.run_monsters(now, self.monsters, self.player, self.floor, self._ai_rng)
        for result in attacks:
            self._say(result.message, "combat")
            if result.killed:
                self._player_died()
                break

        self.scheduler.purge(self.monsters)

    def _apply_intent(self, intent: Intent, now: float) -> Optional[int]:
        """Resolve one intent; returns a floor index when it asks for a transition."""
        if self.game_over:
            return None
        kind = intent.kind
        if intent.direction is not None:
            return self._move_player(intent.direction, now)
        if kind is IntentKind.TOGGLE_INVENTORY:
            self.inventory_open = not self.inventory_open
        elif kind is IntentKind.DESCEND:
            return self._stairs_target(Tile.STAIRS_DOWN)
        elif kind is IntentKind.ASCEND:
            return self._stairs_target(Tile.STAIRS_UP)
        else:
            self._inventory_action(intent)
        return None

    # ---- Player actions ----------------------------------------------------
    def _move_player(self, direction: Point, now: float) -> Optional[int]:
        if not self.player.can_act(now):
            logger.debug("Player on cooldown at t=%.3f", now)
            return None
        dest = (self.player.x + direction[0], self.player.y + direction[1])

        monster = self.monster_at(dest)
        if monster is not None:
            self.player.mark_acted(now)
            self._report_player_hit(resolve_attack(self.player, monster, self.leveling, self.config.progression.xp_per_kill))
            return None

        if not self.floor.is_walkable(*dest):
            logger.debug("Blocked move to %s", dest)
            return None

        self.player.move_to(dest)
        self.player.mark_acted(now)
        self._emit(GameEvent.PLAYER_MOVED)
        self._pick_up_items()

        if self.config.session.auto_stairs:
            tile = self.floor.tile_at(*dest)
            if tile.is_stairs:
                return self._stairs_target(tile)
        return None

    def _report_player_hit(self, result: AttackResult) -> None:
        self._say(result.message, "combat")
        if result.killed:
            self._say(f"{result.defender.name} dies!", "combat")
            self._emit(GameEvent.ACTOR_DIED)
        if result.leveled_up:
            self._say(f"Level up! You are now level {self.player.progression.level}.", "progression")
            self._emit(GameEvent.LEVEL_UP)

    def _stairs_target(self, wanted: Tile) -> Optional[int]:
        if self.floor.tile_at(*self.player.position) is not wanted:
            direction = "down" if wanted is Tile.STAIRS_DOWN else "up"
            self._say(f"There are no stairs {direction} here.")
            return None
        step = 1 if wanted is Tile.STAIRS_DOWN else -1
        return self.floor_index + step

    def _change_floor(self, target: int) -> None:
        spawn = self.floors.transition(target)
        if spawn is None:
            self._say("The stairs lead nowhere.")
            return
        self.player.move_to(spawn)
        self._say(f"Moved to level {target + 1}")
        self._emit(GameEvent.FLOOR_CHANGED)

    def _pick_up_items(self) -> None:
        inventory = self.player.inventory
        if inventory is None:
            return
        here = [g for g in self.ground_items if g.position == self.player.position]
        for ground in here:
            try:
                inventory.add(ground.item)
            except InventoryError as exc:
                self._say(str(exc), "inventory", "error")
                break
            self.ground_items.remove(ground)
            self._say(f"Picked up {ground.item.name}!", "inventory")
            self._emit(GameEvent.ITEM_PICKED_UP)

    def _inventory_action(self, intent: Intent) -> None:
        inventory = self.player.inventory
        if inventory is None:
            self._say("No inventory available!", "inventory", "error")
            return
        assert intent.index is not None
        try:
            if intent.kind is IntentKind.EQUIP:
                item = inventory.equip(intent.index)
                label = "Weapon" if item.kind is ItemKind.WEAPON else "Armor"
                self._say(f"{label} equipped!", "inventory")
            elif intent.kind is IntentKind.USE:
                self._use_item(intent.index)
            elif intent.kind is IntentKind.DROP:
                item = inventory.remove(intent.index)
                self.ground_items.append(GroundItem(x=self.player.x, y=self.player.y, item=item))
                self._say(f"Dropped {item.name}.", "inventory")
        except (InventoryError, ItemUseError) as exc:
            logger.debug("Inventory action %s failed: %s", intent, exc)
            self._say(str(exc), "inventory", "error")

    def _use_item(self, index: int) -> None:
        inventory = self.player.inventory
        assert inventory is not None
        item = inventory.get(index)
        if item.kind is ItemKind.POTION:
            healed = self.player.stats.heal(item.power)
            inventory.remove(index)
            self._say(f"Used {item.name}! Healed for {healed} HP", "inventory")
        elif item.kind is ItemKind.SCROLL:
            self._read_scroll(item)
            inventory.remove(index)
        else:
            raise WrongItemKindError("This item cannot be used!")

    def _read_scroll(self, item: ItemDef) -> None:
        if item.effect is not Effect.LIGHTNING:
            raise ItemUseError("Effect not implemented!")
        assert item.radius is not None
        target = self.find_closest_monster(self.player.position, item.radius)
        if target is None:
            raise NoTargetError("No monster in range!")
        result = apply_hit(
            self.player,
            target,
            item.power,
            self.leveling,
            self.config.progression.xp_per_kill,
        )
        result.message = f"Lightning bolt hits {target.name} for {item.power} damage!"
        self._report_player_hit(result)

    def _player_died(self) -> None:
        self.game_over = True
        self._say("You died!", "combat")
        self._emit(GameEvent.ACTOR_DIED)
        logger.info("Player died on floor %d at tick %d", self.floor_index, self.tick_count)

    # ---- Presentation ------------------------------------------------------
    @staticmethod
    def _actor_view(actor: Actor) -> ActorView:
        return ActorView(
            eid=actor.eid,
            name=actor.name,
            x=actor.x,
            y=actor.y,
            symbol=actor.symbol,
            color=actor.color,
            alive=actor.is_alive,
        )

    def view(self) -> WorldView:
        floor = self.floor
        p = self.player
        progression = p.progression
        inventory = p.inventory
        stats = PlayerView(
            hp=p.stats.hp,
            max_hp=p.stats.max_hp,
            attack=p.total_attack,
            defense=p.total_defense,
            speed=p.stats.speed,
            perception=p.stats.perception,
            level=progression.level if progression else 1,
            xp=progression.xp if progression else 0,
            xp_to_next=progression.xp_to_next if progression else 0,
            weapon=inventory.weapon.name if inventory and inventory.weapon else None,
            armor=inventory.armor.name if inventory and inventory.armor else None,
            inventory=tuple(i.name for i in inventory.items) if inventory else (),
        )
        return WorldView(
            floor_index=floor.index,
            width=floor.width,
            height=floor.height,
            tiles=tuple(tuple(row) for row in floor.tiles),
            player=self._actor_view(p),
            player_stats=stats,
            monsters=tuple(self._actor_view(m) for m in self.monsters),
            items=tuple(
                ItemView(name=g.item.name, x=g.x, y=g.y, symbol=g.item.symbol, color=g.item.color)
                for g in self.ground_items
            ),
            log=tuple(self.log.lines()),
            inventory_open=self.inventory_open,
            game_over=self.game_over,
        )
