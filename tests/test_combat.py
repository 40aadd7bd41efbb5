import pytest

from delve.actors.progression import LevelingSystem, Progression
from delve.actors.stats import Stats
from delve.engine.combat import apply_hit, compute_damage, resolve_attack
from delve.items.inventory import Inventory


def test_damage_is_at_least_one(make_actor):
    weak = make_actor((0, 0), attack=1)
    tank = make_actor((1, 0), defense=50)
    assert compute_damage(weak, tank) == 1


def test_damage_includes_equipment(make_actor, catalog):
    inv = Inventory(5)
    inv.add(catalog.get("sword"))
    inv.equip(0)
    hero = make_actor((0, 0), attack=5, inventory=inv, name="Player")
    goblin = make_actor((1, 0), defense=1)
    assert hero.total_attack == 7
    assert compute_damage(hero, goblin) == 6

    armor = Inventory(5)
    armor.add(catalog.get("chain_mail"))
    armor.equip(0)
    guard = make_actor((1, 0), defense=1, inventory=armor)
    assert compute_damage(goblin, guard) == 1


def test_player_kill_awards_xp(make_actor):
    leveling = LevelingSystem()
    hero = make_actor((0, 0), attack=10, is_player=True, progression=Progression(), name="Player")
    goblin = make_actor((1, 0), hp=5, defense=0)

    res = resolve_attack(hero, goblin, leveling, xp_per_kill=50)

    assert res.killed
    assert res.damage == 10
    assert not goblin.is_alive
    assert goblin.stats.hp == 0
    assert hero.progression.xp == 50
    assert res.message == "Player hits Goblin for 10 damage!"


def test_monster_kill_awards_nothing(make_actor):
    leveling = LevelingSystem()
    goblin = make_actor((0, 0), attack=50)
    hero = make_actor((1, 0), hp=5, is_player=True, progression=Progression(), name="Player")

    res = resolve_attack(goblin, hero, leveling, xp_per_kill=50)
    assert res.killed
    assert res.level_up is None
    assert hero.progression.xp == 0


def test_hitting_a_corpse_is_not_a_kill(make_actor):
    leveling = LevelingSystem()
    hero = make_actor((0, 0), is_player=True, progression=Progression(), name="Player")
    corpse = make_actor((1, 0), hp=1)
    corpse.stats.hp = 0

    res = apply_hit(hero, corpse, 4, leveling, xp_per_kill=50)
    assert not res.killed
    assert hero.progression.xp == 0


def test_kill_can_level_up(make_actor):
    leveling = LevelingSystem()
    hero = make_actor((0, 0), attack=10, is_player=True, progression=Progression(xp=80), name="Player")
    goblin = make_actor((1, 0), hp=1)

    res = resolve_attack(hero, goblin, leveling, xp_per_kill=50)
    assert res.leveled_up
    assert hero.progression.level == 2


def test_stats_clamp_and_death_threshold():
    s = Stats(hp=50, max_hp=30, attack=1, defense=1, speed=1.0, perception=1.0)
    assert s.hp == 30
    assert s.heal(10) == 0 and s.hp == 30

    assert s.take_damage(29) == 29
    assert s.is_alive
    assert s.take_damage(5) == 1
    assert s.hp == 0 and not s.is_alive


def test_stats_reject_bad_values():
    with pytest.raises(ValueError):
        Stats(hp=1, max_hp=0, attack=1, defense=1, speed=1.0, perception=1.0)
    with pytest.raises(ValueError):
        Stats(hp=1, max_hp=1, attack=1, defense=1, speed=0.0, perception=1.0)
    s = Stats(hp=1, max_hp=1, attack=1, defense=1, speed=1.0, perception=1.0)
    with pytest.raises(ValueError):
        s.take_damage(-1)
