import itertools
import logging

from delve.config import DungeonSettings
from delve.dungeon.generator import FloorGenerator
from delve.dungeon.pathfinding import connected_region
from delve.dungeon.tiles import Tile
from delve.rng import RNGManager


def make_generator(seed=12345, **overrides):
    return FloorGenerator(RNGManager(seed), DungeonSettings(**overrides))


def test_no_two_rooms_intersect():
    gen = make_generator()
    for index in range(6):
        floor = gen.generate(50, 40, index)
        for a, b in itertools.combinations(floor.rooms, 2):
            assert not a.intersects(b), f"Rooms {a} and {b} overlap on floor {index}"


def test_same_index_reproduces_floor():
    f1 = make_generator(seed=777).generate(50, 40, 3)
    f2 = make_generator(seed=777).generate(50, 40, 3)
    assert f1.signature() == f2.signature(), "Same seed + floor index must give the same floor"


def test_other_index_or_seed_gives_other_floor():
    base = make_generator(seed=777).generate(50, 40, 3)
    assert make_generator(seed=777).generate(50, 40, 4).signature() != base.signature()
    assert make_generator(seed=778).generate(50, 40, 3).signature() != base.signature()


def test_border_is_wall():
    floor = make_generator(seed=2024).generate(50, 40, 1)
    for x in range(floor.width):
        assert floor.tile_at(x, 0) is Tile.WALL
        assert floor.tile_at(x, floor.height - 1) is Tile.WALL
    for y in range(floor.height):
        assert floor.tile_at(0, y) is Tile.WALL
        assert floor.tile_at(floor.width - 1, y) is Tile.WALL


def test_rooms_and_corridors_form_one_region():
    floor = make_generator(seed="run-abc").generate(50, 40, 2)
    assert floor.rooms
    region = connected_region(floor, floor.spawn_point)
    assert region == set(floor.walkable_cells())


def test_floor_zero_stairs():
    floor = make_generator(seed=42).generate(50, 40, 0)
    assert floor.up_stairs is None
    assert floor.down_stairs == floor.rows[-1][-1].center()
    assert floor.tile_at(*floor.down_stairs) is Tile.STAIRS_DOWN
    assert floor.spawn_room is floor.rows[0][0]


def test_deeper_floor_without_inheritance_puts_up_stairs_in_spawn_room():
    floor = make_generator(seed=42).generate(50, 40, 4)
    assert floor.up_stairs == floor.spawn_room.center()
    assert floor.tile_at(*floor.up_stairs) is Tile.STAIRS_UP


def test_inherited_up_stairs_match_and_are_reachable():
    gen = make_generator(seed=99)
    above = gen.generate(50, 40, 0)
    below = gen.generate(50, 40, 1, inherited_up_stairs=above.down_stairs)

    assert below.up_stairs == above.down_stairs
    assert below.tile_at(*below.up_stairs) is Tile.STAIRS_UP
    region = connected_region(below, below.spawn_point)
    assert below.up_stairs in region
    assert below.down_stairs in region


def test_inherited_stairs_in_wall_get_a_corridor():
    gen = make_generator(seed=5)
    floor = gen.generate(50, 40, 1)
    wall = next(
        (x, y)
        for y in range(1, floor.height - 1)
        for x in range(1, floor.width - 1)
        if floor.tile_at(x, y) is Tile.WALL
    )
    joined = gen.generate(50, 40, 1, inherited_up_stairs=wall)
    assert joined.up_stairs == wall
    assert wall in connected_region(joined, joined.spawn_point)


def test_deepest_floor_has_no_down_stairs():
    gen = make_generator(seed=1, max_depth=3)
    assert gen.generate(50, 40, 1).down_stairs is not None
    last = gen.generate(50, 40, 2)
    assert last.down_stairs is None
    assert all(t is not Tile.STAIRS_DOWN for row in last.tiles for t in row)


def test_too_small_map_gives_solid_floor(caplog):
    gen = make_generator(seed=3)
    with caplog.at_level(logging.WARNING, logger="delve.dungeon.generator"):
        floor = gen.generate(6, 6, 0)

    assert floor.is_degenerate
    assert floor.rooms == []
    assert floor.spawn_point is None
    assert floor.up_stairs is None and floor.down_stairs is None
    assert floor.walkable_cells() == []
    assert any("no rooms placed" in r.getMessage() for r in caplog.records)


def test_rows_are_sorted_left_to_right():
    floor = make_generator(seed=8).generate(50, 40, 0)
    for row in floor.rows:
        xs = [room.x for room in row]
        assert xs == sorted(xs)
