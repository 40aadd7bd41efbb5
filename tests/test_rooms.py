import random

from delve.dungeon.rooms import Room, group_rows


def test_center_uses_integer_division():
    assert Room(2, 3, 5, 6).center() == (4, 6)
    assert Room(0, 0, 9, 9).center() == (4, 4)


def test_intersects_counts_touching_edges():
    a = Room(0, 0, 5, 5)
    assert a.intersects(Room(5, 0, 5, 5)), "Rooms sharing an edge must count as intersecting"
    assert a.intersects(Room(2, 2, 5, 5))
    assert not a.intersects(Room(6, 0, 5, 5))
    assert not a.intersects(Room(0, 6, 5, 5))


def test_inner_tiles_exclude_outer_ring():
    room = Room(1, 1, 5, 6)
    inner = room.inner_tiles()
    assert len(inner) == (5 - 2) * (6 - 2)
    assert all(2 <= x <= 4 and 2 <= y <= 5 for x, y in inner)


def test_random_position_stays_inside():
    rng = random.Random(3)
    room = Room(10, 4, 5, 7)
    inner = set(room.inner_tiles())
    for _ in range(200):
        assert room.random_position(rng) in inner


def test_group_rows_bands_and_orders_left_to_right():
    r_top_right = Room(30, 1, 5, 5)  # center y 3
    r_top_left = Room(2, 3, 5, 5)  # center y 5
    r_bottom = Room(10, 20, 5, 5)  # center y 22
    rows = group_rows([r_bottom, r_top_right, r_top_left], band=4)

    assert rows == [[r_top_left, r_top_right], [r_bottom]]


def test_group_rows_anchor_is_first_room_of_row():
    # Centers 2, 6, 10: 6 joins the first row, 10 is more than 4 below the anchor
    rooms = [Room(0, 0, 5, 5), Room(10, 4, 5, 5), Room(20, 8, 5, 5)]
    rows = group_rows(rooms, band=4)
    assert [len(r) for r in rows] == [2, 1]


def test_group_rows_empty():
    assert group_rows([], band=4) == []
