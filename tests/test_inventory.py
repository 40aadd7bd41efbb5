import pytest

from delve.exceptions import InvalidItemIndexError, InventoryError, InventoryFullError, WrongItemKindError
from delve.items.inventory import Inventory


def test_add_until_full(catalog):
    inv = Inventory(capacity=2)
    inv.add(catalog.get("health_potion"))
    inv.add(catalog.get("sword"))
    assert inv.is_full
    with pytest.raises(InventoryFullError, match="Inventory is full!"):
        inv.add(catalog.get("chain_mail"))
    assert len(inv) == 2


def test_equip_moves_item_to_slot_and_swaps_back(catalog):
    inv = Inventory()
    sword = catalog.get("sword")
    inv.add(sword)
    assert inv.equip(0) is sword
    assert inv.weapon is sword
    assert inv.items == []
    assert inv.bonuses() == (2, 0)

    inv.add(sword.model_copy(update={"id": "big_sword", "power": 5}))
    inv.equip(0)
    assert inv.weapon.id == "big_sword"
    assert [i.id for i in inv.items] == ["sword"]
    assert inv.bonuses() == (5, 0)


def test_equip_armor(catalog):
    inv = Inventory()
    inv.add(catalog.get("chain_mail"))
    inv.equip(0)
    assert inv.armor.id == "chain_mail"
    assert inv.bonuses() == (0, 2)


def test_equip_wrong_kind_leaves_inventory_alone(catalog):
    inv = Inventory()
    inv.add(catalog.get("health_potion"))
    with pytest.raises(WrongItemKindError):
        inv.equip(0)
    assert [i.id for i in inv.items] == ["health_potion"]
    assert inv.weapon is None and inv.armor is None


@pytest.mark.parametrize("index", [-1, 1, 99])
def test_invalid_index(catalog, index):
    inv = Inventory()
    inv.add(catalog.get("sword"))
    with pytest.raises(InvalidItemIndexError, match="Invalid item index!"):
        inv.get(index)
    with pytest.raises(InventoryError):
        inv.remove(index)
    assert len(inv) == 1


def test_remove_returns_item(catalog):
    inv = Inventory()
    inv.add(catalog.get("sword"))
    inv.add(catalog.get("health_potion"))
    assert inv.remove(0).id == "sword"
    assert [i.id for i in inv.items] == ["health_potion"]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        Inventory(0)
