import pytest

from ashcore.domain.inventory import EquipmentSlot, Inventory, equippable_slot

from tests.helpers.world_builders import get_registry, make_item


def test_add_tops_up_existing_stacks_first() -> None:
    arrow = make_item("item_arrow", max_stack=10)
    inventory = Inventory(max_stacks=3)

    assert inventory.add(arrow, 8)
    assert inventory.add(arrow, 5)

    assert [stack.amount for stack in inventory.stacks] == [10, 3]
    assert inventory.count(arrow) == 13


def test_add_is_all_or_nothing() -> None:
    arrow = make_item("item_arrow", max_stack=5)
    inventory = Inventory(max_stacks=2)
    inventory.add(arrow, 4)

    assert inventory.capacity_for(arrow) == 6
    assert not inventory.add(arrow, 7)
    assert inventory.count(arrow) == 4
    assert inventory.add(arrow, 6)
    assert not inventory.can_add(arrow, 1)


def test_full_inventory_rejects_new_item() -> None:
    sword = make_item("item_sword", stackable=False, max_stack=1)
    inventory = Inventory(max_stacks=1)
    inventory.add(sword)

    assert not inventory.add(make_item("item_other"))
    assert not inventory.add(sword)


def test_remove_requires_enough_units() -> None:
    arrow = make_item("item_arrow", max_stack=5)
    inventory = Inventory()
    inventory.add(arrow, 7)

    assert not inventory.remove(arrow, 8)
    assert inventory.count(arrow) == 7
    assert inventory.remove(arrow, 6)
    assert inventory.count(arrow) == 1
    assert len(inventory.stacks) == 1


def test_equippable_slot_from_tags() -> None:
    registry = get_registry()

    assert equippable_slot(registry.item("item_short_sword")) is EquipmentSlot.MAIN_HAND
    assert equippable_slot(registry.item("item_arrow_wooden")) is EquipmentSlot.BACK
    assert equippable_slot(make_item(tags=("helmet",))) is EquipmentSlot.HEAD
    assert equippable_slot(make_item(tags=("shield",))) is EquipmentSlot.OFF_HAND
    assert equippable_slot(registry.item("item_dirt_clod")) is None


def test_equip_moves_item_out_of_stacks_and_swaps_previous() -> None:
    sword = make_item("item_sword", stackable=False, max_stack=1, tags=("weapon",))
    axe = make_item("item_axe", stackable=False, max_stack=1, tags=("weapon",))
    inventory = Inventory()
    inventory.add(sword)
    inventory.add(axe)

    assert inventory.equip(sword)
    assert inventory.equipped(EquipmentSlot.MAIN_HAND) is sword
    assert inventory.count(sword) == 0

    assert inventory.equip(axe)
    assert inventory.equipped(EquipmentSlot.MAIN_HAND) is axe
    assert inventory.count(sword) == 1


def test_equip_fails_without_item_or_slot() -> None:
    inventory = Inventory()
    pebble = make_item("item_pebble")
    inventory.add(pebble)

    assert not inventory.equip(pebble)
    assert not inventory.equip(make_item("item_sword", tags=("weapon",)))
    assert inventory.count(pebble) == 1


def test_unequip_needs_room() -> None:
    sword = make_item("item_sword", stackable=False, max_stack=1, tags=("weapon",))
    filler = make_item("item_filler", stackable=False, max_stack=1)
    inventory = Inventory(max_stacks=1)
    inventory.add(sword)
    inventory.equip(sword)
    inventory.add(filler)

    assert not inventory.unequip(EquipmentSlot.MAIN_HAND)
    assert inventory.equipped(EquipmentSlot.MAIN_HAND) is sword

    inventory.remove(filler)
    assert inventory.unequip(EquipmentSlot.MAIN_HAND)
    assert inventory.equipped(EquipmentSlot.MAIN_HAND) is None
    assert not inventory.unequip(EquipmentSlot.MAIN_HAND)


def test_negative_amounts_are_rejected() -> None:
    inventory = Inventory()
    arrow = make_item("item_arrow")

    with pytest.raises(ValueError):
        inventory.add(arrow, -1)
    with pytest.raises(ValueError):
        inventory.remove(arrow, -1)
    assert inventory.add(arrow, 0)
    assert inventory.stacks == []
