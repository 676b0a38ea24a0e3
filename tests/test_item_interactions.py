from ashcore.domain.inventory import EquipmentSlot
from ashcore.domain.messages import MessageId
from ashcore.domain.tiles import TileType

from tests.helpers.world_builders import get_item, make_simulation


def test_pickup_at_feet_scoops_dirt_from_plain_ground() -> None:
    sim = make_simulation()
    dirt = get_item("item_dirt_clod")

    result = sim.items.pickup_at_feet(sim.player)

    assert result.success
    assert sim.player.inventory.count(dirt) == 1
    assert sim.log.logged_ids[-1] is MessageId.PICKUP_DIRT_GENERIC


def test_pickup_at_feet_on_oil_ground_uses_oil_message() -> None:
    sim = make_simulation(player_at=(2, 2))
    sim.grid.set_ground_type(2, 2, TileType.GROUND_OIL)

    assert sim.items.pickup_at_feet(sim.player).success
    assert sim.log.logged_ids[-1] is MessageId.PICKUP_DIRT_FROM_OIL_GROUND


def test_pickup_at_feet_on_water_finds_nothing() -> None:
    sim = make_simulation(player_at=(2, 2))
    sim.grid.set_ground_type(2, 2, TileType.GROUND_WATER)

    assert sim.items.pickup_at_feet(sim.player).reason == "no_item"
    assert sim.log.logged_ids[-1] is MessageId.PICKUP_NO_ITEM


def test_pickup_at_feet_with_full_inventory() -> None:
    sim = make_simulation(inventory_max_stacks=4)

    assert sim.items.pickup_at_feet(sim.player).reason == "inventory_full"
    assert sim.player.inventory.count(get_item("item_dirt_clod")) == 0


def test_drop_item_lands_under_player_with_current_turn() -> None:
    sim = make_simulation(player_at=(2, 2))
    arrow = get_item("item_arrow_wooden")
    sim.advance_turn()

    result = sim.items.drop_item(sim.player, arrow)

    assert result.success
    assert sim.player.inventory.count(arrow) == 9
    pile = sim.grid.pile_at(2, 2)
    assert pile is not None
    assert pile.count(arrow) == 1
    assert pile.entries[0].drop_turn == 1


def test_drop_follows_search_spiral() -> None:
    sim = make_simulation(player_at=(3, 3))
    for x, y in ((3, 3), (3, 4), (4, 4)):
        sim.grid.set_solid_type(x, y, TileType.WALL_STONE)

    assert sim.items.drop_item(sim.player, get_item("item_oil_bottle")).success
    assert sim.grid.pile_at(4, 3) is not None


def test_drop_skips_cells_with_props() -> None:
    sim = make_simulation(player_at=(3, 3))
    sim.place_prop("signpost", 3, 3)

    assert sim.items.drop_item(sim.player, get_item("item_oil_bottle")).success
    assert sim.grid.pile_at(3, 3) is None
    assert sim.grid.pile_at(3, 4) is not None


def test_drop_without_free_cell_restores_inventory() -> None:
    sim = make_simulation(width=3, height=3, player_at=(1, 1))
    for x in range(3):
        for y in range(3):
            sim.grid.set_solid_type(x, y, TileType.WALL_STONE)
    arrow = get_item("item_arrow_wooden")

    result = sim.items.drop_item(sim.player, arrow)

    assert result.reason == "no_drop_position"
    assert sim.player.inventory.count(arrow) == 10
    assert sim.log.logged_ids[-1] is MessageId.DROP_NO_SPACE


def test_drop_missing_item() -> None:
    sim = make_simulation()

    assert sim.items.drop_item(sim.player, get_item("item_dirt_clod")).reason == "missing_item"


def test_pickup_from_adjacent_pile() -> None:
    sim = make_simulation(player_at=(1, 1))
    arrow = get_item("item_arrow_wooden")
    sim.grid.place_item(2, 2, arrow, 1, drop_turn=0)

    result = sim.items.pickup_from_pile(sim.player, 2, 2)

    assert result.success
    assert sim.player.inventory.count(arrow) == 11
    assert sim.grid.pile_at(2, 2) is None


def test_pickup_from_pile_prefers_requested_item() -> None:
    sim = make_simulation(player_at=(1, 1))
    arrow = get_item("item_arrow_wooden")
    dirt = get_item("item_dirt_clod")
    sim.grid.place_item(1, 1, dirt, 1, drop_turn=0)
    sim.grid.place_item(1, 1, arrow, 2, drop_turn=4)

    assert sim.items.pickup_from_pile(sim.player, 1, 1, arrow).success
    pile = sim.grid.pile_at(1, 1)
    assert pile.count(arrow) == 1
    assert pile.count(dirt) == 1


def test_pickup_from_pile_rejections() -> None:
    sim = make_simulation(player_at=(1, 1))
    arrow = get_item("item_arrow_wooden")
    sim.grid.place_item(3, 1, arrow, 1, drop_turn=0)

    assert sim.items.pickup_from_pile(sim.player, 3, 1).reason == "out_of_range"
    assert sim.items.pickup_from_pile(sim.player, 2, 1).reason == "no_item"
    assert sim.log.logged_ids[-1] is MessageId.PICKUP_NO_ITEM


def test_pickup_from_pile_full_inventory_leaves_pile() -> None:
    sim = make_simulation(player_at=(1, 1), inventory_max_stacks=4)
    armor = get_item("item_leather_armor")
    sim.grid.place_item(1, 1, armor, 1, drop_turn=0)

    assert sim.items.pickup_from_pile(sim.player, 1, 1).reason == "inventory_full"
    assert sim.grid.pile_at(1, 1).count(armor) == 1


def test_pickup_from_pile_can_equip_after() -> None:
    sim = make_simulation(player_at=(1, 1))
    armor = get_item("item_leather_armor")
    sim.grid.place_item(1, 1, armor, 1, drop_turn=0)

    assert sim.items.pickup_from_pile(sim.player, 1, 1, equip_after=True).success
    assert sim.player.inventory.equipped(EquipmentSlot.BODY) is armor
    assert sim.player.inventory.count(armor) == 0


def test_equip_and_unequip() -> None:
    sim = make_simulation()
    sword = get_item("item_short_sword")

    assert sim.items.equip(sim.player, sword).success
    assert sim.player.inventory.equipped(EquipmentSlot.MAIN_HAND) is sword
    assert sim.log.logged_ids[-1] is MessageId.EQUIP_ITEM

    assert sim.items.unequip(sim.player, EquipmentSlot.MAIN_HAND).success
    assert sim.player.inventory.count(sword) == 1
    assert sim.items.unequip(sim.player, EquipmentSlot.MAIN_HAND).reason == "slot_empty"


def test_equip_rejections() -> None:
    sim = make_simulation()

    assert sim.items.equip(sim.player, get_item("item_oil_bottle")).reason == "not_equippable"
    assert sim.items.equip(sim.player, get_item("item_iron_helmet")).reason == "missing_item"
    assert sim.log.logged_ids[-1] is MessageId.EQUIP_FAILED


def test_equip_swap_reuses_the_freed_stack() -> None:
    sim = make_simulation(inventory_max_stacks=4)
    sword = get_item("item_short_sword")
    bow = get_item("item_bow_basic")
    inventory = sim.player.inventory
    assert sim.items.equip(sim.player, sword).success
    inventory.add(get_item("item_dirt_clod"))

    assert sim.items.equip(sim.player, bow).success
    assert inventory.equipped(EquipmentSlot.MAIN_HAND) is bow
    assert inventory.count(sword) == 1


def test_unequip_without_room() -> None:
    sim = make_simulation(inventory_max_stacks=4)
    sword = get_item("item_short_sword")
    sim.items.equip(sim.player, sword)
    sim.player.inventory.add(get_item("item_dirt_clod"))

    assert sim.items.unequip(sim.player, EquipmentSlot.MAIN_HAND).reason == "inventory_full"
    assert sim.log.logged_ids[-1] is MessageId.UNEQUIP_NO_ROOM
