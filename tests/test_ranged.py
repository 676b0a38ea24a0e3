from ashcore.core.types import GridPosition
from ashcore.domain.action_models import ImpactKind
from ashcore.domain.messages import MessageId
from ashcore.domain.tiles import TileType
from ashcore.services.ranged_service import direction_name, throw_class

from tests.helpers.world_builders import get_item, make_simulation


def test_direction_names() -> None:
    assert direction_name(1, 0) == "east"
    assert direction_name(0, 1) == "north"
    assert direction_name(-1, -1) == "south-west"
    assert direction_name(1, -1) == "south-east"


def test_throw_class_by_tag() -> None:
    assert throw_class(get_item("item_arrow_wooden")) == "arrow"
    assert throw_class(get_item("item_oil_bottle")) == "oil"
    assert throw_class(get_item("item_dirt_clod")) == "earth"
    assert throw_class(get_item("item_torch_stub")) is None


def test_directional_shot_falls_at_map_edge() -> None:
    sim = make_simulation(width=8, height=3, player_at=(1, 1))

    result = sim.ranged.shoot_directional(sim.player, 1, 0)

    shot = result.projectile
    assert result.success
    assert shot.impact_kind is ImpactKind.GROUND
    assert shot.impact_position == GridPosition(7, 1)
    assert shot.trajectory[0] == GridPosition(2, 1)
    assert sim.log.logged_ids[-2:] == [MessageId.SHOOT_DIRECTIONAL, MessageId.SHOOT_FELL_TO_GROUND]


def test_directional_shot_normalizes_step() -> None:
    sim = make_simulation(width=8, height=8, player_at=(1, 1))

    shot = sim.ranged.shoot_directional(sim.player, 5, 3).projectile

    assert shot.trajectory[:2] == [GridPosition(2, 2), GridPosition(3, 3)]
    assert shot.impact_position == GridPosition(7, 7)


def test_directional_shot_stops_on_blocking_tile() -> None:
    sim = make_simulation(width=8, height=3, player_at=(1, 1))
    sim.grid.set_solid_type(4, 1, TileType.WALL_STONE)

    shot = sim.ranged.shoot_directional(sim.player, 1, 0).projectile

    assert shot.impact_kind is ImpactKind.BLOCKING_TILE
    assert shot.trajectory == [GridPosition(2, 1), GridPosition(3, 1), GridPosition(4, 1)]
    assert sim.log.logged_ids[-1] is MessageId.SHOOT_HIT_SURFACE


def test_shot_stops_on_blocking_prop() -> None:
    sim = make_simulation(width=8, height=3, player_at=(1, 1))
    sim.place_prop("barrel", 3, 1)

    shot = sim.ranged.shoot_directional(sim.player, 1, 0).projectile

    assert shot.impact_kind is ImpactKind.BLOCKING_TILE
    assert shot.impact_position == GridPosition(3, 1)


def test_shot_hits_first_enemy_and_damages_it() -> None:
    sim = make_simulation(width=8, height=3, player_at=(1, 1))
    handle = sim.spawn_enemy("actor_goblin", 3, 1)
    sim.spawn_enemy("actor_goblin", 5, 1)

    shot = sim.ranged.shoot_directional(sim.player, 1, 0).projectile

    assert shot.impact_kind is ImpactKind.ENEMY
    assert shot.hit_enemy == handle
    assert sim.world.entities.get(handle).stats.hp == 2
    assert MessageId.PROJECTILE_HIT_ENEMY in sim.log.logged_ids


def test_shot_skips_dead_enemies() -> None:
    sim = make_simulation(width=8, height=3, player_at=(1, 1))
    handle = sim.spawn_enemy("actor_goblin", 3, 1)
    sim.world.entities.get(handle).apply_raw_damage(100)

    shot = sim.ranged.shoot_directional(sim.player, 1, 0).projectile

    assert shot.impact_kind is ImpactKind.GROUND


def test_shot_from_edge_is_blocked_immediately() -> None:
    sim = make_simulation(width=8, height=3, player_at=(7, 1))

    result = sim.ranged.shoot_directional(sim.player, 1, 0)

    assert result.reason == "blocked"
    assert result.projectile is None
    assert sim.log.logged_ids[-1] is MessageId.SHOOT_BLOCKED_IMMEDIATELY


def test_directional_zero_vector_has_no_target() -> None:
    sim = make_simulation()

    assert sim.ranged.shoot_directional(sim.player, 0, 0).reason == "no_target"


def test_shoot_at_tile_follows_line_to_target() -> None:
    sim = make_simulation(width=8, height=8, player_at=(1, 1))

    shot = sim.ranged.shoot_at_tile(sim.player, 4, 2).projectile

    assert shot.impact_kind is ImpactKind.GROUND
    assert shot.impact_position == GridPosition(4, 2)
    assert sim.log.logged_ids[0] is MessageId.SHOOT_AT_TILE


def test_shoot_at_own_tile() -> None:
    sim = make_simulation(player_at=(1, 1))

    assert sim.ranged.shoot_at_tile(sim.player, 1, 1).reason == "target_is_self"


def test_throw_oil_makes_a_puddle() -> None:
    sim = make_simulation(player_at=(1, 1))
    oil = get_item("item_oil_bottle")
    sim.grid.set_ground_type(3, 2, TileType.GROUND_WATER)

    assert sim.ranged.throw_item(sim.player, oil, 3, 1).success
    assert sim.ranged.throw_item(sim.player, oil, 3, 2).success

    assert sim.grid.ground_type(3, 1) is TileType.GROUND_OIL
    assert sim.grid.ground_type(3, 2) is TileType.GROUND_OIL
    assert sim.player.inventory.count(oil) == 0
    assert sim.log.logged_ids[-1] is MessageId.THROW_OIL_PUDDLE


def test_throw_oil_on_solid_or_oil_does_not_spread() -> None:
    sim = make_simulation(player_at=(1, 1))
    oil = get_item("item_oil_bottle")
    sim.grid.set_solid_type(3, 1, TileType.TREE_NORMAL)
    sim.grid.set_ground_type(2, 2, TileType.GROUND_OIL)

    assert sim.ranged.throw_item(sim.player, oil, 3, 1).success
    assert sim.log.logged_ids[-1] is MessageId.THROW_OIL_NO_SPREAD
    assert sim.ranged.throw_item(sim.player, oil, 2, 2).success
    assert sim.log.logged_ids[-1] is MessageId.THROW_OIL_NO_SPREAD
    assert sim.player.inventory.count(oil) == 0


def test_throw_oil_off_map_is_lost() -> None:
    sim = make_simulation(player_at=(1, 1))
    oil = get_item("item_oil_bottle")

    assert sim.ranged.throw_item(sim.player, oil, -1, 1).success
    assert sim.player.inventory.count(oil) == 1
    assert sim.log.logged_ids[-1] is MessageId.THROW_OIL_LOST


def test_throw_rejections() -> None:
    sim = make_simulation(width=10, height=3, player_at=(1, 1))
    oil = get_item("item_oil_bottle")

    assert sim.ranged.throw_item(sim.player, oil, 1, 1).reason == "target_is_self"
    assert sim.ranged.throw_item(sim.player, oil, 7, 1).reason == "too_far"
    assert sim.ranged.throw_item(sim.player, get_item("item_dirt_clod"), 2, 1).reason == "missing_item"
    assert sim.player.inventory.count(oil) == 2


def test_throw_dirt_is_consumed_with_flavor() -> None:
    sim = make_simulation(player_at=(1, 1))
    dirt = get_item("item_dirt_clod")
    sim.player.inventory.add(dirt, 2)

    assert sim.ranged.throw_item(sim.player, dirt, 3, 3).success
    assert sim.player.inventory.count(dirt) == 1
    assert sim.log.logged_ids[-1] is MessageId.THROW_DIRT_FLAVOR


def test_throw_item_without_effect_is_kept() -> None:
    sim = make_simulation(player_at=(1, 1))
    torch = get_item("item_torch_stub")
    sim.player.inventory.add(torch, 1)

    assert sim.ranged.throw_item(sim.player, torch, 2, 2).reason == "no_effect"
    assert sim.player.inventory.count(torch) == 1


def test_thrown_arrow_hits_enemy() -> None:
    sim = make_simulation(width=8, height=3, player_at=(1, 1))
    arrow = get_item("item_arrow_wooden")
    handle = sim.spawn_enemy("actor_goblin", 3, 1)

    result = sim.ranged.throw_item(sim.player, arrow, 3, 1)

    assert result.success
    assert result.projectile.impact_kind is ImpactKind.ENEMY
    assert sim.world.entities.get(handle).stats.hp == 2
    assert sim.player.inventory.count(arrow) == 9


def test_thrown_arrow_off_map_drops_at_feet_and_is_consumed() -> None:
    sim = make_simulation(width=8, height=3, player_at=(0, 1))
    arrow = get_item("item_arrow_wooden")

    result = sim.ranged.throw_item(sim.player, arrow, -2, 1)

    assert result.success
    assert result.projectile.trajectory == []
    assert result.projectile.impact_kind is ImpactKind.NONE
    assert tuple(result.projectile.projectile.position) == (0, 1)
    assert sim.player.inventory.count(arrow) == 9
    assert sim.log.logged_ids[-1] is MessageId.THROW_PROJECTILE_DROPPED
