from ashcore.domain.entities import Entity, ProjectileEntity, Stats
from ashcore.domain.tiles import TileTag

from tests.helpers.world_builders import get_registry, make_enemy


def _make_entity(hp: int = 10, attack: int = 0, defense: int = 0) -> Entity:
    return Entity(x=0, y=0, stats=Stats(max_hp=hp, hp=hp, attack=attack, defense=defense))


def test_stats_clamp_hp() -> None:
    stats = Stats(max_hp=5, hp=9)
    assert stats.hp == 5

    stats.set_hp(-3)
    assert stats.hp == 0

    stats.set_hp(4)
    stats.set_max_hp(2)
    assert stats.hp == 2


def test_melee_damage_is_attack_minus_defense_with_floor_of_one() -> None:
    attacker = _make_entity(attack=5)
    tough = _make_entity(defense=9)
    soft = _make_entity(defense=1)

    assert tough.apply_damage_from(attacker) == 1
    assert soft.apply_damage_from(attacker) == 4
    assert soft.stats.hp == 6


def test_no_damage_to_dead_or_zero_max_hp_targets() -> None:
    attacker = _make_entity(attack=5)
    dead = _make_entity(hp=1)
    dead.apply_raw_damage(1)
    scenery = _make_entity(hp=0)

    assert dead.is_dead
    assert dead.apply_damage_from(attacker) == 0
    assert not scenery.is_dead
    assert scenery.apply_damage_from(attacker) == 0


def test_raw_damage_reports_hp_actually_lost() -> None:
    entity = _make_entity(hp=3)

    assert entity.apply_raw_damage(5) == 3
    assert entity.is_dead
    assert entity.apply_raw_damage(0) == 0


def test_heal_caps_at_max_and_skips_dead() -> None:
    entity = _make_entity(hp=10)
    entity.apply_raw_damage(4)

    assert entity.heal(10) == 4
    entity.apply_raw_damage(10)
    assert entity.heal(5) == 0


def test_burning_keeps_longest_duration_and_ticks_down() -> None:
    entity = _make_entity()
    entity.apply_burning(3)
    entity.apply_burning(1)
    assert entity.burning_turns == 3

    entity.tick_burning_duration()
    entity.tick_burning_duration()
    entity.tick_burning_duration()
    entity.tick_burning_duration()
    assert entity.burning_turns == 0
    assert not entity.is_burning

    entity.apply_burning(2)
    entity.clear_burning()
    assert not entity.is_burning


def test_projectile_tags() -> None:
    projectile = ProjectileEntity(1, 2)
    assert not projectile.has_tag(TileTag.BURNING)

    projectile.add_tag(TileTag.BURNING)
    projectile.set_position(3, 2)

    assert projectile.has_tag(TileTag.BURNING)
    assert tuple(projectile.position) == (3, 2)


def test_enemy_drop_rolls_only_after_death_and_once() -> None:
    items = get_registry().core_items
    enemy = make_enemy(4, 4, hp=1, enemy_id="actor_goblin")

    assert not enemy.try_roll_drop_if_needed(run_seed=7, drop_turn=2, items=items)
    enemy.apply_raw_damage(1)
    assert enemy.try_roll_drop_if_needed(run_seed=7, drop_turn=2, items=items)
    assert enemy.has_rolled_drop
    assert all(entry.drop_turn == 2 for entry in enemy.rolled_drop)
    assert not enemy.try_roll_drop_if_needed(run_seed=7, drop_turn=3, items=items)


def test_enemy_drop_depends_on_spawn_cell_not_death_cell() -> None:
    items = get_registry().core_items
    first = make_enemy(4, 4, hp=1, enemy_id="actor_goblin")
    second = make_enemy(4, 4, hp=1, enemy_id="actor_goblin")
    second.set_position(6, 1)
    for enemy in (first, second):
        enemy.apply_raw_damage(1)
        enemy.try_roll_drop_if_needed(run_seed=11, drop_turn=0, items=items)

    assert first.drop_seed == second.drop_seed
    assert [(e.item.id, e.amount) for e in first.rolled_drop] == [(e.item.id, e.amount) for e in second.rolled_drop]
