"""Identifiers of every user-facing message the simulation can emit."""
from __future__ import annotations

from enum import Enum


class MessageId(str, Enum):
    """Keys into the message-template catalog."""

    TURN_START = "turn_start"
    TURN_END = "turn_end"

    ARROW_IGNITED = "rule_arrow_ignited"
    TREE_IGNITED = "rule_tree_ignited"
    TREE_BURNED_OUT = "rule_tree_burned_out"

    MOVE_OUT_OF_BOUNDS = "move_out_of_bounds"
    MOVE_BLOCKED = "move_blocked"
    MOVE_SUCCEEDED = "move_succeeded"

    PICKUP_NO_ITEM = "pickup_no_item"
    PICKUP_INVENTORY_FULL = "pickup_inventory_full"
    PICKUP_DIRT_FROM_OIL_GROUND = "pickup_dirt_from_oil_ground"
    PICKUP_DIRT_GENERIC = "pickup_dirt_generic"
    PICKUP_GENERIC_ITEM = "pickup_generic_item"
    PICKUP_NOT_FROM_THERE = "pickup_not_from_there"

    DROP_ITEM = "drop_item"
    DROP_NO_SPACE = "drop_no_space"
    DROP_MISSING_ITEM = "drop_missing_item"

    CONTAINER_OPENED = "container_opened"
    CONTAINER_EMPTY = "container_empty"
    CONTAINER_NOT_REACHABLE = "container_not_reachable"
    CONTAINER_TAKE = "container_take"
    CONTAINER_STORE = "container_store"
    CONTAINER_TRANSFER_FAILED = "container_transfer_failed"

    EQUIP_ITEM = "equip_item"
    EQUIP_FAILED = "equip_failed"
    UNEQUIP_ITEM = "unequip_item"
    UNEQUIP_NO_ROOM = "unequip_no_room"

    THROW_MISSING_ITEM = "throw_missing_item"
    THROW_TARGET_IS_SELF = "throw_target_is_self"
    THROW_TOO_FAR = "throw_too_far"
    THROW_ARROW_FLAVOR = "throw_arrow_flavor"
    THROW_OIL_LOST = "throw_oil_lost"
    THROW_OIL_PUDDLE = "throw_oil_puddle"
    THROW_OIL_NO_SPREAD = "throw_oil_no_spread"
    THROW_DIRT_FLAVOR = "throw_dirt_flavor"
    THROW_NO_EFFECT = "throw_no_effect"
    THROW_PROJECTILE_DROPPED = "throw_projectile_dropped"

    SHOOT_DIRECTIONAL = "shoot_directional"
    SHOOT_AT_TILE = "shoot_at_tile"
    SHOOT_BLOCKED_IMMEDIATELY = "shoot_blocked_immediately"
    SHOOT_HIT_SURFACE = "shoot_hit_surface"
    SHOOT_FELL_TO_GROUND = "shoot_fell_to_ground"
    PROJECTILE_HIT_ENEMY = "projectile_hit_enemy"

    BURNING_DAMAGE_PLAYER = "burning_damage_player"
    BURNING_DAMAGE_ENEMY = "burning_damage_enemy"

    MELEE_PLAYER_HIT_ENEMY = "melee_player_hit_enemy"
    MELEE_ENEMY_DEFEATED = "melee_enemy_defeated"
    MELEE_ENEMY_HIT_PLAYER = "melee_enemy_hit_player"
    MELEE_PLAYER_DEFEATED = "melee_player_defeated"
    MELEE_HIT_GENERIC = "melee_hit_generic"
    ENEMY_DROPPED_LOOT = "enemy_dropped_loot"


# Positional arguments each message is formatted with; ids not listed take none.
MESSAGE_ARITY: dict[MessageId, int] = {
    MessageId.TURN_START: 1,
    MessageId.TURN_END: 1,
    MessageId.TREE_IGNITED: 2,
    MessageId.TREE_BURNED_OUT: 2,
    MessageId.MOVE_SUCCEEDED: 2,
    MessageId.PICKUP_GENERIC_ITEM: 1,
    MessageId.DROP_ITEM: 3,
    MessageId.DROP_NO_SPACE: 1,
    MessageId.DROP_MISSING_ITEM: 1,
    MessageId.CONTAINER_OPENED: 1,
    MessageId.CONTAINER_EMPTY: 1,
    MessageId.CONTAINER_NOT_REACHABLE: 1,
    MessageId.CONTAINER_TAKE: 2,
    MessageId.CONTAINER_STORE: 2,
    MessageId.CONTAINER_TRANSFER_FAILED: 1,
    MessageId.EQUIP_ITEM: 2,
    MessageId.EQUIP_FAILED: 1,
    MessageId.UNEQUIP_ITEM: 1,
    MessageId.UNEQUIP_NO_ROOM: 1,
    MessageId.THROW_MISSING_ITEM: 1,
    MessageId.THROW_ARROW_FLAVOR: 1,
    MessageId.THROW_OIL_LOST: 1,
    MessageId.THROW_OIL_PUDDLE: 3,
    MessageId.THROW_OIL_NO_SPREAD: 1,
    MessageId.THROW_DIRT_FLAVOR: 1,
    MessageId.THROW_NO_EFFECT: 1,
    MessageId.THROW_PROJECTILE_DROPPED: 1,
    MessageId.SHOOT_DIRECTIONAL: 1,
    MessageId.SHOOT_AT_TILE: 2,
    MessageId.SHOOT_HIT_SURFACE: 2,
    MessageId.SHOOT_FELL_TO_GROUND: 2,
    MessageId.PROJECTILE_HIT_ENEMY: 2,
    MessageId.BURNING_DAMAGE_PLAYER: 1,
    MessageId.BURNING_DAMAGE_ENEMY: 2,
    MessageId.MELEE_PLAYER_HIT_ENEMY: 2,
    MessageId.MELEE_ENEMY_DEFEATED: 1,
    MessageId.MELEE_ENEMY_HIT_PLAYER: 2,
    MessageId.MELEE_HIT_GENERIC: 3,
    MessageId.ENEMY_DROPPED_LOOT: 2,
}


def message_arity(message_id: MessageId) -> int:
    return MESSAGE_ARITY.get(message_id, 0)
