"""Factories for creating runtime actors from definitions."""
from __future__ import annotations

from ashcore.core.types import GridPosition
from ashcore.data.errors import DataReferenceError
from ashcore.data.registry import ContentRegistry
from ashcore.domain.defs import ActorDef
from ashcore.domain.entities import EnemyEntity, PlayerEntity, Stats
from ashcore.domain.inventory import DEFAULT_MAX_STACKS, Inventory
from ashcore.services.errors import FactoryError


def _lookup_actor(actor_id: str, registry: ContentRegistry, kind: str) -> ActorDef:
    try:
        actor_def = registry.actor(actor_id)
    except DataReferenceError as exc:
        raise FactoryError(f"Actor '{actor_id}' not found.") from exc
    if actor_def.kind != kind:
        raise FactoryError(f"Actor '{actor_id}' is a {actor_def.kind}, not a {kind}.")
    return actor_def


def _stats_for(actor_def: ActorDef) -> Stats:
    return Stats(
        max_hp=actor_def.hp,
        hp=actor_def.hp,
        attack=actor_def.attack,
        defense=actor_def.defense,
        speed=actor_def.speed,
    )


def create_player(
    actor_id: str,
    position: GridPosition,
    registry: ContentRegistry,
    max_stacks: int = DEFAULT_MAX_STACKS,
) -> PlayerEntity:
    """Instantiate the player and grant its starting inventory."""
    actor_def = _lookup_actor(actor_id, registry, "player")
    inventory = Inventory(max_stacks=max_stacks)
    for grant in actor_def.initial_inventory:
        if not inventory.add(registry.item(grant.item_id), grant.count):
            raise FactoryError(f"Starting inventory of '{actor_id}' does not fit in {max_stacks} stacks.")
    return PlayerEntity(
        x=position.x,
        y=position.y,
        stats=_stats_for(actor_def),
        display_name=actor_def.display_name,
        inventory=inventory,
    )


def create_enemy(actor_id: str, position: GridPosition, registry: ContentRegistry) -> EnemyEntity:
    """Instantiate an enemy; its stable id is the actor definition id."""
    actor_def = _lookup_actor(actor_id, registry, "enemy")
    return EnemyEntity(
        x=position.x,
        y=position.y,
        stats=_stats_for(actor_def),
        display_name=actor_def.display_name,
        enemy_id=actor_def.id,
        ai_profile_id=actor_def.ai_profile_id,
    )
