"""Melee resolution and defeat handling."""
from __future__ import annotations

import logging
from typing import Callable

from ashcore.core.types import manhattan_distance
from ashcore.data.registry import ContentRegistry
from ashcore.domain.action_models import ActionResult
from ashcore.domain.entities import EnemyEntity, Entity, PlayerEntity
from ashcore.domain.messages import MessageId
from ashcore.domain.state import WorldState
from ashcore.services.message_log import MessageLog

logger = logging.getLogger(__name__)

TurnClock = Callable[[], int]


class CombatService:
    """Resolves bump attacks and drops loot for defeated enemies."""

    def __init__(
        self,
        world: WorldState,
        registry: ContentRegistry,
        log: MessageLog,
        clock: TurnClock = lambda: 0,
    ) -> None:
        self._world = world
        self._registry = registry
        self._log = log
        self._clock = clock

    def melee_attack(self, attacker: Entity, target: Entity) -> ActionResult:
        if attacker.is_dead or target.is_dead:
            return ActionResult.fail("no_target")
        if manhattan_distance(attacker.position, target.position) != 1:
            return ActionResult.fail("out_of_range")

        damage = target.apply_damage_from(attacker)
        self._log_melee(attacker, target, damage)
        if target.is_dead:
            if isinstance(target, EnemyEntity):
                self._log.log_by_id(MessageId.MELEE_ENEMY_DEFEATED, target.display_name)
                self.resolve_defeat(target)
            elif isinstance(target, PlayerEntity):
                self._log.log_by_id(MessageId.MELEE_PLAYER_DEFEATED)
        return ActionResult.ok()

    def damage_with_projectile(self, shooter: Entity, enemy: EnemyEntity) -> int:
        """Apply a projectile hit using the melee damage formula."""
        damage = enemy.apply_damage_from(shooter)
        self._log.log_by_id(MessageId.PROJECTILE_HIT_ENEMY, enemy.display_name, damage)
        if enemy.is_dead:
            self._log.log_by_id(MessageId.MELEE_ENEMY_DEFEATED, enemy.display_name)
            self.resolve_defeat(enemy)
        return damage

    def resolve_defeat(self, enemy: EnemyEntity) -> bool:
        """Roll the enemy's drop once and leave it on the enemy's cell."""
        if not enemy.try_roll_drop_if_needed(self._world.run_seed, self._clock(), self._registry.core_items):
            return False
        for entry in enemy.rolled_drop or ():
            self._world.grid.place_item(enemy.x, enemy.y, entry.item, entry.amount, entry.drop_turn)
            self._log.log_by_id(MessageId.ENEMY_DROPPED_LOOT, enemy.display_name, entry.item.name)
        logger.debug("%s defeated at %s", enemy.enemy_id, enemy.position)
        return True

    def _log_melee(self, attacker: Entity, target: Entity, damage: int) -> None:
        if isinstance(attacker, PlayerEntity) and isinstance(target, EnemyEntity):
            self._log.log_by_id(MessageId.MELEE_PLAYER_HIT_ENEMY, target.display_name, damage)
        elif isinstance(attacker, EnemyEntity) and isinstance(target, PlayerEntity):
            self._log.log_by_id(MessageId.MELEE_ENEMY_HIT_PLAYER, attacker.display_name, damage)
        else:
            self._log.log_by_id(MessageId.MELEE_HIT_GENERIC, attacker.display_name, target.display_name, damage)
