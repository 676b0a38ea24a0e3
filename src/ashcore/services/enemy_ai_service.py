"""Chase-and-bump behaviour for enemies."""
from __future__ import annotations

import logging

from ashcore.core.config import SimulationConfig
from ashcore.core.types import manhattan_distance
from ashcore.domain.entities import EnemyEntity
from ashcore.domain.state import WorldState
from ashcore.services.combat_service import CombatService

logger = logging.getLogger(__name__)


class EnemyAIService:
    """Adjacent enemies attack; enemies within chase range take one step toward the player."""

    def __init__(
        self,
        world: WorldState,
        combat: CombatService,
        config: SimulationConfig | None = None,
    ) -> None:
        self._world = world
        self._combat = combat
        self._config = config or SimulationConfig()

    def take_turns(self) -> None:
        entities = self._world.entities
        if not entities.has_player or entities.player.is_dead:
            return
        player = entities.player
        for _, enemy in list(entities.iter_enemies()):
            if enemy.is_dead:
                continue
            distance = manhattan_distance(enemy.position, player.position)
            if distance <= 1:
                self._combat.melee_attack(enemy, player)
                if player.is_dead:
                    logger.debug("Player defeated by %s", enemy.enemy_id)
                    break
            elif distance <= self._config.enemy_chase_range:
                self.step_toward_player(enemy)

    def step_toward_player(self, enemy: EnemyEntity) -> bool:
        """Move one cell along the axis with the larger gap (vertical on ties)."""
        player = self._world.entities.player
        diff_x = player.x - enemy.x
        diff_y = player.y - enemy.y
        if abs(diff_x) > abs(diff_y):
            step_x, step_y = (diff_x > 0) - (diff_x < 0), 0
        else:
            step_x, step_y = 0, (diff_y > 0) - (diff_y < 0)
        if step_x == 0 and step_y == 0:
            return False

        target_x = enemy.x + step_x
        target_y = enemy.y + step_y
        grid = self._world.grid
        if not grid.in_bounds(target_x, target_y) or not grid.is_walkable(target_x, target_y):
            return False
        if (target_x, target_y) == (player.x, player.y):
            return False
        if self._world.entities.find_enemy_at(target_x, target_y) is not None:
            return False
        enemy.set_position(target_x, target_y)
        return True
