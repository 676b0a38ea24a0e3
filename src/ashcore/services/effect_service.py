"""Fire rules: projectile ignition, burning trees and burning status damage."""
from __future__ import annotations

import logging
from typing import Dict, List

from ashcore.core.config import SimulationConfig
from ashcore.core.types import GridPosition
from ashcore.domain.action_models import ImpactKind, ProjectileResult
from ashcore.domain.entities import Entity, EnemyEntity
from ashcore.domain.messages import MessageId
from ashcore.domain.state import WorldState
from ashcore.domain.tiles import BURNING_SOLID, BURNT_SOLID, FLAMMABLE_SOLID, TileTag
from ashcore.services.combat_service import CombatService
from ashcore.services.message_log import MessageLog

logger = logging.getLogger(__name__)


class EffectService:
    """Ignition triggers and burn timers for map cells, plus burning ticks for entities.

    Map changes happen only in :meth:`tick_environment`; entity damage happens only
    in :meth:`tick_status_effects`.
    """

    def __init__(
        self,
        world: WorldState,
        log: MessageLog,
        combat: CombatService,
        config: SimulationConfig | None = None,
    ) -> None:
        self._world = world
        self._log = log
        self._combat = combat
        self._config = config or SimulationConfig()
        self._pending_ignitions: List[GridPosition] = []
        self._burn_timers: Dict[GridPosition, int] = {}

    @property
    def pending_ignitions(self) -> List[GridPosition]:
        return list(self._pending_ignitions)

    @property
    def burn_timers(self) -> Dict[GridPosition, int]:
        return dict(self._burn_timers)

    # ------------------------------------------------------------------
    # Projectile phase
    # ------------------------------------------------------------------

    def apply_projectile_rules(self, result: ProjectileResult) -> None:
        self.apply_ignition_by_contact(result)
        self.apply_flammable_ignition(result)
        self._ignite_hit_enemy(result)

    def apply_ignition_by_contact(self, result: ProjectileResult) -> bool:
        """Set BURNING on a projectile whose path crossed a burning cell."""
        projectile = result.projectile
        if projectile.has_tag(TileTag.BURNING):
            return False
        grid = self._world.grid
        for cell in result.trajectory:
            if grid.tags_at(cell.x, cell.y) & TileTag.BURNING:
                projectile.add_tag(TileTag.BURNING)
                self._log.log_by_id(MessageId.ARROW_IGNITED)
                logger.debug("Projectile ignited at %s", cell)
                return True
        return False

    def apply_flammable_ignition(self, result: ProjectileResult) -> bool:
        """Queue ignition of a flammable solid struck by a burning projectile."""
        position = result.impact_position
        if position is None or not result.projectile.has_tag(TileTag.BURNING):
            return False
        if self._world.grid.solid_type(position.x, position.y) is not FLAMMABLE_SOLID:
            return False
        if position in self._pending_ignitions or position in self._burn_timers:
            return False
        self._pending_ignitions.append(position)
        return True

    def _ignite_hit_enemy(self, result: ProjectileResult) -> None:
        if result.impact_kind is not ImpactKind.ENEMY or result.hit_enemy is None:
            return
        if not result.projectile.has_tag(TileTag.BURNING):
            return
        enemy = self._world.entities.get(result.hit_enemy)
        if enemy is not None and not enemy.is_dead:
            enemy.apply_burning(self._config.burn_duration_turns)

    # ------------------------------------------------------------------
    # Environment phase
    # ------------------------------------------------------------------

    def tick_environment(self) -> None:
        """Light pending ignitions, then advance every burn timer by one tick."""
        grid = self._world.grid
        for position in self._pending_ignitions:
            if grid.solid_type(position.x, position.y) is not FLAMMABLE_SOLID:
                continue
            grid.set_solid_type(position.x, position.y, BURNING_SOLID)
            self._burn_timers[position] = self._config.burn_duration_turns
            self._log.log_by_id(MessageId.TREE_IGNITED, position.x, position.y)
        self._pending_ignitions.clear()

        for position in list(self._burn_timers):
            remaining = self._burn_timers[position] - 1
            if remaining > 0:
                self._burn_timers[position] = remaining
                continue
            del self._burn_timers[position]
            if grid.solid_type(position.x, position.y) is BURNING_SOLID:
                grid.set_solid_type(position.x, position.y, BURNT_SOLID)
                self._log.log_by_id(MessageId.TREE_BURNED_OUT, position.x, position.y)

    # ------------------------------------------------------------------
    # Status-effect phase
    # ------------------------------------------------------------------

    def tick_status_effects(self) -> None:
        entities = self._world.entities
        if entities.has_player:
            self._tick_burning(entities.player)
        for _, enemy in entities.iter_enemies():
            self._tick_burning(enemy)

    def _tick_burning(self, entity: Entity) -> None:
        if not entity.is_burning or entity.is_dead:
            return
        damage = entity.apply_raw_damage(self._config.burning_damage_per_tick)
        entity.tick_burning_duration()
        if isinstance(entity, EnemyEntity):
            self._log.log_by_id(MessageId.BURNING_DAMAGE_ENEMY, entity.display_name, damage)
            if entity.is_dead:
                self._log.log_by_id(MessageId.MELEE_ENEMY_DEFEATED, entity.display_name)
                self._combat.resolve_defeat(entity)
        else:
            self._log.log_by_id(MessageId.BURNING_DAMAGE_PLAYER, damage)
            if entity.is_dead:
                self._log.log_by_id(MessageId.MELEE_PLAYER_DEFEATED)
