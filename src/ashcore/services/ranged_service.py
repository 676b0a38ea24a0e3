"""Projectile shots and thrown items."""
from __future__ import annotations

import logging
import math
from typing import List, Sequence

from ashcore.core.config import SimulationConfig
from ashcore.core.types import GridPosition, chebyshev_distance
from ashcore.domain.action_models import (
    ActionResult,
    ImpactKind,
    ProjectileParams,
    ProjectileResult,
)
from ashcore.domain.defs import ItemDef
from ashcore.domain.entities import Entity, PlayerEntity, ProjectileEntity
from ashcore.domain.messages import MessageId
from ashcore.domain.state import WorldState
from ashcore.domain.tiles import OIL_SPREADABLE_GROUNDS, TileType
from ashcore.services.combat_service import CombatService
from ashcore.services.message_log import MessageLog

logger = logging.getLogger(__name__)

# Counter-clockwise from east; +y is north.
_DIRECTION_NAMES = (
    "east",
    "north-east",
    "north",
    "north-west",
    "west",
    "south-west",
    "south",
    "south-east",
)

_THROW_CLASSES = (("arrow", "arrow"), ("oil", "oil"), ("earth", "earth"))


def direction_name(dx: int, dy: int) -> str:
    """Name of the compass octant ``(dx, dy)`` points into."""
    angle = math.degrees(math.atan2(dy, dx)) % 360.0
    return _DIRECTION_NAMES[int((angle + 22.5) // 45) % 8]


def throw_class(item: ItemDef) -> str | None:
    for tag, kind in _THROW_CLASSES:
        if item.has_tag(tag):
            return kind
    return None


class RangedCombatService:
    """Traces projectiles across the grid and resolves what they hit."""

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

    @property
    def _map_span(self) -> int:
        return max(self._world.grid.width, self._world.grid.height)

    # ------------------------------------------------------------------
    # Shooting
    # ------------------------------------------------------------------

    def shoot_directional(self, shooter: Entity, dx: int, dy: int) -> ActionResult:
        if dx == 0 and dy == 0:
            return ActionResult.fail("no_target")
        step_x = (dx > 0) - (dx < 0)
        step_y = (dy > 0) - (dy < 0)
        reach = max(self._config.min_projectile_range, self._map_span)
        self._log.log_by_id(MessageId.SHOOT_DIRECTIONAL, direction_name(step_x, step_y))
        trajectory = self._world.grid.linear_trajectory(shooter.position, step_x, step_y, reach)
        params = ProjectileParams(max_range=reach)
        return self._resolve_shot(self.fire_along(shooter, trajectory, params))

    def shoot_at_tile(self, shooter: Entity, x: int, y: int) -> ActionResult:
        if (x, y) == (shooter.x, shooter.y):
            return ActionResult.fail("target_is_self")
        self._log.log_by_id(MessageId.SHOOT_AT_TILE, x, y)
        params = ProjectileParams(max_range=self._config.min_projectile_range)
        return self._resolve_shot(self.perform_shot(shooter, GridPosition(x, y), params))

    def _resolve_shot(self, result: ProjectileResult | None) -> ActionResult:
        if result is None:
            self._log.log_by_id(MessageId.SHOOT_BLOCKED_IMMEDIATELY)
            return ActionResult.fail("blocked")
        self._log_impact(result)
        logger.debug("Projectile stopped: %s at %s", result.impact_kind.value, result.impact_position)
        return ActionResult.ok(projectile=result)

    def perform_shot(self, shooter: Entity, target: GridPosition, params: ProjectileParams) -> ProjectileResult | None:
        """Trace from ``shooter`` toward ``target``; None when the line leaves the map at once."""
        max_range = max(params.max_range, self._map_span)
        trajectory = self._world.grid.line_trajectory(shooter.position, target, max_range)
        return self.fire_along(shooter, trajectory, params)

    def fire_along(
        self,
        shooter: Entity,
        trajectory: Sequence[GridPosition],
        params: ProjectileParams,
    ) -> ProjectileResult | None:
        """Fly along ``trajectory`` and damage the enemy it stops on."""
        if not trajectory:
            return None
        result = self.simulate(trajectory, params, shooter.position)
        if result.hit_enemy is not None:
            enemy = self._world.entities.get(result.hit_enemy)
            if enemy is not None:
                self._combat.damage_with_projectile(shooter, enemy)
        return result

    def simulate(
        self,
        trajectory: Sequence[GridPosition],
        params: ProjectileParams,
        origin: GridPosition,
    ) -> ProjectileResult:
        """Walk the cells in order: enemies stop it first, then blocking tiles, else it lands."""
        projectile = ProjectileEntity(origin.x, origin.y, params.initial_tags)
        travelled: List[GridPosition] = []
        result = ProjectileResult(projectile=projectile, trajectory=travelled)
        grid = self._world.grid
        entities = self._world.entities

        for cell in trajectory:
            travelled.append(cell)
            projectile.set_position(cell.x, cell.y)
            enemy = entities.find_enemy_at(cell.x, cell.y)
            if enemy is not None:
                result.impact_kind = ImpactKind.ENEMY
                result.impact_position = cell
                result.hit_enemy = entities.handle_of(enemy)
                return result
            if grid.blocks_projectiles(cell.x, cell.y) and not params.can_pierce:
                result.impact_kind = ImpactKind.BLOCKING_TILE
                result.impact_position = cell
                return result

        if travelled:
            result.impact_kind = ImpactKind.GROUND
            result.impact_position = travelled[-1]
        return result

    def _log_impact(self, result: ProjectileResult) -> None:
        position = result.impact_position
        if position is None:
            return
        if result.impact_kind is ImpactKind.BLOCKING_TILE:
            self._log.log_by_id(MessageId.SHOOT_HIT_SURFACE, position.x, position.y)
        elif result.impact_kind is ImpactKind.GROUND:
            self._log.log_by_id(MessageId.SHOOT_FELL_TO_GROUND, position.x, position.y)

    # ------------------------------------------------------------------
    # Throwing
    # ------------------------------------------------------------------

    def throw_item(self, thrower: PlayerEntity, item: ItemDef, x: int, y: int) -> ActionResult:
        inventory = thrower.inventory
        if not inventory.has(item):
            self._log.log_by_id(MessageId.THROW_MISSING_ITEM, item.name)
            return ActionResult.fail("missing_item")
        distance = chebyshev_distance(thrower.position, GridPosition(x, y))
        if distance == 0:
            self._log.log_by_id(MessageId.THROW_TARGET_IS_SELF)
            return ActionResult.fail("target_is_self")
        if distance > self._config.throw_range:
            self._log.log_by_id(MessageId.THROW_TOO_FAR)
            return ActionResult.fail("too_far")

        kind = throw_class(item)
        if kind == "arrow":
            return self._throw_arrow(thrower, item, GridPosition(x, y))
        if kind == "oil":
            inventory.remove(item, 1)
            self._splash_oil(item, x, y)
            return ActionResult.ok()
        if kind == "earth":
            inventory.remove(item, 1)
            self._log.log_by_id(MessageId.THROW_DIRT_FLAVOR, item.name)
            return ActionResult.ok()
        self._log.log_by_id(MessageId.THROW_NO_EFFECT, item.name)
        return ActionResult.fail("no_effect")

    def _throw_arrow(self, thrower: PlayerEntity, item: ItemDef, target: GridPosition) -> ActionResult:
        self._log.log_by_id(MessageId.THROW_ARROW_FLAVOR, item.name)
        trajectory = self._world.grid.line_trajectory(thrower.position, target, self._config.throw_range)
        thrower.inventory.remove(item, 1)
        if not trajectory:
            self._log.log_by_id(MessageId.THROW_PROJECTILE_DROPPED, item.name)
            dropped = ProjectileResult(projectile=ProjectileEntity(thrower.x, thrower.y), trajectory=[])
            return ActionResult.ok(projectile=dropped)
        result = self.fire_along(thrower, trajectory, ProjectileParams(max_range=self._config.throw_range))
        assert result is not None
        self._log_impact(result)
        return ActionResult.ok(projectile=result)

    def _splash_oil(self, item: ItemDef, x: int, y: int) -> None:
        grid = self._world.grid
        if not grid.in_bounds(x, y):
            self._log.log_by_id(MessageId.THROW_OIL_LOST, item.name)
            return
        if grid.solid_type(x, y) is not None or grid.prop_at(x, y) is not None:
            self._log.log_by_id(MessageId.THROW_OIL_NO_SPREAD, item.name)
            return
        if grid.ground_type(x, y) in OIL_SPREADABLE_GROUNDS:
            grid.set_ground_type(x, y, TileType.GROUND_OIL)
            self._log.log_by_id(MessageId.THROW_OIL_PUDDLE, item.name, x, y)
            return
        self._log.log_by_id(MessageId.THROW_OIL_NO_SPREAD, item.name)
