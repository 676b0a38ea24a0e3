"""Player movement with bump-to-attack."""
from __future__ import annotations

from ashcore.domain.action_models import ActionResult
from ashcore.domain.entities import PlayerEntity
from ashcore.domain.messages import MessageId
from ashcore.domain.state import WorldState
from ashcore.services.combat_service import CombatService
from ashcore.services.message_log import MessageLog


class MovementService:
    def __init__(self, world: WorldState, combat: CombatService, log: MessageLog) -> None:
        self._world = world
        self._combat = combat
        self._log = log

    def move(self, player: PlayerEntity, dx: int, dy: int) -> ActionResult:
        """Step by ``(dx, dy)``; stepping into an enemy attacks it instead."""
        if dx == 0 and dy == 0:
            return ActionResult.fail("no_target")
        target_x = player.x + dx
        target_y = player.y + dy

        enemy = self._world.entities.find_enemy_at(target_x, target_y)
        if enemy is not None:
            attack = self._combat.melee_attack(player, enemy)
            return ActionResult(success=attack.success, reason=attack.reason, bumped=True)

        grid = self._world.grid
        if not grid.in_bounds(target_x, target_y):
            self._log.log_by_id(MessageId.MOVE_OUT_OF_BOUNDS)
            return ActionResult.fail("out_of_bounds")
        if not grid.is_walkable(target_x, target_y):
            self._log.log_by_id(MessageId.MOVE_BLOCKED)
            return ActionResult.fail("blocked")

        player.set_position(target_x, target_y)
        self._log.log_by_id(MessageId.MOVE_SUCCEEDED, target_x, target_y)
        return ActionResult.ok()
