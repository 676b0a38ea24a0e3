"""Single pending player action and per-phase wiring of the services."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Literal

from ashcore.core.config import SimulationConfig
from ashcore.domain.action_models import ActionResult, ProjectileResult
from ashcore.domain.defs import ItemDef
from ashcore.domain.inventory import EquipmentSlot
from ashcore.domain.messages import MessageId
from ashcore.domain.state import WorldState
from ashcore.services.effect_service import EffectService
from ashcore.services.enemy_ai_service import EnemyAIService
from ashcore.services.item_service import ItemService
from ashcore.services.message_log import MessageLog
from ashcore.services.movement_service import MovementService
from ashcore.services.ranged_service import RangedCombatService
from ashcore.services.turn_manager import TurnManager, TurnPhase

logger = logging.getLogger(__name__)

PendingActionKind = Literal[
    "move",
    "wait",
    "pickup",
    "pickup_from_pile",
    "drop_item",
    "shoot_directional",
    "shoot_at_tile",
    "throw_item",
    "open_container",
    "take_from_container",
    "store_to_container",
    "equip",
    "unequip",
]

_ITEM_ACTIONS = frozenset(
    {"drop_item", "throw_item", "take_from_container", "store_to_container", "equip"}
)
_PROJECTILE_ACTIONS = frozenset({"shoot_directional", "shoot_at_tile", "throw_item"})


@dataclass(frozen=True, slots=True)
class PendingAction:
    """A player intent waiting for the next turn advance."""

    kind: PendingActionKind
    dx: int = 0
    dy: int = 0
    x: int = 0
    y: int = 0
    item: ItemDef | None = None
    slot: EquipmentSlot | None = None
    equip_after: bool = False


class GameController:
    """Queues at most one player action and resolves it inside the Player phase."""

    def __init__(
        self,
        world: WorldState,
        turn_manager: TurnManager,
        log: MessageLog,
        movement: MovementService,
        items: ItemService,
        ranged: RangedCombatService,
        effects: EffectService,
        enemy_ai: EnemyAIService,
        config: SimulationConfig | None = None,
    ) -> None:
        self._world = world
        self._turns = turn_manager
        self._log = log
        self._movement = movement
        self._items = items
        self._ranged = ranged
        self._effects = effects
        self._enemy_ai = enemy_ai
        self._config = config or SimulationConfig()
        self._pending: PendingAction | None = None
        self._last_result: ActionResult | None = None
        self._turn_projectiles: List[ProjectileResult] = []
        self._last_player_projectile: ProjectileResult | None = None
        self._dispatch: Dict[str, Callable[[PendingAction], ActionResult]] = {
            "move": lambda action: self._movement.move(self._player, action.dx, action.dy),
            "wait": lambda action: ActionResult.ok(),
            "pickup": lambda action: self._items.pickup_at_feet(self._player),
            "pickup_from_pile": lambda action: self._items.pickup_from_pile(
                self._player, action.x, action.y, action.item, action.equip_after
            ),
            "drop_item": lambda action: self._items.drop_item(self._player, self._require_item(action)),
            "shoot_directional": lambda action: self._ranged.shoot_directional(self._player, action.dx, action.dy),
            "shoot_at_tile": lambda action: self._ranged.shoot_at_tile(self._player, action.x, action.y),
            "throw_item": lambda action: self._ranged.throw_item(
                self._player, self._require_item(action), action.x, action.y
            ),
            "open_container": lambda action: self._items.open_container(self._player, action.x, action.y),
            "take_from_container": lambda action: self._items.take_from_container(
                self._player, action.x, action.y, self._require_item(action)
            ),
            "store_to_container": lambda action: self._items.store_to_container(
                self._player, action.x, action.y, self._require_item(action)
            ),
            "equip": lambda action: self._items.equip(self._player, self._require_item(action)),
            "unequip": lambda action: self._unequip(action),
        }
        turn_manager.register(TurnPhase.PLAYER, self._on_player_phase)
        turn_manager.register(TurnPhase.PROJECTILE, self._on_projectile_phase)
        turn_manager.register(TurnPhase.ENVIRONMENT, self._on_environment_phase)
        turn_manager.register(TurnPhase.ENEMY, self._on_enemy_phase)
        turn_manager.register(TurnPhase.STATUS_EFFECT, self._on_status_effect_phase)

    @property
    def _player(self):
        return self._world.entities.player

    @property
    def pending_action(self) -> PendingAction | None:
        return self._pending

    @property
    def last_result(self) -> ActionResult | None:
        return self._last_result

    # ------------------------------------------------------------------
    # Queueing
    # ------------------------------------------------------------------

    def queue(self, action: PendingAction) -> None:
        """Replace whatever was pending with ``action``."""
        if action.kind not in self._dispatch:
            raise ValueError(f"Unknown action kind '{action.kind}'.")
        if action.kind in _ITEM_ACTIONS and action.item is None:
            raise ValueError(f"Action '{action.kind}' needs an item.")
        if action.kind == "unequip" and action.slot is None:
            raise ValueError("Action 'unequip' needs a slot.")
        self._pending = action

    def cancel_pending(self) -> None:
        self._pending = None

    def queue_move(self, dx: int, dy: int) -> None:
        self.queue(PendingAction("move", dx=dx, dy=dy))

    def queue_wait(self) -> None:
        self.queue(PendingAction("wait"))

    def queue_pickup(self) -> None:
        self.queue(PendingAction("pickup"))

    def queue_pickup_from_pile(self, x: int, y: int, item: ItemDef | None = None, equip_after: bool = False) -> None:
        self.queue(PendingAction("pickup_from_pile", x=x, y=y, item=item, equip_after=equip_after))

    def queue_drop_item(self, item: ItemDef) -> None:
        self.queue(PendingAction("drop_item", item=item))

    def queue_shoot_directional(self, dx: int, dy: int) -> None:
        self.queue(PendingAction("shoot_directional", dx=dx, dy=dy))

    def queue_shoot_at_tile(self, x: int, y: int) -> None:
        self.queue(PendingAction("shoot_at_tile", x=x, y=y))

    def queue_throw_item(self, item: ItemDef, x: int, y: int) -> None:
        self.queue(PendingAction("throw_item", x=x, y=y, item=item))

    def queue_open_container(self, x: int, y: int) -> None:
        self.queue(PendingAction("open_container", x=x, y=y))

    def queue_take_from_container(self, x: int, y: int, item: ItemDef) -> None:
        self.queue(PendingAction("take_from_container", x=x, y=y, item=item))

    def queue_store_to_container(self, x: int, y: int, item: ItemDef) -> None:
        self.queue(PendingAction("store_to_container", x=x, y=y, item=item))

    def queue_equip(self, item: ItemDef) -> None:
        self.queue(PendingAction("equip", item=item))

    def queue_unequip(self, slot: EquipmentSlot) -> None:
        self.queue(PendingAction("unequip", slot=slot))

    # ------------------------------------------------------------------
    # Turn driving
    # ------------------------------------------------------------------

    def advance_turn(self) -> ActionResult:
        """Run one full turn and return the outcome of the player's action."""
        turn_number = self._turns.current_turn + 1
        self._log.log_by_id(MessageId.TURN_START, turn_number)
        self._turns.advance_turn()
        self._log.log_by_id(MessageId.TURN_END, turn_number)
        assert self._last_result is not None
        return self._last_result

    def try_consume_last_player_projectile(self) -> ProjectileResult | None:
        """Hand the most recent player projectile to a presenter once."""
        result = self._last_player_projectile
        self._last_player_projectile = None
        return result

    # ------------------------------------------------------------------
    # Phase handlers
    # ------------------------------------------------------------------

    def _on_player_phase(self) -> None:
        self._turn_projectiles = []
        action = self._pending
        self._pending = None
        if action is None or self._player.is_dead:
            self._last_result = ActionResult.fail("no_action")
            return
        result = self._dispatch[action.kind](action)
        logger.debug("Player action %s -> %s", action.kind, result)
        if action.kind in _PROJECTILE_ACTIONS:
            # A failed shot clears any unconsumed earlier one.
            self._last_player_projectile = result.projectile
        if result.projectile is not None:
            self._turn_projectiles.append(result.projectile)
        self._last_result = result

    def _on_projectile_phase(self) -> None:
        for result in self._turn_projectiles:
            self._effects.apply_projectile_rules(result)

    def _on_environment_phase(self) -> None:
        self._effects.tick_environment()
        self._world.grid.expire_item_piles(self._turns.current_turn + 1, self._config.item_pile_ttl_turns)

    def _on_enemy_phase(self) -> None:
        self._enemy_ai.take_turns()

    def _on_status_effect_phase(self) -> None:
        self._effects.tick_status_effects()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _require_item(action: PendingAction) -> ItemDef:
        assert action.item is not None
        return action.item

    def _unequip(self, action: PendingAction) -> ActionResult:
        assert action.slot is not None
        return self._items.unequip(self._player, action.slot)
