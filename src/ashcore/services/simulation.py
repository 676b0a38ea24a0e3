"""Builds one fully wired simulation session."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ashcore.core.config import SimulationConfig
from ashcore.core.types import GridPosition
from ashcore.data.registry import ContentRegistry
from ashcore.domain.action_models import ActionResult
from ashcore.domain.entities import PlayerEntity
from ashcore.domain.entity_registry import EntityHandle
from ashcore.domain.grid import GridMap, build_sandbox_map
from ashcore.domain.state import WorldState
from ashcore.services.combat_service import CombatService
from ashcore.services.effect_service import EffectService
from ashcore.services.enemy_ai_service import EnemyAIService
from ashcore.services.errors import SpawnError
from ashcore.services.factories import create_enemy, create_player, create_prop
from ashcore.services.game_controller import GameController
from ashcore.services.item_service import ItemService
from ashcore.services.message_log import MessageCatalog, MessageLog
from ashcore.services.movement_service import MovementService
from ashcore.services.ranged_service import RangedCombatService
from ashcore.services.turn_manager import TurnManager

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """Everything one run owns: content, world, scheduler and services."""

    registry: ContentRegistry
    config: SimulationConfig
    world: WorldState
    log: MessageLog
    turn_manager: TurnManager
    combat: CombatService
    movement: MovementService
    items: ItemService
    ranged: RangedCombatService
    effects: EffectService
    enemy_ai: EnemyAIService
    controller: GameController

    @property
    def player(self) -> PlayerEntity:
        return self.world.entities.player

    @property
    def grid(self) -> GridMap:
        return self.world.grid

    def spawn_enemy(self, actor_id: str, x: int, y: int) -> EntityHandle:
        grid = self.world.grid
        occupied = self.world.entities.find_enemy_at(x, y) is not None or (x, y) == self.player.position
        if not grid.is_walkable(x, y) or occupied:
            raise SpawnError(f"Cannot spawn '{actor_id}' at ({x}, {y}).")
        handle = self.world.entities.register_enemy(create_enemy(actor_id, GridPosition(x, y), self.registry))
        logger.debug("Spawned %s at (%d, %d) as handle %d", actor_id, x, y, handle)
        return handle

    def place_prop(self, prop_id: str, x: int, y: int) -> None:
        if not self.world.grid.add_prop(x, y, create_prop(prop_id, self.registry)):
            raise SpawnError(f"Cannot place prop '{prop_id}' at ({x}, {y}).")

    def advance_turn(self) -> ActionResult:
        return self.controller.advance_turn()


def _default_spawn(grid: GridMap) -> GridPosition:
    preferred = GridPosition(grid.width // 2 - 2, grid.height // 2)
    if grid.is_walkable(preferred.x, preferred.y):
        return preferred
    for y in range(grid.height):
        for x in range(grid.width):
            if grid.is_walkable(x, y):
                return GridPosition(x, y)
    raise SpawnError("Map has no walkable cell for the player.")


def create_simulation(
    registry: ContentRegistry,
    config: SimulationConfig | None = None,
    seed: int = 0,
    grid: GridMap | None = None,
    player_position: GridPosition | None = None,
) -> Simulation:
    """Wire a session around ``registry``; the map defaults to the sandbox layout."""
    config = config or SimulationConfig()
    if grid is None:
        grid = build_sandbox_map(config.map_width, config.map_height)
    world = WorldState.create(seed, grid)

    position = player_position or _default_spawn(grid)
    if not grid.in_bounds(position.x, position.y):
        raise SpawnError(f"Player position {tuple(position)} is outside the map.")
    world.entities.set_player(
        create_player(config.player_actor_id, position, registry, max_stacks=config.inventory_max_stacks)
    )

    turn_manager = TurnManager()
    log = MessageLog(MessageCatalog(registry))

    def clock() -> int:
        return turn_manager.current_turn

    combat = CombatService(world, registry, log, clock)
    movement = MovementService(world, combat, log)
    items = ItemService(world, registry, log, clock)
    ranged = RangedCombatService(world, log, combat, config)
    effects = EffectService(world, log, combat, config)
    enemy_ai = EnemyAIService(world, combat, config)
    controller = GameController(world, turn_manager, log, movement, items, ranged, effects, enemy_ai, config)
    logger.info("Simulation created: seed=%d map=%dx%d", seed, grid.width, grid.height)
    return Simulation(
        registry=registry,
        config=config,
        world=world,
        log=log,
        turn_manager=turn_manager,
        combat=combat,
        movement=movement,
        items=items,
        ranged=ranged,
        effects=effects,
        enemy_ai=enemy_ai,
        controller=controller,
    )
