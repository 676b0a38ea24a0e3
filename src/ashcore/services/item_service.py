"""Pickup, drop, container transfer and equipment actions."""
from __future__ import annotations

import logging
from typing import Tuple

from ashcore.core.types import GridPosition, chebyshev_distance
from ashcore.data.registry import ContentRegistry
from ashcore.domain.action_models import ActionResult
from ashcore.domain.defs import ItemDef
from ashcore.domain.entities import PlayerEntity
from ashcore.domain.inventory import EquipmentSlot, equippable_slot
from ashcore.domain.messages import MessageId
from ashcore.domain.props import PropInstance
from ashcore.domain.state import WorldState
from ashcore.domain.tiles import TileType
from ashcore.services.combat_service import TurnClock
from ashcore.services.message_log import MessageLog

logger = logging.getLogger(__name__)

# Self first, then the neighbours clockwise starting north.
DROP_SEARCH_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, 0),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


class ItemService:
    """Moves items between the ground, containers, the inventory and equipment slots."""

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

    # ------------------------------------------------------------------
    # Ground
    # ------------------------------------------------------------------

    def pickup_at_feet(self, player: PlayerEntity) -> ActionResult:
        grid = self._world.grid
        item = grid.pickup_item(player.x, player.y, self._registry.core_items.dirt_clod)
        if item is None:
            self._log.log_by_id(MessageId.PICKUP_NO_ITEM)
            return ActionResult.fail("no_item")
        if not player.inventory.add(item, 1):
            self._log.log_by_id(MessageId.PICKUP_INVENTORY_FULL)
            return ActionResult.fail("inventory_full")

        if item is self._registry.core_items.dirt_clod:
            if grid.ground_type(player.x, player.y) is TileType.GROUND_OIL:
                self._log.log_by_id(MessageId.PICKUP_DIRT_FROM_OIL_GROUND)
            else:
                self._log.log_by_id(MessageId.PICKUP_DIRT_GENERIC)
        else:
            self._log.log_by_id(MessageId.PICKUP_GENERIC_ITEM, item.name)
        return ActionResult.ok()

    def pickup_from_pile(
        self,
        player: PlayerEntity,
        x: int,
        y: int,
        item: ItemDef | None = None,
        equip_after: bool = False,
    ) -> ActionResult:
        """Take one unit (oldest entry first) from the pile at ``(x, y)``."""
        if chebyshev_distance(player.position, GridPosition(x, y)) > 1:
            self._log.log_by_id(MessageId.PICKUP_NOT_FROM_THERE)
            return ActionResult.fail("out_of_range")
        grid = self._world.grid
        pile = grid.pile_at(x, y)
        wanted = item if item is not None else (pile.representative_item if pile is not None else None)
        if pile is None or wanted is None or pile.count(wanted) <= 0:
            self._log.log_by_id(MessageId.PICKUP_NO_ITEM)
            return ActionResult.fail("no_item")

        if not player.inventory.add(wanted, 1):
            self._log.log_by_id(MessageId.PICKUP_INVENTORY_FULL)
            return ActionResult.fail("inventory_full")
        if pile.take_one(wanted) is None:
            player.inventory.remove(wanted, 1)
            logger.warning("Pile take of %s at (%d, %d) failed; rolled back", wanted.id, x, y)
            self._log.log_by_id(MessageId.PICKUP_NO_ITEM)
            return ActionResult.fail("no_item")
        if pile.is_empty:
            grid.remove_pile(x, y)

        self._log.log_by_id(MessageId.PICKUP_GENERIC_ITEM, wanted.name)
        if equip_after:
            self.equip(player, wanted)
        return ActionResult.ok()

    def find_drop_position(self, origin: GridPosition) -> GridPosition | None:
        grid = self._world.grid
        for dx, dy in DROP_SEARCH_OFFSETS:
            x, y = origin.x + dx, origin.y + dy
            if grid.is_walkable(x, y) and grid.prop_at(x, y) is None:
                return GridPosition(x, y)
        return None

    def drop_item(self, player: PlayerEntity, item: ItemDef) -> ActionResult:
        """Put one unit on the first free cell of the drop spiral around the player."""
        if not player.inventory.remove(item, 1):
            self._log.log_by_id(MessageId.DROP_MISSING_ITEM, item.name)
            return ActionResult.fail("missing_item")
        position = self.find_drop_position(player.position)
        if position is None or not self._world.grid.place_item(position.x, position.y, item, 1, self._clock()):
            player.inventory.add(item, 1)
            self._log.log_by_id(MessageId.DROP_NO_SPACE, item.name)
            return ActionResult.fail("no_drop_position")
        self._log.log_by_id(MessageId.DROP_ITEM, item.name, position.x, position.y)
        return ActionResult.ok()

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def open_container(self, player: PlayerEntity, x: int, y: int) -> ActionResult:
        prop, failure = self._reach_container(player, x, y)
        if prop is None:
            return failure
        self._log.log_by_id(MessageId.CONTAINER_OPENED, prop.definition.display_name)
        if prop.container_items is None or prop.container_items.is_empty:
            self._log.log_by_id(MessageId.CONTAINER_EMPTY, prop.definition.display_name)
        return ActionResult.ok()

    def take_from_container(self, player: PlayerEntity, x: int, y: int, item: ItemDef) -> ActionResult:
        prop, failure = self._reach_container(player, x, y)
        if prop is None:
            return failure
        if prop.container_items is None or prop.container_items.count(item) <= 0:
            self._log.log_by_id(MessageId.CONTAINER_TRANSFER_FAILED, item.name)
            return ActionResult.fail("no_item")
        if not prop.take_one_to_inventory(item, player.inventory):
            self._log.log_by_id(MessageId.CONTAINER_TRANSFER_FAILED, item.name)
            return ActionResult.fail("inventory_full")
        self._log.log_by_id(MessageId.CONTAINER_TAKE, item.name, prop.definition.display_name)
        return ActionResult.ok()

    def store_to_container(self, player: PlayerEntity, x: int, y: int, item: ItemDef) -> ActionResult:
        prop, failure = self._reach_container(player, x, y)
        if prop is None:
            return failure
        if not prop.store_one_from_inventory(item, player.inventory):
            self._log.log_by_id(MessageId.CONTAINER_TRANSFER_FAILED, item.name)
            return ActionResult.fail("missing_item")
        self._log.log_by_id(MessageId.CONTAINER_STORE, item.name, prop.definition.display_name)
        return ActionResult.ok()

    def _reach_container(
        self, player: PlayerEntity, x: int, y: int
    ) -> Tuple[PropInstance | None, ActionResult]:
        """Return the adjacent container at ``(x, y)`` with its loot rolled, or the failure."""
        prop = self._world.grid.prop_at(x, y)
        if prop is None:
            return None, ActionResult.fail("no_target")
        if not prop.is_container:
            return None, ActionResult.fail("not_container")
        if chebyshev_distance(player.position, GridPosition(x, y)) > 1:
            self._log.log_by_id(MessageId.CONTAINER_NOT_REACHABLE, prop.definition.display_name)
            return None, ActionResult.fail("out_of_range")
        prop.ensure_loot_rolled(self._world.run_seed, x, y, self._registry.core_items)
        return prop, ActionResult.ok()

    # ------------------------------------------------------------------
    # Equipment
    # ------------------------------------------------------------------

    def equip(self, player: PlayerEntity, item: ItemDef) -> ActionResult:
        slot = equippable_slot(item)
        if slot is None:
            self._log.log_by_id(MessageId.EQUIP_FAILED, item.name)
            return ActionResult.fail("not_equippable")
        if not player.inventory.has(item):
            self._log.log_by_id(MessageId.EQUIP_FAILED, item.name)
            return ActionResult.fail("missing_item")
        if not player.inventory.equip(item):
            self._log.log_by_id(MessageId.EQUIP_FAILED, item.name)
            return ActionResult.fail("inventory_full")
        self._log.log_by_id(MessageId.EQUIP_ITEM, item.name, slot.value)
        return ActionResult.ok()

    def unequip(self, player: PlayerEntity, slot: EquipmentSlot) -> ActionResult:
        current = player.inventory.equipped(slot)
        if current is None:
            return ActionResult.fail("slot_empty")
        if not player.inventory.unequip(slot):
            self._log.log_by_id(MessageId.UNEQUIP_NO_ROOM, current.name)
            return ActionResult.fail("inventory_full")
        self._log.log_by_id(MessageId.UNEQUIP_ITEM, current.name)
        return ActionResult.ok()
