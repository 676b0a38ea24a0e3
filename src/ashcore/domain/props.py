"""Placed props and their container contents."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ashcore.core.rng import RngStream, derive_loot_seed
from ashcore.domain.defs import CoreItems, ItemDef, PropDef
from ashcore.domain.inventory import Inventory
from ashcore.domain.item_pile import ItemPile
from ashcore.domain.loot import CONTAINER_DROP_TURN, roll_chest_loot

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PropInstance:
    """A prop on one cell; containers roll their loot the first time they are opened."""

    definition: PropDef
    container_items: ItemPile | None = None
    loot_seed: int | None = None
    has_rolled_loot: bool = False

    @property
    def prop_id(self) -> str:
        return self.definition.id

    @property
    def is_container(self) -> bool:
        return self.definition.container

    def ensure_loot_rolled(self, run_seed: int, x: int, y: int, items: CoreItems) -> bool:
        """Roll contents once from the cell-and-id seed; returns True only on the first roll."""
        if not self.is_container or self.has_rolled_loot:
            return False
        if self.loot_seed is None:
            self.loot_seed = derive_loot_seed(run_seed, x, y, self.prop_id)
        rolled = roll_chest_loot(RngStream(self.loot_seed), items)
        if self.container_items is None:
            self.container_items = rolled
        else:
            for entry in rolled.entries:
                self.container_items.add(entry.item, entry.amount, entry.drop_turn)
        self.has_rolled_loot = True
        logger.debug("Rolled loot for %s at (%d, %d)", self.prop_id, x, y)
        return True

    def take_one_to_inventory(self, item: ItemDef, inventory: Inventory) -> bool:
        """Move one unit into ``inventory``; the inventory must accept before the container is debited."""
        if self.container_items is None or self.container_items.count(item) <= 0:
            return False
        if not inventory.add(item, 1):
            return False
        if self.container_items.take_one(item) is None:
            inventory.remove(item, 1)
            logger.warning("Container take of %s failed after inventory add; rolled back", item.id)
            return False
        return True

    def store_one_from_inventory(self, item: ItemDef, inventory: Inventory) -> bool:
        if not self.is_container or not inventory.remove(item, 1):
            return False
        if self.container_items is None:
            self.container_items = ItemPile()
        self.container_items.add(item, 1, CONTAINER_DROP_TURN)
        return True
