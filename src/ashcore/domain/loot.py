"""Fixed loot tables for containers and enemy drops."""
from __future__ import annotations

from typing import List

from ashcore.core.rng import RngStream
from ashcore.domain.defs import CoreItems
from ashcore.domain.item_pile import ItemPile, PileEntry

CONTAINER_DROP_TURN = 0


def roll_chest_loot(rng: RngStream, items: CoreItems) -> ItemPile:
    """Half the chests hold dirt, the rest an oil bottle; every chest holds arrows."""
    pile = ItemPile()
    if rng.next_int(0, 100) < 50:
        pile.add(items.dirt_clod, 2 + rng.next_int(0, 3), CONTAINER_DROP_TURN)
    else:
        pile.add(items.oil_bottle, 1, CONTAINER_DROP_TURN)
    pile.add(items.wooden_arrow, 3 + rng.next_int(0, 5), CONTAINER_DROP_TURN)
    return pile


def roll_enemy_drop(rng: RngStream, items: CoreItems, drop_turn: int) -> List[PileEntry]:
    if rng.next_int(0, 100) < 60:
        return [PileEntry(item=items.dirt_clod, amount=1, drop_turn=drop_turn)]
    return [PileEntry(item=items.wooden_arrow, amount=1 + rng.next_int(0, 2), drop_turn=drop_turn)]
