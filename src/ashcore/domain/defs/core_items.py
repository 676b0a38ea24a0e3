"""Items the rules refer to directly."""
from __future__ import annotations

from dataclasses import dataclass

from .item_def import ItemDef

SHORT_SWORD_ID = "item_short_sword"
BOW_ID = "item_bow_basic"
WOODEN_ARROW_ID = "item_arrow_wooden"
OIL_BOTTLE_ID = "item_oil_bottle"
DIRT_CLOD_ID = "item_dirt_clod"

CORE_ITEM_IDS = (SHORT_SWORD_ID, BOW_ID, WOODEN_ARROW_ID, OIL_BOTTLE_ID, DIRT_CLOD_ID)


@dataclass(frozen=True, slots=True)
class CoreItems:
    short_sword: ItemDef
    bow: ItemDef
    wooden_arrow: ItemDef
    oil_bottle: ItemDef
    dirt_clod: ItemDef
