"""Domain definition exports."""

from .actor_def import ActorDef, InventoryGrantDef
from .core_items import CORE_ITEM_IDS, CoreItems
from .item_def import ItemDef
from .message_def import MessageTemplateDef
from .prop_def import CHEST_PROP_ID, PropDef

__all__ = [
    "ActorDef",
    "CHEST_PROP_ID",
    "CORE_ITEM_IDS",
    "CoreItems",
    "InventoryGrantDef",
    "ItemDef",
    "MessageTemplateDef",
    "PropDef",
]
