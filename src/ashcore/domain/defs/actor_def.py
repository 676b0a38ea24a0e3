"""Actor definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ashcore.core.types import ActorKind


@dataclass(frozen=True, slots=True)
class InventoryGrantDef:
    """Items an actor starts with."""

    item_id: str
    count: int


@dataclass(frozen=True, slots=True)
class ActorDef:
    """Player or enemy template with its base stats."""

    id: str
    display_name: str
    sprite_id: str
    kind: ActorKind
    faction_id: str
    tags: Tuple[str, ...]
    hp: int
    attack: int
    defense: int
    speed: int
    ai_profile_id: str
    initial_inventory: Tuple[InventoryGrantDef, ...] = ()
    notes: str = ""
