"""Prop definition structures."""
from __future__ import annotations

from dataclasses import dataclass

CHEST_PROP_ID = "chest"


@dataclass(frozen=True, slots=True)
class PropDef:
    """Static interactive object such as a chest or a barrel."""

    id: str
    display_name: str
    sprite_id: str
    blocks_movement: bool
    blocks_los: bool
    blocks_projectiles: bool
    container: bool = False
