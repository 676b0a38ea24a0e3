"""The controlled actor."""
from __future__ import annotations

from dataclasses import dataclass, field

from ashcore.domain.inventory import Inventory

from .entity import Entity


@dataclass(slots=True)
class PlayerEntity(Entity):
    """Player-controlled entity that carries the inventory."""

    inventory: Inventory = field(default_factory=Inventory)
