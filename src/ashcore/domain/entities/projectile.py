"""In-flight projectile state."""
from __future__ import annotations

from dataclasses import dataclass

from ashcore.core.types import GridPosition
from ashcore.domain.tiles import TileTag


@dataclass(slots=True)
class ProjectileEntity:
    """A projectile's position and the tags it picked up while flying."""

    x: int
    y: int
    tags: TileTag = TileTag.NONE

    @property
    def position(self) -> GridPosition:
        return GridPosition(self.x, self.y)

    def has_tag(self, tag: TileTag) -> bool:
        return bool(self.tags & tag)

    def add_tag(self, tag: TileTag) -> None:
        self.tags |= tag

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
