"""Outcome models shared by the action services."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ashcore.core.types import FailureReason, GridPosition
from ashcore.domain.entities import ProjectileEntity
from ashcore.domain.entity_registry import EntityHandle
from ashcore.domain.tiles import TileTag


@dataclass(slots=True)
class ActionResult:
    """Success flag plus a machine-readable reason when the action did not happen."""

    success: bool
    reason: FailureReason | None = None
    bumped: bool = False
    projectile: ProjectileResult | None = None

    @classmethod
    def ok(cls, bumped: bool = False, projectile: ProjectileResult | None = None) -> "ActionResult":
        return cls(success=True, bumped=bumped, projectile=projectile)

    @classmethod
    def fail(cls, reason: FailureReason, bumped: bool = False) -> "ActionResult":
        return cls(success=False, reason=reason, bumped=bumped)

    def __bool__(self) -> bool:
        return self.success


class ImpactKind(str, Enum):
    NONE = "none"
    ENEMY = "enemy"
    BLOCKING_TILE = "blocking_tile"
    GROUND = "ground"


@dataclass(frozen=True, slots=True)
class ProjectileParams:
    max_range: int
    can_pierce: bool = False
    initial_tags: TileTag = TileTag.NONE


@dataclass(slots=True)
class ProjectileResult:
    """Where a shot went and what it struck."""

    projectile: ProjectileEntity
    trajectory: List[GridPosition] = field(default_factory=list)
    impact_kind: ImpactKind = ImpactKind.NONE
    impact_position: GridPosition | None = None
    hit_enemy: EntityHandle | None = None
