"""Runtime entity exports."""

from .enemy import EnemyEntity
from .entity import Entity
from .player import PlayerEntity
from .projectile import ProjectileEntity
from .stats import Stats

__all__ = [
    "EnemyEntity",
    "Entity",
    "PlayerEntity",
    "ProjectileEntity",
    "Stats",
]
