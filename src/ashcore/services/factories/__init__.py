"""Factory helpers for runtime entities."""

from .actor_factory import create_enemy, create_player
from .prop_factory import create_prop

__all__ = [
    "create_enemy",
    "create_player",
    "create_prop",
]
