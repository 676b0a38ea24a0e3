"""Shared type aliases for the core and domain layers."""
from typing import Literal, NamedTuple


class GridPosition(NamedTuple):
    """Integer cell coordinate on the map."""

    x: int
    y: int


FailureReason = Literal[
    "out_of_bounds",
    "blocked",
    "out_of_range",
    "no_target",
    "no_item",
    "inventory_full",
    "missing_item",
    "target_is_self",
    "too_far",
    "not_container",
    "not_equippable",
    "slot_empty",
    "no_drop_position",
    "no_effect",
    "no_action",
]

ActorKind = Literal["player", "enemy"]


def chebyshev_distance(a: GridPosition, b: GridPosition) -> int:
    return max(abs(a.x - b.x), abs(a.y - b.y))


def manhattan_distance(a: GridPosition, b: GridPosition) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


__all__ = [
    "ActorKind",
    "FailureReason",
    "GridPosition",
    "chebyshev_distance",
    "manhattan_distance",
]
