"""Tile types, their layers and the tag flags derived from them."""
from __future__ import annotations

from enum import Enum, IntFlag
from typing import Dict, FrozenSet, Tuple


class TileType(str, Enum):
    GROUND_NORMAL = "ground_normal"
    GROUND_BURNT = "ground_burnt"
    GROUND_WATER = "ground_water"
    GROUND_OIL = "ground_oil"
    WALL_STONE = "wall_stone"
    WALL_METAL = "wall_metal"
    TREE_NORMAL = "tree_normal"
    TREE_BURNING = "tree_burning"
    TREE_BURNT = "tree_burnt"
    FIRE_TILE = "fire_tile"
    OVERLAY_WATER = "overlay_water"
    OVERLAY_OIL = "overlay_oil"


class TileTag(IntFlag):
    NONE = 0
    BLOCKING = 1
    FLAMMABLE = 2
    BURNING = 4
    WET = 8
    OILY = 16
    CONDUCTIVE = 32
    HAZARDOUS = 64
    WOOD = 128
    METAL = 256
    GROUND = 512


class TileLayer(str, Enum):
    GROUND = "ground"
    SOLID = "solid"
    OVERLAY = "overlay"


_TILE_TAGS: Dict[TileType, TileTag] = {
    TileType.GROUND_NORMAL: TileTag.GROUND,
    TileType.GROUND_BURNT: TileTag.GROUND,
    TileType.GROUND_WATER: TileTag.GROUND | TileTag.WET,
    TileType.GROUND_OIL: TileTag.GROUND | TileTag.OILY | TileTag.FLAMMABLE,
    TileType.WALL_STONE: TileTag.BLOCKING,
    TileType.WALL_METAL: TileTag.BLOCKING | TileTag.METAL | TileTag.CONDUCTIVE,
    TileType.TREE_NORMAL: TileTag.BLOCKING | TileTag.WOOD | TileTag.FLAMMABLE,
    TileType.TREE_BURNING: TileTag.BLOCKING | TileTag.WOOD | TileTag.BURNING | TileTag.HAZARDOUS,
    TileType.TREE_BURNT: TileTag.BLOCKING | TileTag.WOOD,
    TileType.FIRE_TILE: TileTag.BURNING | TileTag.HAZARDOUS,
    TileType.OVERLAY_WATER: TileTag.WET,
    TileType.OVERLAY_OIL: TileTag.OILY,
}

_TILE_LAYERS: Dict[TileType, TileLayer] = {
    TileType.GROUND_NORMAL: TileLayer.GROUND,
    TileType.GROUND_BURNT: TileLayer.GROUND,
    TileType.GROUND_WATER: TileLayer.GROUND,
    TileType.GROUND_OIL: TileLayer.GROUND,
    TileType.WALL_STONE: TileLayer.SOLID,
    TileType.WALL_METAL: TileLayer.SOLID,
    TileType.TREE_NORMAL: TileLayer.SOLID,
    TileType.TREE_BURNING: TileLayer.SOLID,
    TileType.TREE_BURNT: TileLayer.SOLID,
    TileType.FIRE_TILE: TileLayer.OVERLAY,
    TileType.OVERLAY_WATER: TileLayer.OVERLAY,
    TileType.OVERLAY_OIL: TileLayer.OVERLAY,
}

# Which overlay a single-value tile query reports when several coexist.
OVERLAY_PRIORITY: Tuple[TileType, ...] = (
    TileType.FIRE_TILE,
    TileType.OVERLAY_OIL,
    TileType.OVERLAY_WATER,
)

# Unburnt -> burning -> burnt for the one solid that catches fire.
FLAMMABLE_SOLID = TileType.TREE_NORMAL
BURNING_SOLID = TileType.TREE_BURNING
BURNT_SOLID = TileType.TREE_BURNT

PICKUP_GROUNDS: FrozenSet[TileType] = frozenset(
    {TileType.GROUND_NORMAL, TileType.GROUND_BURNT, TileType.GROUND_OIL}
)
OIL_SPREADABLE_GROUNDS: FrozenSet[TileType] = frozenset(
    {TileType.GROUND_NORMAL, TileType.GROUND_BURNT, TileType.GROUND_WATER}
)


def tags_for(tile_type: TileType) -> TileTag:
    return _TILE_TAGS.get(tile_type, TileTag.NONE)


def has_tag(tile_type: TileType, tag: TileTag) -> bool:
    return bool(tags_for(tile_type) & tag)


def layer_of(tile_type: TileType) -> TileLayer:
    return _TILE_LAYERS[tile_type]


def is_ground(tile_type: TileType) -> bool:
    return layer_of(tile_type) is TileLayer.GROUND


def is_solid(tile_type: TileType) -> bool:
    return layer_of(tile_type) is TileLayer.SOLID


def is_overlay(tile_type: TileType) -> bool:
    return layer_of(tile_type) is TileLayer.OVERLAY


def top_overlay(overlays) -> TileType | None:
    """Return the highest-priority overlay among ``overlays``."""
    for tile_type in OVERLAY_PRIORITY:
        if tile_type in overlays:
            return tile_type
    return None
