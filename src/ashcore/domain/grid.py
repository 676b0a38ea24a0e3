"""Layered tile map with per-cell props and item piles."""
from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterator, List, Set, Tuple

from ashcore.core.types import GridPosition
from ashcore.domain import line
from ashcore.domain.defs import ItemDef
from ashcore.domain.item_pile import ItemPile
from ashcore.domain.props import PropInstance
from ashcore.domain.tiles import (
    PICKUP_GROUNDS,
    TileLayer,
    TileTag,
    TileType,
    layer_of,
    tags_for,
    top_overlay,
)

logger = logging.getLogger(__name__)

DEFAULT_ITEM_PILE_TTL = 3600

Cell = Tuple[int, int]


class GridMap:
    """Ground layer everywhere, optional solids, overlay sets, one prop and one pile per cell."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Map dimensions must be positive.")
        self.width = width
        self.height = height
        self._ground: List[List[TileType]] = [
            [TileType.GROUND_NORMAL for _ in range(height)] for _ in range(width)
        ]
        self._solid: Dict[Cell, TileType] = {}
        self._overlays: Dict[Cell, Set[TileType]] = {}
        self._props: Dict[Cell, PropInstance] = {}
        self._piles: Dict[Cell, ItemPile] = {}

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # ------------------------------------------------------------------
    # Layers
    # ------------------------------------------------------------------

    def ground_type(self, x: int, y: int) -> TileType:
        if not self.in_bounds(x, y):
            return TileType.GROUND_NORMAL
        return self._ground[x][y]

    def solid_type(self, x: int, y: int) -> TileType | None:
        return self._solid.get((x, y))

    def overlays_at(self, x: int, y: int) -> FrozenSet[TileType]:
        return frozenset(self._overlays.get((x, y), ()))

    def tile_type(self, x: int, y: int) -> TileType:
        """Single-value view: top overlay, else solid, else ground."""
        if not self.in_bounds(x, y):
            return TileType.GROUND_NORMAL
        overlay = top_overlay(self._overlays.get((x, y), ()))
        if overlay is not None:
            return overlay
        solid = self._solid.get((x, y))
        if solid is not None:
            return solid
        return self._ground[x][y]

    def tags_at(self, x: int, y: int) -> TileTag:
        """Union of the tags of every layer on the cell."""
        if not self.in_bounds(x, y):
            return TileTag.NONE
        tags = tags_for(self._ground[x][y])
        solid = self._solid.get((x, y))
        if solid is not None:
            tags |= tags_for(solid)
        for overlay in self._overlays.get((x, y), ()):
            tags |= tags_for(overlay)
        return tags

    def set_ground_type(self, x: int, y: int, tile_type: TileType) -> None:
        self._require_layer(tile_type, TileLayer.GROUND)
        if self.in_bounds(x, y):
            self._ground[x][y] = tile_type

    def set_solid_type(self, x: int, y: int, tile_type: TileType) -> None:
        self._require_layer(tile_type, TileLayer.SOLID)
        if self.in_bounds(x, y):
            self._solid[(x, y)] = tile_type

    def clear_solid(self, x: int, y: int) -> None:
        self._solid.pop((x, y), None)

    def add_overlay(self, x: int, y: int, tile_type: TileType) -> None:
        self._require_layer(tile_type, TileLayer.OVERLAY)
        if self.in_bounds(x, y):
            self._overlays.setdefault((x, y), set()).add(tile_type)

    def remove_overlay(self, x: int, y: int, tile_type: TileType) -> None:
        overlays = self._overlays.get((x, y))
        if overlays is None:
            return
        overlays.discard(tile_type)
        if not overlays:
            del self._overlays[(x, y)]

    def clear_overlays(self, x: int, y: int) -> None:
        self._overlays.pop((x, y), None)

    def set_tile_type(self, x: int, y: int, tile_type: TileType) -> None:
        """Single-value write routed to the tile's layer; higher layers on the cell are cleared."""
        if not self.in_bounds(x, y):
            return
        layer = layer_of(tile_type)
        if layer is TileLayer.GROUND:
            self._ground[x][y] = tile_type
            self.clear_solid(x, y)
            self.clear_overlays(x, y)
        elif layer is TileLayer.SOLID:
            self._solid[(x, y)] = tile_type
            self.clear_overlays(x, y)
        else:
            self.clear_solid(x, y)
            self.clear_overlays(x, y)
            self.add_overlay(x, y, tile_type)

    @staticmethod
    def _require_layer(tile_type: TileType, layer: TileLayer) -> None:
        if layer_of(tile_type) is not layer:
            raise ValueError(f"{tile_type.value} is not a {layer.value} tile.")

    # ------------------------------------------------------------------
    # Derived predicates
    # ------------------------------------------------------------------

    def is_walkable(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y) or (x, y) in self._solid:
            return False
        prop = self._props.get((x, y))
        return prop is None or not prop.definition.blocks_movement

    def blocks_projectiles(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y) or (x, y) in self._solid:
            return True
        prop = self._props.get((x, y))
        return prop is not None and prop.definition.blocks_projectiles

    def blocks_los(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y) or (x, y) in self._solid:
            return True
        prop = self._props.get((x, y))
        return prop is not None and prop.definition.blocks_los

    def pickup_item(self, x: int, y: int, resource: ItemDef) -> ItemDef | None:
        """Return ``resource`` when the cell's ground can be scooped up."""
        if not self.is_walkable(x, y):
            return None
        if self._ground[x][y] in PICKUP_GROUNDS:
            return resource
        return None

    def has_line_of_sight(self, start: GridPosition, end: GridPosition) -> bool:
        """True when no cell strictly between ``start`` and ``end`` blocks sight."""
        span = max(abs(end.x - start.x), abs(end.y - start.y))
        for cell in self.line_trajectory(start, end, span):
            if cell == end:
                return True
            if self.blocks_los(cell.x, cell.y):
                return False
        return True

    def linear_trajectory(self, start: GridPosition, dx: int, dy: int, max_range: int) -> List[GridPosition]:
        return line.linear_trajectory(self.width, self.height, start, dx, dy, max_range)

    def line_trajectory(self, start: GridPosition, end: GridPosition, max_range: int) -> List[GridPosition]:
        return line.line_trajectory(self.width, self.height, start, end, max_range)

    # ------------------------------------------------------------------
    # Props
    # ------------------------------------------------------------------

    def prop_at(self, x: int, y: int) -> PropInstance | None:
        return self._props.get((x, y))

    def add_prop(self, x: int, y: int, prop: PropInstance) -> bool:
        if not self.in_bounds(x, y) or (x, y) in self._solid or (x, y) in self._props:
            return False
        self._props[(x, y)] = prop
        return True

    def remove_prop(self, x: int, y: int) -> PropInstance | None:
        return self._props.pop((x, y), None)

    def iter_props(self) -> Iterator[Tuple[GridPosition, PropInstance]]:
        for (x, y) in sorted(self._props):
            yield GridPosition(x, y), self._props[(x, y)]

    # ------------------------------------------------------------------
    # Item piles
    # ------------------------------------------------------------------

    def pile_at(self, x: int, y: int) -> ItemPile | None:
        return self._piles.get((x, y))

    def add_pile(self, x: int, y: int, pile: ItemPile) -> bool:
        if not self.in_bounds(x, y) or (x, y) in self._piles:
            return False
        self._piles[(x, y)] = pile
        return True

    def remove_pile(self, x: int, y: int) -> ItemPile | None:
        return self._piles.pop((x, y), None)

    def place_item(self, x: int, y: int, item: ItemDef, amount: int, drop_turn: int) -> bool:
        """Merge into the cell's pile, creating one when the cell has none."""
        if not self.in_bounds(x, y) or amount <= 0:
            return False
        pile = self._piles.get((x, y))
        if pile is None:
            pile = ItemPile()
            self._piles[(x, y)] = pile
        pile.add(item, amount, drop_turn)
        return True

    def iter_piles(self) -> Iterator[Tuple[GridPosition, ItemPile]]:
        for (x, y) in sorted(self._piles):
            yield GridPosition(x, y), self._piles[(x, y)]

    def expire_item_piles(self, current_turn: int, ttl_turns: int = DEFAULT_ITEM_PILE_TTL) -> int:
        """Age out old entries everywhere; returns how many piles disappeared."""
        emptied = []
        for cell, pile in self._piles.items():
            pile.remove_expired_entries(current_turn, ttl_turns)
            if pile.is_empty:
                emptied.append(cell)
        for cell in emptied:
            del self._piles[cell]
        if emptied:
            logger.debug("Expired %d item piles at turn %d", len(emptied), current_turn)
        return len(emptied)


def build_sandbox_map(width: int, height: int) -> GridMap:
    """Plain ground inside a stone border, with a fire patch and a tree near the centre."""
    grid = GridMap(width, height)
    for x in range(width):
        for y in range(height):
            if x in (0, width - 1) or y in (0, height - 1):
                grid.set_solid_type(x, y, TileType.WALL_STONE)
    if width >= 8 and height >= 8:
        cx, cy = width // 2, height // 2
        grid.add_overlay(cx + 1, cy, TileType.FIRE_TILE)
        grid.set_solid_type(cx + 3, cy, TileType.TREE_NORMAL)
    return grid
