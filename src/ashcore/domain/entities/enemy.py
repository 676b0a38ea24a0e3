"""Hostile actors and their lazily rolled drops."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ashcore.core.rng import RngStream, derive_drop_seed
from ashcore.core.types import GridPosition
from ashcore.domain.defs import CoreItems
from ashcore.domain.item_pile import PileEntry
from ashcore.domain.loot import roll_enemy_drop

from .entity import Entity

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EnemyEntity(Entity):
    """Enemy whose drop is derived from its spawn cell and id, never from a shared stream."""

    enemy_id: str = "enemy_basic"
    ai_profile_id: str = ""
    spawn: GridPosition = field(init=False)
    drop_seed: int | None = field(default=None, init=False)
    rolled_drop: List[PileEntry] | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.spawn = GridPosition(self.x, self.y)

    @property
    def has_rolled_drop(self) -> bool:
        return self.rolled_drop is not None

    def try_roll_drop_if_needed(self, run_seed: int, drop_turn: int, items: CoreItems) -> bool:
        """Roll the drop once after death; later calls are no-ops returning False."""
        if not self.is_dead or self.rolled_drop is not None:
            return False
        if self.drop_seed is None:
            self.drop_seed = derive_drop_seed(run_seed, self.spawn.x, self.spawn.y, self.enemy_id)
        self.rolled_drop = roll_enemy_drop(RngStream(self.drop_seed), items, drop_turn)
        logger.debug("Rolled drop for %s spawned at %s", self.enemy_id, self.spawn)
        return True
