"""World state owned by one simulation session."""
from __future__ import annotations

from dataclasses import dataclass, field

from ashcore.core.rng import WorldRng
from ashcore.domain.entity_registry import EntityRegistry
from ashcore.domain.grid import GridMap


@dataclass
class WorldState:
    """Map, entities and random streams of a run."""

    seed: int
    rng: WorldRng
    grid: GridMap
    entities: EntityRegistry = field(default_factory=EntityRegistry)

    @classmethod
    def create(cls, seed: int, grid: GridMap) -> "WorldState":
        return cls(seed=seed, rng=WorldRng(seed), grid=grid)

    @property
    def run_seed(self) -> int:
        return self.rng.run_seed
