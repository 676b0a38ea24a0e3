"""Simulation configuration persisted as a flat JSON object."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from ashcore.data.errors import DataValidationError
from ashcore.data.json_loader import load_json


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Tunable simulation parameters."""

    map_width: int = 32
    map_height: int = 32
    inventory_max_stacks: int = 20
    item_pile_ttl_turns: int = 3600
    burn_duration_turns: int = 3
    burning_damage_per_tick: int = 1
    min_projectile_range: int = 32
    throw_range: int = 5
    enemy_chase_range: int = 5
    player_actor_id: str = "actor_player"

    def __post_init__(self) -> None:
        for name in ("map_width", "map_height", "inventory_max_stacks"):
            if getattr(self, name) <= 0:
                raise DataValidationError(f"config '{name}' must be positive.")
        for name in ("item_pile_ttl_turns", "burn_duration_turns", "burning_damage_per_tick", "throw_range"):
            if getattr(self, name) < 0:
                raise DataValidationError(f"config '{name}' must not be negative.")


def load_config(path: Path | str | None = None) -> SimulationConfig:
    """Load config from disk or return defaults when no file exists."""
    if path is None:
        return SimulationConfig()
    config_path = Path(path)
    if not config_path.exists():
        return SimulationConfig()
    raw = load_json(config_path)
    if not isinstance(raw, dict):
        raise DataValidationError(f"Expected top-level object in {config_path}")

    expected = {item.name: item for item in fields(SimulationConfig)}
    unknown = set(raw) - set(expected)
    if unknown:
        raise DataValidationError(f"config has unknown fields: {sorted(unknown)}")
    values: dict[str, object] = {}
    for key, value in raw.items():
        default = expected[key].default
        # bool is an int subclass; reject it for numeric settings.
        if isinstance(value, bool) or not isinstance(value, type(default)):
            raise DataValidationError(f"config '{key}' must be of type {type(default).__name__}.")
        values[key] = value
    return SimulationConfig(**values)


def save_config(config: SimulationConfig, path: Path | str) -> None:
    """Persist config to disk."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(asdict(config), indent=2, sort_keys=True), encoding="utf-8")
