"""Actors repository."""
from __future__ import annotations

from typing import Tuple

from ashcore.data.errors import DataValidationError
from ashcore.data.paths import ACTORS_FILE
from ashcore.data.repositories.base import RepositoryBase
from ashcore.domain.defs import ActorDef, InventoryGrantDef

_REQUIRED = {
    "id",
    "display_name",
    "sprite_id",
    "kind",
    "faction_id",
    "tags",
    "base_stats",
    "ai_profile_id",
    "initial_inventory",
}
_STAT_FIELDS = {"hp", "attack", "defense", "speed"}
_KINDS = ("player", "enemy")


class ActorsRepository(RepositoryBase[ActorDef]):
    """Loads and validates player and enemy templates."""

    def __init__(self, base_path=None) -> None:
        super().__init__(ACTORS_FILE, "actors", base_path)

    def _build_one(self, payload: dict[str, object], context: str) -> ActorDef:
        self._assert_fields(payload, _REQUIRED, {"notes"}, context)
        kind = self._require_str(payload["kind"], f"{context} kind")
        if kind not in _KINDS:
            raise DataValidationError(f"{context} kind must be one of {list(_KINDS)}.")

        stats = self._require_mapping(payload["base_stats"], f"{context} base_stats")
        self._assert_fields(stats, _STAT_FIELDS, set(), f"{context} base_stats")

        return ActorDef(
            id=str(payload["id"]),
            display_name=self._require_str(payload["display_name"], f"{context} display_name"),
            sprite_id=self._require_str(payload["sprite_id"], f"{context} sprite_id"),
            kind=kind,  # type: ignore[arg-type]
            faction_id=self._require_str(payload["faction_id"], f"{context} faction_id"),
            tags=self._require_str_list(payload["tags"], f"{context} tags"),
            hp=self._require_int(stats["hp"], f"{context} base_stats.hp", minimum=1),
            attack=self._require_int(stats["attack"], f"{context} base_stats.attack", minimum=0),
            defense=self._require_int(stats["defense"], f"{context} base_stats.defense", minimum=0),
            speed=self._require_int(stats["speed"], f"{context} base_stats.speed", minimum=0),
            ai_profile_id=self._require_str(payload["ai_profile_id"], f"{context} ai_profile_id"),
            initial_inventory=self._parse_inventory(payload["initial_inventory"], context),
            notes=self._require_str(payload.get("notes", ""), f"{context} notes"),
        )

    def _parse_inventory(self, raw_entries: object, context: str) -> Tuple[InventoryGrantDef, ...]:
        if not isinstance(raw_entries, list):
            raise DataValidationError(f"{context} initial_inventory must be a list.")
        grants = []
        for index, entry in enumerate(raw_entries):
            entry_context = f"{context} initial_inventory[{index}]"
            entry_data = self._require_mapping(entry, entry_context)
            self._assert_fields(entry_data, {"item_id", "count"}, set(), entry_context)
            grants.append(
                InventoryGrantDef(
                    item_id=self._require_str(entry_data["item_id"], f"{entry_context} item_id"),
                    count=self._require_int(entry_data["count"], f"{entry_context} count", minimum=1),
                )
            )
        return tuple(grants)
