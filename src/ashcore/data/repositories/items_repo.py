"""Items repository."""
from __future__ import annotations

from ashcore.data.errors import DataValidationError
from ashcore.data.paths import ITEMS_FILE
from ashcore.data.repositories.base import RepositoryBase
from ashcore.domain.defs import ItemDef

_REQUIRED = {"id", "name", "description", "category", "tags", "sprite_id", "stackable", "max_stack"}


class ItemsRepository(RepositoryBase[ItemDef]):
    """Loads and validates item definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__(ITEMS_FILE, "items", base_path)

    def _build_one(self, payload: dict[str, object], context: str) -> ItemDef:
        self._assert_fields(payload, _REQUIRED, set(), context)
        sprite_id = self._require_str(payload["sprite_id"], f"{context} sprite_id")
        if not sprite_id:
            raise DataValidationError(f"{context} sprite_id must not be empty.")
        return ItemDef(
            id=str(payload["id"]),
            name=self._require_str(payload["name"], f"{context} name"),
            description=self._require_str(payload["description"], f"{context} description"),
            category=self._require_str(payload["category"], f"{context} category"),
            tags=self._require_str_list(payload["tags"], f"{context} tags"),
            sprite_id=sprite_id,
            stackable=self._require_bool(payload["stackable"], f"{context} stackable"),
            max_stack=self._require_int(payload["max_stack"], f"{context} max_stack", minimum=1),
        )
