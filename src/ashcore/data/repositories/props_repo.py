"""Props repository."""
from __future__ import annotations

from ashcore.data.errors import DataValidationError
from ashcore.data.paths import PROPS_FILE
from ashcore.data.repositories.base import RepositoryBase
from ashcore.domain.defs import PropDef

_REQUIRED = {"id", "display_name", "sprite_id", "blocks_movement", "blocks_los", "blocks_projectiles"}
_OPTIONAL = {"container"}


class PropsRepository(RepositoryBase[PropDef]):
    """Loads and validates prop definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__(PROPS_FILE, "props", base_path)

    def _build_one(self, payload: dict[str, object], context: str) -> PropDef:
        self._assert_fields(payload, _REQUIRED, _OPTIONAL, context)
        sprite_id = self._require_str(payload["sprite_id"], f"{context} sprite_id")
        if not sprite_id:
            raise DataValidationError(f"{context} sprite_id must not be empty.")
        return PropDef(
            id=str(payload["id"]),
            display_name=self._require_str(payload["display_name"], f"{context} display_name"),
            sprite_id=sprite_id,
            blocks_movement=self._require_bool(payload["blocks_movement"], f"{context} blocks_movement"),
            blocks_los=self._require_bool(payload["blocks_los"], f"{context} blocks_los"),
            blocks_projectiles=self._require_bool(payload["blocks_projectiles"], f"{context} blocks_projectiles"),
            container=self._require_bool(payload.get("container", False), f"{context} container"),
        )
