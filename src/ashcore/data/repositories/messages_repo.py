"""Message template repository."""
from __future__ import annotations

from ashcore.data.paths import MESSAGES_FILE
from ashcore.data.repositories.base import RepositoryBase
from ashcore.domain.defs import MessageTemplateDef


class MessagesRepository(RepositoryBase[MessageTemplateDef]):
    """Loads user-facing message templates keyed by message id."""

    def __init__(self, base_path=None) -> None:
        super().__init__(MESSAGES_FILE, "entries", base_path)

    def _build_one(self, payload: dict[str, object], context: str) -> MessageTemplateDef:
        self._assert_fields(payload, {"id", "text"}, {"category", "notes"}, context)
        return MessageTemplateDef(
            id=str(payload["id"]),
            text=self._require_str(payload["text"], f"{context} text"),
            category=self._require_str(payload.get("category", ""), f"{context} category"),
            notes=self._require_str(payload.get("notes", ""), f"{context} notes"),
        )
