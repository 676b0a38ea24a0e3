"""Player-facing message log fed by the message-template catalog."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple

from ashcore.data.registry import ContentRegistry
from ashcore.domain.messages import MessageId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoggedMessage:
    text: str
    message_id: MessageId | None = None
    args: Tuple[object, ...] = ()


MessageListener = Callable[[LoggedMessage], None]


class MessageCatalog:
    """Formats templates looked up by message id; unknown ids raise."""

    def __init__(self, registry: ContentRegistry) -> None:
        self._registry = registry

    def format(self, message_id: MessageId, *args: object) -> str:
        template = self._registry.message_template(message_id)
        return template.text.format(*args)


class MessageLog:
    """Ordered record of everything the simulation told the player."""

    def __init__(self, catalog: MessageCatalog) -> None:
        self._catalog = catalog
        self._entries: List[LoggedMessage] = []
        self._listeners: List[MessageListener] = []

    @property
    def entries(self) -> List[LoggedMessage]:
        return list(self._entries)

    @property
    def messages(self) -> List[str]:
        return [entry.text for entry in self._entries]

    @property
    def logged_ids(self) -> List[MessageId]:
        return [entry.message_id for entry in self._entries if entry.message_id is not None]

    def subscribe(self, listener: MessageListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: MessageListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def log(self, text: str) -> LoggedMessage:
        return self._append(LoggedMessage(text=text))

    def log_by_id(self, message_id: MessageId, *args: object) -> LoggedMessage:
        text = self._catalog.format(message_id, *args)
        return self._append(LoggedMessage(text=text, message_id=message_id, args=tuple(args)))

    def clear(self) -> None:
        self._entries.clear()

    def _append(self, entry: LoggedMessage) -> LoggedMessage:
        self._entries.append(entry)
        logger.debug("message: %s", entry.text)
        for listener in list(self._listeners):
            listener(entry)
        return entry
