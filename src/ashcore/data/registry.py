"""Immutable content tables handed to the simulation at start-up."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from string import Formatter
from types import MappingProxyType
from typing import Iterable, Mapping

from ashcore.data.errors import DataReferenceError, DataValidationError
from ashcore.data.repositories import (
    ActorsRepository,
    ItemsRepository,
    MessagesRepository,
    PropsRepository,
)
from ashcore.domain.defs import (
    CHEST_PROP_ID,
    ActorDef,
    CoreItems,
    ItemDef,
    MessageTemplateDef,
    PropDef,
)
from ashcore.domain.defs.core_items import BOW_ID, DIRT_CLOD_ID, OIL_BOTTLE_ID, SHORT_SWORD_ID, WOODEN_ARROW_ID
from ashcore.domain.messages import MessageId, message_arity

logger = logging.getLogger(__name__)


class ContentRegistry:
    """Read-only lookup tables for items, actors, props and message templates."""

    def __init__(
        self,
        items: Iterable[ItemDef],
        actors: Iterable[ActorDef],
        props: Iterable[PropDef],
        messages: Iterable[MessageTemplateDef],
    ) -> None:
        self._items = self._index("items", items)
        self._actors = self._index("actors", actors)
        self._props = self._index("props", props)
        self._messages = self._index("messages", messages)
        self.core_items = CoreItems(
            short_sword=self.item(SHORT_SWORD_ID),
            bow=self.item(BOW_ID),
            wooden_arrow=self.item(WOODEN_ARROW_ID),
            oil_bottle=self.item(OIL_BOTTLE_ID),
            dirt_clod=self.item(DIRT_CLOD_ID),
        )
        self._validate()

    @staticmethod
    def _index(table: str, definitions: Iterable) -> Mapping[str, object]:
        indexed = {definition.id: definition for definition in definitions}
        if not indexed:
            raise DataValidationError(f"Content table '{table}' is empty.")
        return MappingProxyType(indexed)

    def _validate(self) -> None:
        chest = self.prop(CHEST_PROP_ID)
        if not chest.container:
            raise DataValidationError(f"Prop '{CHEST_PROP_ID}' must be a container.")
        for actor in self._actors.values():
            for grant in actor.initial_inventory:
                if grant.item_id not in self._items:
                    raise DataReferenceError(
                        f"Actor '{actor.id}' starts with unknown item '{grant.item_id}'."
                    )
        missing = sorted(message_id.value for message_id in MessageId if message_id.value not in self._messages)
        if missing:
            raise DataReferenceError(f"Message catalog is missing templates: {missing}")
        for message_id in MessageId:
            _check_placeholders(self._messages[message_id.value], message_arity(message_id))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def item(self, item_id: str) -> ItemDef:
        return self._lookup(self._items, "item", item_id)

    def actor(self, actor_id: str) -> ActorDef:
        return self._lookup(self._actors, "actor", actor_id)

    def prop(self, prop_id: str) -> PropDef:
        return self._lookup(self._props, "prop", prop_id)

    def message_template(self, message_id: MessageId | str) -> MessageTemplateDef:
        key = message_id.value if isinstance(message_id, MessageId) else message_id
        return self._lookup(self._messages, "message", key)

    def items(self) -> list[ItemDef]:
        return [self._items[key] for key in sorted(self._items)]

    def actors(self) -> list[ActorDef]:
        return [self._actors[key] for key in sorted(self._actors)]

    def props(self) -> list[PropDef]:
        return [self._props[key] for key in sorted(self._props)]

    @staticmethod
    def _lookup(table: Mapping[str, object], kind: str, def_id: str):
        try:
            return table[def_id]
        except KeyError as exc:
            raise DataReferenceError(f"Unknown {kind} id '{def_id}'.") from exc


def load_registry(base_path: Path | str | None = None) -> ContentRegistry:
    """Load every definitions file and build the registry, failing on any gap."""
    registry = ContentRegistry(
        items=ItemsRepository(base_path=base_path).all(),
        actors=ActorsRepository(base_path=base_path).all(),
        props=PropsRepository(base_path=base_path).all(),
        messages=MessagesRepository(base_path=base_path).all(),
    )
    logger.info(
        "Loaded content registry: %d items, %d actors, %d props",
        len(registry.items()),
        len(registry.actors()),
        len(registry.props()),
    )
    return registry


def _check_placeholders(template: MessageTemplateDef, arity: int) -> None:
    """Reject templates that would fail when formatted with ``arity`` positional arguments."""
    next_auto = 0
    try:
        fields = [field for _, field, _, _ in Formatter().parse(template.text) if field is not None]
    except ValueError as exc:
        raise DataValidationError(f"Message '{template.id}' has a malformed template: {exc}") from exc
    for field in fields:
        head = re.split(r"[.\[]", field, maxsplit=1)[0]
        if head == "":
            index = next_auto
            next_auto += 1
        elif head.isdigit():
            index = int(head)
        else:
            raise DataValidationError(f"Message '{template.id}' uses named placeholder '{{{field}}}'.")
        if index >= arity:
            raise DataValidationError(
                f"Message '{template.id}' references argument {index} but is formatted with {arity}."
            )
