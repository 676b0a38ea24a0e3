"""Factory for placing props."""
from __future__ import annotations

from ashcore.data.errors import DataReferenceError
from ashcore.data.registry import ContentRegistry
from ashcore.domain.props import PropInstance
from ashcore.services.errors import FactoryError


def create_prop(prop_id: str, registry: ContentRegistry) -> PropInstance:
    try:
        definition = registry.prop(prop_id)
    except DataReferenceError as exc:
        raise FactoryError(f"Prop '{prop_id}' not found.") from exc
    return PropInstance(definition=definition)
