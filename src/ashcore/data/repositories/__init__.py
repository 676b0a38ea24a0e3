"""Repository exports."""

from .actors_repo import ActorsRepository
from .items_repo import ItemsRepository
from .messages_repo import MessagesRepository
from .props_repo import PropsRepository

__all__ = [
    "ActorsRepository",
    "ItemsRepository",
    "MessagesRepository",
    "PropsRepository",
]
