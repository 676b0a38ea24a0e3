"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class ItemDef:
    """Static description of an item kind."""

    id: str
    name: str
    description: str
    category: str
    tags: Tuple[str, ...]
    sprite_id: str
    stackable: bool
    max_stack: int

    @property
    def stack_limit(self) -> int:
        """Units that fit into one inventory stack or pile entry."""
        if not self.stackable:
            return 1
        return max(1, self.max_stack)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags
