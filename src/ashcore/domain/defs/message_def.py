"""Message template definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MessageTemplateDef:
    """A user-facing text template with positional ``str.format`` fields."""

    id: str
    text: str
    category: str = ""
    notes: str = ""
