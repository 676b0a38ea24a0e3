"""Helpers for resolving content file locations."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "ASHCORE_DEFINITIONS"

ITEMS_FILE = "items.json"
ACTORS_FILE = "actors.json"
PROPS_FILE = "props.json"
MESSAGES_FILE = "messages.json"


def get_repo_root() -> Path:
    """Return the directory holding ``src/`` and ``data/``."""
    return Path(__file__).resolve().parents[3]


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Resolve the content directory: explicit path, then environment override, then the bundled tables."""
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return get_repo_root() / "data" / "definitions"
