"""Base repository implementation for JSON definition data."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, List, TypeVar

from ashcore.data.errors import DataValidationError
from ashcore.data.json_loader import load_json
from ashcore.data import paths

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Loads one definitions file of the shape ``{"<list_key>": [ {...}, ... ]}`` once."""

    def __init__(self, filename: str, list_key: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._list_key = list_key
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> List[dict[str, object]]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        entries = raw.get(self._list_key)
        if not isinstance(entries, list):
            raise DataValidationError(f"{file_path} must contain a '{self._list_key}' list.")
        return [self._require_mapping(entry, f"{self._filename} {self._list_key}[{index}]") for index, entry in enumerate(entries)]

    def _build_one(self, payload: dict[str, object], context: str) -> T:
        """Convert one raw entry into a typed definition."""
        raise NotImplementedError

    def _build(self, entries: List[dict[str, object]]) -> Dict[str, T]:
        definitions: Dict[str, T] = {}
        for index, payload in enumerate(entries):
            raw_id = payload.get("id")
            if not isinstance(raw_id, str) or not raw_id:
                raise DataValidationError(f"{self._filename} {self._list_key}[{index}] needs a non-empty string id.")
            if raw_id in definitions:
                raise DataValidationError(f"{self._filename} defines '{raw_id}' more than once.")
            definitions[raw_id] = self._build_one(payload, f"{self._list_key} '{raw_id}'")
        return definitions

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            self._definitions = self._build(self._load_raw())

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        try:
            return self._definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [self._definitions[key] for key in sorted(self._definitions.keys())]

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str, minimum: int | None = None) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        if minimum is not None and value < minimum:
            raise DataValidationError(f"{context} must be >= {minimum}.")
        return value

    @staticmethod
    def _require_bool(value: object, context: str) -> bool:
        if not isinstance(value, bool):
            raise DataValidationError(f"{context} must be a boolean.")
        return value

    @staticmethod
    def _require_str_list(value: object, context: str) -> tuple[str, ...]:
        if not isinstance(value, list) or not all(isinstance(entry, str) for entry in value):
            raise DataValidationError(f"{context} must be a list of strings.")
        return tuple(value)

    @staticmethod
    def _assert_fields(
        payload: dict[str, object],
        required: set[str],
        optional: set[str],
        context: str,
    ) -> None:
        actual_keys = set(payload.keys())
        missing = required - actual_keys
        unknown = actual_keys - required - optional
        if missing or unknown:
            pieces = []
            if missing:
                pieces.append(f"missing fields: {sorted(missing)}")
            if unknown:
                pieces.append(f"unknown fields: {sorted(unknown)}")
            raise DataValidationError(f"{context} has schema issues ({'; '.join(pieces)}).")
