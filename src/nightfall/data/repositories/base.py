"""Base repository implementation for JSON definition data."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, TypeVar

from nightfall.data import paths
from nightfall.data.errors import DataValidationError
from nightfall.data.json_loader import load_json

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Lazy loading and caching shared by every definition repository."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    @property
    def file_path(self) -> Path:
        return paths.get_definitions_path(self._base_path) / self._filename

    def _load_raw(self) -> dict[str, object]:
        raw = load_json(self.file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {self.file_path}")
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> Dict[str, T]:
        if self._definitions is None:
            self._definitions = self._build(self._load_raw())
        return self._definitions

    def as_mapping(self) -> Dict[str, T]:
        """Return a copy of the id -> definition mapping in file order."""
        return dict(self._ensure_loaded())

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
    def _optional_str(value: object, context: str) -> str | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string if provided.")
        return value

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        # bool is an int subclass; reject it explicitly.
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @staticmethod
    def _require_bool(value: object, context: str) -> bool:
        if not isinstance(value, bool):
            raise DataValidationError(f"{context} must be a boolean.")
        return value
