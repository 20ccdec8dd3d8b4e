"""Base repository implementation for catalog data."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, TypeVar

from qlib.data import paths

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Common caching and lookup behavior for repositories keyed by int id."""

    def __init__(self, base_path: Path | str | None = None) -> None:
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[int, T] | None = None

    def _get_file_path(self, filename: str) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / filename

    def _build(self) -> Dict[int, T]:
        """Load and return typed definitions keyed by id."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is None:
            self._definitions = self._build()

    def reload(self) -> None:
        """Drop cached definitions so the next lookup reads the sources again."""
        self._definitions = None

    def get(self, def_id: int) -> T:
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

    def as_dict(self) -> Dict[int, T]:
        """Return a copy of the id to definition mapping."""
        self._ensure_loaded()
        assert self._definitions is not None
        return dict(self._definitions)
