"""Base repository implementation for JSON definition data."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Generic, Iterator, Tuple, TypeVar

from combatgame.data import paths
from combatgame.data.errors import DataValidationError
from combatgame.data.json_loader import load_json

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Lazy, cached access to one definition file.

    Each file is a JSON object keyed by definition id. Subclasses turn the
    raw payloads into frozen definition dataclasses in ``_build`` and use the
    ``_require_*`` helpers so every schema problem surfaces as a
    ``DataValidationError`` naming the offending entry.
    """

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    @property
    def file_path(self) -> Path:
        return paths.get_definitions_path(self._base_path) / self._filename

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _loaded(self) -> Dict[str, T]:
        if self._definitions is None:
            raw = load_json(self.file_path)
            if not isinstance(raw, dict):
                raise DataValidationError(f"Expected top-level object in {self.file_path}")
            self._definitions = self._build(raw)
        return self._definitions

    def get(self, def_id: str) -> T:
        """Return a definition by id; unknown ids raise ``KeyError``."""
        definitions = self._loaded()
        if def_id not in definitions:
            raise KeyError(def_id)
        return definitions[def_id]

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        definitions = self._loaded()
        return [definitions[key] for key in sorted(definitions)]

    def _iter_payloads(self, raw: dict[str, object], label: str) -> Iterator[Tuple[str, dict[str, object]]]:
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str) or not raw_id:
                raise DataValidationError(f"{label.capitalize()} IDs must be non-empty strings.")
            if not isinstance(payload, dict):
                raise DataValidationError(f"{label} '{raw_id}' must be an object/dict.")
            yield raw_id, payload

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise DataValidationError(f"{context} must be a non-empty string.")
        return value

    @staticmethod
    def _require_int(value: object, context: str, *, minimum: int | None = None) -> int:
        # bool is an int subclass; reject it explicitly.
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        if minimum is not None and value < minimum:
            raise DataValidationError(f"{context} must be >= {minimum}.")
        return value

    @staticmethod
    def _require_number(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        return float(value)

    @staticmethod
    def _require_range(low: int, high: int, context: str) -> None:
        if low > high:
            raise DataValidationError(f"{context} minimum cannot exceed maximum ({low} > {high}).")

    @staticmethod
    def _assert_exact_fields(payload: dict[str, object], expected: set[str], context: str) -> None:
        missing = sorted(expected - payload.keys())
        unknown = sorted(payload.keys() - expected)
        problems = []
        if missing:
            problems.append(f"missing fields: {missing}")
        if unknown:
            problems.append(f"unknown fields: {unknown}")
        if problems:
            raise DataValidationError(f"{context} has schema issues ({'; '.join(problems)}).")
