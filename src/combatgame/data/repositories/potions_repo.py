"""Potions repository."""
from __future__ import annotations

from typing import Dict

from combatgame.data.errors import DataValidationError
from combatgame.data.repositories.base import RepositoryBase
from combatgame.domain.defs import PotionDef

_POTION_TYPES = ("healing", "damage")


class PotionsRepository(RepositoryBase[PotionDef]):
    """Loads and validates potion definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("potions.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, PotionDef]:
        potions: Dict[str, PotionDef] = {}
        for raw_id, potion_data in self._iter_payloads(raw, "potion"):
            context = f"potion '{raw_id}'"
            self._assert_exact_fields(
                potion_data,
                {"name", "min_effect", "max_effect", "cost", "potion_type"},
                context,
            )
            potion_type = self._require_str(potion_data["potion_type"], f"{context} potion_type")
            if potion_type not in _POTION_TYPES:
                raise DataValidationError(f"{context} potion_type must be one of {list(_POTION_TYPES)}.")
            min_effect = self._require_int(potion_data["min_effect"], f"{context} min_effect", minimum=0)
            max_effect = self._require_int(potion_data["max_effect"], f"{context} max_effect", minimum=0)
            self._require_range(min_effect, max_effect, f"{context} effect")

            potions[raw_id] = PotionDef(
                id=raw_id,
                name=self._require_str(potion_data["name"], f"{context} name"),
                min_effect=min_effect,
                max_effect=max_effect,
                cost=self._require_int(potion_data["cost"], f"{context} cost", minimum=0),
                potion_type=potion_type,  # type: ignore[arg-type]
            )
        return potions
