"""Armour repository."""
from __future__ import annotations

from typing import Dict

from combatgame.data.repositories.base import RepositoryBase
from combatgame.domain.defs import ArmourDef


class ArmourRepository(RepositoryBase[ArmourDef]):
    """Loads and validates armour definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("armour.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ArmourDef]:
        armour: Dict[str, ArmourDef] = {}
        for raw_id, armour_data in self._iter_payloads(raw, "armour"):
            context = f"armour '{raw_id}'"
            self._assert_exact_fields(
                armour_data,
                {"name", "min_effect", "max_effect", "cost", "material"},
                context,
            )
            min_effect = self._require_int(armour_data["min_effect"], f"{context} min_effect", minimum=0)
            max_effect = self._require_int(armour_data["max_effect"], f"{context} max_effect", minimum=0)
            self._require_range(min_effect, max_effect, f"{context} effect")

            armour[raw_id] = ArmourDef(
                id=raw_id,
                name=self._require_str(armour_data["name"], f"{context} name"),
                min_effect=min_effect,
                max_effect=max_effect,
                cost=self._require_int(armour_data["cost"], f"{context} cost", minimum=0),
                material=self._require_str(armour_data["material"], f"{context} material"),
            )
        return armour

    def cheapest(self) -> ArmourDef:
        """Return the lowest-cost armour, ties broken by id."""
        return min(self.all(), key=lambda armour: (armour.cost, armour.id))
