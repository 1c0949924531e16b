"""Weapons repository."""
from __future__ import annotations

from typing import Dict

from combatgame.data.repositories.base import RepositoryBase
from combatgame.domain.defs import WeaponDef


class WeaponsRepository(RepositoryBase[WeaponDef]):
    """Loads and validates weapon definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("weapons.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, WeaponDef]:
        weapons: Dict[str, WeaponDef] = {}
        for raw_id, weapon_data in self._iter_payloads(raw, "weapon"):
            context = f"weapon '{raw_id}'"
            self._assert_exact_fields(
                weapon_data,
                {"name", "min_effect", "max_effect", "cost", "damage_type", "weapon_type"},
                context,
            )
            min_effect = self._require_int(weapon_data["min_effect"], f"{context} min_effect", minimum=0)
            max_effect = self._require_int(weapon_data["max_effect"], f"{context} max_effect", minimum=0)
            self._require_range(min_effect, max_effect, f"{context} effect")

            weapons[raw_id] = WeaponDef(
                id=raw_id,
                name=self._require_str(weapon_data["name"], f"{context} name"),
                min_effect=min_effect,
                max_effect=max_effect,
                cost=self._require_int(weapon_data["cost"], f"{context} cost", minimum=0),
                damage_type=self._require_str(weapon_data["damage_type"], f"{context} damage_type"),
                weapon_type=self._require_str(weapon_data["weapon_type"], f"{context} weapon_type"),
            )
        return weapons

    def cheapest(self) -> WeaponDef:
        """Return the lowest-cost weapon, ties broken by id."""
        return min(self.all(), key=lambda weapon: (weapon.cost, weapon.id))
