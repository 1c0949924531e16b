"""Enemies repository."""
from __future__ import annotations

from typing import Dict

from combatgame.data.errors import DataValidationError
from combatgame.data.repositories.base import RepositoryBase
from combatgame.domain.defs import EnemyDef


class EnemiesRepository(RepositoryBase[EnemyDef]):
    """Loads and validates enemy templates.

    Ability keys are only checked for shape here; whether an ability exists
    is decided when an enemy is created from the template.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("enemies.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EnemyDef]:
        enemies: Dict[str, EnemyDef] = {}
        for raw_id, enemy_data in self._iter_payloads(raw, "enemy"):
            context = f"enemy '{raw_id}'"
            self._assert_exact_fields(
                enemy_data,
                {
                    "name",
                    "max_health",
                    "gold",
                    "min_damage",
                    "max_damage",
                    "min_defence",
                    "max_defence",
                    "special_probability",
                    "special_ability",
                },
                context,
            )
            min_damage = self._require_int(enemy_data["min_damage"], f"{context} min_damage", minimum=0)
            max_damage = self._require_int(enemy_data["max_damage"], f"{context} max_damage", minimum=0)
            self._require_range(min_damage, max_damage, f"{context} damage")
            probability = self._require_int(
                enemy_data["special_probability"], f"{context} special_probability", minimum=0
            )
            if probability > 100:
                raise DataValidationError(f"{context} special_probability must be <= 100.")

            enemies[raw_id] = EnemyDef(
                id=raw_id,
                name=self._require_str(enemy_data["name"], f"{context} name"),
                max_health=self._require_int(enemy_data["max_health"], f"{context} max_health", minimum=1),
                gold=self._require_int(enemy_data["gold"], f"{context} gold", minimum=0),
                min_damage=min_damage,
                max_damage=max_damage,
                min_defence=self._require_int(enemy_data["min_defence"], f"{context} min_defence", minimum=0),
                max_defence=self._require_int(enemy_data["max_defence"], f"{context} max_defence", minimum=0),
                special_probability=probability,
                special_ability=self._require_str(enemy_data["special_ability"], f"{context} special_ability"),
            )
        return enemies
