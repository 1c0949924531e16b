"""Factory for creating enemy instances from templates."""
from __future__ import annotations

import logging

from combatgame.core.types import RandomSource
from combatgame.data.repositories import EnemiesRepository
from combatgame.domain.entities import SPECIAL_ABILITIES, Enemy
from combatgame.services.errors import FactoryError


def create_enemy(
    enemy_id: str,
    enemies_repo: EnemiesRepository,
    rng: RandomSource,
    *,
    logger: logging.Logger | None = None,
) -> Enemy:
    """Instantiate a fresh enemy using the provided repository."""
    try:
        enemy_def = enemies_repo.get(enemy_id)
    except KeyError as exc:
        raise FactoryError(f"Enemy '{enemy_id}' not found.") from exc

    if enemy_def.special_ability not in SPECIAL_ABILITIES:
        raise FactoryError(
            f"Enemy '{enemy_id}' has unknown special ability '{enemy_def.special_ability}'."
        )
    return Enemy(enemy_def, rng, logger=logger)
