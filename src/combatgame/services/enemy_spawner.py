"""Stage-weighted random enemy spawning."""
from __future__ import annotations

import logging
from typing import List, Tuple

from combatgame.core.types import RandomSource
from combatgame.data.repositories import EnemiesRepository
from combatgame.domain.entities import Enemy
from combatgame.services.factories import create_enemy

# Spawn tiers in threshold order: (enemy id, base weight, weight change per stage).
SPAWN_TABLE: Tuple[Tuple[str, int, int], ...] = (
    ("slime", 50, -5),
    ("goblin", 30, -5),
    ("ogre", 20, -5),
    ("dragon", 0, 15),
)


class EnemySpawner:
    """Creates enemies, drifting towards stronger ones as the stage grows.

    At stage 0 the odds are Slime 50%, Goblin 30%, Ogre 20% and Dragon 0%.
    Each finished battle advances the stage, lowering every weaker weight by
    5 (never below 0) and raising the Dragon weight by 15.
    """

    def __init__(
        self,
        enemies_repo: EnemiesRepository,
        rng: RandomSource,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._enemies_repo = enemies_repo
        self._rng = rng
        self._logger = logger or logging.getLogger(__name__)
        self.stage = 0

    def spawn_weights(self) -> List[Tuple[str, int]]:
        """Return ``(enemy_id, weight)`` pairs for the current stage."""
        return [(enemy_id, max(0, base + step * self.stage)) for enemy_id, base, step in SPAWN_TABLE]

    def choose_enemy_id(self) -> str:
        num = self._rng.randint(0, 99)
        threshold = 0
        for enemy_id, weight in self.spawn_weights():
            threshold += weight
            if num < threshold:
                return enemy_id
        fallback = SPAWN_TABLE[0][0]
        self._logger.warning(
            "Spawn roll %d matched no tier at stage %d; spawning %s", num, self.stage, fallback
        )
        return fallback

    def create_enemy_randomly(self) -> Enemy:
        enemy_id = self.choose_enemy_id()
        enemy = create_enemy(enemy_id, self._enemies_repo, self._rng)
        self._logger.info("Spawned %s at stage %d", enemy.name, self.stage)
        return enemy

    def update_stage(self) -> None:
        self.stage += 1
        self._logger.info("Advanced to stage %d", self.stage)

    def reset_stage(self) -> None:
        self.stage = 0
