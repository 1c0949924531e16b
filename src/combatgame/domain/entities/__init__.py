"""Runtime entity exports."""

from .combat_entity import CombatEntity
from .enemy import SPECIAL_ABILITIES, Enemy
from .player import PlayerCharacter

__all__ = [
    "CombatEntity",
    "Enemy",
    "PlayerCharacter",
    "SPECIAL_ABILITIES",
]
