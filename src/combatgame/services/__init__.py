"""Service layer exports."""

from .battle_service import BattleService
from .character_service import CharacterService
from .enemy_spawner import EnemySpawner
from .errors import CharacterError, FactoryError, InvalidBattleActionError
from .shop_service import ShopService

__all__ = [
    "BattleService",
    "CharacterError",
    "CharacterService",
    "EnemySpawner",
    "FactoryError",
    "InvalidBattleActionError",
    "ShopService",
]
