"""Repository exports."""

from .armour_repo import ArmourRepository
from .enchantments_repo import EnchantmentsRepository
from .enemies_repo import EnemiesRepository
from .potions_repo import PotionsRepository
from .weapons_repo import WeaponsRepository

__all__ = [
    "ArmourRepository",
    "EnchantmentsRepository",
    "EnemiesRepository",
    "PotionsRepository",
    "WeaponsRepository",
]
