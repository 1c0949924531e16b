"""Domain definition exports."""

from .armour_def import ArmourDef
from .enchantment_def import EnchantmentDef
from .enemy_def import EnemyDef
from .potion_def import PotionDef
from .weapon_def import WeaponDef

__all__ = [
    "ArmourDef",
    "EnchantmentDef",
    "EnemyDef",
    "PotionDef",
    "WeaponDef",
]
