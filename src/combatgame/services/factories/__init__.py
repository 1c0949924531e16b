"""Factory helpers for runtime entities and items."""

from .enemy_factory import create_enemy
from .item_factory import create_armour, create_potion, create_weapon, enchant_weapon
from .player_factory import create_starting_player

__all__ = [
    "create_armour",
    "create_enemy",
    "create_potion",
    "create_starting_player",
    "create_weapon",
    "enchant_weapon",
]
