"""Domain models for items, entities and battles."""

from .battle_models import BattleSession
from .entities import CombatEntity, Enemy, PlayerCharacter
from .inventory import Inventory
from .items import Armour, Item, Potion, Weapon

__all__ = [
    "Armour",
    "BattleSession",
    "CombatEntity",
    "Enemy",
    "Inventory",
    "Item",
    "PlayerCharacter",
    "Potion",
    "Weapon",
]
