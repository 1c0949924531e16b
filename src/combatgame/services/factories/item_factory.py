"""Factory helpers for runtime items."""
from __future__ import annotations

from combatgame.data.repositories import (
    ArmourRepository,
    EnchantmentsRepository,
    PotionsRepository,
    WeaponsRepository,
)
from combatgame.domain.errors import InvalidItemError
from combatgame.domain.items import Armour, Potion, Weapon
from combatgame.services.errors import FactoryError


def create_weapon(item_id: str, weapons_repo: WeaponsRepository) -> Weapon:
    try:
        return Weapon(weapons_repo.get(item_id))
    except KeyError as exc:
        raise FactoryError(f"Weapon '{item_id}' not found.") from exc
    except InvalidItemError as exc:
        raise FactoryError(str(exc)) from exc


def create_armour(item_id: str, armour_repo: ArmourRepository) -> Armour:
    try:
        return Armour(armour_repo.get(item_id))
    except KeyError as exc:
        raise FactoryError(f"Armour '{item_id}' not found.") from exc
    except InvalidItemError as exc:
        raise FactoryError(str(exc)) from exc


def create_potion(item_id: str, potions_repo: PotionsRepository) -> Potion:
    try:
        return Potion(potions_repo.get(item_id))
    except KeyError as exc:
        raise FactoryError(f"Potion '{item_id}' not found.") from exc
    except InvalidItemError as exc:
        raise FactoryError(str(exc)) from exc


def enchant_weapon(
    weapon: Weapon,
    enchantment_id: str,
    enchantments_repo: EnchantmentsRepository,
) -> Weapon:
    """Return ``weapon`` wrapped in one more enchantment layer."""
    try:
        enchantment = enchantments_repo.get(enchantment_id)
    except KeyError as exc:
        raise FactoryError(f"Enchantment '{enchantment_id}' not found.") from exc
    try:
        return weapon.enchant(enchantment)
    except InvalidItemError as exc:
        raise FactoryError(str(exc)) from exc
