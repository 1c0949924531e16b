"""Factory for creating the starting player character."""
from __future__ import annotations

import logging

from combatgame.core.types import RandomSource
from combatgame.data.repositories import ArmourRepository, WeaponsRepository
from combatgame.domain.entities import PlayerCharacter
from combatgame.domain.entities.player import DEFAULT_NAME
from combatgame.domain.items import Armour, Weapon
from combatgame.services.errors import FactoryError


def create_starting_player(
    weapons_repo: WeaponsRepository,
    armour_repo: ArmourRepository,
    rng: RandomSource,
    name: str = DEFAULT_NAME,
    *,
    logger: logging.Logger | None = None,
) -> PlayerCharacter:
    """Instantiate a player holding and wearing the cheapest weapon and armour."""
    if not weapons_repo.all():
        raise FactoryError("No weapons are defined; cannot equip a starting weapon.")
    if not armour_repo.all():
        raise FactoryError("No armour is defined; cannot equip starting armour.")

    weapon = Weapon(weapons_repo.cheapest())
    armour = Armour(armour_repo.cheapest())

    player = PlayerCharacter(rng, name=name, logger=logger)
    player.inventory.add(weapon)
    player.inventory.add(armour)
    player.equip_weapon(weapon)
    player.equip_armour(armour)
    return player
