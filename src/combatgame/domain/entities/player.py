"""The player-controlled character."""
from __future__ import annotations

import logging
from typing import Callable

from combatgame.core.types import RandomSource
from combatgame.domain.entities.combat_entity import CombatEntity
from combatgame.domain.events import GameOverEvent, PotionUseEvent
from combatgame.domain.inventory import Inventory
from combatgame.domain.items import Armour, Potion, Weapon

DEFAULT_NAME = "Player"
DEFAULT_MAX_HEALTH = 30
DEFAULT_GOLD = 100


class PlayerCharacter(CombatEntity):
    """Character whose damage and block come from equipped items.

    The player outlives individual battles; its defeat ends the whole game,
    which is announced with a ``GameOverEvent`` on top of the battle-end event.
    """

    def __init__(
        self,
        rng: RandomSource,
        *,
        name: str = DEFAULT_NAME,
        max_health: int = DEFAULT_MAX_HEALTH,
        gold: float = DEFAULT_GOLD,
        inventory: Inventory | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(name, max_health, gold, rng, logger=logger)
        self.inventory = inventory if inventory is not None else Inventory()

    @property
    def equipped_weapon(self) -> Weapon | None:
        return self.inventory.equipped_weapon

    @property
    def equipped_armour(self) -> Armour | None:
        return self.inventory.equipped_armour

    def equip_weapon(self, weapon: Weapon) -> None:
        self.inventory.equip_weapon(weapon)

    def equip_armour(self, armour: Armour) -> None:
        self.inventory.equip_armour(armour)

    def calculate_attack(self) -> int:
        weapon = self.inventory.equipped_weapon
        if weapon is None:
            return 0
        return weapon.strike(self.rng)

    def calculate_defence(self, incoming_damage: int) -> int:
        armour = self.inventory.equipped_armour
        if armour is None:
            return 0
        return armour.block(self.rng)

    def use_potion(self, potion: Potion | str) -> int:
        """Drink one matching potion from the inventory.

        Returns the damage the potion deals to the opponent; healing potions
        return 0. A potion the player does not carry has no effect.
        """
        name = potion if isinstance(potion, str) else potion.name
        consumed = self.inventory.remove_one_matching(name)
        if consumed is None:
            self._logger.warning("%s tried to use missing potion %r", self.name, name)
            return 0

        self.notify(PotionUseEvent(actor=self, potion_name=consumed.name))
        effect = consumed.roll_effect(self.rng)
        if consumed.is_healing:
            self.set_health(self.health + effect)
            return 0
        return effect

    def _on_defeated(self) -> None:
        super()._on_defeated()
        self.notify(GameOverEvent(actor=self))

    def add_potion_use_observer(self, callback: Callable[[PotionUseEvent], None]) -> None:
        self.add_observer(PotionUseEvent, callback)

    def remove_potion_use_observer(self, callback: Callable[[PotionUseEvent], None]) -> None:
        self.remove_observer(PotionUseEvent, callback)

    def add_game_over_observer(self, callback: Callable[[GameOverEvent], None]) -> None:
        self.add_observer(GameOverEvent, callback)

    def remove_game_over_observer(self, callback: Callable[[GameOverEvent], None]) -> None:
        self.remove_observer(GameOverEvent, callback)
