"""Shared health, gold and attack/defend behaviour for every combatant."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

from combatgame.core.types import RandomSource
from combatgame.domain.errors import InvalidEntityConfigurationError
from combatgame.domain.events import (
    AttackEvent,
    BattleEndEvent,
    CombatEvent,
    DamageEvent,
    DefendEvent,
    EventChannel,
    HealEvent,
)

_module_logger = logging.getLogger(__name__)


class CombatEntity(ABC):
    """Anything that can attack, defend, take damage and heal.

    Subclasses provide ``calculate_attack`` and ``calculate_defence``; the
    bookkeeping around them (clamping, events, defeat detection) lives here.
    Health always stays within ``[0, max_health]`` and gold never goes
    negative.
    """

    def __init__(
        self,
        name: str,
        max_health: int,
        gold: float,
        rng: RandomSource,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        if max_health <= 0:
            raise InvalidEntityConfigurationError(f"{name}: max health must be positive, got {max_health}.")
        if gold < 0:
            raise InvalidEntityConfigurationError(f"{name}: gold cannot be negative, got {gold}.")
        self.name = name
        self._max_health = max_health
        self._health = max_health
        self._gold = gold
        self.rng = rng
        self.observers = EventChannel()
        self._logger = logger or _module_logger

    # -----------------------
    # Template hooks
    # -----------------------
    @abstractmethod
    def calculate_attack(self) -> int:
        """Return the raw damage of one attack."""

    @abstractmethod
    def calculate_defence(self, incoming_damage: int) -> int:
        """Return how much of ``incoming_damage`` this entity tries to block."""

    # -----------------------
    # Stats
    # -----------------------
    @property
    def health(self) -> int:
        return self._health

    @property
    def max_health(self) -> int:
        return self._max_health

    @max_health.setter
    def max_health(self, value: int) -> None:
        if value <= 0:
            raise InvalidEntityConfigurationError(f"{self.name}: max health must be positive, got {value}.")
        self._max_health = value
        if self._health > value:
            self._health = value

    @property
    def gold(self) -> float:
        return self._gold

    @gold.setter
    def gold(self, value: float) -> None:
        if value < 0:
            raise InvalidEntityConfigurationError(f"{self.name}: gold cannot be negative, got {value}.")
        self._gold = value

    @property
    def is_alive(self) -> bool:
        return self._health > 0

    # -----------------------
    # Combat
    # -----------------------
    def attack(self) -> int:
        """Roll an attack and announce it; the target applies it by defending."""
        damage = self.calculate_attack()
        self._logger.debug("%s attacks for %d", self.name, damage)
        self.notify(AttackEvent(actor=self, damage=damage))
        return damage

    def defend(self, incoming_damage: int) -> None:
        """Block what the armour allows and lose the rest of ``incoming_damage``."""
        incoming = max(incoming_damage, 0)
        blocked = max(0, min(self.calculate_defence(incoming), incoming))
        final_damage = max(incoming - blocked, 0)
        self._logger.debug("%s blocks %d of %d", self.name, blocked, incoming)
        self.notify(DefendEvent(actor=self, blocked=blocked))
        self.notify(DamageEvent(actor=self, amount=final_damage))
        self._change_health(self._health - final_damage, report_damage=False)

    def set_health(self, value: int) -> None:
        """Set health, clamped to ``[0, max_health]``.

        Gains are reported as heal events, losses as damage events. Dropping
        to zero reports the defeat once; further calls at zero stay silent.
        """
        self._change_health(value, report_damage=True)

    def _change_health(self, value: int, *, report_damage: bool) -> None:
        previous = self._health
        new_health = 0 if value <= 0 else min(self._max_health, value)
        if new_health > previous:
            self.notify(HealEvent(actor=self, amount=new_health - previous))
        elif new_health < previous and report_damage:
            self.notify(DamageEvent(actor=self, amount=previous - new_health))
        self._health = new_health
        if previous > 0 and new_health == 0:
            self._logger.info("%s has been defeated", self.name)
            self._on_defeated()

    def _on_defeated(self) -> None:
        self.notify(BattleEndEvent(defeated=self))

    # -----------------------
    # Observers
    # -----------------------
    def notify(self, event: CombatEvent) -> None:
        self.observers.publish(event)

    def add_observer(self, event_type: type, callback: Callable) -> None:
        self.observers.subscribe(event_type, callback)

    def remove_observer(self, event_type: type, callback: Callable) -> None:
        self.observers.unsubscribe(event_type, callback)

    def add_attack_observer(self, callback: Callable[[AttackEvent], None]) -> None:
        self.add_observer(AttackEvent, callback)

    def remove_attack_observer(self, callback: Callable[[AttackEvent], None]) -> None:
        self.remove_observer(AttackEvent, callback)

    def add_defend_observer(self, callback: Callable[[DefendEvent], None]) -> None:
        self.add_observer(DefendEvent, callback)

    def remove_defend_observer(self, callback: Callable[[DefendEvent], None]) -> None:
        self.remove_observer(DefendEvent, callback)

    def add_damage_observer(self, callback: Callable[[DamageEvent], None]) -> None:
        self.add_observer(DamageEvent, callback)

    def remove_damage_observer(self, callback: Callable[[DamageEvent], None]) -> None:
        self.remove_observer(DamageEvent, callback)

    def add_heal_observer(self, callback: Callable[[HealEvent], None]) -> None:
        self.add_observer(HealEvent, callback)

    def remove_heal_observer(self, callback: Callable[[HealEvent], None]) -> None:
        self.remove_observer(HealEvent, callback)

    def add_battle_end_observer(self, callback: Callable[[BattleEndEvent], None]) -> None:
        self.add_observer(BattleEndEvent, callback)

    def remove_battle_end_observer(self, callback: Callable[[BattleEndEvent], None]) -> None:
        self.remove_observer(BattleEndEvent, callback)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, health={self._health}/{self._max_health})"
