"""Enemy combatants and their special abilities."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Dict, Iterator

from combatgame.core.types import RandomSource
from combatgame.domain.defs import EnemyDef
from combatgame.domain.entities.combat_entity import CombatEntity
from combatgame.domain.errors import InvalidEntityConfigurationError
from combatgame.domain.events import SpecialAbilityEvent

SpecialAbility = Callable[["Enemy", int], int]

GOBLIN_BONUS_DAMAGE = 3
DRAGON_FURY_SIDES = 34
DRAGON_DOUBLE_DAMAGE_MAX_ROLL = 25
DRAGON_HEAL = 10


def _nullify(enemy: Enemy, damage: int) -> int:
    enemy.announce_special("Deals no damage...")
    return 0


def _bonus_damage(enemy: Enemy, damage: int) -> int:
    enemy.announce_special(f"Extra +{GOBLIN_BONUS_DAMAGE} damage!")
    return damage + GOBLIN_BONUS_DAMAGE


def _double_strike(enemy: Enemy, damage: int) -> int:
    enemy.announce_special("Double Strike!")
    with enemy.specials_suppressed():
        return damage + enemy.calculate_attack()


def _dragon_fury(enemy: Enemy, damage: int) -> int:
    roll = enemy.rng.randint(1, DRAGON_FURY_SIDES)
    if roll <= DRAGON_DOUBLE_DAMAGE_MAX_ROLL:
        enemy.announce_special("Double damage!")
        return damage * 2
    enemy.announce_special(f"Lifesteal +{DRAGON_HEAL} HP!")
    enemy.set_health(enemy.health + DRAGON_HEAL)
    return damage


SPECIAL_ABILITIES: Dict[str, SpecialAbility] = {
    "nullify": _nullify,
    "bonus_damage": _bonus_damage,
    "double_strike": _double_strike,
    "dragon_fury": _dragon_fury,
}


class Enemy(CombatEntity):
    """A spawned enemy built from an immutable ``EnemyDef`` template."""

    def __init__(
        self,
        template: EnemyDef,
        rng: RandomSource,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(template.name, template.max_health, template.gold, rng, logger=logger)
        if template.special_ability not in SPECIAL_ABILITIES:
            raise InvalidEntityConfigurationError(
                f"{template.name}: unknown special ability '{template.special_ability}'."
            )
        if template.min_damage > template.max_damage:
            raise InvalidEntityConfigurationError(f"{template.name}: min damage exceeds max damage.")
        self.template = template
        self._special = SPECIAL_ABILITIES[template.special_ability]
        self._specials_suppressed = False

    @property
    def enemy_id(self) -> str:
        return self.template.id

    @property
    def special_probability(self) -> int:
        return 0 if self._specials_suppressed else self.template.special_probability

    def calculate_attack(self) -> int:
        damage = self.rng.randint(self.template.min_damage, self.template.max_damage)
        if self.rng.roll_percent(self.special_probability):
            self._logger.debug("%s special triggered (%d%% chance)", self.name, self.special_probability)
            damage = self.do_special_ability(damage)
        return damage

    def calculate_defence(self, incoming_damage: int) -> int:
        low = self.template.min_defence + 1
        high = self.template.max_defence
        if low > high:
            return high
        return self.rng.randint(low, high)

    def do_special_ability(self, damage: int) -> int:
        return self._special(self, damage)

    @contextmanager
    def specials_suppressed(self) -> Iterator[None]:
        """Disable special abilities for the duration of the block."""
        previous = self._specials_suppressed
        self._specials_suppressed = True
        try:
            yield
        finally:
            self._specials_suppressed = previous

    def announce_special(self, description: str) -> None:
        self.notify(SpecialAbilityEvent(actor=self, description=description))

    def add_special_ability_observer(self, callback: Callable[[SpecialAbilityEvent], None]) -> None:
        self.add_observer(SpecialAbilityEvent, callback)

    def remove_special_ability_observer(self, callback: Callable[[SpecialAbilityEvent], None]) -> None:
        self.remove_observer(SpecialAbilityEvent, callback)
