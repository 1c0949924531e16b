"""Runtime weapon, armour and potion items."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from combatgame.core.types import RandomSource
from combatgame.domain.defs import ArmourDef, EnchantmentDef, PotionDef, WeaponDef
from combatgame.domain.enchantments import apply_enchantments, validate_enchantment
from combatgame.domain.errors import InvalidItemError


def _validate_effect_range(item_id: str, min_effect: int, max_effect: int, cost: int) -> None:
    if min_effect < 0 or max_effect < 0:
        raise InvalidItemError(f"Item '{item_id}' effects cannot be negative.")
    if min_effect > max_effect:
        raise InvalidItemError(f"Item '{item_id}' min effect cannot exceed max effect.")
    if cost < 0:
        raise InvalidItemError(f"Item '{item_id}' cost cannot be negative.")


def _roll(rng: RandomSource, min_effect: int, max_effect: int) -> int:
    if min_effect == max_effect:
        return max_effect
    return rng.randint(min_effect, max_effect)


@dataclass(frozen=True, slots=True, eq=False)
class Weapon:
    """A weapon instance, optionally wrapped in enchantments."""

    definition: WeaponDef
    enchantments: Tuple[EnchantmentDef, ...] = ()

    def __post_init__(self) -> None:
        d = self.definition
        _validate_effect_range(d.id, d.min_effect, d.max_effect, d.cost)
        for enchantment in self.enchantments:
            validate_enchantment(enchantment)

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def cost(self) -> int:
        return self.definition.cost + sum(enchantment.cost for enchantment in self.enchantments)

    @property
    def display_name(self) -> str:
        if not self.enchantments:
            return self.name
        labels = ", ".join(enchantment.name for enchantment in self.enchantments)
        return f"{self.name} ({labels})"

    def strike(self, rng: RandomSource) -> int:
        base = _roll(rng, self.definition.min_effect, self.definition.max_effect)
        return apply_enchantments(base, self.enchantments, rng)

    def enchant(self, enchantment: EnchantmentDef) -> "Weapon":
        """Return a new weapon with ``enchantment`` as its outermost layer."""
        return Weapon(definition=self.definition, enchantments=self.enchantments + (enchantment,))


@dataclass(frozen=True, slots=True, eq=False)
class Armour:
    definition: ArmourDef

    def __post_init__(self) -> None:
        d = self.definition
        _validate_effect_range(d.id, d.min_effect, d.max_effect, d.cost)

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def cost(self) -> int:
        return self.definition.cost

    def block(self, rng: RandomSource) -> int:
        return _roll(rng, self.definition.min_effect, self.definition.max_effect)


@dataclass(frozen=True, slots=True, eq=False)
class Potion:
    definition: PotionDef

    def __post_init__(self) -> None:
        d = self.definition
        _validate_effect_range(d.id, d.min_effect, d.max_effect, d.cost)
        if d.potion_type not in ("healing", "damage"):
            raise InvalidItemError(f"Potion '{d.id}' has unknown type '{d.potion_type}'.")

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def cost(self) -> int:
        return self.definition.cost

    @property
    def is_healing(self) -> bool:
        return self.definition.potion_type == "healing"

    def roll_effect(self, rng: RandomSource) -> int:
        return _roll(rng, self.definition.min_effect, self.definition.max_effect)


Item = Union[Weapon, Armour, Potion]
