"""Weapon enchantment modifiers.

Each enchantment kind maps to a pure function that takes the strike value
produced by everything beneath it and returns the modified value.
"""
from __future__ import annotations

from typing import Callable, Dict, Sequence

from combatgame.core.types import EnchantmentKind, RandomSource
from combatgame.domain.defs import EnchantmentDef
from combatgame.domain.errors import InvalidItemError

Modifier = Callable[[int, EnchantmentDef, RandomSource], int]


def _flat_bonus(strike: int, enchantment: EnchantmentDef, rng: RandomSource) -> int:
    return strike + enchantment.amount


def _random_bonus(strike: int, enchantment: EnchantmentDef, rng: RandomSource) -> int:
    return strike + rng.randint(enchantment.min_amount, enchantment.max_amount)


def _multiplier(strike: int, enchantment: EnchantmentDef, rng: RandomSource) -> int:
    return int(strike * enchantment.factor)


MODIFIERS: Dict[EnchantmentKind, Modifier] = {
    "flat": _flat_bonus,
    "random": _random_bonus,
    "multiplier": _multiplier,
}


def validate_enchantment(enchantment: EnchantmentDef) -> None:
    """Reject definitions whose numbers cannot produce a sensible strike."""
    if enchantment.kind not in MODIFIERS:
        raise InvalidItemError(f"Enchantment '{enchantment.id}' has unknown kind '{enchantment.kind}'.")
    if enchantment.cost < 0:
        raise InvalidItemError(f"Enchantment '{enchantment.id}' cost cannot be negative.")
    if enchantment.kind == "random" and not 0 <= enchantment.min_amount <= enchantment.max_amount:
        raise InvalidItemError(f"Enchantment '{enchantment.id}' needs 0 <= min_amount <= max_amount.")
    if enchantment.kind == "multiplier" and enchantment.factor < 0:
        raise InvalidItemError(f"Enchantment '{enchantment.id}' factor cannot be negative.")


def apply_enchantments(base_strike: int, enchantments: Sequence[EnchantmentDef], rng: RandomSource) -> int:
    """Layer enchantments over a base strike.

    ``enchantments`` is in application order, so the last entry is the
    outermost layer and modifies the result of all earlier ones.
    """
    strike = base_strike
    for enchantment in enchantments:
        strike = MODIFIERS[enchantment.kind](strike, enchantment, rng)
    return strike
