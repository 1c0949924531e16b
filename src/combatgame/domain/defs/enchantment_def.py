"""Enchantment definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from combatgame.core.types import EnchantmentKind


@dataclass(frozen=True, slots=True)
class EnchantmentDef:
    """A purchasable weapon enchantment.

    ``kind`` selects which of the numeric fields matter:
    ``flat`` uses ``amount``, ``random`` uses ``min_amount``/``max_amount``
    and ``multiplier`` uses ``factor``.
    """

    id: str
    name: str
    cost: int
    kind: EnchantmentKind
    amount: int = 0
    min_amount: int = 0
    max_amount: int = 0
    factor: float = 1.0
