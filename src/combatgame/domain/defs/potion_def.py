"""Potion definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from combatgame.core.types import PotionType


@dataclass(frozen=True, slots=True)
class PotionDef:
    """Consumable potion definition."""

    id: str
    name: str
    min_effect: int
    max_effect: int
    cost: int
    potion_type: PotionType
