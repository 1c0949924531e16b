"""Weapon definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WeaponDef:
    """Weapon definition with its damage range and descriptive types."""

    id: str
    name: str
    min_effect: int
    max_effect: int
    cost: int
    damage_type: str
    weapon_type: str
