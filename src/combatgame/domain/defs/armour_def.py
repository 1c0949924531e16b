"""Armour definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ArmourDef:
    """Armour definition with its block range."""

    id: str
    name: str
    min_effect: int
    max_effect: int
    cost: int
    material: str
