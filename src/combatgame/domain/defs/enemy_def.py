"""Enemy definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EnemyDef:
    """Immutable stat template for one enemy variant."""

    id: str
    name: str
    max_health: int
    gold: int
    min_damage: int
    max_damage: int
    min_defence: int
    max_defence: int
    special_probability: int
    special_ability: str
