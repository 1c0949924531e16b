"""Shared type aliases for the core and domain layers."""
from typing import Literal, Protocol

PotionType = Literal["healing", "damage"]
EnchantmentKind = Literal["flat", "random", "multiplier"]
Victor = Literal["player", "enemy"]


class RandomSource(Protocol):
    """Anything that rolls like ``RNG``: bounded integers and percentage checks."""

    def randint(self, a: int, b: int) -> int:
        ...

    def roll_percent(self, probability: int) -> bool:
        ...


__all__ = ["EnchantmentKind", "PotionType", "RandomSource", "Victor"]
