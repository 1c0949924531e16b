"""Seedable random source shared by every combat roll."""
from __future__ import annotations

from random import Random


class RNG:
    """Thin facade over ``random.Random``.

    A fixed seed replays the same fight; ``None`` seeds from the OS.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Inclusive integer draw in ``[a, b]``."""
        return self._random.randint(a, b)

    def roll_percent(self, probability: int) -> bool:
        """Roll 1-100 and report whether the roll landed at or under ``probability``."""
        return self.randint(1, 100) <= probability
