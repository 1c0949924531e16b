"""Turn-based combat game with stage-driven enemy progression."""

__version__ = "1.0.0"
