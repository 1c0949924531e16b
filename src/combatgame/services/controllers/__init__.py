"""UI-agnostic controllers."""

from .battle_controller import BattleAction, BattleController

__all__ = ["BattleAction", "BattleController"]
