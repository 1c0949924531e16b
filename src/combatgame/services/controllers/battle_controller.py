"""UI-agnostic battle controller that separates state progression from rendering."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from combatgame.domain.battle_models import BattleSession
from combatgame.domain.entities import PlayerCharacter
from combatgame.domain.events import CombatEvent
from combatgame.services.battle_service import BattleService
from combatgame.services.errors import InvalidBattleActionError

BattleActionType = Literal["attack", "potion"]


@dataclass(slots=True)
class BattleAction:
    """Represents a structured action decision from the player."""

    action_type: BattleActionType
    potion_name: str | None = None


class BattleController:
    """
    UI-agnostic controller for battle state progression.

    Wraps BattleService, validates player decisions and returns events. It
    does not render, format or prompt; the presentation layer does that.
    """

    def __init__(self, battle_service: BattleService) -> None:
        self._service = battle_service

    def start_battle(self, player: PlayerCharacter) -> tuple[BattleSession, List[CombatEvent]]:
        return self._service.start_battle(player)

    def available_actions(self, session: BattleSession) -> List[BattleAction]:
        """Attack plus one potion action per distinct potion carried.

        A finished battle offers nothing.
        """
        if session.is_over:
            return []
        actions = [BattleAction(action_type="attack")]
        seen: set[str] = set()
        for potion in session.player.inventory.potions():
            if potion.name in seen:
                continue
            seen.add(potion.name)
            actions.append(BattleAction(action_type="potion", potion_name=potion.name))
        return actions

    def apply_player_action(self, session: BattleSession, action: BattleAction) -> List[CombatEvent]:
        """Apply a player action and return the resulting events."""
        if action.action_type == "attack":
            return self._service.player_attack(session)

        if action.action_type == "potion":
            if not action.potion_name:
                raise InvalidBattleActionError("Potion action requires potion_name.")
            if session.player.inventory.find_potion(action.potion_name) is None:
                raise InvalidBattleActionError(f"No potion named '{action.potion_name}' in the inventory.")
            return self._service.player_use_potion(session, action.potion_name)

        raise InvalidBattleActionError(f"Unknown action type: {action.action_type}")
