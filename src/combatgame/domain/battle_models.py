"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from combatgame.core.types import Victor
from combatgame.domain.entities import Enemy, PlayerCharacter
from combatgame.domain.events import CombatEvent, EventChannel


@dataclass(slots=True)
class BattleSession:
    """Tracks one player-versus-enemy battle.

    While the battle runs, every event either combatant emits is relayed into
    ``channel``; ``history`` keeps them in order.
    """

    battle_id: str
    player: PlayerCharacter
    enemy: Enemy
    stage: int = 0
    turn: int = 0
    is_over: bool = False
    victor: Victor | None = None
    game_over: bool = False
    channel: EventChannel = field(default_factory=EventChannel)
    history: List[CombatEvent] = field(default_factory=list)
