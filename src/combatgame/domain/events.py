"""Combat events and the callback channel that delivers them."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Tuple, Type, TypeVar

from combatgame.core.types import Victor

if TYPE_CHECKING:
    from combatgame.domain.entities.combat_entity import CombatEntity

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CombatEvent:
    """Base combat event."""


@dataclass(frozen=True, slots=True)
class AttackEvent(CombatEvent):
    actor: CombatEntity
    damage: int


@dataclass(frozen=True, slots=True)
class DefendEvent(CombatEvent):
    actor: CombatEntity
    blocked: int


@dataclass(frozen=True, slots=True)
class DamageEvent(CombatEvent):
    actor: CombatEntity
    amount: int


@dataclass(frozen=True, slots=True)
class HealEvent(CombatEvent):
    actor: CombatEntity
    amount: int


@dataclass(frozen=True, slots=True)
class SpecialAbilityEvent(CombatEvent):
    actor: CombatEntity
    description: str


@dataclass(frozen=True, slots=True)
class BattleEndEvent(CombatEvent):
    defeated: CombatEntity


@dataclass(frozen=True, slots=True)
class PotionUseEvent(CombatEvent):
    actor: CombatEntity
    potion_name: str


@dataclass(frozen=True, slots=True)
class GameOverEvent(CombatEvent):
    actor: CombatEntity


@dataclass(frozen=True, slots=True)
class BattleStartedEvent(CombatEvent):
    battle_id: str
    enemy_name: str
    stage: int


@dataclass(frozen=True, slots=True)
class BattleResolvedEvent(CombatEvent):
    battle_id: str
    victor: Victor
    gold_reward: float


E = TypeVar("E", bound=CombatEvent)
Handler = Callable[[CombatEvent], None]


class EventChannel:
    """Synchronous observer registry.

    Handlers are called in the order they were registered. A handler
    registered with ``subscribe_all`` receives every event. Removing a handler
    that was never registered does nothing.
    """

    def __init__(self) -> None:
        self._handlers: List[Tuple[Type[CombatEvent] | None, Handler]] = []

    def subscribe(self, event_type: Type[E], handler: Callable[[E], None]) -> None:
        self._handlers.append((event_type, handler))  # type: ignore[arg-type]

    def unsubscribe(self, event_type: Type[E], handler: Callable[[E], None]) -> None:
        self._discard((event_type, handler))  # type: ignore[arg-type]

    def subscribe_all(self, handler: Handler) -> None:
        self._handlers.append((None, handler))

    def unsubscribe_all(self, handler: Handler) -> None:
        self._discard((None, handler))

    def handler_count(self, event_type: Type[CombatEvent] | None = None) -> int:
        return sum(1 for registered, _ in self._handlers if registered is event_type)

    def publish(self, event: CombatEvent) -> None:
        for event_type, handler in list(self._handlers):
            if event_type is None or isinstance(event, event_type):
                handler(event)

    def _discard(self, entry: Tuple[Type[CombatEvent] | None, Handler]) -> None:
        try:
            self._handlers.remove(entry)
        except ValueError:
            logger.debug("Ignoring removal of unregistered handler %r", entry[1])
