from __future__ import annotations

from typing import List

import pytest

from combatgame.domain.entities import CombatEntity
from combatgame.domain.errors import InvalidEntityConfigurationError
from combatgame.domain.events import (
    AttackEvent,
    BattleEndEvent,
    CombatEvent,
    DamageEvent,
    DefendEvent,
    HealEvent,
)
from tests.helpers.scripted_rng import ScriptedRNG


class _Dummy(CombatEntity):
    """Entity with fixed attack and block values."""

    def __init__(self, max_health: int = 20, gold: float = 0, *, attack_value: int = 5, block_value: int = 0):
        super().__init__("Dummy", max_health, gold, ScriptedRNG())
        self.attack_value = attack_value
        self.block_value = block_value

    def calculate_attack(self) -> int:
        return self.attack_value

    def calculate_defence(self, incoming_damage: int) -> int:
        return self.block_value


def _record_all(entity: CombatEntity) -> List[CombatEvent]:
    events: List[CombatEvent] = []
    entity.observers.subscribe_all(events.append)
    return events


def test_construction_rejects_non_positive_health() -> None:
    with pytest.raises(InvalidEntityConfigurationError):
        _Dummy(max_health=0)


def test_construction_rejects_negative_gold() -> None:
    with pytest.raises(InvalidEntityConfigurationError):
        _Dummy(gold=-1)


def test_invalid_configuration_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        _Dummy(max_health=-5)


def test_attack_notifies_and_does_not_change_health() -> None:
    entity = _Dummy(attack_value=7)
    seen: List[AttackEvent] = []
    entity.add_attack_observer(seen.append)

    assert entity.attack() == 7
    assert [event.damage for event in seen] == [7]
    assert seen[0].actor is entity
    assert entity.health == 20


def test_defend_blocks_and_reports_damage() -> None:
    entity = _Dummy(block_value=3)
    events = _record_all(entity)

    entity.defend(10)

    assert entity.health == 13
    assert [type(event) for event in events] == [DefendEvent, DamageEvent]
    assert events[0].blocked == 3
    assert events[1].amount == 7


def test_defend_cannot_block_more_than_incoming() -> None:
    entity = _Dummy(block_value=12)
    defends: List[DefendEvent] = []
    damages: List[DamageEvent] = []
    entity.add_defend_observer(defends.append)
    entity.add_damage_observer(damages.append)

    entity.defend(4)

    assert entity.health == 20
    assert defends[0].blocked == 4
    assert damages[0].amount == 0


def test_damage_event_fires_for_zero_damage() -> None:
    entity = _Dummy(block_value=0)
    damages: List[DamageEvent] = []
    entity.add_damage_observer(damages.append)

    entity.defend(0)

    assert [event.amount for event in damages] == [0]


def test_defend_does_not_double_report_damage() -> None:
    entity = _Dummy(block_value=1)
    damages: List[DamageEvent] = []
    heals: List[HealEvent] = []
    entity.add_damage_observer(damages.append)
    entity.add_heal_observer(heals.append)

    entity.defend(6)

    assert len(damages) == 1
    assert heals == []


def test_set_health_heal_emits_actual_gain_before_applying() -> None:
    entity = _Dummy(max_health=20)
    entity.set_health(10)
    seen_health: List[int] = []
    heals: List[HealEvent] = []

    def _on_heal(event: HealEvent) -> None:
        seen_health.append(event.actor.health)
        heals.append(event)

    entity.add_heal_observer(_on_heal)
    entity.set_health(50)

    assert entity.health == 20
    assert heals[0].amount == 10
    assert seen_health == [10]


def test_set_health_at_max_emits_no_heal() -> None:
    entity = _Dummy(max_health=20)
    heals: List[HealEvent] = []
    entity.add_heal_observer(heals.append)

    entity.set_health(25)

    assert heals == []
    assert entity.health == 20


def test_set_health_decrease_reports_damage() -> None:
    entity = _Dummy(max_health=20)
    damages: List[DamageEvent] = []
    entity.add_damage_observer(damages.append)

    entity.set_health(15)

    assert [event.amount for event in damages] == [5]


def test_battle_end_fires_once_per_crossing() -> None:
    entity = _Dummy(max_health=10)
    ends: List[BattleEndEvent] = []
    entity.add_battle_end_observer(ends.append)

    entity.set_health(-3)
    entity.set_health(0)
    entity.set_health(-10)

    assert entity.health == 0
    assert len(ends) == 1
    assert ends[0].defeated is entity
    assert not entity.is_alive


def test_battle_end_fires_again_after_revival() -> None:
    entity = _Dummy(max_health=10)
    ends: List[BattleEndEvent] = []
    entity.add_battle_end_observer(ends.append)

    entity.set_health(0)
    entity.set_health(5)
    entity.defend(30)

    assert len(ends) == 2


def test_observers_run_in_registration_order() -> None:
    entity = _Dummy()
    order: List[str] = []
    entity.add_attack_observer(lambda event: order.append("first"))
    entity.add_attack_observer(lambda event: order.append("second"))

    entity.attack()

    assert order == ["first", "second"]


def test_removing_unregistered_observer_is_a_noop() -> None:
    entity = _Dummy()
    entity.remove_attack_observer(lambda event: None)
    entity.remove_battle_end_observer(print)


def test_removed_observer_is_not_notified() -> None:
    entity = _Dummy()
    seen: List[AttackEvent] = []
    entity.add_attack_observer(seen.append)
    entity.remove_attack_observer(seen.append)

    entity.attack()

    assert seen == []


def test_max_health_setter_clamps_current_health() -> None:
    entity = _Dummy(max_health=20)
    entity.max_health = 8
    assert entity.health == 8
    with pytest.raises(InvalidEntityConfigurationError):
        entity.max_health = 0


def test_gold_setter_rejects_negative() -> None:
    entity = _Dummy(gold=10)
    entity.gold = 25
    assert entity.gold == 25
    with pytest.raises(InvalidEntityConfigurationError):
        entity.gold = -1
