from __future__ import annotations

import pytest

from combatgame.data.repositories import EnemiesRepository
from combatgame.domain.entities import PlayerCharacter
from combatgame.domain.events import BattleResolvedEvent, PotionUseEvent
from combatgame.domain.items import Potion, Weapon
from combatgame.services.battle_service import BattleService
from combatgame.services.controllers import BattleAction, BattleController
from combatgame.services.enemy_spawner import EnemySpawner
from combatgame.services.errors import InvalidBattleActionError
from tests.helpers.defs import make_potion_def, make_weapon_def
from tests.helpers.scripted_rng import ScriptedRNG


def _make_controller(*values: int, potions=()) -> tuple[BattleController, PlayerCharacter]:
    rng = ScriptedRNG(values)
    player = PlayerCharacter(rng)
    weapon = Weapon(make_weapon_def(min_effect=20, max_effect=20))
    player.inventory.add(weapon)
    player.equip_weapon(weapon)
    for potion in potions:
        player.inventory.add(potion)
    controller = BattleController(BattleService(EnemySpawner(EnemiesRepository(), rng)))
    return controller, player


def _bomb() -> Potion:
    return Potion(make_potion_def("fire_bomb", potion_type="damage", min_effect=12, max_effect=12))


def test_available_actions_lists_attack_and_distinct_potions() -> None:
    controller, player = _make_controller(0, potions=[_bomb(), _bomb()])
    session, _ = controller.start_battle(player)

    actions = controller.available_actions(session)

    assert [action.action_type for action in actions] == ["attack", "potion"]
    assert actions[1].potion_name == "Fire Bomb"


def test_attack_action_resolves_round() -> None:
    controller, player = _make_controller(0, 1)
    session, _ = controller.start_battle(player)

    events = controller.apply_player_action(session, BattleAction(action_type="attack"))

    assert session.is_over
    assert isinstance(events[-1], BattleResolvedEvent)
    assert controller.available_actions(session) == []


def test_potion_action_uses_named_potion() -> None:
    controller, player = _make_controller(0, 1, potions=[_bomb()])
    session, _ = controller.start_battle(player)

    events = controller.apply_player_action(session, BattleAction(action_type="potion", potion_name="Fire Bomb"))

    assert isinstance(events[0], PotionUseEvent)
    assert session.victor == "player"


def test_potion_action_requires_name() -> None:
    controller, player = _make_controller(0)
    session, _ = controller.start_battle(player)
    with pytest.raises(InvalidBattleActionError):
        controller.apply_player_action(session, BattleAction(action_type="potion"))


def test_potion_action_requires_owned_potion() -> None:
    controller, player = _make_controller(0)
    session, _ = controller.start_battle(player)
    with pytest.raises(InvalidBattleActionError):
        controller.apply_player_action(session, BattleAction(action_type="potion", potion_name="Fire Bomb"))


def test_unknown_action_type_rejected() -> None:
    controller, player = _make_controller(0)
    session, _ = controller.start_battle(player)
    with pytest.raises(InvalidBattleActionError):
        controller.apply_player_action(session, BattleAction(action_type="flee"))  # type: ignore[arg-type]
