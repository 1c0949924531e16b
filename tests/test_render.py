"""Tests for CLI rendering utilities."""
from combatgame.domain.entities import Enemy, PlayerCharacter
from combatgame.domain.events import (
    AttackEvent,
    BattleResolvedEvent,
    BattleStartedEvent,
    DamageEvent,
    DefendEvent,
    HealEvent,
    PotionUseEvent,
    SpecialAbilityEvent,
)
from combatgame.presentation.cli import render
from tests.helpers.defs import ENEMY_TEMPLATES
from tests.helpers.scripted_rng import ScriptedRNG


def _player() -> PlayerCharacter:
    return PlayerCharacter(ScriptedRNG(), name="Aria")


def test_attack_lines_include_announcer() -> None:
    lines = render.format_event(AttackEvent(actor=_player(), damage=7))
    assert lines == [render.ANNOUNCER_BANNER, "Aria attacked for 7 damage!!"]


def test_damage_lines_project_remaining_health() -> None:
    player = _player()
    assert render.format_event(DamageEvent(actor=player, amount=12)) == [
        "Aria took 12 damage!!",
        "Aria has 18 life points left!",
    ]
    assert render.format_event(DamageEvent(actor=player, amount=0)) == ["Aria took no damage!!"]


def test_heal_lines_clamp_to_max() -> None:
    player = _player()
    player.set_health(25)
    lines = render.format_event(HealEvent(actor=player, amount=5))
    assert lines[-1] == "Aria now has 30 life points."


def test_defend_and_potion_lines() -> None:
    player = _player()
    assert render.format_event(DefendEvent(actor=player, blocked=3)) == ["Aria defended 3 damage!!"]
    assert render.format_event(PotionUseEvent(actor=player, potion_name="Tonic"))[-1] == "Aria used Tonic!!"


def test_special_ability_box() -> None:
    enemy = Enemy(ENEMY_TEMPLATES["goblin"], ScriptedRNG())
    lines = render.format_event(SpecialAbilityEvent(actor=enemy, description="Extra +3 damage!"))
    assert lines[0] == "* * * * SPECIAL ABILITY * * * *"
    assert lines[1].strip() == "Goblin"
    assert lines[2].strip() == "Extra +3 damage!"
    assert len(lines[-1]) == len(lines[0])


def test_battle_lifecycle_lines() -> None:
    assert render.format_event(BattleStartedEvent(battle_id="b1", enemy_name="Ogre", stage=2)) == [
        "A wild Ogre appears! (Stage 2)"
    ]
    won = render.format_event(BattleResolvedEvent(battle_id="b1", victor="player", gold_reward=40))
    assert "            Gold : 40" in won
    lost = render.format_event(BattleResolvedEvent(battle_id="b1", victor="enemy", gold_reward=0))
    assert "          Winner : Enemy" in lost


def test_render_event_prints(capsys) -> None:
    render.render_event(AttackEvent(actor=_player(), damage=2))
    assert "Aria attacked for 2 damage!!" in capsys.readouterr().out


def test_debug_enabled_requires_exact_flag(monkeypatch) -> None:
    monkeypatch.setenv("COMBATGAME_DEBUG", "true")
    assert not render.debug_enabled()
    monkeypatch.setenv("COMBATGAME_DEBUG", "1")
    assert render.debug_enabled()


def test_player_summary() -> None:
    lines = render.format_player_summary(_player())
    assert "Name   : Aria" in lines
    assert "Weapon : None" in lines
    assert "Gold   : 100" in lines


def test_large_gold_stays_in_fixed_notation() -> None:
    assert render.format_gold(1_000_000) == "1,000,000"
    assert render.format_gold(2_500_000.5) == "2,500,000.50"
    won = render.format_event(BattleResolvedEvent(battle_id="b1", victor="player", gold_reward=1_000_000))
    assert "            Gold : 1,000,000" in won
    assert not any("e+" in line for line in won)
