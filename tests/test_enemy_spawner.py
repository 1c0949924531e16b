from __future__ import annotations

import logging
from collections import Counter

from combatgame.core.rng import RNG
from combatgame.data.repositories import EnemiesRepository
from combatgame.domain.entities import Enemy
from combatgame.services import enemy_spawner
from combatgame.services.enemy_spawner import EnemySpawner
from tests.helpers.scripted_rng import ScriptedRNG


def _make_spawner(rng=None) -> EnemySpawner:
    return EnemySpawner(EnemiesRepository(), rng or RNG(5))


def test_stage_zero_weights() -> None:
    spawner = _make_spawner()
    assert spawner.stage == 0
    assert spawner.spawn_weights() == [("slime", 50), ("goblin", 30), ("ogre", 20), ("dragon", 0)]


def test_weights_shift_with_stage() -> None:
    spawner = _make_spawner()
    spawner.update_stage()
    assert spawner.spawn_weights() == [("slime", 45), ("goblin", 25), ("ogre", 15), ("dragon", 15)]


def test_weights_are_clamped_at_high_stages() -> None:
    spawner = _make_spawner()
    for _ in range(7):
        spawner.update_stage()
    assert spawner.spawn_weights() == [("slime", 15), ("goblin", 0), ("ogre", 0), ("dragon", 105)]


def test_thresholds_follow_fixed_order() -> None:
    rng = ScriptedRNG([0, 49, 50, 79, 80, 99])
    spawner = _make_spawner(rng)
    picks = [spawner.choose_enemy_id() for _ in range(6)]
    assert picks == ["slime", "slime", "goblin", "goblin", "ogre", "ogre"]
    assert rng.calls == [(0, 99)] * 6


def test_stage_zero_distribution() -> None:
    spawner = _make_spawner(RNG(2024))
    counts = Counter(spawner.choose_enemy_id() for _ in range(10_000))

    assert counts["dragon"] == 0
    assert 4700 <= counts["slime"] <= 5300
    assert 2700 <= counts["goblin"] <= 3300
    assert 1700 <= counts["ogre"] <= 2300


def test_every_draw_spawns_an_enemy_at_any_stage() -> None:
    spawner = _make_spawner(RNG(11))
    for stage in range(0, 30):
        spawner.stage = stage
        for _ in range(50):
            assert isinstance(spawner.create_enemy_randomly(), Enemy)


def test_late_stage_draw_lands_on_dragon() -> None:
    spawner = _make_spawner(ScriptedRNG([99]))
    spawner.stage = 10
    enemy = spawner.create_enemy_randomly()
    assert enemy.name == "Dragon"
    assert enemy.health == 100


def test_unmatched_draw_falls_back_to_lowest_tier(monkeypatch, caplog) -> None:
    monkeypatch.setattr(enemy_spawner, "SPAWN_TABLE", (("slime", 10, 0), ("goblin", 10, 0)))
    spawner = _make_spawner(ScriptedRNG([75]))

    with caplog.at_level(logging.WARNING, logger="combatgame.services.enemy_spawner"):
        enemy = spawner.create_enemy_randomly()

    assert enemy.name == "Slime"
    assert "matched no tier" in caplog.text


def test_each_spawn_is_a_fresh_instance() -> None:
    spawner = _make_spawner(ScriptedRNG([0, 0]))
    first = spawner.create_enemy_randomly()
    first.set_health(1)
    second = spawner.create_enemy_randomly()
    assert second is not first
    assert second.health == second.max_health


def test_update_and_reset_stage() -> None:
    spawner = _make_spawner()
    spawner.update_stage()
    spawner.update_stage()
    assert spawner.stage == 2
    spawner.reset_stage()
    assert spawner.stage == 0
