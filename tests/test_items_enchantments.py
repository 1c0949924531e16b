from __future__ import annotations

import pytest

from combatgame.domain.defs import EnchantmentDef
from combatgame.domain.enchantments import apply_enchantments
from combatgame.domain.errors import InvalidItemError
from combatgame.domain.items import Armour, Potion, Weapon
from tests.helpers.defs import (
    fire_enchantment,
    flat_enchantment,
    make_armour_def,
    make_potion_def,
    make_weapon_def,
    power_up_enchantment,
)
from tests.helpers.scripted_rng import ScriptedRNG


def test_fixed_range_weapon_does_not_draw() -> None:
    rng = ScriptedRNG()
    weapon = Weapon(make_weapon_def(min_effect=4, max_effect=4))
    assert weapon.strike(rng) == 4
    assert rng.calls == []


def test_enchantments_apply_in_order_outermost_last() -> None:
    weapon = Weapon(make_weapon_def(min_effect=10, max_effect=10))
    plus_then_power = weapon.enchant(flat_enchantment(10)).enchant(power_up_enchantment())
    power_then_plus = weapon.enchant(power_up_enchantment()).enchant(flat_enchantment(10))

    # (10 + 10) * 1.1 = 22; 10 * 1.1 + 10 = 21
    assert plus_then_power.strike(ScriptedRNG()) == 22
    assert power_then_plus.strike(ScriptedRNG()) == 21


def test_multiplier_truncates() -> None:
    assert apply_enchantments(9, [power_up_enchantment()], ScriptedRNG()) == 9
    assert apply_enchantments(19, [power_up_enchantment()], ScriptedRNG()) == 20


def test_random_enchantment_draws_bonus() -> None:
    rng = ScriptedRNG([6, 8])
    weapon = Weapon(make_weapon_def(min_effect=5, max_effect=9)).enchant(fire_enchantment())
    assert weapon.strike(rng) == 14
    assert rng.calls == [(5, 9), (5, 10)]


def test_enchant_returns_new_weapon_and_updates_cost() -> None:
    base = Weapon(make_weapon_def(cost=10))
    enchanted = base.enchant(fire_enchantment()).enchant(flat_enchantment(2, cost=5))

    assert base.enchantments == ()
    assert enchanted.cost == 35
    assert enchanted.display_name == "Test Sword (Fire Damage, Damage +2)"
    assert enchanted.id == base.id


def test_item_rejects_inverted_range() -> None:
    with pytest.raises(InvalidItemError):
        Weapon(make_weapon_def(min_effect=9, max_effect=5))
    with pytest.raises(InvalidItemError):
        Armour(make_armour_def(min_effect=-1, max_effect=5))


def test_potion_rejects_unknown_type() -> None:
    with pytest.raises(InvalidItemError):
        Potion(make_potion_def(potion_type="poison"))


def test_enchant_rejects_invalid_definition() -> None:
    bad = EnchantmentDef(id="bad", name="Bad", cost=5, kind="random", min_amount=8, max_amount=2)
    with pytest.raises(InvalidItemError):
        Weapon(make_weapon_def()).enchant(bad)


def test_armour_block_and_potion_effect_roll_in_range() -> None:
    rng = ScriptedRNG([3, 6])
    assert Armour(make_armour_def(min_effect=2, max_effect=4)).block(rng) == 3
    assert Potion(make_potion_def(min_effect=5, max_effect=10)).roll_effect(rng) == 6
