from __future__ import annotations

import pytest

from combatgame.domain.errors import InventoryError
from combatgame.domain.inventory import Inventory
from combatgame.domain.items import Armour, Potion, Weapon
from tests.helpers.defs import flat_enchantment, make_armour_def, make_potion_def, make_weapon_def


def _build_inventory() -> tuple[Inventory, Weapon, Armour, Potion]:
    inventory = Inventory()
    weapon = Weapon(make_weapon_def())
    armour = Armour(make_armour_def())
    potion = Potion(make_potion_def("heal"))
    for item in (weapon, armour, potion):
        inventory.add(item)
    inventory.equip_weapon(weapon)
    inventory.equip_armour(armour)
    return inventory, weapon, armour, potion


def test_filtered_views() -> None:
    inventory, weapon, armour, potion = _build_inventory()
    assert inventory.weapons() == [weapon]
    assert inventory.armour() == [armour]
    assert inventory.potions() == [potion]


def test_equipped_item_cannot_be_removed() -> None:
    inventory, weapon, _, _ = _build_inventory()
    with pytest.raises(InventoryError):
        inventory.remove(weapon)
    assert inventory.contains(weapon)


def test_unequipped_duplicate_can_be_removed() -> None:
    inventory, weapon, _, _ = _build_inventory()
    spare = Weapon(make_weapon_def())
    inventory.add(spare)

    inventory.remove(spare)

    assert inventory.weapons() == [weapon]


def test_remove_missing_item_raises() -> None:
    inventory, _, _, _ = _build_inventory()
    with pytest.raises(InventoryError):
        inventory.remove(Potion(make_potion_def("other")))


def test_equip_requires_ownership() -> None:
    inventory = Inventory()
    with pytest.raises(InventoryError):
        inventory.equip_weapon(Weapon(make_weapon_def()))


def test_replace_keeps_equipment_on_replacement() -> None:
    inventory, weapon, _, _ = _build_inventory()
    enchanted = weapon.enchant(flat_enchantment())

    inventory.replace(weapon, enchanted)

    assert inventory.equipped_weapon is enchanted
    assert inventory.weapons() == [enchanted]


def test_remove_one_matching_by_name() -> None:
    inventory, _, _, potion = _build_inventory()
    assert inventory.find_potion("Heal") is potion
    assert inventory.remove_one_matching("Heal") is potion
    assert inventory.remove_one_matching("Heal") is None
