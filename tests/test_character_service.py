import pytest

from combatgame.core.rng import RNG
from combatgame.data.repositories import ArmourRepository, WeaponsRepository
from combatgame.domain.items import Weapon
from combatgame.services.character_service import CharacterService
from combatgame.services.errors import CharacterError
from combatgame.services.factories import create_starting_player
from tests.helpers.defs import make_weapon_def


def _make_player():
    return create_starting_player(WeaponsRepository(), ArmourRepository(), RNG(1))


def test_rename_strips_and_applies() -> None:
    player = _make_player()
    assert CharacterService().rename(player, "  Aria  ") == "Aria"
    assert player.name == "Aria"


@pytest.mark.parametrize("name", ["", "   ", "Al", " x "])
def test_rename_rejects_short_or_blank(name: str) -> None:
    player = _make_player()
    with pytest.raises(CharacterError):
        CharacterService().rename(player, name)
    assert player.name == "Player"


def test_equip_weapon_by_position() -> None:
    player = _make_player()
    spare = Weapon(make_weapon_def("spare_blade"))
    player.inventory.add(spare)

    equipped = CharacterService().equip_weapon(player, 1)

    assert equipped is spare
    assert player.equipped_weapon is spare


def test_equip_out_of_range_raises() -> None:
    player = _make_player()
    service = CharacterService()
    with pytest.raises(CharacterError):
        service.equip_weapon(player, 3)
    with pytest.raises(CharacterError):
        service.equip_armour(player, -1)


def test_equip_armour_by_position() -> None:
    player = _make_player()
    original = player.equipped_armour
    assert CharacterService().equip_armour(player, 0) is original
