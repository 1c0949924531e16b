"""Character customisation: name and equipment."""
from __future__ import annotations

from combatgame.domain.entities import PlayerCharacter
from combatgame.domain.items import Armour, Weapon
from combatgame.services.errors import CharacterError

MIN_NAME_LENGTH = 3


class CharacterService:
    """Validates and applies changes the player makes between battles."""

    def rename(self, player: PlayerCharacter, name: str) -> str:
        cleaned = name.strip()
        if not cleaned:
            raise CharacterError("Name cannot be blank.")
        if len(cleaned) < MIN_NAME_LENGTH:
            raise CharacterError(f"Name must be at least {MIN_NAME_LENGTH} characters long.")
        player.name = cleaned
        return cleaned

    def equip_weapon(self, player: PlayerCharacter, index: int) -> Weapon:
        weapons = player.inventory.weapons()
        if not 0 <= index < len(weapons):
            raise CharacterError(f"No weapon at position {index + 1}.")
        weapon = weapons[index]
        player.equip_weapon(weapon)
        return weapon

    def equip_armour(self, player: PlayerCharacter, index: int) -> Armour:
        armour = player.inventory.armour()
        if not 0 <= index < len(armour):
            raise CharacterError(f"No armour at position {index + 1}.")
        piece = armour[index]
        player.equip_armour(piece)
        return piece
