"""Character inventory and equipment tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from combatgame.domain.errors import InventoryError
from combatgame.domain.items import Armour, Item, Potion, Weapon


@dataclass(slots=True)
class Inventory:
    """Ordered item list with references to the equipped weapon and armour.

    Items are tracked by identity, so two copies of the same weapon are
    separate entries and only the equipped copy is protected from removal.
    """

    items: List[Item] = field(default_factory=list)
    equipped_weapon: Weapon | None = None
    equipped_armour: Armour | None = None

    def add(self, item: Item) -> None:
        if item is None:
            raise InventoryError("Item cannot be None.")
        self.items.append(item)

    def contains(self, item: Item) -> bool:
        return any(owned is item for owned in self.items)

    def remove(self, item: Item) -> None:
        """Remove ``item``; refuses the equipped instance."""
        if not self.contains(item):
            raise InventoryError(f"{item.name} is not in the inventory.")
        if self.is_equipped(item):
            raise InventoryError(f"{item.name} is currently equipped.")
        self.items = [owned for owned in self.items if owned is not item]

    def replace(self, old: Item, new: Item) -> None:
        """Swap ``old`` for ``new`` in place, carrying over its equipped status."""
        for index, owned in enumerate(self.items):
            if owned is old:
                self.items[index] = new
                break
        else:
            raise InventoryError(f"{old.name} is not in the inventory.")
        if old is self.equipped_weapon and isinstance(new, Weapon):
            self.equipped_weapon = new
        if old is self.equipped_armour and isinstance(new, Armour):
            self.equipped_armour = new

    def is_equipped(self, item: Item) -> bool:
        return item is self.equipped_weapon or item is self.equipped_armour

    def equip_weapon(self, weapon: Weapon) -> None:
        if not self.contains(weapon):
            raise InventoryError(f"{weapon.name} is not owned.")
        self.equipped_weapon = weapon

    def equip_armour(self, armour: Armour) -> None:
        if not self.contains(armour):
            raise InventoryError(f"{armour.name} is not owned.")
        self.equipped_armour = armour

    def weapons(self) -> List[Weapon]:
        return [item for item in self.items if isinstance(item, Weapon)]

    def armour(self) -> List[Armour]:
        return [item for item in self.items if isinstance(item, Armour)]

    def potions(self) -> List[Potion]:
        return [item for item in self.items if isinstance(item, Potion)]

    def find_potion(self, name: str) -> Potion | None:
        for potion in self.potions():
            if potion.name == name:
                return potion
        return None

    def remove_one_matching(self, name: str) -> Potion | None:
        """Remove and return the first potion called ``name``, if any."""
        potion = self.find_potion(name)
        if potion is not None:
            self.remove(potion)
        return potion
