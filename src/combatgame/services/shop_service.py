"""Shop service for buy, sell and enchant flows."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Literal

from combatgame.data.repositories import (
    ArmourRepository,
    EnchantmentsRepository,
    PotionsRepository,
    WeaponsRepository,
)
from combatgame.domain.entities import PlayerCharacter
from combatgame.domain.items import Armour, Item, Potion, Weapon

ItemKind = Literal["weapon", "armour", "potion"]


@dataclass(slots=True)
class ShopEvent:
    """Base class for shop-related events."""


@dataclass(slots=True)
class ShopPurchaseEvent(ShopEvent):
    item_id: str
    item_name: str
    total_cost: int
    total_gold: float


@dataclass(slots=True)
class ShopSaleEvent(ShopEvent):
    item_id: str
    item_name: str
    total_gain: int
    total_gold: float


@dataclass(slots=True)
class ShopEnchantEvent(ShopEvent):
    weapon_name: str
    enchantment_name: str
    total_cost: int
    total_gold: float


@dataclass(slots=True)
class ShopActionFailedEvent(ShopEvent):
    reason: str
    message: str


@dataclass(slots=True)
class ShopEntryView:
    item_id: str
    name: str
    kind: ItemKind
    min_effect: int
    max_effect: int
    price: int
    owned: int


@dataclass(slots=True)
class EnchantmentOfferView:
    enchantment_id: str
    name: str
    price: int


@dataclass(slots=True)
class SellEntryView:
    index: int
    name: str
    price: int
    equipped: bool


@dataclass(slots=True)
class ShopView:
    gold: float
    entries: List[ShopEntryView] = field(default_factory=list)
    enchantments: List[EnchantmentOfferView] = field(default_factory=list)


class ShopService:
    """Catalogue and transaction logic; every outcome is returned as events."""

    def __init__(
        self,
        *,
        weapons_repo: WeaponsRepository,
        armour_repo: ArmourRepository,
        potions_repo: PotionsRepository,
        enchantments_repo: EnchantmentsRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        self._weapons_repo = weapons_repo
        self._armour_repo = armour_repo
        self._potions_repo = potions_repo
        self._enchantments_repo = enchantments_repo
        self._logger = logger or logging.getLogger(__name__)

    def build_shop_view(self, player: PlayerCharacter) -> ShopView:
        entries: List[ShopEntryView] = []
        for kind, definitions in (
            ("weapon", self._weapons_repo.all()),
            ("armour", self._armour_repo.all()),
            ("potion", self._potions_repo.all()),
        ):
            for definition in sorted(definitions, key=lambda d: (d.cost, d.id)):
                entries.append(
                    ShopEntryView(
                        item_id=definition.id,
                        name=definition.name,
                        kind=kind,  # type: ignore[arg-type]
                        min_effect=definition.min_effect,
                        max_effect=definition.max_effect,
                        price=definition.cost,
                        owned=sum(1 for item in player.inventory.items if item.id == definition.id),
                    )
                )
        offers = [
            EnchantmentOfferView(enchantment_id=enchantment.id, name=enchantment.name, price=enchantment.cost)
            for enchantment in sorted(self._enchantments_repo.all(), key=lambda e: (e.cost, e.id))
        ]
        return ShopView(gold=player.gold, entries=entries, enchantments=offers)

    def build_sell_view(self, player: PlayerCharacter) -> List[SellEntryView]:
        return [
            SellEntryView(
                index=index,
                name=item.display_name,
                price=self._sell_price(item),
                equipped=player.inventory.is_equipped(item),
            )
            for index, item in enumerate(player.inventory.items)
        ]

    def buy(self, player: PlayerCharacter, item_id: str) -> List[ShopEvent]:
        item = self._create_item(item_id)
        if item is None:
            return [ShopActionFailedEvent(reason="not_in_stock", message="Item is not sold here.")]
        if player.gold < item.cost:
            return [ShopActionFailedEvent(reason="insufficient_gold", message="Not enough gold.")]
        player.gold -= item.cost
        player.inventory.add(item)
        self._logger.info("%s bought %s for %d gold", player.name, item.name, item.cost)
        return [
            ShopPurchaseEvent(
                item_id=item.id,
                item_name=item.name,
                total_cost=item.cost,
                total_gold=player.gold,
            )
        ]

    def sell(self, player: PlayerCharacter, index: int) -> List[ShopEvent]:
        items = player.inventory.items
        if not 0 <= index < len(items):
            return [ShopActionFailedEvent(reason="not_owned", message="Item not available to sell.")]
        item = items[index]
        if player.inventory.is_equipped(item):
            return [ShopActionFailedEvent(reason="equipped", message=f"{item.name} is currently equipped.")]
        player.inventory.remove(item)
        gain = self._sell_price(item)
        player.gold += gain
        self._logger.info("%s sold %s for %d gold", player.name, item.display_name, gain)
        return [
            ShopSaleEvent(
                item_id=item.id,
                item_name=item.display_name,
                total_gain=gain,
                total_gold=player.gold,
            )
        ]

    def enchant(self, player: PlayerCharacter, weapon_index: int, enchantment_id: str) -> List[ShopEvent]:
        weapons = player.inventory.weapons()
        if not 0 <= weapon_index < len(weapons):
            return [ShopActionFailedEvent(reason="not_owned", message="Weapon not available to enchant.")]
        try:
            enchantment = self._enchantments_repo.get(enchantment_id)
        except KeyError:
            return [ShopActionFailedEvent(reason="unknown_enchantment", message="Enchantment is not sold here.")]
        if player.gold < enchantment.cost:
            return [ShopActionFailedEvent(reason="insufficient_gold", message="Not enough gold.")]

        weapon = weapons[weapon_index]
        enchanted = weapon.enchant(enchantment)
        player.gold -= enchantment.cost
        player.inventory.replace(weapon, enchanted)
        self._logger.info("%s enchanted %s with %s", player.name, weapon.display_name, enchantment.name)
        return [
            ShopEnchantEvent(
                weapon_name=enchanted.display_name,
                enchantment_name=enchantment.name,
                total_cost=enchantment.cost,
                total_gold=player.gold,
            )
        ]

    def _create_item(self, item_id: str) -> Item | None:
        for repo, item_type in (
            (self._weapons_repo, Weapon),
            (self._armour_repo, Armour),
            (self._potions_repo, Potion),
        ):
            try:
                definition = repo.get(item_id)
            except KeyError:
                continue
            return item_type(definition)
        return None

    @staticmethod
    def _sell_price(item: Item) -> int:
        return item.cost // 2
