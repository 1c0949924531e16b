"""Console-driven UI loops for the combat game."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal

from combatgame.core.logging_config import configure_logging
from combatgame.core.rng import RNG
from combatgame.data.errors import DataError
from combatgame.data.repositories import (
    ArmourRepository,
    EnchantmentsRepository,
    EnemiesRepository,
    PotionsRepository,
    WeaponsRepository,
)
from combatgame.domain.battle_models import BattleSession
from combatgame.domain.entities import PlayerCharacter
from combatgame.presentation.cli import render
from combatgame.presentation.cli.config import apply_env_overrides, load_config
from combatgame.services import (
    BattleService,
    CharacterError,
    CharacterService,
    EnemySpawner,
    FactoryError,
    InvalidBattleActionError,
    ShopService,
)
from combatgame.services.controllers import BattleAction, BattleController
from combatgame.services.factories import create_starting_player
from combatgame.services.shop_service import (
    ShopActionFailedEvent,
    ShopEnchantEvent,
    ShopEvent,
    ShopPurchaseEvent,
    ShopSaleEvent,
)

logger = logging.getLogger(__name__)

MenuAction = Literal["shop", "name", "weapon", "armour", "battle", "exit"]

MAIN_MENU: List[tuple[MenuAction, str]] = [
    ("shop", "Go to Shop"),
    ("name", "Choose Character Name"),
    ("weapon", "Choose Weapon"),
    ("armour", "Choose Armour"),
    ("battle", "Start Battle"),
    ("exit", "Exit"),
]


@dataclass(slots=True)
class GameContext:
    """Everything one interactive run needs."""

    player: PlayerCharacter
    shop: ShopService
    characters: CharacterService
    battles: BattleController


def main() -> None:
    """Start the interactive CLI session."""
    config = apply_env_overrides(load_config())
    configure_logging(config["log_level"], config["log_file"])  # type: ignore[arg-type]
    rng = RNG(config["seed"])  # type: ignore[arg-type]

    try:
        context = build_context(rng)
    except (DataError, FactoryError) as exc:
        logger.exception("Unable to load game data")
        print(f"Unable to load game data: {exc}")
        raise SystemExit(1) from exc

    print("=== Combat Game ===")
    run_main_menu(context)
    print("Goodbye!")


def build_context(rng: RNG, base_path=None) -> GameContext:
    """Construct repositories and services, then equip the starting player."""
    weapons_repo = WeaponsRepository(base_path)
    armour_repo = ArmourRepository(base_path)
    potions_repo = PotionsRepository(base_path)
    enchantments_repo = EnchantmentsRepository(base_path)
    enemies_repo = EnemiesRepository(base_path)

    player = create_starting_player(weapons_repo, armour_repo, rng)
    spawner = EnemySpawner(enemies_repo, rng)
    battle_service = BattleService(spawner, event_sink=render.render_event)
    shop = ShopService(
        weapons_repo=weapons_repo,
        armour_repo=armour_repo,
        potions_repo=potions_repo,
        enchantments_repo=enchantments_repo,
    )
    return GameContext(
        player=player,
        shop=shop,
        characters=CharacterService(),
        battles=BattleController(battle_service),
    )


def run_main_menu(context: GameContext) -> None:
    """Loop over the main menu until the player exits or dies."""
    while True:
        render.render_heading("Character")
        for line in render.format_player_summary(context.player):
            print(line)
        render.render_menu("Main Menu", [label for _, label in MAIN_MENU])
        action = MAIN_MENU[_prompt_index("Select an option: ", len(MAIN_MENU))][0]
        if action == "exit":
            return
        if action == "shop":
            _run_shop_menu(context)
        elif action == "name":
            _change_name(context)
        elif action == "weapon":
            _change_weapon(context)
        elif action == "armour":
            _change_armour(context)
        elif action == "battle":
            if not _run_battle(context):
                print("\nYou have fallen in battle. Game Over.")
                return


def _prompt_index(prompt: str, count: int) -> int:
    """Ask for a 1-based choice and return it 0-based."""
    while True:
        raw = input(prompt).strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Input must be an integer - Please try again")
            continue
        if 0 <= index < count:
            return index
        print(f"Input is out of bounds - Please enter a value between 1 and {count}.")


def _prompt_optional_index(prompt: str, options: List[str]) -> int | None:
    """Show numbered options plus Back; return None for Back."""
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")
    print(f"{len(options) + 1}. Back")
    index = _prompt_index(prompt, len(options) + 1)
    return None if index == len(options) else index


# -----------------------
# Character
# -----------------------
def _change_name(context: GameContext) -> None:
    while True:
        raw = input("Enter a new name: ")
        try:
            name = context.characters.rename(context.player, raw)
        except CharacterError as exc:
            print(f"{exc} Please try again")
            continue
        print(f"You are now known as {name}.")
        return


def _change_weapon(context: GameContext) -> None:
    weapons = context.player.inventory.weapons()
    render.render_heading("Choose Weapon")
    labels = [_equip_label(w.display_name, w is context.player.equipped_weapon) for w in weapons]
    index = _prompt_optional_index("Select a weapon: ", labels)
    if index is None:
        return
    try:
        weapon = context.characters.equip_weapon(context.player, index)
    except CharacterError as exc:
        print(exc)
        return
    print(f"Equipped {weapon.display_name}.")


def _change_armour(context: GameContext) -> None:
    armour = context.player.inventory.armour()
    render.render_heading("Choose Armour")
    labels = [_equip_label(a.display_name, a is context.player.equipped_armour) for a in armour]
    index = _prompt_optional_index("Select armour: ", labels)
    if index is None:
        return
    try:
        piece = context.characters.equip_armour(context.player, index)
    except CharacterError as exc:
        print(exc)
        return
    print(f"Equipped {piece.display_name}.")


def _equip_label(name: str, equipped: bool) -> str:
    return f"{name} (equipped)" if equipped else name


# -----------------------
# Shop
# -----------------------
def _run_shop_menu(context: GameContext) -> None:
    while True:
        render.render_heading("Shop")
        print(f"Gold: {render.format_gold(context.player.gold)}")
        index = _prompt_optional_index("Select an option: ", ["Buy", "Sell", "Enchant Weapon"])
        if index is None:
            return
        if index == 0:
            _shop_buy(context)
        elif index == 1:
            _shop_sell(context)
        else:
            _shop_enchant(context)


def _shop_buy(context: GameContext) -> None:
    view = context.shop.build_shop_view(context.player)
    render.render_heading("Buy")
    labels = [
        f"{entry.name} [{entry.kind}, {entry.min_effect}-{entry.max_effect}] "
        f"{entry.price} gold (owned: {entry.owned})"
        for entry in view.entries
    ]
    index = _prompt_optional_index("Select an item: ", labels)
    if index is None:
        return
    _render_shop_events(context.shop.buy(context.player, view.entries[index].item_id))


def _shop_sell(context: GameContext) -> None:
    entries = context.shop.build_sell_view(context.player)
    render.render_heading("Sell")
    labels = [_equip_label(f"{entry.name} for {entry.price} gold", entry.equipped) for entry in entries]
    index = _prompt_optional_index("Select an item: ", labels)
    if index is None:
        return
    _render_shop_events(context.shop.sell(context.player, entries[index].index))


def _shop_enchant(context: GameContext) -> None:
    weapons = context.player.inventory.weapons()
    render.render_heading("Enchant Weapon")
    weapon_index = _prompt_optional_index("Select a weapon: ", [weapon.display_name for weapon in weapons])
    if weapon_index is None:
        return
    offers = context.shop.build_shop_view(context.player).enchantments
    render.render_heading("Enchantments")
    offer_index = _prompt_optional_index(
        "Select an enchantment: ", [f"{offer.name} {offer.price} gold" for offer in offers]
    )
    if offer_index is None:
        return
    _render_shop_events(
        context.shop.enchant(context.player, weapon_index, offers[offer_index].enchantment_id)
    )


def _render_shop_events(events: List[ShopEvent]) -> None:
    for event in events:
        if isinstance(event, ShopPurchaseEvent):
            print(
                f"- Bought {event.item_name} for {event.total_cost} gold "
                f"(Gold: {render.format_gold(event.total_gold)})."
            )
        elif isinstance(event, ShopSaleEvent):
            print(
                f"- Sold {event.item_name} for {event.total_gain} gold "
                f"(Gold: {render.format_gold(event.total_gold)})."
            )
        elif isinstance(event, ShopEnchantEvent):
            print(
                f"- Enchanted with {event.enchantment_name} for {event.total_cost} gold: "
                f"{event.weapon_name} (Gold: {render.format_gold(event.total_gold)})."
            )
        elif isinstance(event, ShopActionFailedEvent):
            print(f"- {event.message}")
        else:
            print(f"- {event}")


# -----------------------
# Battle
# -----------------------
def _run_battle(context: GameContext) -> bool:
    """Run one battle to completion; return False when the player died."""
    session, _ = context.battles.start_battle(context.player)
    while not session.is_over:
        render.render_battle_status(session)
        action = _prompt_battle_action(context, session)
        try:
            context.battles.apply_player_action(session, action)
        except InvalidBattleActionError as exc:
            print(f"{exc} Please try again")
    return not session.game_over


def _prompt_battle_action(context: GameContext, session: BattleSession) -> BattleAction:
    actions = context.battles.available_actions(session)
    potion_actions = [action for action in actions if action.action_type == "potion"]
    while True:
        render.render_menu("Actions", ["Attack", "Use Potion"])
        index = _prompt_index("Choose action: ", 2)
        if index == 0:
            return BattleAction(action_type="attack")
        if not potion_actions:
            print("You have no potions - Please try again")
            continue
        render.render_heading("Potions")
        choice = _prompt_optional_index("Select a potion: ", [a.potion_name or "" for a in potion_actions])
        if choice is not None:
            return potion_actions[choice]
