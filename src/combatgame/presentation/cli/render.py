"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, List, Sequence

from combatgame.domain.battle_models import BattleSession
from combatgame.domain.entities import PlayerCharacter
from combatgame.domain.events import (
    AttackEvent,
    BattleEndEvent,
    BattleResolvedEvent,
    BattleStartedEvent,
    CombatEvent,
    DamageEvent,
    DefendEvent,
    GameOverEvent,
    HealEvent,
    PotionUseEvent,
    SpecialAbilityEvent,
)

ANNOUNCER_BANNER = "-------- BATTLE ANNOUNCER --------"
_SPECIAL_WIDTH = 31


def debug_enabled() -> bool:
    """Return True only when COMBATGAME_DEBUG is explicitly set to '1'."""
    return os.getenv("COMBATGAME_DEBUG") == "1"


def format_gold(amount: float) -> str:
    """Fixed-point gold with thousands separators; cents only when present."""
    if float(amount).is_integer():
        return f"{amount:,.0f}"
    return f"{amount:,.2f}"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def format_event(event: CombatEvent) -> List[str]:
    """Return announcer lines for one event.

    Damage and heal events are announced before the health change lands, so
    the remaining health shown here is projected from the event amount.
    """
    if isinstance(event, BattleStartedEvent):
        return [f"A wild {event.enemy_name} appears! (Stage {event.stage})"]
    if isinstance(event, AttackEvent):
        return [ANNOUNCER_BANNER, f"{event.actor.name} attacked for {event.damage} damage!!"]
    if isinstance(event, DefendEvent):
        return [f"{event.actor.name} defended {event.blocked} damage!!"]
    if isinstance(event, DamageEvent):
        if event.amount <= 0:
            return [f"{event.actor.name} took no damage!!"]
        remaining = max(event.actor.health - event.amount, 0)
        return [
            f"{event.actor.name} took {event.amount} damage!!",
            f"{event.actor.name} has {remaining} life points left!",
        ]
    if isinstance(event, HealEvent):
        now = min(event.actor.health + event.amount, event.actor.max_health)
        return [
            f"{event.actor.name} healed for {event.amount} life points!!",
            f"{event.actor.name} now has {now} life points.",
        ]
    if isinstance(event, PotionUseEvent):
        return [ANNOUNCER_BANNER, f"{event.actor.name} used {event.potion_name}!!"]
    if isinstance(event, SpecialAbilityEvent):
        return [
            "* * * * SPECIAL ABILITY * * * *",
            event.actor.name.center(_SPECIAL_WIDTH),
            event.description.center(_SPECIAL_WIDTH),
            "* " * (_SPECIAL_WIDTH // 2) + "*",
        ]
    if isinstance(event, BattleEndEvent):
        return [f"{event.defeated.name} has been defeated!"]
    if isinstance(event, GameOverEvent):
        return [f"{event.actor.name} has fallen. GAME OVER."]
    if isinstance(event, BattleResolvedEvent):
        lines = ["- - - - POST-BATTLE RESULTS - - - -"]
        if event.victor == "player":
            lines.append("- - - - - -  REWARD(S)  - - - - - -")
            lines.append(f"            Gold : {format_gold(event.gold_reward)}")
        else:
            lines.append("          Winner : Enemy")
        return lines
    return [str(event)]


def render_event(event: CombatEvent) -> None:
    """Print one event as announcer text."""
    print()
    for line in format_event(event):
        print(line)


def render_battle_status(session: BattleSession) -> None:
    player, enemy = session.player, session.enemy
    render_heading(f"Battle: {player.name} vs {enemy.name}")
    print(f"{player.name:<16} HP {player.health}/{player.max_health}")
    print(f"{enemy.name:<16} HP {enemy.health}/{enemy.max_health}")
    if debug_enabled():
        template = enemy.template
        print(
            f"[debug] {enemy.name}: damage {template.min_damage}-{template.max_damage}, "
            f"defence {template.min_defence}-{template.max_defence}, "
            f"special {template.special_probability}% (stage {session.stage}, turn {session.turn})"
        )


def format_player_summary(player: PlayerCharacter) -> List[str]:
    weapon = player.equipped_weapon
    armour = player.equipped_armour
    return [
        f"Name   : {player.name}",
        f"Health : {player.health}/{player.max_health}",
        f"Gold   : {format_gold(player.gold)}",
        f"Weapon : {weapon.display_name if weapon else 'None'}",
        f"Armour : {armour.display_name if armour else 'None'}",
    ]
