"""Battle service running one player-versus-enemy fight at a time."""
from __future__ import annotations

import itertools
import logging
from typing import Callable, List, Tuple

from combatgame.core.types import Victor
from combatgame.domain.battle_models import BattleSession
from combatgame.domain.entities import CombatEntity, PlayerCharacter
from combatgame.domain.events import BattleResolvedEvent, BattleStartedEvent, CombatEvent
from combatgame.services.enemy_spawner import EnemySpawner
from combatgame.services.errors import InvalidBattleActionError

REWARD_HEALTH_MULTIPLIER = 1.5

EventSink = Callable[[CombatEvent], None]


class BattleService:
    """Turn-by-turn battle orchestrator.

    Only one session is open at a time; a new battle can start once the
    current one has resolved.

    Each call to ``player_attack`` or ``player_use_potion`` is one round: the
    player acts, then the enemy answers unless the battle already ended. Calls
    return the events produced during that round.
    """

    def __init__(
        self,
        spawner: EnemySpawner,
        event_sink: EventSink | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._spawner = spawner
        self._event_sink = event_sink
        self._logger = logger or logging.getLogger(__name__)
        self._battle_numbers = itertools.count(1)
        self._active: BattleSession | None = None

    @property
    def active_session(self) -> BattleSession | None:
        return self._active

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(self, player: PlayerCharacter) -> Tuple[BattleSession, List[CombatEvent]]:
        """Spawn an enemy and open a session against it."""
        if not player.is_alive:
            raise InvalidBattleActionError(f"{player.name} cannot battle with no health left.")
        if self._active is not None:
            raise InvalidBattleActionError(f"Battle '{self._active.battle_id}' is still in progress.")

        enemy = self._spawner.create_enemy_randomly()
        session = BattleSession(
            battle_id=f"battle_{next(self._battle_numbers)}",
            player=player,
            enemy=enemy,
            stage=self._spawner.stage,
        )
        self._active = session
        session.channel.subscribe_all(session.history.append)
        if self._event_sink is not None:
            session.channel.subscribe_all(self._event_sink)
        for entity in (player, enemy):
            entity.observers.subscribe_all(session.channel.publish)

        self._logger.info("%s started: %s vs %s", session.battle_id, player.name, enemy.name)
        session.channel.publish(
            BattleStartedEvent(battle_id=session.battle_id, enemy_name=enemy.name, stage=session.stage)
        )
        return session, list(session.history)

    # -----------------------
    # Combat primitives
    # -----------------------
    @staticmethod
    def fight(attacker: CombatEntity, defender: CombatEntity) -> None:
        defender.defend(attacker.attack())

    @staticmethod
    def use_potion(session: BattleSession, potion_name: str) -> int:
        """Drink a potion; damage potions are thrown at the enemy."""
        damage = session.player.use_potion(potion_name)
        if damage > 0:
            session.enemy.defend(damage)
        return damage

    # -----------------------
    # Player Actions
    # -----------------------
    def player_attack(self, session: BattleSession) -> List[CombatEvent]:
        self._ensure_active(session)
        mark = len(session.history)
        self.fight(session.player, session.enemy)
        self._finish_round(session)
        return session.history[mark:]

    def player_use_potion(self, session: BattleSession, potion_name: str) -> List[CombatEvent]:
        self._ensure_active(session)
        if session.player.inventory.find_potion(potion_name) is None:
            raise InvalidBattleActionError(f"{session.player.name} has no potion named '{potion_name}'.")
        mark = len(session.history)
        self.use_potion(session, potion_name)
        self._finish_round(session)
        return session.history[mark:]

    # -----------------------
    # Internals
    # -----------------------
    @staticmethod
    def _ensure_active(session: BattleSession) -> None:
        if session.is_over:
            raise InvalidBattleActionError(f"Battle '{session.battle_id}' is already over.")

    def _finish_round(self, session: BattleSession) -> None:
        session.turn += 1
        if self._check_over(session):
            return
        self.fight(session.enemy, session.player)
        self._check_over(session)

    def _check_over(self, session: BattleSession) -> bool:
        if not session.player.is_alive:
            self._resolve(session, "enemy")
        elif not session.enemy.is_alive:
            self._resolve(session, "player")
        return session.is_over

    def _resolve(self, session: BattleSession, victor: Victor) -> None:
        session.is_over = True
        session.victor = victor
        gold_reward: float = 0
        if victor == "player":
            gold_reward = self._grant_rewards(session)
        else:
            session.game_over = True

        for entity in (session.player, session.enemy):
            entity.observers.unsubscribe_all(session.channel.publish)
        self._active = None
        self._spawner.update_stage()

        self._logger.info("%s resolved: %s won", session.battle_id, victor)
        session.channel.publish(
            BattleResolvedEvent(battle_id=session.battle_id, victor=victor, gold_reward=gold_reward)
        )

    @staticmethod
    def _grant_rewards(session: BattleSession) -> float:
        player = session.player
        gold = session.enemy.gold
        player.gold += gold
        player.set_health(int(player.health * REWARD_HEALTH_MULTIPLIER))
        return gold
