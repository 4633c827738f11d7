"""Combat service resolving simultaneous attack/defend rounds."""
from __future__ import annotations

import logging
from typing import List

from epic_adventure.core.rng import RNG
from epic_adventure.core.types import ACTIONS, Action
from epic_adventure.data.repositories import DifficultiesRepository, EnemiesRepository
from epic_adventure.domain.combat_models import CombatRoundResult
from epic_adventure.domain.damage import calculate_damage
from epic_adventure.domain.enemy_policy import choose_enemy_action
from epic_adventure.domain.entities import Enemy, Player
from epic_adventure.services.factories import create_enemy

logger = logging.getLogger(__name__)

EXHAUSTION_DAMAGE = 2
GUARD_DIVISOR = 2
COUNTER_DIVISOR = 3


class CombatService:
    """Stateless round resolver; the caller owns the enemy health counter.

    ``resolve_round`` mutates ``player.stats`` in place and reports the new
    enemy health in the result. ``enemy.stats.hp`` is never read or written
    here, so the same Enemy record can be reused while health is tracked
    elsewhere.
    """

    def __init__(
        self,
        enemies_repo: EnemiesRepository,
        difficulties_repo: DifficultiesRepository,
    ) -> None:
        self._enemies_repo = enemies_repo
        self._difficulties_repo = difficulties_repo

    # -----------------------
    # Encounter setup
    # -----------------------
    def create_enemy(self, enemy_id: str, difficulty_id: str) -> Enemy:
        """Build a difficulty-scaled enemy for a new encounter."""
        enemy = create_enemy(
            enemy_id,
            difficulty_id,
            enemies_repo=self._enemies_repo,
            difficulties_repo=self._difficulties_repo,
        )
        logger.debug(
            "Spawned %s (hp=%s atk=%s def=%s aggression=%s) on %s",
            enemy.name,
            enemy.stats.max_hp,
            enemy.stats.attack,
            enemy.stats.defense,
            enemy.aggression,
            difficulty_id,
        )
        return enemy

    # -----------------------
    # Enemy AI
    # -----------------------
    def run_enemy_turn(self, enemy: Enemy, enemy_health: int, rng: RNG) -> Action:
        return choose_enemy_action(enemy, enemy_health, rng)

    # -----------------------
    # Round resolution
    # -----------------------
    def resolve_round(
        self,
        player_action: Action,
        enemy_action: Action,
        player: Player,
        enemy: Enemy,
        enemy_health: int,
        *,
        rng: RNG,
    ) -> CombatRoundResult:
        """Resolve one round of simultaneous actions.

        When both sides drop to zero in the same round both flags are set;
        callers treat that as a victory.
        """
        for label, action in (("player", player_action), ("enemy", enemy_action)):
            if action not in ACTIONS:
                raise ValueError(f"Unknown {label} action '{action}'.")

        log: List[str] = []
        player_damage = 0
        enemy_damage = 0
        enemy_defeated = False

        if player_action == "attack" and enemy_action == "attack":
            player_damage = calculate_damage(player.stats.attack, enemy.stats.defense, rng)
            enemy_health -= player_damage
            log.append(f"{player.name} attacked and dealt {player_damage} damage!")
            if enemy_health <= 0:
                enemy_defeated = True
                log.append(self._defeat_line(enemy))
            else:
                enemy_damage = calculate_damage(enemy.stats.attack, player.stats.defense, rng)
                player.stats.take_damage(enemy_damage)
                log.append(f"The {enemy.name} attacked back and dealt {enemy_damage} damage!")

        elif player_action == "attack":
            full_damage = calculate_damage(player.stats.attack, enemy.stats.defense, rng)
            player_damage = full_damage // GUARD_DIVISOR
            enemy_damage = enemy.stats.attack // COUNTER_DIVISOR
            enemy_health -= player_damage
            player.stats.take_damage(enemy_damage)
            log.extend(
                [
                    f"{player.name} attacked for {full_damage} damage!",
                    f"The {enemy.name} raised its guard and blocked most of it! "
                    f"Only took {player_damage} damage.",
                    f"Its counterattack dealt {enemy_damage} damage to you!",
                ]
            )
            if enemy_health <= 0:
                enemy_defeated = True
                log.append(self._defeat_line(enemy))

        elif enemy_action == "attack":
            full_damage = calculate_damage(enemy.stats.attack, player.stats.defense, rng)
            enemy_damage = full_damage // GUARD_DIVISOR
            player_damage = player.stats.attack // COUNTER_DIVISOR
            player.stats.take_damage(enemy_damage)
            enemy_health -= player_damage
            log.extend(
                [
                    f"{player.name} raised their guard!",
                    f"The {enemy.name} attacked for {full_damage} damage, but you blocked most of it!",
                    f"You took {enemy_damage} damage and countered for {player_damage} damage!",
                ]
            )

        else:
            player_damage = enemy_damage = EXHAUSTION_DAMAGE
            player.stats.take_damage(EXHAUSTION_DAMAGE)
            enemy_health -= EXHAUSTION_DAMAGE
            log.extend(
                [
                    f"{player.name} and the {enemy.name} both brace for impact!",
                    "You circle each other warily. "
                    f"Both take {EXHAUSTION_DAMAGE} damage from exhaustion.",
                ]
            )

        result = CombatRoundResult(
            player_damage_dealt=player_damage,
            enemy_damage_dealt=enemy_damage,
            log_lines=tuple(log),
            enemy_defeated=enemy_defeated or enemy_health <= 0,
            player_defeated=not player.is_alive,
            enemy_health_after=enemy_health,
        )
        logger.debug(
            "Round %s/%s: dealt=%s taken=%s enemy_hp=%s player_hp=%s",
            player_action,
            enemy_action,
            player_damage,
            enemy_damage,
            enemy_health,
            player.stats.hp,
        )
        return result

    @staticmethod
    def _defeat_line(enemy: Enemy) -> str:
        return f"The {enemy.name} has been defeated! You gain experience and rest!"
