"""Victory rewards and level progression."""
from __future__ import annotations

import logging

from epic_adventure.data.repositories import DifficultiesRepository
from epic_adventure.domain.combat_models import LevelUpEvent
from epic_adventure.domain.defs import RewardTable
from epic_adventure.domain.entities import Player

logger = logging.getLogger(__name__)


class ProgressionService:
    """Applies the difficulty reward table after each won encounter."""

    def __init__(self, difficulties_repo: DifficultiesRepository) -> None:
        self._difficulties_repo = difficulties_repo

    def apply_victory_rewards(self, player: Player) -> LevelUpEvent:
        """Heal (capped at max hp), add attack and bump the level."""
        rewards = self._rewards_for(player)
        before_hp = player.stats.hp
        player.stats.hp = min(player.stats.hp + rewards.health_recovery, player.stats.max_hp)
        player.stats.attack += rewards.attack_gain
        player.level += 1
        return self._event(player, rewards, before_hp)

    def level_up(self, player: Player) -> LevelUpEvent:
        """Level first, then attack, then heal through the stat block.

        Same end state as ``apply_victory_rewards``; kept for callers that
        drive progression from the player's side.
        """
        rewards = self._rewards_for(player)
        before_hp = player.stats.hp
        player.level += 1
        player.stats.attack += rewards.attack_gain
        player.stats.heal(rewards.health_recovery)
        return self._event(player, rewards, before_hp)

    def _rewards_for(self, player: Player) -> RewardTable:
        # Difficulty ids are validated when the player is created.
        return self._difficulties_repo.get(player.difficulty).rewards

    @staticmethod
    def _event(player: Player, rewards: RewardTable, before_hp: int) -> LevelUpEvent:
        event = LevelUpEvent(
            level=player.level,
            health=player.stats.hp,
            attack=player.stats.attack,
            health_restored=player.stats.hp - before_hp,
            attack_gained=rewards.attack_gain,
        )
        logger.debug("%s reached level %s: %s", player.name, player.level, event)
        return event
