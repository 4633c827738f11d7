"""Difficulty profiles repository."""
from __future__ import annotations

from typing import Dict

from epic_adventure.core.types import DIFFICULTIES
from epic_adventure.data.errors import DataValidationError
from epic_adventure.data.repositories.base import RepositoryBase
from epic_adventure.domain.defs import DifficultyDef, EnemyMultipliers, PlayerBonuses, RewardTable

_STAT_KEYS = {"health", "attack", "defense"}


class DifficultiesRepository(RepositoryBase[DifficultyDef]):
    """Loads and validates difficulty profiles."""

    def __init__(self, base_path=None) -> None:
        super().__init__("difficulties.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, DifficultyDef]:
        profiles: Dict[str, DifficultyDef] = {}
        for raw_id, payload in raw.items():
            if raw_id not in DIFFICULTIES:
                raise DataValidationError(
                    f"Unknown difficulty '{raw_id}'; expected one of {list(DIFFICULTIES)}."
                )
            context = f"difficulty '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(data, {"name", "player", "enemy", "rewards"}, context)

            player = self._require_mapping(data["player"], f"{context} player")
            self._assert_exact_fields(player, _STAT_KEYS, f"{context} player")
            enemy = self._require_mapping(data["enemy"], f"{context} enemy")
            self._assert_exact_fields(enemy, _STAT_KEYS, f"{context} enemy")
            rewards = self._require_mapping(data["rewards"], f"{context} rewards")
            self._assert_exact_fields(rewards, {"health_recovery", "attack_gain"}, f"{context} rewards")

            multipliers = EnemyMultipliers(
                health=self._require_number(enemy["health"], f"{context} enemy health"),
                attack=self._require_number(enemy["attack"], f"{context} enemy attack"),
                defense=self._require_number(enemy["defense"], f"{context} enemy defense"),
            )
            if min(multipliers.health, multipliers.attack, multipliers.defense) < 0:
                raise DataValidationError(f"{context} enemy multipliers must be non-negative.")

            reward_table = RewardTable(
                health_recovery=self._require_int(rewards["health_recovery"], f"{context} health_recovery"),
                attack_gain=self._require_int(rewards["attack_gain"], f"{context} attack_gain"),
            )
            if reward_table.health_recovery < 0 or reward_table.attack_gain < 0:
                raise DataValidationError(f"{context} rewards must be non-negative.")

            profiles[raw_id] = DifficultyDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                player=PlayerBonuses(
                    health=self._require_int(player["health"], f"{context} player health"),
                    attack=self._require_int(player["attack"], f"{context} player attack"),
                    defense=self._require_int(player["defense"], f"{context} player defense"),
                ),
                enemy=multipliers,
                rewards=reward_table,
            )
        return profiles
