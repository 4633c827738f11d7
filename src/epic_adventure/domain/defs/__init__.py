"""Domain definition exports."""

from .difficulty_def import DifficultyDef, EnemyMultipliers, PlayerBonuses, RewardTable
from .encounter_def import EncounterDef
from .enemy_def import EnemyDef

__all__ = [
    "DifficultyDef",
    "EncounterDef",
    "EnemyDef",
    "EnemyMultipliers",
    "PlayerBonuses",
    "RewardTable",
]
