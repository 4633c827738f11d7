"""Enemies repository."""
from __future__ import annotations

from typing import Dict

from epic_adventure.data.errors import DataValidationError
from epic_adventure.data.repositories.base import RepositoryBase
from epic_adventure.domain.defs import EnemyDef


class EnemiesRepository(RepositoryBase[EnemyDef]):
    """Loads and validates enemy templates."""

    def __init__(self, base_path=None) -> None:
        super().__init__("enemies.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EnemyDef]:
        enemies: Dict[str, EnemyDef] = {}
        for raw_id, payload in raw.items():
            context = f"enemy '{raw_id}'"
            enemy_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                enemy_data,
                {"name", "base_health", "base_attack", "base_defense", "aggression"},
                context,
                optional_fields={"passive"},
            )

            aggression = self._require_int(enemy_data["aggression"], f"{context} aggression")
            if not 0 <= aggression <= 100:
                raise DataValidationError(f"{context} aggression must be between 0 and 100.")

            base_health = self._require_int(enemy_data["base_health"], f"{context} base_health")
            base_attack = self._require_int(enemy_data["base_attack"], f"{context} base_attack")
            base_defense = self._require_int(enemy_data["base_defense"], f"{context} base_defense")
            if base_health <= 0:
                raise DataValidationError(f"{context} base_health must be positive.")
            if base_attack < 0 or base_defense < 0:
                raise DataValidationError(f"{context} base_attack and base_defense must be non-negative.")

            enemies[raw_id] = EnemyDef(
                id=raw_id,
                name=self._require_str(enemy_data["name"], f"{context} name"),
                base_health=base_health,
                base_attack=base_attack,
                base_defense=base_defense,
                aggression=aggression,
                passive=self._require_bool(enemy_data.get("passive", False), f"{context} passive"),
            )
        return enemies
