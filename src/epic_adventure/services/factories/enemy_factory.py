"""Factory for creating enemy instances from templates."""
from __future__ import annotations

from epic_adventure.data.repositories import DifficultiesRepository, EnemiesRepository
from epic_adventure.domain.defs import EnemyDef
from epic_adventure.domain.enemy_scaling import scale_enemy_stats
from epic_adventure.domain.entities import Enemy
from epic_adventure.services.errors import FactoryError


def create_enemy(
    template: str | EnemyDef,
    difficulty_id: str,
    enemies_repo: EnemiesRepository,
    difficulties_repo: DifficultiesRepository,
) -> Enemy:
    """Instantiate an enemy scaled by the difficulty's multipliers.

    ``template`` is either an enemy id looked up in ``enemies_repo`` or an
    already-loaded ``EnemyDef``.
    """
    if isinstance(template, EnemyDef):
        enemy_def = template
    else:
        try:
            enemy_def = enemies_repo.get(template)
        except KeyError as exc:
            raise FactoryError(f"Enemy '{template}' not found.") from exc

    try:
        profile = difficulties_repo.get(difficulty_id)
    except KeyError as exc:
        raise FactoryError(f"Difficulty '{difficulty_id}' not found.") from exc

    return Enemy(
        enemy_id=enemy_def.id,
        name=enemy_def.name,
        stats=scale_enemy_stats(enemy_def, profile.enemy),
        aggression=enemy_def.aggression,
        passive=enemy_def.passive,
    )
