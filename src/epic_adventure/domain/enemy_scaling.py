"""Deterministic enemy stat scaling helpers."""
from __future__ import annotations

import math

from epic_adventure.domain.defs import EnemyDef, EnemyMultipliers
from epic_adventure.domain.entities import Stats

# Multipliers are applied to the template and truncated toward zero, so a
# medium profile (1.0 across the board) reproduces the template exactly.


def scale_enemy_stats(template: EnemyDef, multipliers: EnemyMultipliers) -> Stats:
    max_hp = math.trunc(template.base_health * multipliers.health)
    attack = math.trunc(template.base_attack * multipliers.attack)
    defense = math.trunc(template.base_defense * multipliers.defense)
    return Stats(
        max_hp=max_hp,
        hp=max_hp,
        attack=attack,
        defense=max(0, defense),
    )
