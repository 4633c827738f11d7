"""Damage calculation rules."""
from __future__ import annotations

import math

from epic_adventure.core.rng import RNG

DAMAGE_VARIANCE_MIN = 0.85
DAMAGE_VARIANCE_MAX = 1.15
MIN_DAMAGE = 3


def base_damage(attacker_power: int, defender_defense: int) -> int:
    """Attack minus half of defense, never below 1."""
    return max(attacker_power - defender_defense // 2, 1)


def damage_range(attacker_power: int, defender_defense: int) -> tuple[int, int]:
    """Return the inclusive variance band a hit is drawn from."""
    base = base_damage(attacker_power, defender_defense)
    low = max(math.floor(base * DAMAGE_VARIANCE_MIN), 1)
    high = max(math.floor(base * DAMAGE_VARIANCE_MAX), low)
    return low, high


def calculate_damage(attacker_power: int, defender_defense: int, rng: RNG) -> int:
    """Roll damage within the variance band, floored at MIN_DAMAGE."""
    low, high = damage_range(attacker_power, defender_defense)
    return max(rng.randint(low, high), MIN_DAMAGE)
