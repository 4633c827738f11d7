"""Difficulty profile definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PlayerBonuses:
    """Flat deltas applied to the player's base stats."""

    health: int
    attack: int
    defense: int


@dataclass(slots=True, frozen=True)
class EnemyMultipliers:
    """Scaling applied to enemy templates; results are truncated."""

    health: float
    attack: float
    defense: float


@dataclass(slots=True, frozen=True)
class RewardTable:
    """Amounts granted to the player after each victory."""

    health_recovery: int
    attack_gain: int


@dataclass(slots=True, frozen=True)
class DifficultyDef:
    """Read-only difficulty profile keyed by difficulty id."""

    id: str
    name: str
    player: PlayerBonuses
    enemy: EnemyMultipliers
    rewards: RewardTable
