"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


def health_percent(hp: int, max_hp: int) -> float:
    """Return hp as a percentage of max_hp; 0 when max_hp is not positive."""
    if max_hp <= 0:
        return 0.0
    return hp / max_hp * 100


@dataclass(slots=True)
class Stats:
    """Stores basic combat stats and owns the health clamping rules."""

    max_hp: int
    hp: int
    attack: int
    defense: int

    def __post_init__(self) -> None:
        self.hp = max(0, min(self.hp, self.max_hp))

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def health_percent(self) -> float:
        return health_percent(self.hp, self.max_hp)

    def take_damage(self, amount: int) -> int:
        """Reduce hp by ``amount`` without dropping below zero."""
        self.hp = max(0, self.hp - amount)
        return self.hp

    def heal(self, amount: int) -> int:
        """Restore hp by ``amount`` without exceeding max_hp."""
        self.hp = min(self.max_hp, self.hp + amount)
        return self.hp
