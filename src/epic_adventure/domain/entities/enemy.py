"""Enemy runtime model."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

from .stats import Stats


@dataclass(slots=True)
class Enemy:
    """Represents a spawned, difficulty-scaled enemy for one encounter."""

    kind: ClassVar[Literal["enemy"]] = "enemy"

    enemy_id: str
    name: str
    stats: Stats
    aggression: int
    passive: bool = False

    @property
    def is_alive(self) -> bool:
        return self.stats.is_alive
