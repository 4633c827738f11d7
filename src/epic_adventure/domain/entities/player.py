"""Player runtime model."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

from epic_adventure.core.types import Difficulty

from .stats import Stats


@dataclass(slots=True)
class Player:
    """Represents the adventurer for the whole session."""

    kind: ClassVar[Literal["player"]] = "player"

    name: str
    difficulty: Difficulty
    stats: Stats
    level: int = 1

    @property
    def is_alive(self) -> bool:
        return self.stats.is_alive
