"""Domain-level session state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

from epic_adventure.core.rng import RNG
from epic_adventure.core.types import Difficulty
from epic_adventure.domain.entities import Player

GameOutcome = Literal["victory", "game_over"]


@dataclass
class GameState:
    """Everything one playthrough owns; services borrow it per call."""

    seed: int
    rng: RNG
    difficulty: Difficulty
    player: Player
    encounter_ids: List[str] = field(default_factory=list)
    cleared: List[str] = field(default_factory=list)
    first_visit: bool = True
    outcome: GameOutcome | None = None

    @property
    def is_over(self) -> bool:
        return self.outcome is not None
