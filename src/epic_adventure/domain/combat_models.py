"""Combat domain models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from epic_adventure.core.types import Action, EncounterOutcome
from epic_adventure.domain.defs import EncounterDef
from epic_adventure.domain.entities import Enemy


@dataclass(slots=True, frozen=True)
class CombatRoundResult:
    """Outcome of one exchange of simultaneous actions."""

    player_damage_dealt: int
    enemy_damage_dealt: int
    log_lines: Tuple[str, ...]
    enemy_defeated: bool
    player_defeated: bool
    enemy_health_after: int


@dataclass(slots=True, frozen=True)
class LevelUpEvent:
    """Player stats right after a victory reward was applied."""

    level: int
    health: int
    attack: int
    health_restored: int
    attack_gained: int


@dataclass(slots=True)
class EncounterSession:
    """Tracks one fight; enemy health is counted here, not on the enemy."""

    encounter: EncounterDef
    enemy: Enemy
    enemy_health: int
    rounds: int = 0
    outcome: EncounterOutcome | None = None


@dataclass(slots=True, frozen=True)
class RoundOutcome:
    """What happened in a round, from the adventure's point of view."""

    player_action: Action
    enemy_action: Action
    result: CombatRoundResult
    outcome: EncounterOutcome | None = None
    level_up: LevelUpEvent | None = None
