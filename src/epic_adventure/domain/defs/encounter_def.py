"""Encounter (scenario) definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EncounterKind = Literal["combat", "rescue"]


@dataclass(slots=True, frozen=True)
class EncounterDef:
    """Scripted scene reached by picking a path at the crossroad."""

    id: str
    kind: EncounterKind
    label: str
    crossroad_description: str
    intro_text: str
    victory_text: str
    defeat_text: str
    order: int
    enemy_id: str | None = None
    defeat_followup_prompt: str | None = None
    defeat_followup_text: str | None = None
    unlock_name: str | None = None

    def is_unlocked_for(self, player_name: str) -> bool:
        if self.unlock_name is None:
            return True
        return player_name.strip().lower() == self.unlock_name.lower()
