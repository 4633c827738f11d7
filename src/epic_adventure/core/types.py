"""Shared type aliases for the core and domain layers."""
from typing import Literal

Action = Literal["attack", "defend"]
Difficulty = Literal["easy", "medium", "hard"]
EncounterOutcome = Literal["victory", "defeat"]

ACTIONS: tuple[Action, ...] = ("attack", "defend")
DIFFICULTIES: tuple[Difficulty, ...] = ("easy", "medium", "hard")

__all__ = ["ACTIONS", "DIFFICULTIES", "Action", "Difficulty", "EncounterOutcome"]
