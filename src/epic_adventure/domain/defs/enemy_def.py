"""Enemy template definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class EnemyDef:
    """Unscaled enemy template."""

    id: str
    name: str
    base_health: int
    base_attack: int
    base_defense: int
    aggression: int
    passive: bool = False
