"""Repository exports."""

from .difficulties_repo import DifficultiesRepository
from .enemies_repo import EnemiesRepository
from .encounters_repo import EncountersRepository

__all__ = [
    "DifficultiesRepository",
    "EnemiesRepository",
    "EncountersRepository",
]
