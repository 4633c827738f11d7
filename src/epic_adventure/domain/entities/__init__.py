"""Runtime entity exports."""

from .character import Character, HasHealth
from .enemy import Enemy
from .player import Player
from .stats import Stats, health_percent

__all__ = [
    "Character",
    "Enemy",
    "HasHealth",
    "Player",
    "Stats",
    "health_percent",
]
