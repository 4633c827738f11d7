"""Factory helpers for runtime entities."""

from .enemy_factory import create_enemy
from .player_factory import (
    PLAYER_BASE_ATTACK,
    PLAYER_BASE_DEFENSE,
    PLAYER_BASE_HEALTH,
    create_player,
)

__all__ = [
    "PLAYER_BASE_ATTACK",
    "PLAYER_BASE_DEFENSE",
    "PLAYER_BASE_HEALTH",
    "create_enemy",
    "create_player",
]
