"""Factory for creating the player from a difficulty profile."""
from __future__ import annotations

from epic_adventure.data.repositories import DifficultiesRepository
from epic_adventure.domain.entities import Player, Stats
from epic_adventure.services.errors import FactoryError

PLAYER_BASE_HEALTH = 100
PLAYER_BASE_ATTACK = 15
PLAYER_BASE_DEFENSE = 5


def create_player(
    name: str,
    difficulty_id: str,
    difficulties_repo: DifficultiesRepository,
) -> Player:
    """Instantiate a level 1 player with the profile's stat bonuses."""
    try:
        profile = difficulties_repo.get(difficulty_id)
    except KeyError as exc:
        raise FactoryError(f"Difficulty '{difficulty_id}' not found.") from exc

    max_hp = PLAYER_BASE_HEALTH + profile.player.health
    stats = Stats(
        max_hp=max_hp,
        hp=max_hp,
        attack=PLAYER_BASE_ATTACK + profile.player.attack,
        defense=max(0, PLAYER_BASE_DEFENSE + profile.player.defense),
    )
    return Player(
        name=name.strip(),
        difficulty=profile.id,  # type: ignore[arg-type]
        stats=stats,
    )
