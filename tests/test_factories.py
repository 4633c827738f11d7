from __future__ import annotations

import pytest

from epic_adventure.data.repositories import DifficultiesRepository, EnemiesRepository
from epic_adventure.domain.defs import EnemyDef
from epic_adventure.services.errors import FactoryError
from epic_adventure.services.factories import create_enemy, create_player


@pytest.mark.parametrize(
    ("difficulty", "expected"),
    [("easy", (130, 20, 8)), ("medium", (100, 15, 5)), ("hard", (80, 12, 3))],
)
def test_create_player_applies_difficulty_bonuses(difficulty: str, expected: tuple[int, int, int]) -> None:
    player = create_player("  Hero  ", difficulty, difficulties_repo=DifficultiesRepository())

    assert player.name == "Hero"
    assert player.difficulty == difficulty
    assert player.level == 1
    assert (player.stats.max_hp, player.stats.attack, player.stats.defense) == expected
    assert player.stats.hp == player.stats.max_hp


def test_create_player_unknown_difficulty_raises() -> None:
    with pytest.raises(FactoryError):
        create_player("Hero", "nightmare", difficulties_repo=DifficultiesRepository())


def test_create_enemy_from_id() -> None:
    enemy = create_enemy(
        "dragon",
        "easy",
        enemies_repo=EnemiesRepository(),
        difficulties_repo=DifficultiesRepository(),
    )

    assert enemy.enemy_id == "dragon"
    assert enemy.stats.max_hp == 105
    assert enemy.stats.attack == 21
    assert enemy.stats.defense == 7
    assert enemy.aggression == 50
    assert not enemy.passive


def test_create_enemy_from_template_record() -> None:
    template = EnemyDef(
        id="wolf", name="Wolf", base_health=30, base_attack=9, base_defense=1, aggression=90
    )

    enemy = create_enemy(
        template,
        "medium",
        enemies_repo=EnemiesRepository(),
        difficulties_repo=DifficultiesRepository(),
    )

    assert enemy.name == "Wolf"
    assert enemy.stats.max_hp == 30


def test_rock_is_passive() -> None:
    enemy = create_enemy(
        "rock", "hard", enemies_repo=EnemiesRepository(), difficulties_repo=DifficultiesRepository()
    )

    assert enemy.passive
    assert enemy.stats.attack == 0


def test_create_enemy_unknown_id_raises() -> None:
    with pytest.raises(FactoryError):
        create_enemy(
            "goblin", "medium", enemies_repo=EnemiesRepository(), difficulties_repo=DifficultiesRepository()
        )
