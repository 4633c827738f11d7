from __future__ import annotations

import pytest

from epic_adventure.core.rng import RNG
from epic_adventure.data.repositories import DifficultiesRepository, EnemiesRepository
from epic_adventure.domain.entities import Enemy, Player, Stats
from epic_adventure.services.combat_service import EXHAUSTION_DAMAGE, CombatService
from tests.helpers.rng_stubs import MaxRNG, MinRNG, ScriptedRNG


def _service() -> CombatService:
    return CombatService(enemies_repo=EnemiesRepository(), difficulties_repo=DifficultiesRepository())


def _player(hp: int = 100, attack: int = 15, defense: int = 5) -> Player:
    return Player(name="Tester", difficulty="medium", stats=Stats(max_hp=100, hp=hp, attack=attack, defense=defense))


def _enemy(attack: int = 15, defense: int = 3, max_hp: int = 50) -> Enemy:
    return Enemy(
        enemy_id="bear",
        name="Bear",
        stats=Stats(max_hp=max_hp, hp=max_hp, attack=attack, defense=defense),
        aggression=75,
    )


def test_attack_attack_reference_round() -> None:
    player = _player()
    result = _service().resolve_round("attack", "attack", player, _enemy(), 50, rng=MinRNG())

    assert result.player_damage_dealt == 11
    assert result.enemy_health_after == 39
    assert result.enemy_damage_dealt == 11
    assert player.stats.hp == 89
    assert not result.enemy_defeated
    assert not result.player_defeated
    assert result.log_lines == (
        "Tester attacked and dealt 11 damage!",
        "The Bear attacked back and dealt 11 damage!",
    )


def test_attack_attack_kill_suppresses_retaliation() -> None:
    player = _player()
    rng = MinRNG()
    result = _service().resolve_round("attack", "attack", player, _enemy(), 5, rng=rng)

    assert result.enemy_defeated
    assert result.enemy_health_after == 5 - 11
    assert result.enemy_damage_dealt == 0
    assert player.stats.hp == 100
    assert len(rng.randint_calls) == 1
    assert result.log_lines == (
        "Tester attacked and dealt 11 damage!",
        "The Bear has been defeated! You gain experience and rest!",
    )


def test_attack_defend_halves_damage_and_counter_always_lands() -> None:
    player = _player()
    # Full hit of 16 halves to 8; counter is 15 // 3 = 5.
    result = _service().resolve_round("attack", "defend", player, _enemy(), 8, rng=MaxRNG())

    assert result.player_damage_dealt == 8
    assert result.enemy_damage_dealt == 5
    assert result.enemy_health_after == 0
    assert result.enemy_defeated
    assert player.stats.hp == 95
    assert result.log_lines == (
        "Tester attacked for 16 damage!",
        "The Bear raised its guard and blocked most of it! Only took 8 damage.",
        "Its counterattack dealt 5 damage to you!",
        "The Bear has been defeated! You gain experience and rest!",
    )


def test_attack_defend_without_kill_has_three_lines() -> None:
    result = _service().resolve_round("attack", "defend", _player(), _enemy(), 50, rng=MinRNG())

    assert result.enemy_health_after == 50 - 5
    assert len(result.log_lines) == 3
    assert not result.enemy_defeated


def test_defend_attack_halves_incoming_and_counters_for_a_third() -> None:
    player = _player()
    # Enemy full hit: base 15 - 2 = 13, min draw 11, halved to 5; counter 15 // 3 = 5.
    result = _service().resolve_round("defend", "attack", player, _enemy(), 50, rng=MinRNG())

    assert result.enemy_damage_dealt == 5
    assert result.player_damage_dealt == 5
    assert player.stats.hp == 95
    assert result.enemy_health_after == 45
    assert result.log_lines == (
        "Tester raised their guard!",
        "The Bear attacked for 11 damage, but you blocked most of it!",
        "You took 5 damage and countered for 5 damage!",
    )


def test_defend_attack_counter_can_finish_the_enemy() -> None:
    result = _service().resolve_round("defend", "attack", _player(), _enemy(), 4, rng=MinRNG())

    assert result.enemy_defeated
    assert result.enemy_health_after == -1
    assert len(result.log_lines) == 3


@pytest.mark.parametrize("stats", [(15, 5, 15, 3), (40, 20, 1, 0), (1, 0, 99, 50)])
def test_defend_defend_costs_both_sides_exactly_two(stats: tuple[int, int, int, int]) -> None:
    p_atk, p_def, e_atk, e_def = stats
    player = _player(attack=p_atk, defense=p_def)
    rng = MinRNG()
    result = _service().resolve_round(
        "defend", "defend", player, _enemy(attack=e_atk, defense=e_def), 30, rng=rng
    )

    assert player.stats.hp == 100 - EXHAUSTION_DAMAGE
    assert result.enemy_health_after == 30 - EXHAUSTION_DAMAGE
    assert rng.randint_calls == []
    assert result.log_lines == (
        "Tester and the Bear both brace for impact!",
        "You circle each other warily. Both take 2 damage from exhaustion.",
    )


def test_player_health_is_clamped_at_zero() -> None:
    player = _player(hp=3)
    result = _service().resolve_round("attack", "attack", player, _enemy(attack=60), 50, rng=MinRNG())

    assert player.stats.hp == 0
    assert result.player_defeated


def test_double_knockout_reports_both_flags() -> None:
    player = _player(hp=2)
    result = _service().resolve_round("defend", "defend", player, _enemy(), 2, rng=MinRNG())

    assert result.enemy_defeated
    assert result.player_defeated


def test_enemy_record_health_is_not_touched() -> None:
    enemy = _enemy()
    _service().resolve_round("attack", "attack", _player(), enemy, 20, rng=MinRNG())

    assert enemy.stats.hp == enemy.stats.max_hp


def test_unknown_action_fails_fast_without_mutation() -> None:
    player = _player()
    with pytest.raises(ValueError):
        _service().resolve_round("flee", "attack", player, _enemy(), 50, rng=MinRNG())  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        _service().resolve_round("attack", "taunt", player, _enemy(), 50, rng=MinRNG())  # type: ignore[arg-type]
    assert player.stats.hp == 100


def test_round_resolution_deterministic_for_seed() -> None:
    service = _service()
    player_a, player_b = _player(), _player()

    result_a = service.resolve_round("attack", "attack", player_a, _enemy(), 50, rng=RNG(77))
    result_b = service.resolve_round("attack", "attack", player_b, _enemy(), 50, rng=RNG(77))

    assert result_a == result_b
    assert player_a.stats.hp == player_b.stats.hp


def test_scripted_draws_are_consumed_player_first() -> None:
    player = _player()
    result = _service().resolve_round("attack", "attack", player, _enemy(), 50, rng=ScriptedRNG([13, 12]))

    assert result.player_damage_dealt == 13
    assert result.enemy_damage_dealt == 12


def test_create_enemy_scales_by_difficulty() -> None:
    enemy = _service().create_enemy("bear", "hard")

    assert enemy.name == "Bear"
    assert enemy.stats.max_hp == 70
    assert enemy.stats.attack == 19
    assert enemy.stats.defense == 3
    assert enemy.aggression == 75


def test_run_enemy_turn_uses_policy() -> None:
    service = _service()
    rock = service.create_enemy("rock", "medium")

    assert service.run_enemy_turn(rock, rock.stats.max_hp, RNG(1)) == "defend"
