"""Enemy action selection."""
from __future__ import annotations

import logging

from epic_adventure.core.rng import RNG
from epic_adventure.core.types import Action
from epic_adventure.domain.entities import Enemy, health_percent

logger = logging.getLogger(__name__)

HIGH_HEALTH_THRESHOLD = 60
LOW_HEALTH_THRESHOLD = 30
WOUNDED_AGGRESSION_FACTOR = 0.7
DESPERATE_AGGRESSION_CUTOFF = 70
DESPERATE_WEIGHTS_AGGRESSIVE = (90, 10)
DESPERATE_WEIGHTS_CAUTIOUS = (30, 70)

_ACTIONS: tuple[Action, Action] = ("attack", "defend")


def action_weights(enemy: Enemy, enemy_health: int) -> tuple[float, float]:
    """Return (attack, defend) weights for the enemy's current health."""
    pct = health_percent(enemy_health, enemy.stats.max_hp)

    if pct > HIGH_HEALTH_THRESHOLD:
        return enemy.aggression, 100 - enemy.aggression
    if pct > LOW_HEALTH_THRESHOLD:
        attack_weight = enemy.aggression * WOUNDED_AGGRESSION_FACTOR
        return attack_weight, 100 - attack_weight
    if enemy.aggression > DESPERATE_AGGRESSION_CUTOFF:
        return DESPERATE_WEIGHTS_AGGRESSIVE
    return DESPERATE_WEIGHTS_CAUTIOUS


def choose_enemy_action(enemy: Enemy, enemy_health: int, rng: RNG) -> Action:
    """Pick attack or defend for this round.

    Passive enemies never attack; that check happens before any weights are
    computed and consumes no random draw.
    """
    if enemy.passive:
        logger.debug("%s is passive and defends", enemy.name)
        return "defend"
    weights = action_weights(enemy, enemy_health)
    action = rng.weighted_choice(_ACTIONS, weights)
    logger.debug("%s chose %s (weights=%s, health=%s)", enemy.name, action, weights, enemy_health)
    return action
