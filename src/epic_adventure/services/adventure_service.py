"""Adventure service sequencing the crossroad, encounters and the ending."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from epic_adventure.core.rng import RNG
from epic_adventure.core.types import Action
from epic_adventure.data.repositories import DifficultiesRepository, EncountersRepository
from epic_adventure.domain.combat_models import EncounterSession, RoundOutcome
from epic_adventure.domain.defs import EncounterDef
from epic_adventure.domain.state import GameState
from epic_adventure.services.combat_service import CombatService
from epic_adventure.services.errors import FactoryError
from epic_adventure.services.factories import create_player
from epic_adventure.services.progression_service import ProgressionService

logger = logging.getLogger(__name__)

_FIRST_VISIT_INTRO = "You find yourself suddenly teleported to an unfamiliar crossroad surrounded by {count} different paths."
_RETURN_INTRO = "You find yourself at the crossroad surrounded by {count} different paths."
_PATH_COUNT_WORDS = {1: "one", 2: "two", 3: "three", 4: "four", 5: "five", 6: "six"}


@dataclass(slots=True)
class CrossroadView:
    """Data returned to the presentation layer for the crossroad screen."""

    greeting: str
    intro: str
    path_descriptions: List[str]
    cleared_labels: List[str]
    prompt: str
    options: List[str] = field(default_factory=list)


@dataclass(slots=True)
class PathChoice:
    """Result of picking a direction at the crossroad."""

    encounter: EncounterDef
    already_cleared: bool = False


class AdventureService:
    """Application service that drives one playthrough."""

    def __init__(
        self,
        encounters_repo: EncountersRepository,
        difficulties_repo: DifficultiesRepository,
        combat_service: CombatService,
        progression_service: ProgressionService,
    ) -> None:
        self._encounters_repo = encounters_repo
        self._difficulties_repo = difficulties_repo
        self._combat_service = combat_service
        self._progression_service = progression_service

    # -----------------------
    # Session lifecycle
    # -----------------------
    def start_new_game(self, seed: int, player_name: str, difficulty: str) -> GameState:
        """Create the player and the list of paths unlocked for them."""
        player = create_player(player_name, difficulty, difficulties_repo=self._difficulties_repo)
        encounters = self._encounters_repo.for_player(player.name)
        state = GameState(
            seed=seed,
            rng=RNG(seed),
            difficulty=player.difficulty,
            player=player,
            encounter_ids=[encounter.id for encounter in encounters],
        )
        logger.debug(
            "New game seed=%s difficulty=%s paths=%s", seed, difficulty, state.encounter_ids
        )
        return state

    def is_complete(self, state: GameState) -> bool:
        return bool(state.encounter_ids) and set(state.cleared) >= set(state.encounter_ids)

    def finish(self, state: GameState) -> str:
        """Mark the run as won and return the congratulation text."""
        if not self.is_complete(state):
            raise ValueError("Cannot finish the adventure before every path is cleared.")
        state.outcome = "victory"
        return (
            f"Congratulations {state.player.name}!!! You have defeated all the enemies and "
            f"completed the epic adventure on {state.difficulty.upper()} mode!"
        )

    # -----------------------
    # Crossroad
    # -----------------------
    def get_crossroad_view(self, state: GameState) -> CrossroadView:
        encounters = self._encounters(state)
        count = _PATH_COUNT_WORDS.get(len(encounters), str(len(encounters)))
        template = _FIRST_VISIT_INTRO if state.first_visit else _RETURN_INTRO
        state.first_visit = False
        labels = [encounter.label for encounter in encounters]
        return CrossroadView(
            greeting=f"Hello {state.player.name}.",
            intro=template.format(count=count),
            path_descriptions=[encounter.crossroad_description for encounter in encounters],
            cleared_labels=[self._encounters_repo.get(enc_id).label for enc_id in state.cleared],
            prompt=f"Which direction will you choose? ({' / '.join(labels)})",
            options=labels,
        )

    def choose_path(self, state: GameState, choice: str) -> PathChoice:
        """Resolve a direction label (case-insensitive) or encounter id."""
        wanted = choice.strip().lower()
        for encounter in self._encounters(state):
            if wanted in (encounter.id, encounter.label.lower()):
                return PathChoice(encounter=encounter, already_cleared=encounter.id in state.cleared)
        raise ValueError(f"Unknown path '{choice}'.")

    # -----------------------
    # Encounters
    # -----------------------
    def begin_encounter(self, state: GameState, encounter: EncounterDef) -> EncounterSession:
        if encounter.kind != "combat" or encounter.enemy_id is None:
            raise FactoryError(f"Encounter '{encounter.id}' has no enemy to fight.")
        enemy = self._combat_service.create_enemy(encounter.enemy_id, state.difficulty)
        return EncounterSession(encounter=encounter, enemy=enemy, enemy_health=enemy.stats.max_hp)

    def play_round(self, state: GameState, session: EncounterSession, player_action: Action) -> RoundOutcome:
        """Let the enemy pick, resolve the round and settle the encounter.

        A double knockout counts as a victory: the enemy defeat is checked
        first and rewards are applied before the player's health is looked at.
        """
        if session.outcome is not None:
            raise ValueError("Encounter is already over.")

        enemy_action = self._combat_service.run_enemy_turn(session.enemy, session.enemy_health, state.rng)
        result = self._combat_service.resolve_round(
            player_action,
            enemy_action,
            state.player,
            session.enemy,
            session.enemy_health,
            rng=state.rng,
        )
        session.enemy_health = result.enemy_health_after
        session.rounds += 1

        level_up = None
        if result.enemy_defeated:
            session.outcome = "victory"
            level_up = self._progression_service.apply_victory_rewards(state.player)
            self._mark_cleared(state, session.encounter)
        elif result.player_defeated:
            session.outcome = "defeat"
            state.outcome = "game_over"
            logger.debug("%s fell to %s", state.player.name, session.enemy.name)

        return RoundOutcome(
            player_action=player_action,
            enemy_action=enemy_action,
            result=result,
            outcome=session.outcome,
            level_up=level_up,
        )

    def complete_rescue(self, state: GameState, encounter: EncounterDef) -> None:
        """Record a finished rescue scene as a cleared path."""
        if encounter.kind != "rescue":
            raise ValueError(f"Encounter '{encounter.id}' is not a rescue scene.")
        self._mark_cleared(state, encounter)

    # -----------------------
    # Helpers
    # -----------------------
    def _encounters(self, state: GameState) -> List[EncounterDef]:
        return [self._encounters_repo.get(enc_id) for enc_id in state.encounter_ids]

    def _mark_cleared(self, state: GameState, encounter: EncounterDef) -> None:
        if encounter.id not in state.cleared:
            state.cleared.append(encounter.id)
            logger.debug("Cleared path %s", encounter.id)
