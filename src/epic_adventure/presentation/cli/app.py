"""Console-driven UI loops for Epic Adventure."""
from __future__ import annotations

import secrets
from pathlib import Path
from typing import Dict, List, Literal, Sequence

from epic_adventure.core.types import DIFFICULTIES, Action, Difficulty
from epic_adventure.data.repositories import (
    DifficultiesRepository,
    EncountersRepository,
    EnemiesRepository,
)
from epic_adventure.domain.combat_models import RoundOutcome
from epic_adventure.domain.defs import EncounterDef
from epic_adventure.domain.state import GameState
from epic_adventure.services import (
    AdventureService,
    CombatService,
    CrossroadView,
    ProgressionService,
    RescueScene,
)

from .config import SessionOptions, parse_options
from .render import (
    configure_logging,
    render_banner,
    render_health_status,
    render_heading,
    render_lines,
    render_menu,
    render_text,
    render_welcome,
)

MenuAction = Literal["new_game", "options", "quit"]
_MAX_RANDOM_SEED = 2**31 - 1
_ACTION_CHOICES: Dict[str, Action] = {"1": "attack", "2": "defend", "attack": "attack", "defend": "defend"}


def main(argv: Sequence[str] | None = None) -> None:
    """Start the interactive CLI session."""
    options = parse_options(argv)
    configure_logging()
    adventure_service = _build_adventure_service(options.definitions_dir)
    render_welcome()
    running = True
    while running:
        action = _main_menu_loop()
        if action == "quit":
            running = False
            continue
        if action == "options":
            _options_menu(options)
            continue
        state = _start_new_game(adventure_service, options)
        _run_adventure_loop(adventure_service, state, step_mode=options.step_mode)
    print("Goodbye!")


def _main_menu_loop() -> MenuAction:
    while True:
        render_menu("Main Menu", ["New Game", "Options", "Quit"])
        choice = input("Select an option: ").strip()
        if choice == "1":
            return "new_game"
        if choice == "2":
            return "options"
        if choice == "3":
            return "quit"
        print("Invalid selection. Please enter 1, 2 or 3.")


def _options_menu(options: SessionOptions) -> None:
    """Switch the text display mode for the rest of this session."""
    render_menu(
        f"Options (text display: {options.text_display_mode})",
        ["Instant text", "Pause between screens", "Back"],
    )
    choice = input("Select an option: ").strip()
    if choice in ("1", "2"):
        options.step_mode = choice == "2"
        print(f"Text display set to {options.text_display_mode}.")


def _build_adventure_service(definitions_dir: Path | None = None) -> AdventureService:
    """Construct the AdventureService with concrete repositories."""
    difficulties_repo = DifficultiesRepository(base_path=definitions_dir)
    enemies_repo = EnemiesRepository(base_path=definitions_dir)
    encounters_repo = EncountersRepository(enemies_repo=enemies_repo, base_path=definitions_dir)
    return AdventureService(
        encounters_repo=encounters_repo,
        difficulties_repo=difficulties_repo,
        combat_service=CombatService(enemies_repo=enemies_repo, difficulties_repo=difficulties_repo),
        progression_service=ProgressionService(difficulties_repo=difficulties_repo),
    )


def _start_new_game(adventure_service: AdventureService, options: SessionOptions) -> GameState:
    seed = options.seed if options.seed is not None else _prompt_seed()
    difficulty = options.difficulty or _prompt_difficulty()
    player_name = options.player_name or _prompt_player_name()
    state = adventure_service.start_new_game(seed=seed, player_name=player_name, difficulty=difficulty)
    print(f"Game started with seed: {seed}")
    return state


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _prompt_difficulty() -> Difficulty:
    render_banner("SELECT YOUR DIFFICULTY:")
    while True:
        raw = input("\nChoose your difficulty (Easy / Medium / Hard)\n> ").strip().lower()
        if raw in DIFFICULTIES:
            print(f"  Difficulty set to: {raw.upper()}")
            return raw  # type: ignore[return-value]
        print("Invalid input. Please try again.")


def _prompt_player_name() -> str:
    while True:
        name = input("\nWhat is your name?\n> ").strip()
        if name:
            return name
        print("Please enter a name.")


def _pause(step_mode: bool, prompt: str = "[Continue]") -> None:
    if step_mode:
        input(prompt)


def _run_adventure_loop(adventure_service: AdventureService, state: GameState, *, step_mode: bool) -> None:
    """Run the crossroad loop until every path is cleared or the player dies."""
    while not state.is_over:
        if adventure_service.is_complete(state):
            render_text("\n" + adventure_service.finish(state) + "\n")
            input("Press ENTER to end game and get back to your life, loser.")
            return

        view = adventure_service.get_crossroad_view(state)
        _render_crossroad(view)
        choice = _prompt_path(adventure_service, state, view)
        if choice.already_cleared:
            print("You have already cleared this path. Try another direction.")
            _pause(step_mode)
            continue

        encounter = choice.encounter
        render_text(encounter.intro_text)
        _pause(step_mode)
        if encounter.kind == "rescue":
            _run_rescue_scene(adventure_service, state, encounter, step_mode=step_mode)
        else:
            _run_fight(adventure_service, state, encounter, step_mode=step_mode)

    if state.outcome == "game_over":
        render_text("\nUnfortunately, your adventure has come to an end.\n")
        input("Press ENTER to die.")
        render_text("\nx_x You died.\n")


def _render_crossroad(view: CrossroadView) -> None:
    render_text(f"\n{view.greeting}\n")
    render_text(view.intro + "\n")
    render_lines(view.path_descriptions)
    print()
    if view.cleared_labels:
        render_text(f"Defeated enemies: {', '.join(view.cleared_labels)}\n")


def _prompt_path(adventure_service: AdventureService, state: GameState, view: CrossroadView):
    while True:
        raw = input(view.prompt + "\n> ")
        try:
            return adventure_service.choose_path(state, raw)
        except ValueError:
            print("Invalid input. Please try again.")


def _prompt_action() -> Action:
    while True:
        raw = input("1. Attack   2. Defend\n> ").strip().lower()
        if raw in _ACTION_CHOICES:
            return _ACTION_CHOICES[raw]
        print("Invalid input. Please try again.")


def _run_fight(
    adventure_service: AdventureService,
    state: GameState,
    encounter: EncounterDef,
    *,
    step_mode: bool,
) -> None:
    session = adventure_service.begin_encounter(state, encounter)
    while session.outcome is None:
        render_health_status(state.player, session.enemy.name, session.enemy_health)
        action = _prompt_action()
        outcome = adventure_service.play_round(state, session, action)
        print()
        render_lines(outcome.result.log_lines)
        if outcome.outcome is None:
            _pause(step_mode)

    _render_fight_ending(outcome, encounter)
    _pause(step_mode)


def _render_fight_ending(outcome: RoundOutcome, encounter: EncounterDef) -> None:
    if outcome.outcome == "victory":
        if outcome.level_up is not None:
            level_up = outcome.level_up
            render_heading(f"Level {level_up.level}")
            print(
                f"Recovered {level_up.health_restored} health (now {level_up.health}), "
                f"attack +{level_up.attack_gained} (now {level_up.attack})."
            )
        render_text("\n" + encounter.victory_text)
        return

    render_text("\n" + encounter.defeat_text)
    if encounter.defeat_followup_prompt:
        input(encounter.defeat_followup_prompt)
        if encounter.defeat_followup_text:
            render_text(encounter.defeat_followup_text)


def _run_rescue_scene(
    adventure_service: AdventureService,
    state: GameState,
    encounter: EncounterDef,
    *,
    step_mode: bool,
) -> None:
    scene = RescueScene()
    for beat in scene.opening_beats():
        print()
        render_lines(beat)
        _pause(step_mode)

    while not scene.is_rescued:
        print()
        render_lines(scene.situation_lines())
        lines: List[str] = scene.choose(_prompt_rescue_choice())
        print()
        render_lines(lines)
        _pause(step_mode)

    adventure_service.complete_rescue(state, encounter)
    render_text("\n" + encounter.victory_text)
    _pause(step_mode)


def _prompt_rescue_choice():
    while True:
        raw = input("1. Help Marcus\n2. Tell him to get out\n> ").strip()
        if raw == "1":
            return "help"
        if raw == "2":
            return "shout"
        print("Invalid input. Please try again.")
