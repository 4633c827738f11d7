from pathlib import Path

import pytest

from epic_adventure.presentation.cli.config import SessionOptions, parse_options


def test_defaults_pause_between_screens() -> None:
    options = parse_options([])
    assert options == SessionOptions()
    assert options.step_mode is True
    assert options.text_display_mode == "step"


def test_instant_flag_disables_pauses() -> None:
    options = parse_options(["--instant"])
    assert options.step_mode is False
    assert options.text_display_mode == "instant"


def test_run_choices_skip_prompts(tmp_path: Path) -> None:
    options = parse_options(
        ["--seed", "42", "--difficulty", "HARD", "--name", "  Robert ", "--definitions", str(tmp_path)]
    )
    assert options.seed == 42
    assert options.difficulty == "hard"
    assert options.player_name == "Robert"
    assert options.definitions_dir == tmp_path


@pytest.mark.parametrize(
    "argv",
    [
        ["--difficulty", "nightmare"],
        ["--seed", "abc"],
        ["--name", "   "],
    ],
)
def test_bad_arguments_exit_with_usage(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_options(argv)
    assert excinfo.value.code == 2
