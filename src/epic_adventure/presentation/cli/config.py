"""Per-run CLI options parsed from the command line.

Nothing is written to disk; every choice here lasts for one session.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from epic_adventure.core.types import DIFFICULTIES, Difficulty


@dataclass(slots=True)
class SessionOptions:
    """Choices that shape one run of the game."""

    step_mode: bool = True
    seed: int | None = None
    difficulty: Difficulty | None = None
    player_name: str | None = None
    definitions_dir: Path | None = None

    @property
    def text_display_mode(self) -> str:
        return "step" if self.step_mode else "instant"


def _player_name(value: str) -> str:
    name = value.strip()
    if not name:
        raise argparse.ArgumentTypeError("name must not be blank")
    return name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="epic-adventure",
        description="Clear every path around the crossroad without dying.",
    )
    parser.add_argument(
        "--instant",
        dest="step_mode",
        action="store_false",
        help="Print every screen without waiting for ENTER between rounds.",
    )
    parser.add_argument("--seed", type=int, help="Seed for a reproducible run (skips the seed prompt).")
    parser.add_argument(
        "--difficulty",
        type=str.lower,
        choices=DIFFICULTIES,
        help="Difficulty for new games (skips the difficulty prompt).",
    )
    parser.add_argument("--name", dest="player_name", type=_player_name, help="Player name (skips the name prompt).")
    parser.add_argument(
        "--definitions",
        dest="definitions_dir",
        type=Path,
        help="Directory holding difficulties.json, enemies.json and encounters.json.",
    )
    return parser


def parse_options(argv: Sequence[str] | None = None) -> SessionOptions:
    """Parse ``argv`` (``sys.argv[1:]`` when None) into session options."""
    args = build_parser().parse_args(argv)
    return SessionOptions(
        step_mode=args.step_mode,
        seed=args.seed,
        difficulty=args.difficulty,
        player_name=args.player_name,
        definitions_dir=args.definitions_dir,
    )
