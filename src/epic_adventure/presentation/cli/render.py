"""Shared CLI rendering helpers."""
from __future__ import annotations

import logging
import os
from typing import Iterable, Sequence

from epic_adventure.domain.entities import Player

_BANNER_WIDTH = 50


def debug_enabled() -> bool:
    """Return True only when EPIC_DEBUG is explicitly set to '1'."""
    return os.getenv("EPIC_DEBUG") == "1"


def configure_logging() -> None:
    """Send library debug logs to stderr when debugging is switched on."""
    if debug_enabled():
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def render_banner(title: str) -> None:
    print("\n" + "=" * _BANNER_WIDTH)
    print(title)
    print("=" * _BANNER_WIDTH)


def render_welcome() -> None:
    stars = "*" * 32
    print(stars)
    print(stars)
    print("** Welcome to Epic Adventure! **")
    print(stars)
    print(stars)


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_text(text: str) -> None:
    print(text)


def render_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def render_health_status(player: Player, enemy_name: str, enemy_health: int) -> None:
    """Show both health totals; enemy health is never shown below zero."""
    print(f"\n{player.name}'s health: {player.stats.hp}")
    print(f"{enemy_name}'s health: {max(0, enemy_health)}")
    if debug_enabled():
        print(f"[level {player.level} | attack {player.stats.attack} | defense {player.stats.defense}]")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")
