"""Shared capability interface for everything that fights."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Union

from .stats import Stats

if TYPE_CHECKING:
    from .enemy import Enemy
    from .player import Player


class HasHealth(Protocol):
    """Anything with a name, a stat block and an alive check."""

    name: str
    stats: Stats

    @property
    def is_alive(self) -> bool: ...


Character = Union["Player", "Enemy"]
