"""Helpers for resolving data file locations."""
from __future__ import annotations

import os
from pathlib import Path

DEFINITIONS_ENV_VAR = "EPIC_DEFINITIONS_DIR"


def get_packaged_definitions_path() -> Path:
    """Return the definitions directory shipped inside the package."""
    return Path(__file__).resolve().parent / "definitions"


def get_definitions_path(base_path: Path | str | None = None) -> Path:
    """Return the directory containing JSON definition files.

    An explicit ``base_path`` wins, then the ``EPIC_DEFINITIONS_DIR``
    environment variable, then the definitions bundled with the package.
    """
    if base_path is not None:
        return Path(base_path)
    override = os.environ.get(DEFINITIONS_ENV_VAR)
    if override:
        return Path(override)
    return get_packaged_definitions_path()
