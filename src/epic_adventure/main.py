"""Console entry point (``epic-adventure`` or ``python -m epic_adventure.main``)."""
from __future__ import annotations

from .presentation.cli.app import main as run_cli


def main() -> None:
    run_cli()


if __name__ == "__main__":
    main()
