from pathlib import Path

import pytest

from epic_adventure.data import paths


def test_get_definitions_path_base_path(tmp_path: Path) -> None:
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_get_definitions_path_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(paths.DEFINITIONS_ENV_VAR, str(tmp_path))
    assert paths.get_definitions_path() == tmp_path


def test_default_definitions_ship_inside_the_package(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(paths.DEFINITIONS_ENV_VAR, raising=False)
    definitions_path = paths.get_definitions_path()

    package_dir = Path(paths.__file__).resolve().parent
    assert definitions_path == package_dir / "definitions"
    for name in ("difficulties.json", "enemies.json", "encounters.json"):
        assert (definitions_path / name).is_file()
