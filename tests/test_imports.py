def test_import_package() -> None:
    import importlib

    module = importlib.import_module("epic_adventure")
    assert module is not None


def test_import_rng_no_side_effects() -> None:
    from epic_adventure.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_import_cli_entry_point() -> None:
    from epic_adventure.main import main

    assert callable(main)
