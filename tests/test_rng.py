import pytest

from epic_adventure.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    ints_a = [rng_a.randint(1, 100) for _ in range(5)]
    ints_b = [rng_b.randint(1, 100) for _ in range(5)]
    floats_a = [rng_a.random() for _ in range(5)]
    floats_b = [rng_b.random() for _ in range(5)]
    choices_a = [rng_a.weighted_choice(["a", "b", "c"], [1, 2, 3]) for _ in range(5)]
    choices_b = [rng_b.weighted_choice(["a", "b", "c"], [1, 2, 3]) for _ in range(5)]

    assert ints_a == ints_b
    assert floats_a == floats_b
    assert choices_a == choices_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_randint_is_inclusive_and_rejects_inverted_range() -> None:
    rng = RNG(7)
    draws = {rng.randint(3, 5) for _ in range(200)}

    assert draws == {3, 4, 5}
    assert rng.randint(4, 4) == 4
    with pytest.raises(ValueError):
        rng.randint(5, 3)


def test_weighted_choice_all_zero_weights_returns_last_option() -> None:
    rng = RNG(1)

    picks = {rng.weighted_choice(["attack", "defend"], [0, 0]) for _ in range(50)}

    assert picks == {"defend"}


def test_weighted_choice_zero_weight_option_is_never_picked() -> None:
    rng = RNG(3)

    picks = {rng.weighted_choice(["attack", "defend"], [0, 100]) for _ in range(500)}

    assert picks == {"defend"}


def test_weighted_choice_respects_proportions() -> None:
    rng = RNG(2024)
    trials = 20000

    hits = sum(1 for _ in range(trials) if rng.weighted_choice(["a", "b"], [25, 75]) == "a")

    assert abs(hits / trials - 0.25) < 0.02


def test_weighted_choice_validates_arguments() -> None:
    rng = RNG(5)
    with pytest.raises(ValueError):
        rng.weighted_choice([], [])
    with pytest.raises(ValueError):
        rng.weighted_choice(["a", "b"], [1])
    with pytest.raises(ValueError):
        rng.weighted_choice(["a", "b"], [1, -1])
