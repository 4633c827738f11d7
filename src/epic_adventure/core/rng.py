"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random
from typing import MutableSequence, Sequence, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        if a > b:
            raise ValueError(f"Invalid range: {a} > {b}.")
        return self._random.randint(a, b)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)

    def shuffle(self, seq: MutableSequence[T_co]) -> None:
        """Shuffle the sequence in-place."""
        self._random.shuffle(seq)

    def weighted_choice(self, options: Sequence[T_co], weights: Sequence[float]) -> T_co:
        """Return one option with probability proportional to its weight.

        The draw walks the options subtracting each weight from a point in
        ``[0, total)`` and returns the first option that brings the remainder
        to zero or below. When every weight is zero the walk never gets there
        and the last option is returned, so the result is deterministic.
        """
        if not options:
            raise ValueError("Cannot choose from an empty sequence.")
        if len(options) != len(weights):
            raise ValueError("Options and weights must have the same length.")
        if any(weight < 0 for weight in weights):
            raise ValueError("Weights must be non-negative.")

        remainder = self.random() * sum(weights)
        for option, weight in zip(options, weights):
            remainder -= weight
            if remainder <= 0 and weight > 0:
                return option
        return options[-1]
