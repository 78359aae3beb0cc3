"""Seedable random source injected into generation.

Generation never touches the global ``random`` module: every call receives a
``Random`` instance, so the same seed always yields the same level.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")
Seed = str | int

logger = logging.getLogger(__name__)

DEFAULT_SEED = "standard"


class Random:
    """Reseedable random number generator.

    Seeds are normalized to strings, so ``Random(42)`` and ``Random("42")``
    produce the same sequence.
    """

    def __init__(self, seed: Seed = DEFAULT_SEED) -> None:
        self._seed = str(seed)
        self._source = random.Random(self._seed)

    @property
    def seed(self) -> str:
        """The seed the generator was last (re)initialized with."""
        return self._seed

    def next_float(self) -> float:
        """Return a float in [0, 1)."""
        return self._source.random()

    def int_range(self, min_value: int, max_value: int) -> int:
        """Return an integer in [min_value, max_value)."""
        if min_value >= max_value:
            raise ValueError(
                f"Empty range: min {min_value} must be lower than max {max_value}"
            )
        return self._source.randrange(min_value, max_value)

    def select_from(self, *values: T) -> T:
        """Return one of the given values."""
        if not values:
            raise ValueError("select_from() requires at least one value")
        return values[self.int_range(0, len(values))]

    def select_many(
        self,
        values: Sequence[T],
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[T]:
        """Return between min_count and max_count distinct values.

        The input sequence is left untouched.
        """
        if not values:
            return []
        n = len(values)
        if min_count > n:
            raise ValueError(
                f"min_count {min_count} cannot be greater than {n} values"
            )
        upper = n if max_count is None else min(n, max_count)
        k = self.int_range(min_count, upper + 1)
        return self._source.sample(list(values), k)

    def shuffle(self, values: list[T]) -> list[T]:
        """Shuffle a list in place and return it."""
        self._source.shuffle(values)
        return values

    def reset(self, seed: Seed | None = None) -> None:
        """Reseed the generator.

        Without an argument (or with the current seed), the generator is
        rewound to the start of its current sequence.
        """
        if seed is not None and str(seed) != self._seed:
            logger.debug(
                "Resetting RNG with new seed=%s, previous seed=%s", seed, self._seed
            )
            self._seed = str(seed)
        else:
            logger.debug("Resetting RNG with same seed=%s", self._seed)
        self._source.seed(self._seed)
