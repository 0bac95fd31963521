"""Seeded pseudo-random integer stream."""

import random


class SeededRandom:
    """
    Deterministic integer stream keyed by a seed.

    Uses a private ``random.Random`` instance, so two streams built from the
    same seed and driven by the same calls yield the same values.
    """

    def __init__(self, seed: int):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"Seed must be an integer, got {type(seed).__name__}")
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def next(self, max_exclusive: int) -> int:
        """
        Return a uniform integer in ``[0, max_exclusive)``.

        ``next(0)`` returns 0 without advancing the stream.

        Raises:
            ValueError: If ``max_exclusive`` is negative
        """
        if max_exclusive < 0:
            raise ValueError(f"max_exclusive must be non-negative, got {max_exclusive}")
        if max_exclusive == 0:
            return 0
        return self._random.randrange(max_exclusive)

    def next_in_range(self, min_inclusive: int, max_exclusive: int) -> int:
        """Return a uniform integer in ``[min_inclusive, max_exclusive)``."""
        if max_exclusive < min_inclusive:
            raise ValueError(
                f"max_exclusive ({max_exclusive}) must not be less than "
                f"min_inclusive ({min_inclusive})"
            )
        return min_inclusive + self.next(max_exclusive - min_inclusive)

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self._seed})"
