"""
Random number generation utilities.

Every randomized decision of region generation draws from a
``RandomSource``. There is no process-wide generator: callers create a
source, seed it, and hand it to the code that needs it. Python's random
and NumPy's random are not used so that a seed reproduces the same trace
on every platform.
"""

import math
from typing import Optional, Sequence, TypeVar

from .lcg_prng import LcgPRNG

T = TypeVar("T")


class RandomSource:
    """Seedable source of integer and uniform draws."""

    def __init__(self, seed: Optional[float] = None):
        """
        Create a random source.

        Args:
            seed: Initial seed. Defaults to the configured default seed.
        """
        if seed is None:
            from ..config import settings

            seed = settings.default_seed
        self.seed(seed)

    def seed(self, value: float) -> None:
        """
        Reset the stream.

        Only the stream position is discarded; the source object stays the
        same so anything holding a reference keeps drawing from it.

        Args:
            value: Seed value
        """
        self._seed = value
        self._prng = LcgPRNG(value)

    @property
    def current_seed(self) -> float:
        """Seed the stream was last reset with."""
        return self._seed

    @property
    def call_count(self) -> int:
        """Number of draws taken since the last reseed."""
        return self._prng.call_count

    def next_uniform(self) -> float:
        """Return a uniform value in [0, 1)."""
        return self._prng.random()

    def next_int(self, low: int, high: int) -> int:
        """
        Return a uniformly distributed integer in [low, high).

        Args:
            low: Inclusive lower bound
            high: Exclusive upper bound

        Returns:
            Random integer
        """
        low = math.floor(low)
        span = math.floor(high) - low
        return math.floor(self._prng.random() * span + low)

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.next_int(0, len(seq))]
