"""Seedable random source shared by one generation run."""

import time
from decimal import ROUND_HALF_UP, Decimal

import numpy as np
from numpy.typing import NDArray

# Decimal places kept on per-run scale draws
SCALE_PRECISION = 4


def time_seed() -> int:
    """Return a non-reproducible seed derived from the wall clock."""
    return time.time_ns() & 0x7FFFFFFF


def round_half_away(value: float, precision: int = SCALE_PRECISION) -> float:
    """Round to a fixed number of decimals, ties away from zero.

    Python's ``round`` uses banker's rounding on the binary value, so the
    decimal module is used to pin the result.

    Args:
        value: Value to round.
        precision: Decimal places to keep.

    Returns:
        Rounded value.
    """
    quantum = Decimal(1).scaleb(-precision)
    # ROUND_HALF_UP rounds ties away from zero for both signs
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


class RandomSource:
    """Deterministic uniform [0, 1) draws for a single generation run.

    Wraps a numpy Generator. Every run calls ``reseed`` first so that the
    sequence of draws within the run depends only on the seed.
    """

    def __init__(self, seed: int | None = None):
        self.seed = 0
        self._rng = np.random.default_rng(0)
        self.reseed(seed)

    def reseed(self, seed: int | None = None) -> int:
        """Restart the sequence.

        Args:
            seed: Fixed seed, or None for a wall-clock seed.

        Returns:
            The seed actually used.
        """
        self.seed = time_seed() if seed is None else seed
        self._rng = np.random.default_rng(self.seed)
        return self.seed

    def uniform(self) -> float:
        """Draw one value in [0, 1)."""
        return float(self._rng.random())

    def uniforms(self, count: int) -> NDArray[np.float64]:
        """Draw ``count`` values in [0, 1), in sequence order."""
        return self._rng.random(count)

    def scaled(self, limit: float, precision: int = SCALE_PRECISION) -> float:
        """Draw a value in [0, limit) rounded to ``precision`` decimals."""
        return round_half_away(self.uniform() * limit, precision)
