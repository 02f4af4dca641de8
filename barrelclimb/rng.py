"""Seeded random number source."""

from __future__ import annotations

import random
import time


class Random:
    """Random numbers from a Mersenne Twister, seeded from the clock by default."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self._generator = random.Random(seed)

    def random_int(self) -> int:
        """An integer in [0, 2**32 - 1]."""
        return self._generator.getrandbits(32)

    def random_float(self) -> float:
        """A float in [0.0, 1.0)."""
        return self._generator.random()

    def random_range(self, lo: int | float, hi: int | float) -> int | float:
        """An int in [lo, hi] for integer bounds, otherwise a float in [lo, hi)."""
        ints = all(
            isinstance(v, int) and not isinstance(v, bool) for v in (lo, hi)
        )
        if ints:
            if lo > hi:
                raise ValueError(f"empty range [{lo}, {hi}]")
            return self._generator.randint(lo, hi)
        lo, hi = float(lo), float(hi)
        return lo + (hi - lo) * self._generator.random()