"""Frame timer measuring time since the last reset."""

from __future__ import annotations

import time
from typing import Callable


def _default_clock() -> int:
    return int(time.monotonic() * 1000)


class Timer:
    """Measures elapsed time since the last reset, in ticks (ms) and seconds."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _default_clock
        self.time_scale = 1.0
        self.reset()

    def reset(self) -> None:
        self._start_ticks = self._clock()
        self._elapsed_ticks = 0
        self._delta_time = 0.0

    def update(self) -> None:
        self._elapsed_ticks = self._clock() - self._start_ticks
        self._delta_time = self._elapsed_ticks * 0.001

    @property
    def delta_time(self) -> float:
        """Seconds elapsed between the last reset and the last update."""
        return self._delta_time

    @property
    def elapsed_ticks(self) -> int:
        return self._elapsed_ticks