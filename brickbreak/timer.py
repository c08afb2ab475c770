"""Frame timer measuring the time between frames and the frame rate."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures elapsed time between successive calls to check_time."""

    def __init__(
        self,
        clock: Callable[[], int] = time.perf_counter_ns,
        ticks_per_second: int = 1_000_000_000,
    ) -> None:
        self._clock = clock
        self.ticks_per_second = ticks_per_second
        self.seconds_per_tick = 1.0 / ticks_per_second
        self._previous = clock()
        self.delta_time = 0.0
        self.frames_per_second = 0

    def check_time(self) -> None:
        """Sample the clock and update delta_time and frames_per_second."""
        current = self._clock()
        elapsed = current - self._previous
        self.delta_time = elapsed * self.seconds_per_tick
        self.frames_per_second = int(self.ticks_per_second / elapsed) if elapsed > 0 else 0
        self._previous = current
        if self.delta_time < 0.0:
            self.delta_time = 0.0