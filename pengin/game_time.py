"""Frame timing with a fixed-step lag accumulator."""

from __future__ import annotations

import time
from typing import Callable


class GameTime:
    """Tracks frame time and accumulated lag for fixed-step updates."""

    MS_PER_FRAME = 16.7
    MS_FIXED_TIME_STEP = 20.0

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last_time = clock()
        self._elapsed_sec = 0.0
        self._ms_lag = 0.0

    def elapsed_sec(self) -> float:
        """Seconds between the last two updates."""
        return self._elapsed_sec

    def fixed_time_step(self) -> float:
        """The fixed update step in seconds."""
        return self.MS_FIXED_TIME_STEP / 1000.0

    def is_lag(self) -> bool:
        """Whether at least one fixed step of lag has built up."""
        return self._ms_lag >= self.MS_FIXED_TIME_STEP

    def process_lag(self) -> None:
        """Consume one fixed step of lag."""
        self._ms_lag -= self.MS_FIXED_TIME_STEP

    def update(self) -> None:
        """Measure the time since the previous update and add it to the lag."""
        now = self._clock()
        self._elapsed_sec = now - self._last_time
        self._ms_lag += self._elapsed_sec * 1000.0
        self._last_time = self._clock()

    def sleep_time(self) -> float:
        """Seconds left until the next frame is due (negative when late)."""
        frame_sec = int(self.MS_PER_FRAME) / 1000.0
        return self._last_time + frame_sec - self._clock()