"""Frame timing and frames-per-second reporting."""

from __future__ import annotations

import time
from typing import Callable


class Time:
    """Measures the time between frames and reports FPS once a second."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._prev = 0.0
        self._delta = 0.0
        self._second = 0.0

    @property
    def delta_time(self) -> float:
        """Seconds between the last two updates."""
        return self._delta

    def initialize(self) -> None:
        """Start measuring from now."""
        self._prev = self._clock()

    def update(self) -> None:
        """Measure the time since the previous update."""
        current = self._clock()
        self._delta = current - self._prev
        self._prev = current

    def render(self, set_title: Callable[[str], None]) -> str | None:
        """Once more than a second has gone by, show the FPS through set_title.

        Returns the text shown, or None when nothing was shown.
        """
        self._second += self._delta
        if self._second <= 1.0:
            return None
        fps = 1.0 / self._delta if self._delta > 0 else 0.0
        text = f"FPS:{int(fps)}"
        set_title(text)
        self._second = 0.0
        return text