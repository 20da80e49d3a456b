"""Frame timing."""

from __future__ import annotations

import time
from typing import Callable, Optional


class Clock:
    """Measures the time between calls to ``refresh``.

    ``counter`` returns a monotonic time in seconds.
    """

    def __init__(self, counter: Optional[Callable[[], float]] = None):
        self._counter = counter if counter is not None else time.perf_counter
        self._current = self._counter()
        self.delta_time = 0.0

    def refresh(self) -> float:
        """Take a new reading and return the seconds since the last one."""
        last = self._current
        self._current = self._counter()
        self.delta_time = self._current - last
        return self.delta_time