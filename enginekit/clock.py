"""Engine clock measuring time since start and time between updates."""

from __future__ import annotations

import time


class Clock:
    """Tracks elapsed seconds since ``start`` and the delta between updates."""

    def __init__(self):
        self.time = 0.0
        self.delta_time = 0.0
        self._start_ns = 0

    def start(self):
        """Mark the current instant as time zero."""
        self._start_ns = time.monotonic_ns()

    def update(self):
        """Advance to the current instant, at microsecond resolution."""
        elapsed_us = (time.monotonic_ns() - self._start_ns) // 1000
        new_time = elapsed_us / 1_000_000
        self.delta_time = new_time - self.time
        self.time = new_time