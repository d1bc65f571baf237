"""A simple stopwatch."""

from __future__ import annotations

import time


class Timer:
    """A stopwatch that starts on creation and records elapsed time when stopped."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0
        self.is_running = False
        self.microseconds = 0
        self.milliseconds = 0.0
        self.seconds = 0.0
        self.start()

    @staticmethod
    def now() -> float:
        return time.perf_counter()

    def start(self) -> None:
        """Start (or restart) timing."""
        self._start = self.now()
        self.is_running = True

    def stop(self) -> None:
        """Stop timing and record the elapsed time."""
        self._end = self.now()
        self.is_running = False
        elapsed = self.elapsed()
        self.microseconds = int(elapsed * 1_000_000)
        self.milliseconds = self.microseconds / 1000.0
        self.seconds = self.microseconds / 1_000_000.0

    def elapsed(self) -> float:
        """Seconds since start, up to now if running or up to the stop otherwise."""
        if self.is_running:
            return self.now() - self._start
        return self._end - self._start

    def copy(self) -> Timer:
        """Return an independent copy of this timer's state."""
        other = Timer.__new__(Timer)
        other.__dict__.update(self.__dict__)
        return other