"""Millisecond stopwatch used to measure frame times."""

from __future__ import annotations

import time
from typing import Callable

MIN_DELTA_MS = 0.01


class Timer:
    """Measures whole milliseconds elapsed on a monotonic clock.

    ``clock`` returns seconds; when ``start`` is False the timer counts from
    the clock's zero point.
    """

    def __init__(self, start: bool = True, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started = clock() if start else 0.0
        self._ended = self._started
        self.stopped = False

    def _elapsed_ms(self) -> float:
        return float(int((self._ended - self._started) * 1000))

    def stop_time(self, debug: bool = False) -> float:
        """Stop the timer and return the milliseconds since it started."""
        self.stopped = True
        self._ended = self._clock()
        ms = self._elapsed_ms()
        if debug:
            print(f"Timer stops at {ms} ms ")
        return ms

    def reset(self, debug: bool = False) -> float:
        """Return the milliseconds since the last start and start again.

        A stopped timer returns 0.0.
        """
        if self.stopped:
            if debug:
                print("Timer is stopped")
            return 0.0
        self._ended = self._clock()
        ms = self._elapsed_ms()
        self._started = self._clock()
        if debug:
            print(f"{ms} ms ")
        return ms

    def get_delta_time(self, debug: bool = False) -> float:
        """Like :meth:`reset`, but never less than 0.01."""
        return max(self.reset(debug), MIN_DELTA_MS)