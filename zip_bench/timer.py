import time
from contextlib import contextmanager
from typing import Callable, Optional

from zip_bench.errors import TimerAlreadyPausedError, TimerAlreadyRunningError


def format_seconds(seconds: float) -> str:
    """Renders a duration as ``"<seconds>.<millis> seconds"``.

    Milliseconds are truncated, not rounded, and zero-padded to 3 digits.
    """
    total_ns = int(round(seconds * 1_000_000_000))
    secs, rem_ns = divmod(total_ns, 1_000_000_000)
    millis = rem_ns // 1_000_000
    return f"{secs}.{millis:03d} seconds"


class ElapsedTimer:
    """Accumulating stopwatch that can be paused and resumed.

    The timer is created paused with nothing accumulated. Only completed
    intervals are added to `accumulated`; `total()` also counts the interval
    that is currently open.
    """

    accumulated: float
    running_since: Optional[float]

    __slots__ = ["accumulated", "running_since", "_clock"]

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self.accumulated = 0.
        self.running_since = None
        self._clock = clock

    @property
    def is_running(self) -> bool:
        return self.running_since is not None

    def start(self):
        """Opens a new interval.

        Raises:
            TimerAlreadyRunningError: If the timer is already running.
        """
        if self.running_since is not None:
            raise TimerAlreadyRunningError("Timer is already running")
        self.running_since = self._clock()

    def pause(self):
        """Closes the open interval and adds it to the accumulated time.

        Raises:
            TimerAlreadyPausedError: If the timer is already paused.
        """
        if self.running_since is None:
            raise TimerAlreadyPausedError("Timer is already paused")
        self.accumulated += self._clock() - self.running_since
        self.running_since = None

    def resume(self):
        """Reopens the timer after `pause()`.

        Raises:
            TimerAlreadyRunningError: If the timer is already running.
        """
        self.start()

    def resume_if_paused(self):
        """Resumes a paused timer; does nothing if it is already running."""
        if self.running_since is None:
            self.running_since = self._clock()

    def total(self) -> float:
        """Returns the accumulated time plus the open interval, if any."""
        if self.running_since is None:
            return self.accumulated
        return self.accumulated + (self._clock() - self.running_since)

    @contextmanager
    def excluded(self):
        """Pauses the timer for the duration of a block.

        The timer is resumed on exit even if the block raises, so work such
        as file setup or filler tasks is kept out of the measurement.

        Yields:
            None
        """

        self.pause()
        try:
            yield
        finally:
            self.resume()

    def __str__(self) -> str:
        return format_seconds(self.total())

    def __repr__(self) -> str:
        state = "running" if self.is_running else "paused"
        return f"ElapsedTimer({state}, accumulated={self.accumulated!r})"
