"""
Countdown clock for the input phase
"""

import time
from typing import Callable, Optional


class GameClock:
    """
    Wall-clock timer measuring time spent in the input phase.

    seconds_left() is a pure read. After stop() the clock is frozen at the
    moment it was stopped; before the first start() no time has elapsed.

    Example:
        clock = GameClock()
        clock.start()
        # each tick:
        if clock.seconds_left(limit) == 0:
            ...  # time is up
    """

    def __init__(self, time_source: Callable[[], float] = time.time):
        """
        Initialize a stopped clock.

        Args:
            time_source: Callable returning the current time in seconds
        """
        self._time_source = time_source
        self.started_at: Optional[float] = None
        self.stopped_at: Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self.started_at is not None and self.stopped_at is None

    def start(self) -> None:
        """Record the current time as t0 and begin counting"""
        self.started_at = self._time_source()
        self.stopped_at = None

    def stop(self) -> None:
        """Freeze the clock; a no-op if it is not running"""
        if self.is_running:
            self.stopped_at = self._time_source()

    def elapsed_seconds(self) -> float:
        """Seconds since start(), up to stop() if the clock was stopped"""
        if self.started_at is None:
            return 0.0
        end = self.stopped_at if self.stopped_at is not None else self._time_source()
        return end - self.started_at

    def seconds_left(self, limit: float) -> float:
        """
        Remaining seconds of a countdown with the given limit.

        Args:
            limit: Countdown duration in seconds

        Returns:
            max(0, limit - elapsed)
        """
        return max(0.0, limit - self.elapsed_seconds())
