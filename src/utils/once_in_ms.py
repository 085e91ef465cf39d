"""
Timing utility for throttling execution in game loops
"""

import time
from typing import Callable


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    Use this to limit how often an operation runs in the game loop, even
    though the loop itself runs every frame. Missed intervals are coalesced:
    a busy frame never produces a burst of catch-up executions.

    Example:
        # In __init__:
        self.countdown_tick = OnceInMs(1000 / 60)  # ~60Hz

        # In update loop:
        if self.countdown_tick.should_execute():
            self.tick()
    """

    def __init__(self, interval_ms: float, time_source: Callable[[], float] = time.time):
        """
        Initialize timer with interval.

        Args:
            interval_ms: Minimum milliseconds between executions
            time_source: Callable returning the current time in seconds
        """
        self.interval_ms = interval_ms
        self.interval = interval_ms / 1000.0
        self._time_source = time_source
        self.last_execution = None

    def should_execute(self) -> bool:
        """
        Check if enough time has passed and update timer if so.

        Returns:
            True if interval has passed (and timer is updated), False otherwise
        """
        current = self._time_source()
        if self.last_execution is None or current - self.last_execution >= self.interval:
            self.last_execution = current
            return True
        return False

    def reset(self):
        """Force next should_execute() call to return True"""
        self.last_execution = None

    def elapsed_ms(self) -> float:
        """Get milliseconds elapsed since last execution (infinite if never executed)"""
        if self.last_execution is None:
            return float("inf")
        return (self._time_source() - self.last_execution) * 1000

    def remaining_ms(self) -> float:
        """Get milliseconds remaining until next execution (can be negative if overdue)"""
        return self.interval_ms - self.elapsed_ms()
