"""
Cancellable deferred callbacks for a single-threaded game loop
"""

import heapq
import itertools
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from utils.hybrid_logger import ClassLogger


@dataclass(order=True)
class ScheduledTask:
    """
    A callback waiting in the queue.

    Ordered by due time, then by scheduling order, so tasks due at the same
    moment run first-in first-out.
    """
    due_time: float
    order: int
    generation: int = field(compare=False)
    name: str = field(compare=False)
    callback: Callable[[], None] = field(compare=False, repr=False)
    cancelled: bool = field(default=False, compare=False)
    done: bool = field(default=False, compare=False)

    @property
    def pending(self) -> bool:
        """True while the task has neither run nor been cancelled"""
        return not (self.cancelled or self.done)

    def cancel(self) -> None:
        """Mark the task so the queue drops it instead of running it"""
        self.cancelled = True


class DeferredTaskQueue:
    """
    Time-ordered queue of deferred callbacks, polled from the game loop.

    Equivalent to posting delayed tasks to a single event queue: nothing runs
    until run_due() is called, and run_due() only runs tasks whose due time
    has passed. Every task is tagged with the queue generation at scheduling
    time; cancel_all() clears the queue and bumps the generation so a task
    from a previous session can never run, even if something still holds a
    reference to it.

    Example:
        queue = DeferredTaskQueue()
        queue.schedule(300, lambda: print("later"), name="flash-off")

        # In update loop:
        queue.run_due()
    """

    def __init__(self,
                 time_source: Callable[[], float] = time.time,
                 logger: Optional['ClassLogger'] = None):
        """
        Initialize an empty queue.

        Args:
            time_source: Callable returning the current time in seconds
            logger: Optional ClassLogger for scheduling diagnostics
        """
        self._time_source = time_source
        self._logger = logger
        self._heap: List[ScheduledTask] = []
        self._counter = itertools.count()
        self._generation = 0

    @property
    def generation(self) -> int:
        """Current generation; incremented by every cancel_all()"""
        return self._generation

    def schedule(self, delay_ms: float, callback: Callable[[], None], name: str = "task") -> ScheduledTask:
        """
        Schedule a callback to run after delay_ms.

        Args:
            delay_ms: Delay in milliseconds (negative values are treated as 0)
            callback: Zero-argument callable
            name: Label used in debug logs

        Returns:
            The ScheduledTask, which can be cancelled individually
        """
        due_time = self._time_source() + max(0.0, delay_ms) / 1000.0
        task = ScheduledTask(
            due_time=due_time,
            order=next(self._counter),
            generation=self._generation,
            name=name,
            callback=callback,
        )
        heapq.heappush(self._heap, task)
        if self._logger:
            self._logger.debug(f"Scheduled '{name}' in {delay_ms:.0f}ms (generation {self._generation})")
        return task

    def cancel_all(self) -> int:
        """
        Drop every pending task and start a new generation.

        Returns:
            Number of live tasks that were dropped
        """
        dropped = sum(1 for task in self._heap if not task.cancelled)
        for task in self._heap:
            task.cancel()
        self._heap.clear()
        self._generation += 1
        if self._logger and dropped:
            self._logger.debug(f"Cancelled {dropped} pending tasks, now at generation {self._generation}")
        return dropped

    def run_due(self) -> int:
        """
        Run every task whose due time has passed, in (due time, order) order.

        Tasks scheduled by a running task are picked up in the same pass when
        they are already due.

        Returns:
            Number of callbacks that were executed
        """
        now = self._time_source()
        executed = 0
        while self._heap and self._heap[0].due_time <= now:
            task = heapq.heappop(self._heap)
            if task.cancelled:
                continue
            if task.generation != self._generation:
                if self._logger:
                    self._logger.debug(f"Dropped stale task '{task.name}' from generation {task.generation}")
                continue
            task.done = True
            task.callback()
            executed += 1
        return executed

    def pending_count(self) -> int:
        """Number of tasks still waiting to run"""
        return sum(1 for task in self._heap if not task.cancelled)

    def next_due_in_ms(self) -> Optional[float]:
        """Milliseconds until the next live task is due, or None when idle"""
        live = [task for task in self._heap if not task.cancelled]
        if not live:
            return None
        return (min(live).due_time - self._time_source()) * 1000

    def __len__(self) -> int:
        return self.pending_count()
