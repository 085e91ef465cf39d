"""
Timed playback of a tile sequence on the deferred task queue
"""

import enum
from dataclasses import dataclass
from typing import Callable, List, Optional, TYPE_CHECKING

from .cell import Cell

if TYPE_CHECKING:
    from utils.deferred_task_queue import DeferredTaskQueue, ScheduledTask
    from utils.hybrid_logger import ClassLogger
    from game_system.config import TimingConfig


class FlashEventKind(enum.Enum):
    FLASH_ON = "flash_on"
    FLASH_OFF = "flash_off"
    DONE = "done"


@dataclass(frozen=True)
class FlashEvent:
    """One step of a playback, offset_ms after playback start"""
    offset_ms: int
    kind: FlashEventKind
    cell: Optional[Cell] = None
    index: Optional[int] = None


class PlaybackScheduler:
    """
    Plays a sequence back as timed flash events.

    Cell i lights up at i * (flash + gap) and goes dark flash ms later; a DONE
    event follows at len * (flash + gap) + post delay. Scheduling is
    fire-and-forget on the shared task queue; cancel() drops whatever is still
    pending from the current playback.
    """

    def __init__(self,
                 task_queue: 'DeferredTaskQueue',
                 timing: 'TimingConfig',
                 logger: Optional['ClassLogger'] = None):
        self.task_queue = task_queue
        self.timing = timing
        self.logger = logger
        self._pending: List['ScheduledTask'] = []

    def build_timeline(self, sequence: List[Cell]) -> List[FlashEvent]:
        """
        Compute the playback events for a sequence without scheduling them.

        Args:
            sequence: Cells to play back

        Returns:
            Events sorted by offset; ties keep on-before-off order
        """
        step = self.timing.flash_step_ms
        events: List[FlashEvent] = []
        for index, cell in enumerate(sequence):
            start = index * step
            events.append(FlashEvent(start, FlashEventKind.FLASH_ON, cell, index))
            events.append(FlashEvent(start + self.timing.flash_duration_ms, FlashEventKind.FLASH_OFF, cell, index))
        events.append(FlashEvent(len(sequence) * step + self.timing.post_delay_ms, FlashEventKind.DONE))
        # Stable sort keeps scheduling order for equal offsets (e.g. zero gap)
        events.sort(key=lambda event: event.offset_ms)
        return events

    def play(self, sequence: List[Cell], listener: Callable[[FlashEvent], None]) -> List[FlashEvent]:
        """
        Schedule every event of the sequence's timeline.

        Any playback still pending is cancelled first, so two playbacks never
        overlap.

        Args:
            sequence: Cells to play back
            listener: Called with each FlashEvent when it fires

        Returns:
            The scheduled timeline
        """
        self.cancel()
        timeline = self.build_timeline(sequence)
        for event in timeline:
            task = self.task_queue.schedule(
                event.offset_ms,
                self._make_callback(event, listener),
                name=f"playback-{event.kind.value}"
            )
            self._pending.append(task)
        if self.logger:
            self.logger.debug(
                f"Playing {len(sequence)} cells, done in {timeline[-1].offset_ms}ms"
            )
        return timeline

    def cancel(self) -> int:
        """
        Cancel all pending events of the current playback.

        Returns:
            Number of events that had not fired yet
        """
        cancelled = 0
        for task in self._pending:
            if task.pending:
                task.cancel()
                cancelled += 1
        self._pending = []
        if self.logger and cancelled:
            self.logger.debug(f"Playback cancelled with {cancelled} events pending")
        return cancelled

    @property
    def is_playing(self) -> bool:
        return bool(self._pending)

    def _make_callback(self, event: FlashEvent, listener: Callable[[FlashEvent], None]) -> Callable[[], None]:
        def fire() -> None:
            if event.kind is FlashEventKind.DONE:
                self._pending = []
            listener(event)
        return fire
