"""
Main game manager - orchestrates the round state machine, input and rendering
"""

import random
import time
from typing import Callable, Optional, TYPE_CHECKING

import psutil

from .cell import Cell
from .clock import GameClock
from .game_session import GameSession, RoundState
from .input_validator import InputValidator
from .playback_scheduler import PlaybackScheduler
from .sequence_generator import SequenceGenerator
from .states import GameState, IdleState, next_round_state
from input_system.input_event import InputEvent, InputEventKind
from utils import DeferredTaskQueue, OnceInMs

if TYPE_CHECKING:
    from display_system.interfaces import IRenderer
    from game_system.config import GameConfig
    from input_system.interfaces import IInputReader
    from utils import ClassLogger


class GameManager:
    """
    Main game manager that orchestrates the entire game system.

    Responsibilities:
    - Own the single GameSession and the per-session deferred task queue
    - Manage state transitions
    - Dispatch input events and the countdown tick to the current state
    - Maintain consistent frame timing
    """

    def __init__(self,
                 config: 'GameConfig',
                 renderer: 'IRenderer',
                 input_reader: 'IInputReader',
                 logger: 'ClassLogger',
                 time_source: Callable[[], float] = time.time,
                 rng: Optional[random.Random] = None):
        """
        Initialize the game manager.

        Args:
            config: Validated game configuration
            renderer: Renderer the game draws through
            input_reader: Source of clicks, pointer moves and Start presses
            logger: Logger for debugging and monitoring
            time_source: Callable returning the current time in seconds
            rng: Random source for the sequence generator
        """
        self.config = config
        self.renderer = renderer
        self.input_reader = input_reader
        self.logger = logger
        self.time_source = time_source
        self.target_frame_duration = config.frame_duration_ms / 1000.0
        self.running = True

        # Tile under the pointer, kept while states ignore hover
        self.pointer_cell: Optional[Cell] = None

        self.task_queue = DeferredTaskQueue(time_source, logger.create_class_logger("DeferredTaskQueue"))
        self.clock = GameClock(time_source)
        self.sequence_generator = SequenceGenerator(
            rows=config.grid.rows,
            cols=config.grid.cols,
            max_length=config.difficulty.max_sequence_length,
            rng=rng
        )
        self.input_validator = InputValidator()
        self.playback = PlaybackScheduler(
            self.task_queue, config.timing, logger.create_class_logger("PlaybackScheduler")
        )
        self.session = GameSession(generation=self.task_queue.generation)

        # Countdown check (coalesced when the loop falls behind)
        self._countdown_tick = OnceInMs(config.timing.tick_interval_ms, time_source)

        # Memory monitoring
        self._memory_monitor = OnceInMs(60000, time_source)
        self._process = psutil.Process()

        self.current_state: GameState = IdleState(self)
        self.current_state.on_enter()

        self.logger.info(
            f"GameManager initialized: {config.grid.rows}x{config.grid.cols} grid, "
            f"max sequence {config.difficulty.max_sequence_length}, "
            f"{config.frame_duration_ms:.1f}ms frame duration"
        )

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Call this from your main() function for automatic frame management.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration*1000)}ms frame duration")

        try:
            while self.running:
                frame_start = time.time()

                self.update()

                frame_duration = time.time() - frame_start
                sleep_time = self.target_frame_duration - frame_duration

                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
            self.logger.flush()
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            self.logger.flush()
            raise
        finally:
            self.stop()

    def update(self) -> None:
        """
        One frame: input events, due callbacks, countdown tick, present.

        Input is handled before the tick, so a final tap read in the same
        frame as the countdown expiry completes the round.
        """
        if self._memory_monitor.should_execute():
            self._log_memory_usage()

        for event in self.input_reader.read_events():
            self.handle_event(event)
            if not self.running:
                return

        self.task_queue.run_due()

        if self._countdown_tick.should_execute():
            self.tick()

        self.renderer.present()

    def handle_event(self, event: InputEvent) -> None:
        """Dispatch one input event"""
        if event.kind is InputEventKind.START_PRESSED:
            self.on_start_pressed()
        elif event.kind is InputEventKind.TILE_CLICK:
            self.on_tile_click(event.cell)
        elif event.kind is InputEventKind.POINTER_MOVE:
            self.on_pointer_move(event.cell)
        elif event.kind is InputEventKind.QUIT:
            self.logger.info("Quit requested")
            self.running = False

    def on_start_pressed(self) -> None:
        """
        Start (or restart) a game.

        Everything pending from the previous session is cancelled before the
        new session schedules anything.
        """
        self.playback.cancel()
        dropped = self.task_queue.cancel_all()
        self.clock.stop()
        if dropped:
            self.logger.debug(f"Restart dropped {dropped} pending callbacks")

        self.session = GameSession(generation=self.task_queue.generation)
        self.renderer.hide_game_over()
        self.logger.info(f"New game started (session {self.session.generation})")

        if not isinstance(self.current_state, IdleState):
            self._transition_to_state(IdleState(self))
        self._transition_to_state(next_round_state(self))

    def on_tile_click(self, cell: Cell) -> None:
        """Forward a tile click to the current state"""
        self._check_cell(cell)
        self.apply_transition(self.current_state.handle_tile_click(Cell(*cell)))

    def on_pointer_move(self, cell: Optional[Cell]) -> None:
        """Forward a hover change to the current state"""
        if cell is not None:
            self._check_cell(cell)
            cell = Cell(*cell)
        self.pointer_cell = cell
        self.apply_transition(self.current_state.handle_pointer_move(cell))

    def tick(self) -> None:
        """Run the periodic countdown check of the current state"""
        self.apply_transition(self.current_state.tick())

    def schedule(self, delay_ms: float, callback: Callable[[], Optional[GameState]], name: str = "task") -> None:
        """
        Defer a state callback; a state it returns becomes the current state.

        Args:
            delay_ms: Delay in milliseconds
            callback: Returns the next GameState or None
            name: Label for debug logs
        """
        self.task_queue.schedule(delay_ms, lambda: self.apply_transition(callback()), name=name)

    def apply_transition(self, new_state: Optional[GameState]) -> None:
        """Transition to new_state if one was returned by a handler"""
        if new_state is not None:
            self._transition_to_state(new_state)

    def stop(self) -> None:
        """Stop the game and clean up resources."""
        self.running = False
        self.playback.cancel()
        self.task_queue.cancel_all()
        self.clock.stop()

        self.input_reader.cleanup()
        self.renderer.cleanup()

        self.logger.info("Game stopped")

    @property
    def round_state(self) -> RoundState:
        return self.session.round_state

    def get_current_state_name(self) -> str:
        """Get the name of the current game state."""
        return self.current_state.__class__.__name__

    def _check_cell(self, cell) -> None:
        rows, cols = self.config.grid.rows, self.config.grid.cols
        if not Cell(*cell).in_bounds(rows, cols):
            raise ValueError(f"Cell {tuple(cell)} is outside the {rows}x{cols} grid")

    def _log_memory_usage(self) -> None:
        """Log current memory and CPU usage (process and system)"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu_percent = self._process.cpu_percent(interval=None)

            sys_mem = psutil.virtual_memory()
            sys_total_mb = sys_mem.total / 1024 / 1024
            sys_used_mb = sys_mem.used / 1024 / 1024

            sys_cpu_percent = psutil.cpu_percent(interval=None)

            self.logger.debug(
                f"Memory - Process: {process_mb:.1f}MB | "
                f"System: {sys_used_mb:.0f}/{sys_total_mb:.0f}MB ({sys_mem.percent:.1f}%) | "
                f"CPU - Process: {process_cpu_percent:.1f}% | System: {sys_cpu_percent:.1f}%"
            )
        except (psutil.Error, OSError) as e:
            self.logger.warning(f"Failed to log system usage: {e}")

    def _transition_to_state(self, new_state: GameState) -> None:
        """
        Handle transition to a new game state.

        Args:
            new_state: The new state to transition to
        """
        self.current_state.on_exit()

        old_state_name = self.current_state.__class__.__name__
        new_state_name = new_state.__class__.__name__
        self.logger.info(f"State transition: {old_state_name} → {new_state_name}")

        self.current_state = new_state
        self.current_state.on_enter()
