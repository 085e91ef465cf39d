"""
Game state base class and concrete implementations
"""

from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

from .game_session import RoundState
from .playback_scheduler import FlashEvent, FlashEventKind

if TYPE_CHECKING:
    from game_system.cell import Cell
    from game_system.game_manager import GameManager


GAME_OVER_MESSAGE = "Game Over"
WIN_MESSAGE = "CONGRATS"


class GameState(ABC):
    """
    Abstract base class for all game states.

    Each state represents one phase of a round with its own:
    - Tap and hover handling
    - Deferred work (scheduled through the game manager)
    - Transition conditions

    Handlers return the next GameState, or None to stay in the current one.
    Deferred callbacks check is_active first: a state that has already been
    replaced must never act.
    """

    round_state: RoundState = RoundState.IDLE

    def __init__(self, game_manager: 'GameManager'):
        self.game_manager: 'GameManager' = game_manager
        self.logger = game_manager.logger.create_class_logger(self.__class__.__name__)

    @property
    def is_active(self) -> bool:
        return self.game_manager.current_state is self

    @property
    def session(self):
        return self.game_manager.session

    @property
    def renderer(self):
        return self.game_manager.renderer

    def on_enter(self) -> None:
        """Called when entering this state - records the round state and calls custom enter"""
        self.session.round_state = self.round_state
        self.custom_on_enter()

    def on_exit(self) -> None:
        """Called when exiting this state"""
        self.custom_on_exit()

    @abstractmethod
    def custom_on_enter(self) -> None:
        """Custom enter logic (override in subclasses)"""
        pass

    def custom_on_exit(self) -> None:
        """Custom exit logic (override if needed)"""
        pass

    def handle_tile_click(self, cell: 'Cell') -> Optional['GameState']:
        """A tile was clicked; ignored unless the state accepts input"""
        return None

    def handle_pointer_move(self, cell: Optional['Cell']) -> Optional['GameState']:
        """The pointer moved onto a tile (or off the board)"""
        return None

    def tick(self) -> Optional['GameState']:
        """Periodic check from the game loop (~60Hz)"""
        return None


def next_round_state(game_manager: 'GameManager') -> GameState:
    """
    Round start: grow the sequence and move on to playback.

    The win condition is checked before extending, so a player who has just
    completed a full-length sequence gets the CONGRATS game over.
    """
    session = game_manager.session
    generator = game_manager.sequence_generator

    if generator.is_complete(session.sequence):
        return GameOverState(game_manager, WIN_MESSAGE)

    session.sequence = generator.extend(session.sequence)
    session.score += 1
    session.current_time_limit = game_manager.config.difficulty.time_limit_for(len(session.sequence))
    return PlaybackState(game_manager)


class IdleState(GameState):
    """
    Idle state - empty board, waiting for Start.

    Transitions:
    - Start pressed → PlaybackState (handled by the game manager)
    """

    round_state = RoundState.IDLE

    def custom_on_enter(self) -> None:
        self.renderer.render_grid()
        self.renderer.update_progress(0.0)


class PlaybackState(GameState):
    """
    Playback state - the sequence is flashed for the player to watch.

    Waits for the round lead-in, then hands the sequence to the playback
    scheduler. Taps and hover are ignored.

    Transitions:
    - Playback done → AwaitingInputState
    """

    round_state = RoundState.PLAYBACK

    def custom_on_enter(self) -> None:
        self.renderer.highlight_hover(None)
        sequence = self.session.sequence
        self.logger.info(
            f"Round {len(sequence)}: showing {len(sequence)} tiles, "
            f"{self.session.current_time_limit:.0f}s to answer"
        )
        self.logger.debug(f"Sequence: {' '.join(str(cell) for cell in sequence)}")
        self.game_manager.schedule(
            self.game_manager.config.timing.round_start_delay_ms,
            self._start_playback,
            name="round-start"
        )

    def custom_on_exit(self) -> None:
        self.game_manager.playback.cancel()

    def _start_playback(self) -> Optional[GameState]:
        if not self.is_active:
            return None
        self.game_manager.playback.play(
            self.session.sequence,
            lambda event: self.game_manager.apply_transition(self._on_playback_event(event))
        )
        return None

    def _on_playback_event(self, event: FlashEvent) -> Optional[GameState]:
        if not self.is_active:
            return None

        if event.kind is FlashEventKind.FLASH_ON:
            self.renderer.flash_tile(event.cell)
        elif event.kind is FlashEventKind.FLASH_OFF:
            self.renderer.unflash_tile(event.cell)
        else:
            return AwaitingInputState(self.game_manager)
        return None


class AwaitingInputState(GameState):
    """
    Input state - the player repeats the sequence against the countdown.

    Transitions:
    - Wrong tile → GameOverState("Game Over")
    - Whole sequence matched → RoundCompleteState
    - Countdown reaches 0 → GameOverState("Game Over")
    """

    round_state = RoundState.AWAITING_INPUT

    def custom_on_enter(self) -> None:
        clock = self.game_manager.clock
        self.session.player_input = []
        clock.start()
        self.session.deadline = clock.started_at + self.session.current_time_limit
        self.renderer.update_progress(1.0)
        # Pointer may have settled on a tile during playback
        self.renderer.highlight_hover(self.game_manager.pointer_cell)

    def handle_tile_click(self, cell: 'Cell') -> Optional[GameState]:
        self.renderer.highlight_hover(None)
        result = self.game_manager.input_validator.accept(
            self.session.player_input, self.session.sequence, cell
        )

        if not result.matched:
            expected = self.session.sequence[len(self.session.player_input)]
            self.logger.info(f"Wrong tile {cell}, expected {expected}")
            return GameOverState(self.game_manager, GAME_OVER_MESSAGE)

        self.session.player_input = result.player_input
        self.logger.debug(f"Tile {cell} ok ({len(result.player_input)}/{len(self.session.sequence)})")

        if result.is_complete(self.session.sequence):
            return RoundCompleteState(self.game_manager)
        return None

    def handle_pointer_move(self, cell: Optional['Cell']) -> Optional[GameState]:
        self.renderer.highlight_hover(cell)
        return None

    def tick(self) -> Optional[GameState]:
        # Completion wins over expiry when both happen in the same tick
        if self.session.input_complete():
            return RoundCompleteState(self.game_manager)

        limit = self.session.current_time_limit
        seconds_left = self.game_manager.clock.seconds_left(limit)
        self.renderer.update_progress(min(1.0, seconds_left / limit))

        if seconds_left == 0:
            self.logger.info(
                f"Time is up after {len(self.session.player_input)}/{len(self.session.sequence)} tiles"
            )
            return GameOverState(self.game_manager, GAME_OVER_MESSAGE)
        return None


class RoundCompleteState(GameState):
    """
    Round complete - short pause before the next round.

    Transitions:
    - Pacing delay elapsed → PlaybackState, or GameOverState("CONGRATS")
      when the sequence is already at full length
    """

    round_state = RoundState.ROUND_COMPLETE

    def custom_on_enter(self) -> None:
        clock = self.game_manager.clock
        clock.stop()
        self.session.deadline = None
        self.logger.info(
            f"Round {self.session.round_number} complete in {clock.elapsed_seconds():.2f}s"
        )
        self.game_manager.schedule(
            self.game_manager.config.timing.round_pacing_delay_ms,
            self._advance,
            name="round-pacing"
        )

    def handle_pointer_move(self, cell: Optional['Cell']) -> Optional[GameState]:
        self.renderer.highlight_hover(cell)
        return None

    def _advance(self) -> Optional[GameState]:
        if not self.is_active:
            return None
        return next_round_state(self.game_manager)


class GameOverState(GameState):
    """
    Game over - terminal until Start is pressed.

    Cancels every pending callback of the session so nothing flashes or
    ticks after the message is shown.
    """

    round_state = RoundState.GAME_OVER

    def __init__(self, game_manager: 'GameManager', message: str = GAME_OVER_MESSAGE):
        super().__init__(game_manager)
        self.message = message

    def custom_on_enter(self) -> None:
        self.game_manager.playback.cancel()
        dropped = self.game_manager.task_queue.cancel_all()
        self.session.generation = self.game_manager.task_queue.generation
        self.game_manager.clock.stop()

        self.session.final_score = self.session.score
        self.session.game_over_message = self.message
        self.session.deadline = None

        self.renderer.highlight_hover(None)
        self.renderer.show_game_over(self.message, self.session.final_score)

        self.logger.info(f"{self.message} - final score {self.session.final_score}")
        if dropped:
            self.logger.debug(f"Dropped {dropped} pending callbacks")
