"""
Game System - State machine based tile memory game

This module provides the round engine of the game: sequence generation,
timed playback, input validation and the countdown-driven state machine.
"""

from .cell import Cell
from .clock import GameClock
from .config import GameConfig, GridConfig, TimingConfig, DifficultyConfig, DisplayConfig
from .game_session import GameSession, RoundState
from .input_validator import InputValidator, ValidationResult
from .playback_scheduler import PlaybackScheduler, FlashEvent, FlashEventKind
from .sequence_generator import SequenceGenerator, SequenceComplete
from .states import (
    GameState,
    IdleState,
    PlaybackState,
    AwaitingInputState,
    RoundCompleteState,
    GameOverState,
    GAME_OVER_MESSAGE,
    WIN_MESSAGE,
)
from .game_manager import GameManager

__all__ = [
    # Data
    "Cell",
    "GameSession",
    "RoundState",
    # Components
    "GameClock",
    "SequenceGenerator",
    "SequenceComplete",
    "InputValidator",
    "ValidationResult",
    "PlaybackScheduler",
    "FlashEvent",
    "FlashEventKind",
    "GameManager",
    # States
    "GameState",
    "IdleState",
    "PlaybackState",
    "AwaitingInputState",
    "RoundCompleteState",
    "GameOverState",
    "GAME_OVER_MESSAGE",
    "WIN_MESSAGE",
    # Configuration
    "GameConfig",
    "GridConfig",
    "TimingConfig",
    "DifficultyConfig",
    "DisplayConfig",
]
