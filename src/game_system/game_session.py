"""
Per-game session data owned by the game manager
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from .cell import Cell


class RoundState(enum.Enum):
    IDLE = "idle"
    PLAYBACK = "playback"
    AWAITING_INPUT = "awaiting_input"
    ROUND_COMPLETE = "round_complete"
    GAME_OVER = "game_over"


@dataclass
class GameSession:
    """
    Everything that belongs to one game, from Start to Game Over.

    score always equals len(sequence) while playing; player_input is a
    prefix of sequence while awaiting input.
    """
    generation: int = 0
    sequence: List[Cell] = field(default_factory=list)
    player_input: List[Cell] = field(default_factory=list)
    round_state: RoundState = RoundState.IDLE
    score: int = 0
    current_time_limit: float = 0.0
    deadline: Optional[float] = None
    final_score: Optional[int] = None
    game_over_message: Optional[str] = None

    @property
    def round_number(self) -> int:
        return len(self.sequence)

    @property
    def is_over(self) -> bool:
        return self.round_state is RoundState.GAME_OVER

    def input_complete(self) -> bool:
        """True when the player has matched the whole sequence"""
        return bool(self.sequence) and self.player_input == self.sequence

    def __str__(self) -> str:
        return (
            f"GameSession(generation={self.generation}, state={self.round_state.value}, "
            f"score={self.score}, input={len(self.player_input)}/{len(self.sequence)}, "
            f"limit={self.current_time_limit:.1f}s)"
        )
