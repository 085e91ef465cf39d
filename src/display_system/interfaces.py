#!/usr/bin/env python3
"""
Renderer Interface - Abstract base class for drawing the game

Defines the commands the game engine sends to its display. Implementations
can draw with pygame, record calls for tests, or drive any other output.
"""
from abc import ABC, abstractmethod
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from game_system.cell import Cell


class IRenderer(ABC):
    """Abstract interface for the game display

    The engine only issues commands; it never reads anything back.

    Typical round:
        renderer.render_grid()                  # empty board
        renderer.flash_tile(Cell(1, 2))         # playback
        renderer.unflash_tile(Cell(1, 2))
        renderer.update_progress(0.75)          # countdown
        renderer.show_game_over("Game Over", 3)
    """

    @abstractmethod
    def render_grid(self) -> None:
        """Redraw the empty board, clearing flashes and hover"""
        pass

    @abstractmethod
    def flash_tile(self, cell: 'Cell') -> None:
        """Highlight one tile during playback"""
        pass

    @abstractmethod
    def unflash_tile(self, cell: 'Cell') -> None:
        """Return a flashed tile to its normal color"""
        pass

    @abstractmethod
    def highlight_hover(self, cell: Optional['Cell']) -> None:
        """Show pointer-hover feedback on a tile, or clear it with None"""
        pass

    @abstractmethod
    def update_progress(self, fraction: float) -> None:
        """Set the remaining-time bar.

        Args:
            fraction: Remaining time in [0, 1]

        Raises:
            ValueError: If fraction is outside [0, 1]
        """
        pass

    @abstractmethod
    def show_game_over(self, message: str, final_score: int) -> None:
        """Show the game-over overlay with its message and the final score"""
        pass

    @abstractmethod
    def hide_game_over(self) -> None:
        """Hide the game-over overlay"""
        pass

    def present(self) -> None:
        """Push the current frame to the screen (called once per frame)"""
        pass

    def cleanup(self) -> None:
        """Release display resources"""
        pass


def check_fraction(fraction: float) -> float:
    """Validate a progress fraction for update_progress()"""
    if not 0.0 <= fraction <= 1.0:
        raise ValueError(f"Progress fraction must be within [0, 1], got {fraction}")
    return fraction
