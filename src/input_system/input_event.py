"""
InputEvent - player input delivered to the game manager
"""

import enum
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from game_system.cell import Cell


class InputEventKind(enum.Enum):
    TILE_CLICK = "tile_click"
    POINTER_MOVE = "pointer_move"
    START_PRESSED = "start_pressed"
    QUIT = "quit"


@dataclass(frozen=True)
class InputEvent:
    """
    One input event.

    Usage:
        InputEvent.tile_click(Cell(1, 2))
        InputEvent.pointer_move(None)   # pointer left the board
        InputEvent.start_pressed()
    """
    kind: InputEventKind
    cell: Optional['Cell'] = None

    def __post_init__(self):
        if self.kind is InputEventKind.TILE_CLICK and self.cell is None:
            raise ValueError("TILE_CLICK event needs a cell")

    @classmethod
    def tile_click(cls, cell: 'Cell') -> 'InputEvent':
        return cls(InputEventKind.TILE_CLICK, cell)

    @classmethod
    def pointer_move(cls, cell: Optional['Cell']) -> 'InputEvent':
        return cls(InputEventKind.POINTER_MOVE, cell)

    @classmethod
    def start_pressed(cls) -> 'InputEvent':
        return cls(InputEventKind.START_PRESSED)

    @classmethod
    def quit(cls) -> 'InputEvent':
        return cls(InputEventKind.QUIT)

    def __str__(self) -> str:
        if self.cell is None:
            return f"InputEvent({self.kind.value})"
        return f"InputEvent({self.kind.value}, {self.cell})"
