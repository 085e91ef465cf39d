"""
Input System Package

Player input for the tile memory game: tile clicks, pointer hover and the
Start button, delivered as InputEvent objects.

The pygame reader lives in input_system.pygame_input and is imported
directly so the engine can be used without loading pygame.
"""

from .input_event import InputEvent, InputEventKind
from .interfaces import IInputReader

__all__ = [
    "InputEvent",
    "InputEventKind",
    "IInputReader",
]
