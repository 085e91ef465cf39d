"""
Pygame input reader - mouse and keyboard events from the game window
"""

from typing import List, Optional, TYPE_CHECKING

import pygame

from .input_event import InputEvent
from .interfaces import IInputReader

if TYPE_CHECKING:
    from display_system.pygame_renderer import PygameRenderer
    from game_system.cell import Cell
    from utils import ClassLogger


class PygameInputReader(IInputReader):
    """
    Translates pygame events into InputEvents.

    Controls:
        - Left click on a tile: tile click
        - Left click on the Start/Retry button (when visible): start
        - Mouse motion: pointer move, only when the hovered tile changes
        - Space / Enter: start
        - Escape / window close: quit

    Example:
        reader = PygameInputReader(renderer, logger)
        for event in reader.read_events():
            game_manager.handle_event(event)
    """

    START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)

    def __init__(self, renderer: 'PygameRenderer', logger: 'ClassLogger'):
        """
        Args:
            renderer: The window renderer (layout and button visibility)
            logger: ClassLogger instance for logging
        """
        self._renderer = renderer
        self._layout = renderer.layout
        self._logger = logger
        self._last_hover: Optional['Cell'] = None

    def read_events(self) -> List[InputEvent]:
        events: List[InputEvent] = []
        for event in pygame.event.get():
            translated = self._translate(event)
            if translated is not None:
                self._logger.debug(str(translated))
                events.append(translated)
        return events

    def cleanup(self) -> None:
        self._last_hover = None

    def _translate(self, event) -> Optional[InputEvent]:
        if event.type == pygame.QUIT:
            return InputEvent.quit()

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return InputEvent.quit()
            if event.key in self.START_KEYS:
                return InputEvent.start_pressed()
            return None

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = event.pos
            if self._renderer.start_button_visible and self._layout.is_on_button(x, y):
                return InputEvent.start_pressed()
            cell = self._layout.cell_at(x, y)
            if cell is not None:
                # A click resets hover, the next motion reports it again
                self._last_hover = None
                return InputEvent.tile_click(cell)
            return None

        if event.type == pygame.MOUSEMOTION:
            cell = self._layout.cell_at(*event.pos)
            if cell != self._last_hover:
                self._last_hover = cell
                return InputEvent.pointer_move(cell)

        return None
