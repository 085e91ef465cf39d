"""
Pygame Renderer - draws the board, progress bar and overlay in a window
"""

from typing import Optional, Set, TYPE_CHECKING

import pygame

from game_system.cell import Cell
from .grid_layout import GridLayout
from .interfaces import IRenderer, check_fraction

if TYPE_CHECKING:
    from game_system.config import GameConfig
    from utils import ClassLogger


class PygameRenderer(IRenderer):
    """
    Window renderer built on pygame.

    Commands only update the display state; present() draws the whole frame
    and flips it, once per game loop frame.

    Layout:
        - Board: grid of tiles with black borders
        - Progress bar: red bar under the board, width = remaining time
        - Overlay: message, final score and Start/Retry button
    """

    def __init__(self, config: 'GameConfig', logger: 'ClassLogger'):
        """
        Open the game window.

        Args:
            config: Game configuration (grid and display sections are used)
            logger: ClassLogger instance for logging

        Raises:
            pygame.error: If the display can not be initialized
        """
        self.display = config.display
        self.layout = GridLayout(config)
        self.logger = logger

        pygame.init()
        self.surface = pygame.display.set_mode(self.layout.window_size)
        pygame.display.set_caption(self.display.window_title)
        self.title_font = pygame.font.Font(None, 64)
        self.text_font = pygame.font.Font(None, 36)

        self.flashed: Set[Cell] = set()
        self.hovered: Optional[Cell] = None
        self.progress = 0.0
        self.game_over_message: Optional[str] = None
        self.final_score = 0
        self.start_button_visible = True
        self.start_label = "Start"

        self.logger.info(
            f"Pygame renderer ready: {self.layout.window_size[0]}x{self.layout.window_size[1]} window, "
            f"{self.layout.rows}x{self.layout.cols} tiles"
        )

    def render_grid(self) -> None:
        self.flashed.clear()
        self.hovered = None

    def flash_tile(self, cell: Cell) -> None:
        self.flashed.add(cell)

    def unflash_tile(self, cell: Cell) -> None:
        self.flashed.discard(cell)

    def highlight_hover(self, cell: Optional[Cell]) -> None:
        self.hovered = cell

    def update_progress(self, fraction: float) -> None:
        self.progress = check_fraction(fraction)

    def show_game_over(self, message: str, final_score: int) -> None:
        self.game_over_message = message
        self.final_score = final_score
        self.start_label = "Retry"
        self.start_button_visible = True

    def hide_game_over(self) -> None:
        self.game_over_message = None
        self.start_button_visible = False

    def present(self) -> None:
        """Draw the full frame and flip it to the screen"""
        self.surface.fill(self.display.background_color)
        self._draw_tiles()
        self._draw_progress_bar()
        if self.game_over_message is not None:
            self._draw_overlay()
        if self.start_button_visible:
            self._draw_button()
        pygame.display.flip()

    def cleanup(self) -> None:
        pygame.quit()
        self.logger.info("Pygame renderer closed")

    def _draw_tiles(self) -> None:
        for row in range(self.layout.rows):
            for col in range(self.layout.cols):
                cell = Cell(row, col)
                rect = pygame.Rect(self.layout.tile_rect(cell))
                if cell in self.flashed:
                    color = self.display.flash_color
                elif cell == self.hovered:
                    color = self.display.hover_color
                else:
                    color = self.display.tile_color
                pygame.draw.rect(self.surface, color, rect)
                pygame.draw.rect(self.surface, self.display.border_color, rect, self.display.border_width)

    def _draw_progress_bar(self) -> None:
        if self.progress > 0:
            pygame.draw.rect(self.surface, self.display.progress_color,
                             pygame.Rect(self.layout.progress_rect(self.progress)))

    def _draw_overlay(self) -> None:
        shade = pygame.Surface((self.layout.width, self.layout.height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 170))
        self.surface.blit(shade, (0, 0))

        center_x = self.layout.width // 2
        center_y = self.layout.height // 2

        title = self.title_font.render(self.game_over_message, True, self.display.text_color)
        self.surface.blit(title, title.get_rect(center=(center_x, center_y - 50)))

        score = self.text_font.render(f"Score: {self.final_score}", True, self.display.text_color)
        self.surface.blit(score, score.get_rect(center=(center_x, center_y + 10)))

    def _draw_button(self) -> None:
        rect = pygame.Rect(self.layout.button_rect())
        pygame.draw.rect(self.surface, self.display.flash_color, rect)
        pygame.draw.rect(self.surface, self.display.border_color, rect, self.display.border_width)
        label = self.text_font.render(self.start_label, True, self.display.border_color)
        self.surface.blit(label, label.get_rect(center=rect.center))
