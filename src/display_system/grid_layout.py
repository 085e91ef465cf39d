"""
GridLayout - pixel geometry of the board, progress bar and Start button
"""

from typing import Optional, Tuple, TYPE_CHECKING

from game_system.cell import Cell

if TYPE_CHECKING:
    from game_system.config import GameConfig

Rect = Tuple[int, int, int, int]


class GridLayout:
    """
    Converts between window pixels and board cells.

    The board fills the top width x height of the window; the progress bar
    sits directly underneath it. Pure arithmetic, no pygame needed.

    Example:
        layout = GridLayout(config)
        layout.cell_at(160, 20)     # Cell(0, 1) on a 600px 4x4 board
        layout.tile_rect(Cell(0, 1))  # (150, 0, 150, 150)
    """

    BUTTON_WIDTH = 160
    BUTTON_HEIGHT = 50

    def __init__(self, config: 'GameConfig'):
        self.rows = config.grid.rows
        self.cols = config.grid.cols
        self.width = config.display.width
        self.height = config.display.height
        self.progress_bar_height = config.display.progress_bar_height
        self.tile_width = self.width / self.cols
        self.tile_height = self.height / self.rows

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.width, self.height + self.progress_bar_height

    def cell_at(self, x: float, y: float) -> Optional[Cell]:
        """
        Cell under a pixel position.

        Returns:
            Cell, or None when the position is outside the board
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        row = min(int(y // self.tile_height), self.rows - 1)
        col = min(int(x // self.tile_width), self.cols - 1)
        return Cell(row, col)

    def tile_rect(self, cell: Cell) -> Rect:
        """Pixel rectangle (x, y, w, h) covered by a cell"""
        x = round(cell.col * self.tile_width)
        y = round(cell.row * self.tile_height)
        right = round((cell.col + 1) * self.tile_width)
        bottom = round((cell.row + 1) * self.tile_height)
        return x, y, right - x, bottom - y

    def progress_rect(self, fraction: float) -> Rect:
        """Filled part of the progress bar for a remaining-time fraction"""
        return 0, self.height, round(self.width * fraction), self.progress_bar_height

    def button_rect(self) -> Rect:
        """Start/Retry button, centered in the lower half of the board"""
        x = (self.width - self.BUTTON_WIDTH) // 2
        y = self.height // 2 + 60
        return x, y, self.BUTTON_WIDTH, self.BUTTON_HEIGHT

    def is_on_button(self, x: float, y: float) -> bool:
        bx, by, bw, bh = self.button_rect()
        return bx <= x < bx + bw and by <= y < by + bh
