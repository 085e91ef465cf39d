"""
Cell - one tile position on the board
"""

from typing import NamedTuple


class Cell(NamedTuple):
    """
    Immutable (row, col) position of a tile.

    Compares equal to a plain tuple, so Cell(1, 2) == (1, 2).
    """
    row: int
    col: int

    def in_bounds(self, rows: int, cols: int) -> bool:
        """Check whether the cell lies on a rows x cols board"""
        return 0 <= self.row < rows and 0 <= self.col < cols

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
