"""
Random tile sequence generation
"""

import random
from typing import List, Optional

from .cell import Cell


class SequenceComplete(Exception):
    """Raised when a sequence is already at its maximum length (the win condition)"""


class SequenceGenerator:
    """
    Grows the target sequence by one uniformly random cell per round.

    Cells are independent of each other; repeats are allowed.

    Example:
        generator = SequenceGenerator(rows=4, cols=4, max_length=10)
        sequence = generator.extend([])        # [Cell(2, 1)]
        sequence = generator.extend(sequence)  # [Cell(2, 1), Cell(0, 3)]
    """

    def __init__(self, rows: int, cols: int, max_length: int, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            rows: Number of board rows
            cols: Number of board columns
            max_length: Sequence length at which the game is won
            rng: Random source (defaults to the random module)
        """
        self.rows = rows
        self.cols = cols
        self.max_length = max_length
        self._rng = rng if rng is not None else random

    def is_complete(self, sequence: List[Cell]) -> bool:
        """True when the sequence can not grow any further"""
        return len(sequence) >= self.max_length

    def random_cell(self) -> Cell:
        """Pick one cell uniformly from the board"""
        return Cell(self._rng.randrange(self.rows), self._rng.randrange(self.cols))

    def extend(self, sequence: List[Cell]) -> List[Cell]:
        """
        Return a new sequence with one random cell appended.

        Args:
            sequence: Current sequence (not modified)

        Returns:
            New list one cell longer than sequence

        Raises:
            SequenceComplete: If sequence is already at max_length
        """
        if self.is_complete(sequence):
            raise SequenceComplete(f"Sequence already has {len(sequence)} cells (max {self.max_length})")
        return list(sequence) + [self.random_cell()]
