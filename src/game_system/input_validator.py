"""
Player tap validation against the target sequence
"""

from dataclasses import dataclass, field
from typing import List

from .cell import Cell


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single tap: matched with the extended input, or a mismatch"""
    matched: bool
    player_input: List[Cell] = field(default_factory=list)

    def is_complete(self, sequence: List[Cell]) -> bool:
        """True when a matched input covers the whole sequence"""
        return self.matched and len(self.player_input) == len(sequence)


class InputValidator:
    """
    Positional comparison of player taps against the sequence.

    Side-effect free: the caller decides what a mismatch means.
    """

    def accept(self, player_input: List[Cell], sequence: List[Cell], new_cell: Cell) -> ValidationResult:
        """
        Append new_cell to the player's input if it is the expected next cell.

        Args:
            player_input: Cells tapped so far this round (not modified)
            sequence: Target sequence
            new_cell: The tapped cell

        Returns:
            ValidationResult(matched=True, player_input=extended) on a match,
            ValidationResult(matched=False) on a mismatch or an extra tap
        """
        position = len(player_input)
        if position >= len(sequence):
            return ValidationResult(matched=False)

        if tuple(new_cell) != tuple(sequence[position]):
            return ValidationResult(matched=False)

        return ValidationResult(matched=True, player_input=list(player_input) + [Cell(*new_cell)])
