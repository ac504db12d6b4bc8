"""
Board data model.

A Board is an ordered list of Categories (display columns); each Category holds
a fixed-length ordered list of Clues (display rows).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RevealState(Enum):
    HIDDEN = 'hidden'
    QUESTION = 'question'
    ANSWER = 'answer'


@dataclass
class Clue:
    question: str
    answer: str
    reveal_state: RevealState = RevealState.HIDDEN
    value: Optional[int] = None


@dataclass
class Category:
    title: str
    clues: List[Clue] = field(default_factory=list)
    category_id: Optional[int] = None


@dataclass
class Board:
    categories: List[Category] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        """Number of clues in every category (0 for an empty board)."""
        if not self.categories:
            return 0
        return len(self.categories[0].clues)

    def clue_at(self, category_index: int, clue_index: int) -> Clue:
        """
        Look up the clue at a grid cell.

        Args:
            category_index: Zero-based column index
            clue_index: Zero-based row index

        Returns:
            The Clue displayed in that cell

        Raises:
            IndexError: If either index is outside the board
        """
        if not 0 <= category_index < len(self.categories):
            raise IndexError(f"No category at column {category_index}")
        clues = self.categories[category_index].clues
        if not 0 <= clue_index < len(clues):
            raise IndexError(f"No clue at row {clue_index} in column {category_index}")
        return clues[clue_index]
