"""Text rendering of a board for the terminal."""

from typing import List

import pandas as pd  # type: ignore

from .constants import BOARD_DEFAULTS
from .models import Board
from .reveal import display_text
from .utils.text_processor import TextProcessor


def board_to_frame(board: Board, cell_width: int = BOARD_DEFAULTS['cell_width']) -> pd.DataFrame:
    """
    Lay out a board as a DataFrame: one column per category, one row per clue.

    Column headers are numbered category titles and the index is the 1-based
    row number, matching the coordinates the CLI accepts.
    """
    columns: List[str] = [
        TextProcessor.truncate_text(f"{number}. {category.title}", cell_width)
        for number, category in enumerate(board.categories, 1)
    ]
    rows = [
        [TextProcessor.truncate_text(display_text(category.clues[row]), cell_width)
         for category in board.categories]
        for row in range(board.row_count)
    ]
    return pd.DataFrame(rows, columns=columns, index=range(1, board.row_count + 1))


def render_board(board: Board, cell_width: int = BOARD_DEFAULTS['cell_width']) -> str:
    """Render a board as a fixed-width text grid."""
    if not board.categories:
        return "(empty board)"
    return board_to_frame(board, cell_width).to_string()
