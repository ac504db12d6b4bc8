"""
Game session: owns the current board and the loading state.

The session is what a presentation layer talks to. It replaces the board
wholesale on each successful load and keeps the previous board, marked stale,
when a load fails.
"""

import logging
from typing import Optional

from .errors import LoadError
from .loader import BoardLoader
from .models import Board
from .reveal import display_text, on_clue_click


class GameSession:
    def __init__(self, loader: BoardLoader, category_count: int, offset_range: int):
        self.logger = logging.getLogger(__name__)
        self.loader = loader
        self.category_count = category_count
        self.offset_range = offset_range
        self.board: Optional[Board] = None
        self.is_loading = False
        self.is_stale = False
        self.last_error: Optional[LoadError] = None

    async def restart(self) -> bool:
        """
        Start a new game.

        Returns:
            True if a new board was loaded. False if the load failed or another
            load was already in flight.
        """
        if self.is_loading:
            self.logger.warning("Restart ignored: a board is already loading")
            return False

        self.is_loading = True
        try:
            board = await self.loader.load_board(self.category_count, self.offset_range)
        except LoadError as e:
            self.logger.error(f"Error during setup: {e}")
            self.last_error = e
            self.is_stale = self.board is not None
            return False
        finally:
            self.is_loading = False

        self.board = board
        self.is_stale = False
        self.last_error = None
        return True

    def click(self, category_index: int, clue_index: int) -> str:
        """
        Reveal the next step of a clue and return the text to display.

        Raises:
            RuntimeError: If no board has been loaded
            IndexError: If the cell is outside the board
        """
        if self.board is None:
            raise RuntimeError("No board loaded")
        clue = self.board.clue_at(category_index, clue_index)
        on_clue_click(clue)
        return display_text(clue)
