"""
Trivia Board Package

A terminal trivia board: loads random categories from the jService catalog,
renders them as a grid and reveals each clue's question, then its answer.
"""

__version__ = "1.0.0"

from .errors import LoadError, NetworkError, ShapeError, ConfigError
from .game import GameSession
from .loader import BoardLoader
from .models import Board, Category, Clue, RevealState
from .reveal import display_text, next_reveal_state, on_clue_click

__all__ = [
    'Board',
    'BoardLoader',
    'Category',
    'Clue',
    'ConfigError',
    'GameSession',
    'LoadError',
    'NetworkError',
    'RevealState',
    'ShapeError',
    'display_text',
    'next_reveal_state',
    'on_clue_click'
]
