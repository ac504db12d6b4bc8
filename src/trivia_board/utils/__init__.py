"""
Utility modules for the trivia board.

This package contains text cleaning helpers for catalog content.
"""

from .text_processor import TextProcessor, clean_clue_text

__all__ = [
    'TextProcessor',
    'clean_clue_text'
]
