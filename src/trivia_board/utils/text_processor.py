"""
Text Processing Utilities

This module provides centralized text cleaning for clue text returned by the
catalog service and for fitting that text into board cells.
"""

import re

from bs4 import BeautifulSoup  # type: ignore

from ..constants import TEXT_CLEANUP_PATTERNS


class TextProcessor:
    """
    Handles text processing operations for catalog content.

    Catalog clues may carry HTML markup (``<i>Hamlet</i>``), HTML entities and
    backslash-escaped quotes; all of those are stripped before a clue reaches
    the board.
    """

    @staticmethod
    def clean_clue_text(text: str) -> str:
        """
        Clean question or answer text from the catalog.

        Args:
            text: Raw clue text

        Returns:
            str: Plain text with markup, entities and escapes removed
        """
        if not text:
            return ""

        cleaned = text.strip()

        # Markup and entities
        if '<' in cleaned or '&' in cleaned:
            cleaned = BeautifulSoup(cleaned, 'html.parser').get_text()

        for pattern in TEXT_CLEANUP_PATTERNS['escaped_quotes']:
            cleaned = re.sub(pattern, pattern[-1], cleaned)

        return re.sub(TEXT_CLEANUP_PATTERNS['whitespace'], ' ', cleaned).strip()

    @staticmethod
    def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
        """
        Truncate text to specified length with suffix.

        Args:
            text: Text to truncate
            max_length: Maximum length including suffix
            suffix: Suffix to add when truncating

        Returns:
            str: Truncated text
        """
        if not text or len(text) <= max_length:
            return text

        if max_length <= len(suffix):
            return suffix[:max(max_length, 0)]

        truncated_length = max_length - len(suffix)
        return text[:truncated_length] + suffix


def clean_clue_text(text: str) -> str:
    """Clean clue text."""
    return TextProcessor.clean_clue_text(text)
