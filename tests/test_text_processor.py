"""
Tests for clue text cleaning.
"""

import pytest

from trivia_board.utils.text_processor import TextProcessor, clean_clue_text


@pytest.mark.parametrize("raw, expected", [
    ("Shakespeare", "Shakespeare"),
    ("  spaced   out  ", "spaced out"),
    ("<i>The Bell Jar</i>", "The Bell Jar"),
    ("Rock &amp; roll", "Rock & roll"),
    ("Plath\\'s novel", "Plath's novel"),
    ('a \\"quoted\\" word', 'a "quoted" word'),
    ("", ""),
    (None, ""),
])
def test_clean_clue_text(raw, expected):
    assert clean_clue_text(raw) == expected


def test_truncate_text():
    assert TextProcessor.truncate_text("short", 10) == "short"
    assert TextProcessor.truncate_text("a much longer clue", 10) == "a much ..."
    assert TextProcessor.truncate_text("abcdef", 3) == "..."


@pytest.mark.parametrize("max_length", [0, 1, 2])
def test_truncate_never_exceeds_max_length(max_length):
    truncated = TextProcessor.truncate_text("abcdef", max_length)
    assert len(truncated) <= max_length
    assert truncated == "..."[:max_length]
