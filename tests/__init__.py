"""
Test suite for the trivia board.

This package contains tests for all components of the board:
- Clue reveal state machine
- Board loading and fan-out
- jService catalog client
- Game session and terminal rendering
- Settings and text processing
"""
