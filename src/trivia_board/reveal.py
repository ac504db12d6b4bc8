"""
Clue reveal state machine.

    HIDDEN   --click--> QUESTION
    QUESTION --click--> ANSWER
    ANSWER   --click--> ANSWER

Transitions never move backwards and never raise. Nothing here knows about
rendering, so the controller can be exercised without a presentation layer.
"""

from .constants import HIDDEN_CELL_TEXT
from .models import Clue, RevealState

_TRANSITIONS = {
    RevealState.HIDDEN: RevealState.QUESTION,
    RevealState.QUESTION: RevealState.ANSWER,
    RevealState.ANSWER: RevealState.ANSWER,
}


def next_reveal_state(state: RevealState) -> RevealState:
    """Return the state a clue moves to when clicked in ``state``."""
    return _TRANSITIONS[state]


def on_clue_click(clue: Clue) -> RevealState:
    """Advance ``clue`` by one click and return the state to display."""
    clue.reveal_state = next_reveal_state(clue.reveal_state)
    return clue.reveal_state


def display_text(clue: Clue, placeholder: str = HIDDEN_CELL_TEXT) -> str:
    """Text a cell shows for the clue's current state."""
    if clue.reveal_state is RevealState.QUESTION:
        return clue.question
    if clue.reveal_state is RevealState.ANSWER:
        return clue.answer
    return placeholder
