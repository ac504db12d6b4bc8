"""
Tests for board loading: fan-out, ordering and failure handling.
"""

import asyncio
import random

import pytest

from trivia_board.errors import LoadError, NetworkError, ShapeError
from trivia_board.loader import BoardLoader
from trivia_board.models import RevealState
from tests.stubs import StubCatalog, make_clues


def load(loader: BoardLoader, category_count: int, offset_range: int = 18000):
    return asyncio.run(loader.load_board(category_count, offset_range))


def test_six_categories_by_five_clues(six_by_five):
    board = load(BoardLoader(six_by_five), 6)

    assert len(board.categories) == 6
    assert board.row_count == 5
    assert [c.category_id for c in board.categories] == [11, 12, 13, 14, 15, 16]
    assert all(len(c.clues) == 5 for c in board.categories)
    assert all(clue.reveal_state is RevealState.HIDDEN
               for c in board.categories for clue in c.clues)


def test_math_and_history_example(math_and_history):
    board = load(BoardLoader(math_and_history), 2)

    assert board.categories[0].title == "Math"
    assert board.categories[1].title == "History"
    assert len(board.categories[1].clues) == 5
    assert board.categories[0].clues[0].question == "math question 0"
    assert board.categories[0].clues[0].answer == "math answer 0"
    assert board.categories[0].clues[0].value == 200


def test_order_preserved_when_completion_order_differs():
    categories = {i: {'title': f"T{i}", 'clues': make_clues(5)} for i in (1, 2, 3)}
    catalog = StubCatalog(categories, delays={1: 0.05, 2: 0.02, 3: 0})

    board = load(BoardLoader(catalog), 3)

    assert catalog.completed == [3, 2, 1]
    assert [c.title for c in board.categories] == ["T1", "T2", "T3"]


def test_requests_are_fanned_out(six_by_five):
    six_by_five.delays = {i: 0.01 for i in six_by_five.categories}
    load(BoardLoader(six_by_five), 6)
    assert six_by_five.max_in_flight == 6


def test_concurrency_cap(six_by_five):
    six_by_five.delays = {i: 0.01 for i in six_by_five.categories}
    load(BoardLoader(six_by_five, concurrency=2), 6)
    assert six_by_five.max_in_flight == 2


def test_offset_drawn_from_range(six_by_five):
    loader = BoardLoader(six_by_five, rng=random.Random(7))
    load(loader, 6, offset_range=100)

    count, offset = six_by_five.list_calls[0]
    assert count == 6
    assert 0 <= offset < 100
    assert offset == random.Random(7).randrange(100)


def test_failed_category_raises_load_error(six_by_five):
    six_by_five.failing = {13}
    with pytest.raises(LoadError) as exc_info:
        load(BoardLoader(six_by_five), 6)
    assert isinstance(exc_info.value, NetworkError)


def test_failed_category_waits_for_siblings(six_by_five):
    six_by_five.failing = {11}
    six_by_five.delays = {16: 0.02}
    with pytest.raises(LoadError):
        load(BoardLoader(six_by_five), 6)
    assert six_by_five.in_flight == 0


def test_failed_id_listing_raises_load_error():
    class BrokenCatalog(StubCatalog):
        async def list_category_ids(self, count, offset):
            raise NetworkError("connection refused")

    with pytest.raises(LoadError):
        load(BoardLoader(BrokenCatalog({})), 6)


def test_mismatched_clue_counts():
    categories = {i: {'title': f"T{i}", 'clues': make_clues(5)} for i in range(1, 7)}
    categories[4]['clues'] = make_clues(4)

    with pytest.raises(ShapeError):
        load(BoardLoader(StubCatalog(categories)), 6)


def test_mismatched_clue_counts_with_row_limit():
    categories = {i: {'title': f"T{i}", 'clues': make_clues(5)} for i in range(1, 7)}
    categories[4]['clues'] = make_clues(4)

    with pytest.raises(LoadError):
        load(BoardLoader(StubCatalog(categories), clues_per_category=5), 6)


def test_row_limit_truncates_long_categories():
    categories = {
        1: {'title': "Long", 'clues': make_clues(9)},
        2: {'title': "Short", 'clues': make_clues(5)},
    }
    board = load(BoardLoader(StubCatalog(categories), clues_per_category=5), 2)

    assert board.row_count == 5
    assert [clue.question for clue in board.categories[0].clues] == [f"Q question {i}" for i in range(5)]


def test_too_few_ids():
    categories = {i: {'title': f"T{i}", 'clues': make_clues(5)} for i in (1, 2)}
    with pytest.raises(ShapeError):
        load(BoardLoader(StubCatalog(categories)), 6)


def test_duplicate_ids():
    categories = {1: {'title': "T1", 'clues': make_clues(5)}}
    with pytest.raises(ShapeError):
        load(BoardLoader(StubCatalog(categories, ids=[1, 1])), 2)


def test_malformed_clue():
    categories = {1: {'title': "T1", 'clues': [{'question': "no answer"}]}}
    with pytest.raises(ShapeError):
        load(BoardLoader(StubCatalog(categories)), 1)


@pytest.mark.parametrize("title", [None, 42, ["Math"]])
def test_non_string_title(title):
    categories = {1: {'title': title, 'clues': make_clues(5)}}
    with pytest.raises(ShapeError):
        load(BoardLoader(StubCatalog(categories)), 1)


def test_clue_text_is_cleaned():
    categories = {1: {'title': "Authors", 'clues': [
        {'question': "This <i>Hamlet</i> author", 'answer': "William Shakespeare\\'s"},
    ]}}
    board = load(BoardLoader(StubCatalog(categories)), 1)

    clue = board.categories[0].clues[0]
    assert clue.question == "This Hamlet author"
    assert clue.answer == "William Shakespeare's"


@pytest.mark.parametrize("category_count, offset_range", [(0, 100), (6, 0)])
def test_invalid_arguments(six_by_five, category_count, offset_range):
    with pytest.raises(ValueError):
        load(BoardLoader(six_by_five), category_count, offset_range)
