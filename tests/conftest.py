import pytest

from tests.stubs import StubCatalog, make_clues


@pytest.fixture
def six_by_five() -> StubCatalog:
    categories = {
        category_id: {'title': f"Category {category_id}", 'clues': make_clues(5, str(category_id))}
        for category_id in (11, 12, 13, 14, 15, 16)
    }
    return StubCatalog(categories)


@pytest.fixture
def math_and_history() -> StubCatalog:
    return StubCatalog({
        1: {'title': "Math", 'clues': make_clues(5, "math")},
        2: {'title': "History", 'clues': make_clues(5, "history")},
    })
