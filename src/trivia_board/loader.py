"""
Board loading.

The loader asks the catalog for a random page of category ids, fetches every
category concurrently, and assembles a Board in the order the ids were
requested. A load either returns a complete Board or raises ``LoadError``.
"""

import asyncio
import logging
import random
from typing import List, Dict, Any, Optional

from .catalog.base import BaseCatalog
from .errors import LoadError, ShapeError
from .models import Board, Category, Clue, RevealState
from .utils.text_processor import TextProcessor


class BoardLoader:
    def __init__(self, catalog: BaseCatalog, clues_per_category: Optional[int] = None,
                 concurrency: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the loader.

        Args:
            catalog: Catalog client to fetch from (already initialized)
            clues_per_category: Keep only the first N clues of each category and
                reject categories with fewer. When None, every category must
                return the same number of clues.
            concurrency: Maximum category requests in flight. When None, all
                requests are issued at once.
            rng: Random source for the category offset
        """
        self.logger = logging.getLogger(__name__)
        self.catalog = catalog
        self.clues_per_category = clues_per_category
        self.concurrency = concurrency
        self.rng = rng or random.Random()

    async def load_board(self, category_count: int, offset_range: int) -> Board:
        """
        Load a fresh board.

        Args:
            category_count: Number of categories (columns) to load
            offset_range: Exclusive upper bound for the random catalog offset

        Returns:
            Board with ``category_count`` categories, all clues hidden

        Raises:
            LoadError: If any request fails or the responses have the wrong shape
        """
        if category_count < 1:
            raise ValueError(f"category_count must be positive, got {category_count}")
        if offset_range < 1:
            raise ValueError(f"offset_range must be positive, got {offset_range}")

        offset = self.rng.randrange(offset_range)
        self.logger.info(f"Loading board: {category_count} categories at offset {offset}")

        category_ids = await self.catalog.list_category_ids(category_count, offset)
        self._check_category_ids(category_ids, category_count)

        raw_categories = await self._fetch_categories(category_ids)
        categories = [self._build_category(category_id, raw)
                      for category_id, raw in zip(category_ids, raw_categories)]
        self._check_clue_counts(categories)

        board = Board(categories=categories)
        self.logger.info(f"Board loaded: {len(board.categories)} categories x {board.row_count} clues")
        return board

    async def _fetch_categories(self, category_ids: List[int]) -> List[Dict[str, Any]]:
        """Fetch all categories concurrently, returning payloads in request order."""
        semaphore = asyncio.Semaphore(self.concurrency or len(category_ids))

        async def fetch(category_id: int) -> Dict[str, Any]:
            async with semaphore:
                self.logger.debug(f"Fetching category {category_id}")
                return await self.catalog.get_category(category_id)

        tasks = [asyncio.ensure_future(fetch(category_id)) for category_id in category_ids]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        for category_id, result in zip(category_ids, results):
            if isinstance(result, LoadError):
                self.logger.error(f"Category {category_id} failed: {result}")
                raise result
            if isinstance(result, BaseException):
                raise result
        return results

    def _build_category(self, category_id: int, raw: Dict[str, Any]) -> Category:
        try:
            title = raw['title']
            if not isinstance(title, str):
                raise TypeError(f"title must be a string, got {type(title).__name__}")
            raw_clues = raw['clues']
            clues = [
                Clue(
                    question=TextProcessor.clean_clue_text(raw_clue['question']),
                    answer=TextProcessor.clean_clue_text(raw_clue['answer']),
                    reveal_state=RevealState.HIDDEN,
                    value=raw_clue.get('value')
                )
                for raw_clue in raw_clues
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise ShapeError(f"Category {category_id} has a malformed payload: {e!r}") from e

        if self.clues_per_category is not None:
            if len(clues) < self.clues_per_category:
                raise ShapeError(
                    f"Category {category_id} has {len(clues)} clues, "
                    f"need {self.clues_per_category}"
                )
            clues = clues[:self.clues_per_category]

        self.logger.debug(f"Category {category_id} '{title}': {len(clues)} clues")
        return Category(title=TextProcessor.clean_clue_text(title), clues=clues,
                        category_id=category_id)

    def _check_category_ids(self, category_ids: List[int], category_count: int) -> None:
        if len(category_ids) != category_count:
            raise ShapeError(f"Asked for {category_count} categories, catalog returned {len(category_ids)}")
        if len(set(category_ids)) != len(category_ids):
            raise ShapeError(f"Catalog returned duplicate category ids: {category_ids}")

    def _check_clue_counts(self, categories: List[Category]) -> None:
        counts = {len(category.clues) for category in categories}
        if len(counts) > 1:
            detail = ', '.join(f"{c.category_id}={len(c.clues)}" for c in categories)
            raise ShapeError(f"Inconsistent clue counts across categories: {detail}")
