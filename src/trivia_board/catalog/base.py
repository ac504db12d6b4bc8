from abc import ABC, abstractmethod
from typing import List, Dict, Any


class BaseCatalog(ABC):
    """Read-only trivia catalog: a list of category ids and per-category detail."""

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the client (e.g., open an HTTP session)."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Clean up resources (e.g., close the HTTP session)."""
        pass

    @abstractmethod
    async def list_category_ids(self, count: int, offset: int) -> List[int]:
        """Return up to ``count`` category ids starting at ``offset``."""
        pass

    @abstractmethod
    async def get_category(self, category_id: int) -> Dict[str, Any]:
        """Return the raw category payload: ``{title, clues: [{question, answer}, ...]}``."""
        pass
