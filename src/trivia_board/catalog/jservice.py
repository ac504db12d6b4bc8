"""
aiohttp client for the jService trivia catalog.

Only two read-only endpoints are used:

- ``GET /categories?count=N&offset=K`` returning ``[{"id": ...}, ...]``
- ``GET /category?id=N`` returning ``{"title": ..., "clues": [...]}``

Failed requests are never retried; they surface as ``NetworkError`` and
malformed payloads as ``ShapeError``.
"""

import asyncio
import logging
from typing import List, Dict, Any, Optional

import aiohttp  # type: ignore

from .base import BaseCatalog
from ..constants import CATALOG_ENDPOINTS, DEFAULT_SETTINGS
from ..errors import NetworkError, ShapeError


class JServiceCatalog(BaseCatalog):
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the client.

        Args:
            config: The ``catalog`` section of the settings (base_url,
                timeout_seconds, user_agent). Defaults are used when omitted.
        """
        self.logger = logging.getLogger(__name__)
        self.config = {**DEFAULT_SETTINGS['catalog'], **(config or {})}
        self.base_url = self.config['base_url'].rstrip('/')
        self.session: Optional[aiohttp.ClientSession] = None

    async def initialize(self) -> None:
        if self.session is not None:
            return
        timeout = aiohttp.ClientTimeout(total=self.config['timeout_seconds'])
        headers = {'User-Agent': self.config['user_agent']}
        self.session = aiohttp.ClientSession(timeout=timeout, headers=headers)
        self.logger.debug(f"Opened catalog session for {self.base_url}")

    async def close(self) -> None:
        if self.session is not None:
            await self.session.close()
            self.session = None
            self.logger.debug("Closed catalog session")

    async def list_category_ids(self, count: int, offset: int) -> List[int]:
        data = await self._get_json(
            CATALOG_ENDPOINTS['list_categories'],
            {'count': count, 'offset': offset}
        )
        if not isinstance(data, list):
            raise ShapeError(f"Expected a list of categories, got {type(data).__name__}")

        try:
            return [int(category['id']) for category in data]
        except (KeyError, TypeError, ValueError) as e:
            raise ShapeError(f"Category list entry without a usable id: {e}") from e

    async def get_category(self, category_id: int) -> Dict[str, Any]:
        data = await self._get_json(CATALOG_ENDPOINTS['get_category'], {'id': category_id})
        if not isinstance(data, dict):
            raise ShapeError(f"Expected an object for category {category_id}, got {type(data).__name__}")

        missing = [key for key in ('title', 'clues') if key not in data]
        if missing:
            raise ShapeError(f"Category {category_id} is missing fields: {', '.join(missing)}")
        return data

    async def _get_json(self, endpoint: str, params: Dict[str, Any]) -> Any:
        """
        Issue a GET request and decode the JSON body.

        Args:
            endpoint: Path relative to the base URL
            params: Query parameters

        Returns:
            Decoded JSON payload

        Raises:
            NetworkError: On connection errors, timeouts or non-200 responses
            ShapeError: If the body is not valid JSON
        """
        if self.session is None:
            raise RuntimeError("Catalog session is not initialized; use 'async with' or call initialize()")

        url = f"{self.base_url}{endpoint}"
        self.logger.debug(f"GET {url} params={params}")

        try:
            async with self.session.get(url, params=params) as response:
                if response.status != 200:
                    raise NetworkError(f"HTTP {response.status} from {url}")
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise ShapeError(f"Invalid JSON from {url}: {e}") from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise NetworkError(f"Request to {url} timed out") from e
