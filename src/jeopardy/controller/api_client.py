"""
Trivia API client for fetching Jeopardy categories and clues.

https://rithm-jeopardy.herokuapp.com/api
"""
from __future__ import annotations

import asyncio
import html
import logging
from typing import Any, Dict, List, Optional, Protocol

import aiohttp

from jeopardy.config import API_BASE_URL, REQUEST_TIMEOUT
from jeopardy.model.board import Category, Clue
from jeopardy.model.errors import MalformedResponse, NetworkFailure

logger = logging.getLogger(__name__)


class TriviaDataSource(Protocol):
    async def get_category_ids(self, count: int) -> List[int]:
        ...

    async def get_category(self, category_id: int) -> Category:
        ...


class JeopardyClient:
    """HTTP client for the Jeopardy trivia API. Requests are never retried."""

    def __init__(self, base_url: str = API_BASE_URL, timeout: int = REQUEST_TIMEOUT):
        """
        Initialize the client.

        Args:
            base_url: API root, without a trailing slash
            timeout: Total request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def get_category_ids(self, count: int) -> List[int]:
        """
        Fetch identifiers of up to `count` categories.

        Raises:
            NetworkFailure: If the request fails
            MalformedResponse: If the payload is not a list of categories with ids
        """
        data = await self._get_json("categories", {"count": count})

        if not isinstance(data, list):
            raise MalformedResponse(f"Expected a list of categories, got {type(data).__name__}")

        try:
            ids = [int(item["id"]) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedResponse(f"Category list entry without a valid id: {e}") from e

        logger.info(f"Fetched {len(ids)} category ids")
        return ids

    async def get_category(self, category_id: int) -> Category:
        """
        Fetch one category with its full clue pool.

        Returns:
            Category with every clue the API knows for it, all HIDDEN

        Raises:
            NetworkFailure: If the request fails
            MalformedResponse: If the payload lacks a title or clues
        """
        data = await self._get_json("category", {"id": category_id})
        category = self._parse_category(data)
        logger.info(f"Fetched category {category_id} '{category.title}' with {len(category.clues)} clues")
        return category

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self.base_url}/{path}"
        logger.debug(f"GET {url} params={params}")

        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, params=params) as response:
                    if response.status != 200:
                        logger.error(f"Trivia API returned status {response.status} for {url}")
                        raise NetworkFailure(f"Trivia API returned status {response.status}")

                    try:
                        return await response.json()
                    except (aiohttp.ContentTypeError, ValueError) as e:
                        logger.error(f"Trivia API returned invalid JSON for {url}: {e}")
                        raise MalformedResponse(f"Invalid JSON from {url}") from e

        except asyncio.TimeoutError as e:
            logger.error(f"Trivia API request timeout for {url}")
            raise NetworkFailure(f"Request to {url} timed out after {self.timeout}s") from e

        except aiohttp.ClientError as e:
            logger.error(f"Trivia API network error: {e}")
            raise NetworkFailure(f"Network error: {e}") from e

    @staticmethod
    def _parse_category(data: Any) -> Category:
        if not isinstance(data, dict):
            raise MalformedResponse(f"Expected a category object, got {type(data).__name__}")

        try:
            title = html.unescape(str(data["title"]))
            raw_clues = data["clues"]
        except KeyError as e:
            raise MalformedResponse(f"Category is missing field {e}") from e

        if not isinstance(raw_clues, list):
            raise MalformedResponse("Category clues are not a list")

        clues = []
        for item in raw_clues:
            try:
                clues.append(Clue(
                    question=html.unescape(str(item["question"])),
                    answer=html.unescape(str(item["answer"])),
                    value=_optional_int(item.get("value")),
                ))
            except (KeyError, TypeError, AttributeError) as e:
                raise MalformedResponse(f"Clue is missing field {e}") from e

        return Category(title=title, clues=clues, id=_optional_int(data.get("id")))


def _optional_int(value: Any) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None
