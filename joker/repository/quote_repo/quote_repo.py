"""Quote repository - raw ZenQuotes API calls."""

import asyncio
import logging
from typing import Any

import httpx

from joker.config import Settings
from joker.repository.errors import (
    MalformedResponseError,
    NetworkError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)
from joker.repository.quote_repo.dto import ZenQuote

logger = logging.getLogger(__name__)

PROVIDER = "zenquotes"


class QuoteRepository:
    """Fetches random quotes by keyword from ZenQuotes."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client

    async def random_by_keyword(self, keyword: str) -> ZenQuote:
        """
        Fetch one random quote for a keyword.

        The request races a timer of ``settings.upstream_timeout`` seconds.

        Raises:
            UpstreamTimeoutError: timer won the race
            NetworkError: transport failure
            UpstreamStatusError: non-2xx answer
            MalformedResponseError: body is not ``[{"q": ..., "a": ...}, ...]``
        """
        url = f"{self.settings.zenquotes_api_url.rstrip('/')}/{keyword}"

        try:
            response = await asyncio.wait_for(
                self.client.get(url),
                timeout=self.settings.upstream_timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise UpstreamTimeoutError(PROVIDER, f"no answer for {keyword!r}") from e
        except httpx.HTTPError as e:
            raise NetworkError(PROVIDER, str(e) or type(e).__name__) from e

        if not response.is_success:
            raise UpstreamStatusError(PROVIDER, response.status_code, response.reason_phrase)

        try:
            data: Any = response.json()
        except ValueError as e:
            raise MalformedResponseError(PROVIDER, "body is not JSON") from e

        return self._parse(data)

    @staticmethod
    def _parse(data: Any) -> ZenQuote:
        if not isinstance(data, list) or not data:
            raise MalformedResponseError(PROVIDER, "expected a non-empty array")

        first = data[0]
        if not isinstance(first, dict):
            raise MalformedResponseError(PROVIDER, "array element is not an object")

        text = first.get("q")
        author = first.get("a")
        if not isinstance(text, str) or not isinstance(author, str):
            raise MalformedResponseError(PROVIDER, "missing 'q' or 'a' field")

        return ZenQuote(text=text, author=author)
