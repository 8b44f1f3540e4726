"""Content service - picks a joke or a quote and never fails."""

import logging
import random

from joker.config import Settings
from joker.constants import (
    JOKE_ERROR_TEXT,
    JOKE_PROMPT,
    JOKE_TIMEOUT_TEXT,
    QUOTE_FALLBACK_AUTHOR,
    QUOTE_FALLBACK_TEXT,
    QUOTE_KEYWORDS,
)
from joker.repository import (
    LLMRepository,
    QuoteRepository,
    UpstreamError,
    UpstreamTimeoutError,
)
from joker.services.content_service.dto import ContentResult

logger = logging.getLogger(__name__)


class ContentService:
    """Cheer-up content: an LLM joke or a ZenQuotes quote, chosen by coin flip."""

    def __init__(
        self,
        settings: Settings,
        quote_repo: QuoteRepository,
        llm_repo: LLMRepository,
        rng: random.Random | None = None,
    ):
        self.settings = settings
        self.quote_repo = quote_repo
        self.llm_repo = llm_repo
        self.rng = rng or random.Random()

    def should_send_joke(self) -> bool:
        return self.rng.random() < 0.5

    def pick_keyword(self) -> str:
        return self.rng.choice(QUOTE_KEYWORDS)

    async def select_content(self) -> ContentResult:
        """Return a joke or a quote with equal probability."""
        if self.should_send_joke():
            return await self.fetch_joke()
        return await self.fetch_quote()

    async def fetch_quote(self) -> ContentResult:
        keyword = self.pick_keyword()
        try:
            quote = await self.quote_repo.random_by_keyword(keyword)
        except UpstreamError as e:
            logger.error(f"Error fetching quote for {keyword!r}: {e}")
            return ContentResult.quote(QUOTE_FALLBACK_TEXT, QUOTE_FALLBACK_AUTHOR)

        logger.info(f"Fetched quote for {keyword!r} by {quote.author}")
        return ContentResult.quote(quote.text, quote.author)

    async def fetch_joke(self) -> ContentResult:
        try:
            text = await self.llm_repo.complete(
                JOKE_PROMPT,
                temperature=self.settings.llm_temperature,
            )
        except UpstreamTimeoutError as e:
            logger.warning(f"Joke generation timed out: {e}")
            return ContentResult.joke(JOKE_TIMEOUT_TEXT)
        except UpstreamError as e:
            logger.error(f"Error generating joke: {e}")
            return ContentResult.joke(JOKE_ERROR_TEXT)

        joke = text.strip()
        logger.info(f"Generated joke: {joke[:50]}...")
        return ContentResult.joke(joke)
