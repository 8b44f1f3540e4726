"""LLM repository - raw OpenAI-compatible chat completion calls."""

import asyncio
import logging
import os
from typing import Any

import httpx
from openai import APIConnectionError, APIError, APIStatusError, APITimeoutError

from joker.config import Settings
from joker.repository.errors import (
    MalformedResponseError,
    NetworkError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)

_langfuse_host = os.getenv("LANGFUSE_HOST", "")
if _langfuse_host:
    from langfuse.openai import AsyncOpenAI
else:
    from openai import AsyncOpenAI

logger = logging.getLogger(__name__)

PROVIDER = "llm"


class LLMRepository:
    """OpenAI-compatible chat completion client without retries."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None):
        self.settings = settings
        self.client: AsyncOpenAI | None = None

        # The openai client refuses an empty key; without one jokes fail as unauthorized
        if not settings.mistral_api_key:
            logger.warning("MISTRAL_API_KEY is not set, joke requests will fail authorization")
            return

        self.client = AsyncOpenAI(
            api_key=settings.mistral_api_key,
            base_url=settings.llm_base_url,
            timeout=settings.upstream_timeout,
            max_retries=0,
            http_client=http_client,
        )

    async def complete(self, prompt: str, temperature: float | None = None) -> str:
        """
        Send a single-turn user prompt and return the first choice's text.

        Raises the errors from ``joker.repository.errors``; never a raw
        ``openai`` exception.
        """
        if self.client is None:
            raise UpstreamStatusError(PROVIDER, 401, "missing API key")

        temp = temperature if temperature is not None else self.settings.llm_temperature

        try:
            response = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=self.settings.llm_model,
                    messages=[{"role": "user", "content": prompt}],
                    temperature=temp,
                ),
                timeout=self.settings.upstream_timeout,
            )
        except (asyncio.TimeoutError, APITimeoutError) as e:
            raise UpstreamTimeoutError(PROVIDER, "completion timed out") from e
        except APIConnectionError as e:
            raise NetworkError(PROVIDER, str(e)) from e
        except APIStatusError as e:
            raise UpstreamStatusError(PROVIDER, e.status_code, e.message) from e
        except (APIError, ValueError) as e:
            # Response arrived but could not be decoded/validated
            raise MalformedResponseError(PROVIDER, str(e)) from e

        return self._extract_text(response)

    @staticmethod
    def _extract_text(response: Any) -> str:
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            raise MalformedResponseError(PROVIDER, "no choices in completion") from e

        if not isinstance(content, str):
            raise MalformedResponseError(PROVIDER, "completion has no text content")

        return content

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()
