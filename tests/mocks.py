"""
Mocked upstream transports shared by the tests
"""
import json

import httpx

from joker.config import Settings
from joker.repository import LLMRepository, QuoteRepository

QUOTES_URL = "https://quotes.test/api/random"
LLM_URL = "https://llm.test/v1"


class RecordingHandler:
    """Mock transport handler that records every request it receives"""

    def __init__(self, respond):
        self.respond = respond
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return await self.respond(request)


def make_quote_repo(settings: Settings, handler) -> QuoteRepository:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return QuoteRepository(settings, client)


def make_llm_repo(settings: Settings, handler) -> LLMRepository:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return LLMRepository(settings, http_client=client)


def completion(text: str) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"content": text}}]})


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content)
