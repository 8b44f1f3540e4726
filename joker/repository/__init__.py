from joker.repository.errors import (
    MalformedResponseError,
    NetworkError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)
from joker.repository.llm_repo import LLMRepository
from joker.repository.quote_repo import QuoteRepository, ZenQuote

__all__ = [
    "LLMRepository",
    "MalformedResponseError",
    "NetworkError",
    "QuoteRepository",
    "UpstreamError",
    "UpstreamStatusError",
    "UpstreamTimeoutError",
    "ZenQuote",
]
