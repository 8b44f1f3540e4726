from joker.repository.quote_repo.dto import ZenQuote
from joker.repository.quote_repo.quote_repo import QuoteRepository

__all__ = ["QuoteRepository", "ZenQuote"]
