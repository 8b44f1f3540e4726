from joker.repository.llm_repo.llm_repo import LLMRepository

__all__ = ["LLMRepository"]
