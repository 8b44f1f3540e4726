"""
Pytest configuration and fixtures
"""
import pytest

from joker.config import Settings

from mocks import LLM_URL, QUOTES_URL


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment, with a short upstream timeout"""
    return Settings(
        _env_file=None,
        mistral_api_key="test-key",
        llm_base_url=LLM_URL,
        zenquotes_api_url=QUOTES_URL,
        upstream_timeout=0.2,
    )
