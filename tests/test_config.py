"""
Tests for settings loading
"""
from joker.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("MISTRAL_API_KEY", raising=False)
    monkeypatch.delenv("UPSTREAM_TIMEOUT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.mistral_api_key == ""
    assert settings.llm_base_url == "https://api.mistral.ai/v1"
    assert settings.llm_model == "mistral-medium"
    assert settings.llm_temperature == 0.7
    assert settings.zenquotes_api_url == "https://zenquotes.io/api/random"
    assert settings.upstream_timeout == 10.0


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("MISTRAL_API_KEY", "secret")
    monkeypatch.setenv("UPSTREAM_TIMEOUT", "2.5")

    settings = Settings(_env_file=None)

    assert settings.mistral_api_key == "secret"
    assert settings.upstream_timeout == 2.5
