"""Unit tests for settings loaded from the environment."""

import pytest

from sculpture_radar.config import DEFAULT_GEMINI_MODEL, DEFAULT_GROQ_MODEL, Settings

ENV_VARS = [
    "AI_PROVIDER", "GEMINI_API_KEY", "GEMINI_MODEL", "GROQ_API_KEY", "GROQ_MODEL",
    "AI_TIMEOUT_SECONDS", "AI_DISCOVERY_TIMEOUT_SECONDS", "AI_MAX_RETRIES", "AI_BACKOFF_SECONDS",
    "SEARCH_RADIUS_KM", "DUPLICATE_THRESHOLD_KM", "MAX_RESULTS",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.setattr("sculpture_radar.config.load_dotenv", lambda: False)
    return monkeypatch


class TestSettingsFromEnv:

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = Settings.from_env()
        assert settings.gateway.provider == "gemini"
        assert settings.gateway.api_key is None
        assert settings.gateway.model_name == DEFAULT_GEMINI_MODEL
        assert settings.gateway.max_retries == 2
        assert settings.gateway.initial_backoff_seconds == 1.5
        assert settings.discovery.search_radius_km == 50.0
        assert settings.discovery.duplicate_threshold_km == 0.2
        assert settings.discovery.max_results == 16
        assert settings.discovery.spotlight_count == 8

    def test_gemini_key(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("GEMINI_API_KEY", "g-key")
        assert Settings.from_env().gateway.api_key == "g-key"

    def test_groq_provider(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("AI_PROVIDER", "Groq")
        clean_env.setenv("GROQ_API_KEY", "q-key")
        clean_env.setenv("GEMINI_API_KEY", "g-key")
        gateway = Settings.from_env().gateway
        assert gateway.provider == "groq"
        assert gateway.api_key == "q-key"
        assert gateway.model_name == DEFAULT_GROQ_MODEL

    def test_radius_is_shared(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("SEARCH_RADIUS_KM", "75")
        settings = Settings.from_env()
        assert settings.gateway.search_radius_km == 75.0
        assert settings.discovery.search_radius_km == 75.0

    def test_empty_key_is_missing(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("GEMINI_API_KEY", "")
        assert Settings.from_env().gateway.api_key is None

    def test_numeric_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("AI_MAX_RETRIES", "3")
        clean_env.setenv("MAX_RESULTS", "12")
        clean_env.setenv("DUPLICATE_THRESHOLD_KM", "1.5")
        settings = Settings.from_env()
        assert settings.gateway.max_retries == 3
        assert settings.discovery.max_results == 12
        assert settings.discovery.duplicate_threshold_km == 1.5
