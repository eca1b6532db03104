"""Runtime configuration.

Settings are read from the environment (and a local ``.env`` file) once, then
passed explicitly to the services that need them. Nothing below the API layer
reads ``os.environ`` directly.

A missing API key is not an error here: the AI gateway raises
``ConfigurationError`` on its first call instead.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_GROQ_MODEL = "llama-3.1-8b-instant"


@dataclass(frozen=True)
class GatewaySettings:
    """AI gateway configuration."""

    provider: str = "gemini"
    api_key: Optional[str] = None
    model_name: str = DEFAULT_GEMINI_MODEL
    timeout_seconds: float = 8.0
    # Grounded web search is slower than plain generation
    discovery_timeout_seconds: float = 15.0
    max_retries: int = 2
    initial_backoff_seconds: float = 1.5
    search_radius_km: float = 50.0


@dataclass(frozen=True)
class DiscoverySettings:
    """Reconciliation constants."""

    search_radius_km: float = 50.0
    duplicate_threshold_km: float = 0.2
    max_results: int = 16
    spotlight_count: int = 8


@dataclass(frozen=True)
class Settings:
    gateway: GatewaySettings = field(default_factory=GatewaySettings)
    discovery: DiscoverySettings = field(default_factory=DiscoverySettings)

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        provider = os.getenv("AI_PROVIDER", "gemini").strip().lower()
        if provider == "groq":
            api_key = os.getenv("GROQ_API_KEY")
            model_name = os.getenv("GROQ_MODEL", DEFAULT_GROQ_MODEL)
        else:
            api_key = os.getenv("GEMINI_API_KEY")
            model_name = os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)

        radius = float(os.getenv("SEARCH_RADIUS_KM", "50"))
        return cls(
            gateway=GatewaySettings(
                provider=provider,
                api_key=api_key or None,
                model_name=model_name,
                timeout_seconds=float(os.getenv("AI_TIMEOUT_SECONDS", "8")),
                discovery_timeout_seconds=float(os.getenv("AI_DISCOVERY_TIMEOUT_SECONDS", "15")),
                max_retries=int(os.getenv("AI_MAX_RETRIES", "2")),
                initial_backoff_seconds=float(os.getenv("AI_BACKOFF_SECONDS", "1.5")),
                search_radius_km=radius,
            ),
            discovery=DiscoverySettings(
                search_radius_km=radius,
                duplicate_threshold_km=float(os.getenv("DUPLICATE_THRESHOLD_KM", "0.2")),
                max_results=int(os.getenv("MAX_RESULTS", "16")),
            ),
        )
