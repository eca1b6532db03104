"""Sculpture Radar Services.

Service layer components:
- Catalog: curated, read-only list of sculpture parks
- AI Gateway: Gemini (primary, search-grounded) + Groq (alternative)
- Discovery: merges catalog and AI candidates into one ranked list
- Session: per-user search state guarded by a generation token
"""

from .catalog import ReferenceCatalog
from .ai_gateway import (
    AIGateway,
    GeminiGateway,
    GroqGateway,
    create_ai_gateway,
)
from .discovery import DiscoveryService
from .session import SessionRegistry, SessionState

__all__ = [
    # Catalog
    "ReferenceCatalog",
    # AI gateway
    "AIGateway",
    "GeminiGateway",
    "GroqGateway",
    "create_ai_gateway",
    # Discovery
    "DiscoveryService",
    # Session
    "SessionRegistry",
    "SessionState",
]
