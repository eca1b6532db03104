"""AI Gateway: Gemini (primary, search-grounded) + Groq (alternative)."""

from .service import (
    AIGateway,
    GeminiGateway,
    GenerationResult,
    GroqGateway,
    create_ai_gateway,
)
from .validation import CandidateValidation, coerce_coordinates, validate_candidate

__all__ = [
    "AIGateway",
    "GeminiGateway",
    "GenerationResult",
    "GroqGateway",
    "create_ai_gateway",
    "CandidateValidation",
    "coerce_coordinates",
    "validate_candidate",
]
