"""AI Gateway: Gemini (primary, search-grounded) or Groq (alternative).

Provider-agnostic base class with two concrete implementations:
- GeminiGateway: Google Gemini with the Google Search grounding tool
- GroqGateway:   Groq LPU in JSON mode, answers from model knowledge only

All prompt construction, retry handling, error classification and JSON
parsing lives in the base class. Subclasses only implement ``_generate()``
for their API client, plus any SDK-specific error classification.

Resilience policy:
- every call goes through ``_call_with_retry`` with a bounded timeout
- timeouts, network errors, 5xx and empty/malformed bodies are retried with
  exponential backoff
- rate limits raise ``QuotaExceededError`` at once, never retried
- a missing API key raises ``ConfigurationError`` on the first call
"""

import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types
from groq import APIConnectionError as GroqConnectionError
from groq import AsyncGroq

from sculpture_radar.config import GatewaySettings
from sculpture_radar.models import (
    Citation,
    ConfigurationError,
    Coordinates,
    DiscoveryResult,
    ExpertAnswer,
    MalformedResponseError,
    NotFoundError,
    QuotaExceededError,
    RadarError,
    ResolvedLocation,
    TransientError,
    UpstreamError,
)

from .validation import coerce_coordinates, validate_candidate

logger = logging.getLogger(__name__)

CURRENT_LOCATION_NAME = "your current location"

SYSTEM_PROMPT = (
    "You are a curator of outdoor art: sculpture parks, sculpture gardens, "
    "open-air museums, land art and monumental public sculpture. "
    "Only mention places that really exist and can be visited today. "
    "Never invent coordinates: if you do not know where something is, leave it out. "
    "When asked for JSON, respond ONLY with valid JSON. No explanations, no markdown."
)

EXPERT_INSTRUCTION = (
    "You are an expert in European sculpture and land art. Give a factual, "
    "in-depth and inspiring answer. Use web search for current facts."
)

# "52.09, 5.81" or "52,09 5,81" typed into the search box
_COORDINATE_QUERY = re.compile(
    r"^\s*([-+]?\d{1,2}(?:[.,]\d+)?)\s*[,;\s]\s*([-+]?\d{1,3}(?:[.,]\d+)?)\s*$"
)

_QUOTA_MARKERS = ("resource_exhausted", "quota", "rate limit", "rate_limit")


@dataclass
class GenerationResult:
    """Raw output of a single generative call."""
    text: str
    citations: list[Citation] = field(default_factory=list)


class AIGateway(ABC):
    """Base class for AI gateways.

    Subclasses only implement ``_generate()`` for their specific API client.
    """

    def __init__(self, settings: GatewaySettings) -> None:
        self._settings = settings
        self._timeout = settings.timeout_seconds

    @abstractmethod
    async def _generate(
        self,
        prompt: str,
        *,
        system_instruction: Optional[str] = None,
        json_output: bool = False,
        grounded: bool = False,
        temperature: float = 0.0,
    ) -> GenerationResult:
        """Send prompt to the AI provider and return raw text."""
        ...

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Human-readable provider name for logging."""
        ...

    # ── Utilities ─────────────────────────────────────────────────────

    @staticmethod
    def _sanitize_input(text: str, max_length: int = 500) -> str:
        """Strip control characters and cap length before prompting."""
        cleaned = re.sub(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]', '', text or "")
        return cleaned[:max_length].strip()

    @staticmethod
    def _extract_json(text: str) -> str:
        """Cut the JSON payload out of any wrapper text.

        Tries to decode a value at every ``{`` or ``[`` and keeps the longest
        one, so code fences and bracketed prose such as ``[1]`` or
        ``[from web search]`` around the payload are ignored.
        """
        decoder = json.JSONDecoder()
        best = None
        pos = 0
        while True:
            starts = [i for i in (text.find("{", pos), text.find("[", pos)) if i != -1]
            if not starts:
                break
            start = min(starts)
            try:
                _, end = decoder.raw_decode(text, start)
            except json.JSONDecodeError:
                pos = start + 1
                continue
            if best is None or end - start > best[1] - best[0]:
                best = (start, end)
            pos = end
        if best is None:
            return text.strip()
        return text[best[0]:best[1]]

    @classmethod
    def _parse_json(cls, text: str) -> Any:
        try:
            return json.loads(cls._extract_json(text))
        except (json.JSONDecodeError, ValueError) as e:
            raise MalformedResponseError(f"Response is not valid JSON: {e}") from e

    @staticmethod
    def _parse_coordinate_query(text: str) -> Optional[Coordinates]:
        match = _COORDINATE_QUERY.match(text)
        if not match:
            return None
        return coerce_coordinates(match.group(1), match.group(2))

    @staticmethod
    def _status_of(exc: BaseException) -> Optional[int]:
        for attr in ("status_code", "code"):
            value = getattr(exc, attr, None)
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        return None

    def _classify_error(self, exc: Exception) -> RadarError:
        """Map a provider or transport exception onto the error taxonomy."""
        if isinstance(exc, RadarError):
            return exc
        if isinstance(exc, (asyncio.TimeoutError, httpx.TransportError)):
            return TransientError(f"{self.provider_name} timeout or network failure: {type(exc).__name__}")

        status = self._status_of(exc)
        text = str(exc).lower()
        if status == 429 or any(marker in text for marker in _QUOTA_MARKERS):
            return QuotaExceededError(f"{self.provider_name} rate limit (status {status})")
        if status in (401, 403):
            return ConfigurationError(f"{self.provider_name} rejected the credentials (status {status})")
        if status is not None and status >= 500:
            return TransientError(f"{self.provider_name} server error (status {status})")
        if status is not None:
            return UpstreamError(f"{self.provider_name} rejected the request (status {status})")
        return UpstreamError(f"{self.provider_name} call failed: {type(exc).__name__}")

    async def _call_with_retry(
        self,
        operation: str,
        prompt: str,
        *,
        parse: Optional[Callable[[str], Any]] = None,
        timeout: Optional[float] = None,
        **generate_kwargs: Any,
    ) -> tuple[GenerationResult, Any]:
        """Run one generative call with timeout, retry and classification.

        Returns the raw result and, when ``parse`` is given, its parsed body.
        Raises the last ``TransientError`` once retries are exhausted, or any
        non-transient ``RadarError`` immediately.
        """
        t = timeout or self._timeout
        attempts = self._settings.max_retries + 1
        delay = self._settings.initial_backoff_seconds
        last_error: Optional[TransientError] = None

        for attempt in range(1, attempts + 1):
            try:
                result = await asyncio.wait_for(self._generate(prompt, **generate_kwargs), timeout=t)
                if not result.text.strip():
                    raise MalformedResponseError(f"{operation}: empty response body")
                parsed = parse(result.text) if parse else None
                return result, parsed
            except RadarError as e:
                error = e
            except Exception as e:
                error = self._classify_error(e)
                error.__cause__ = e

            if not isinstance(error, TransientError):
                logger.warning(f"[{self.provider_name}] {operation} failed: {error.message}")
                raise error

            last_error = error
            if attempt < attempts:
                logger.info(
                    f"[{self.provider_name}] {operation} attempt {attempt}/{attempts} failed "
                    f"({error.message}), retrying in {delay:.1f}s"
                )
                await asyncio.sleep(delay)
                delay *= 2

        logger.warning(f"[{self.provider_name}] {operation} gave up after {attempts} attempts")
        raise last_error

    # ── Operations ────────────────────────────────────────────────────

    async def resolve_location(self, query: Union[str, Coordinates]) -> ResolvedLocation:
        """Resolve free text (or a GPS fix, passed straight through) to coordinates."""
        if isinstance(query, Coordinates):
            return ResolvedLocation(coordinates=query, display_name=CURRENT_LOCATION_NAME)

        cleaned = self._sanitize_input(query, max_length=200)
        if not cleaned:
            raise NotFoundError("Empty location query")

        typed = self._parse_coordinate_query(cleaned)
        if typed:
            return ResolvedLocation(coordinates=typed, display_name=cleaned)

        prompt = (
            f'Translate the following search term into geographic coordinates.\n'
            f'SEARCH TERM: "{cleaned}"\n'
            f'Respond ONLY with a JSON object: {{"lat": 0.0, "lng": 0.0, "name": "City/Place"}}'
        )
        try:
            _, data = await self._call_with_retry(
                "geocode", prompt, parse=self._parse_json, json_output=True, temperature=0.0,
            )
        except MalformedResponseError as e:
            raise NotFoundError(f"Geocode for {cleaned!r} returned no usable JSON") from e

        if isinstance(data, list) and data:
            data = data[0]
        coordinates = coerce_coordinates(data.get("lat"), data.get("lng")) if isinstance(data, dict) else None
        if coordinates is None:
            raise NotFoundError(f"Geocode for {cleaned!r} returned no valid coordinates")

        name = data.get("name")
        display_name = name.strip() if isinstance(name, str) and name.strip() else cleaned
        logger.info(
            f"[{self.provider_name}] Resolved {cleaned!r} to {display_name} "
            f"({coordinates.lat:.4f}, {coordinates.lng:.4f})"
        )
        return ResolvedLocation(coordinates=coordinates, display_name=display_name)

    async def discover_locations(self, origin: Coordinates, display_name: str) -> DiscoveryResult:
        """Ask the curator for real sculpture parks around ``origin``.

        The radius in the prompt is advisory; callers must re-check distances.
        Unparseable output yields an empty result rather than an error.
        """
        place = self._sanitize_input(display_name, max_length=200)
        radius = self._settings.search_radius_km
        prompt = (
            f"Search for real, existing sculpture parks, sculpture gardens, open-air museums, "
            f"land art and monumental outdoor sculptures within {radius:g} km of "
            f"{place} ({origin.lat:.5f}, {origin.lng:.5f}).\n"
            f"Only include places that actually exist.\n\n"
            f"Respond ONLY with a JSON object:\n"
            f'{{"curatorIntro": "One or two sentences about art in this region", '
            f'"parks": [{{"name": "Name", "location": "Town", "desc": "Short description", '
            f'"lat": 0.0, "lng": 0.0, "isSolitary": false, "isInteractive": false, '
            f'"url": "official website or null"}}]}}\n\n'
            f"Rules:\n- isSolitary is true for a single standalone monument rather than a park\n"
            f"- isInteractive is true when visitors can walk through or play with the works\n"
            f"- Use the exact coordinates of the entrance or the artwork"
        )
        try:
            _, data = await self._call_with_retry(
                "search-parks",
                prompt,
                parse=self._parse_json,
                timeout=self._settings.discovery_timeout_seconds,
                json_output=True,
                grounded=True,
                temperature=0.0,
            )
        except MalformedResponseError as e:
            logger.warning(f"[{self.provider_name}] Discovery near {place} unusable: {e.message}")
            return DiscoveryResult()

        return self._build_discovery_result(data)

    def _build_discovery_result(self, data: Any) -> DiscoveryResult:
        curator_intro = None
        if isinstance(data, dict):
            raw_parks = data.get("parks")
            intro = data.get("curatorIntro")
            if isinstance(intro, str) and intro.strip():
                curator_intro = intro.strip()
        else:
            raw_parks = data
        if not isinstance(raw_parks, list):
            raw_parks = []

        candidates = []
        dropped = 0
        for raw in raw_parks:
            validation = validate_candidate(raw)
            if validation.is_valid:
                candidates.append(validation.record)
                continue
            dropped += 1
            label = raw.get("name") if isinstance(raw, dict) else type(raw).__name__
            logger.info(f"[{self.provider_name}] Dropped candidate {label!r}: invalid {validation.missing_fields}")

        logger.info(f"[{self.provider_name}] Got {len(candidates)} candidates ({dropped} dropped)")
        return DiscoveryResult(candidates=candidates, curator_intro=curator_intro, dropped=dropped)

    async def answer_question(self, text: str) -> ExpertAnswer:
        """Free-text expert answer grounded in web search, with citations."""
        question = self._sanitize_input(text, max_length=1000)
        if not question:
            raise ValueError("question cannot be empty")
        result, _ = await self._call_with_retry(
            "expert-advice",
            question,
            system_instruction=EXPERT_INSTRUCTION,
            grounded=True,
            temperature=0.2,
        )
        seen: set[str] = set()
        citations = []
        for citation in result.citations:
            if citation.uri not in seen:
                seen.add(citation.uri)
                citations.append(citation)
        return ExpertAnswer(answer=result.text.strip(), citations=citations)

    async def elaborate(self, name: str, place: str) -> str:
        """Deep dive into the art movement, artists and history of a location."""
        name = self._sanitize_input(name, max_length=200)
        place = self._sanitize_input(place, max_length=200)
        if not name:
            raise ValueError("name cannot be empty")
        prompt = (
            f"Describe in detail the art movement, the specific artists and the historical "
            f"context of {name} in {place or 'its region'}."
        )
        result, _ = await self._call_with_retry("deep-dive", prompt, temperature=0.3)
        return result.text.strip()


# ═══════════════════════════════════════════════════════════════════════
# Provider: Gemini  (primary, Google Search grounding)
# ═══════════════════════════════════════════════════════════════════════

class GeminiGateway(AIGateway):
    """Google Gemini with the Google Search tool."""

    def __init__(self, settings: GatewaySettings) -> None:
        super().__init__(settings)
        self._client: Optional[genai.Client] = None

    @property
    def provider_name(self) -> str:
        return "Gemini"

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self._settings.api_key:
                raise ConfigurationError("GEMINI_API_KEY not provided")
            self._client = genai.Client(api_key=self._settings.api_key)
            logger.info(f"[AI] Gemini ready: {self._settings.model_name}")
        return self._client

    async def _generate(
        self,
        prompt: str,
        *,
        system_instruction: Optional[str] = None,
        json_output: bool = False,
        grounded: bool = False,
        temperature: float = 0.0,
    ) -> GenerationResult:
        client = self._get_client()
        config = genai_types.GenerateContentConfig(
            system_instruction=system_instruction or SYSTEM_PROMPT,
            temperature=temperature,
            tools=[genai_types.Tool(google_search=genai_types.GoogleSearch())] if grounded else None,
            # JSON mime type cannot be combined with tools; _extract_json copes
            response_mime_type="application/json" if json_output and not grounded else None,
        )
        resp = await client.aio.models.generate_content(
            model=self._settings.model_name,
            contents=prompt,
            config=config,
        )
        return GenerationResult(text=(resp.text or "").strip(), citations=self._extract_citations(resp))

    @staticmethod
    def _extract_citations(resp: Any) -> list[Citation]:
        citations = []
        for candidate in resp.candidates or []:
            metadata = candidate.grounding_metadata
            if not metadata:
                continue
            for chunk in metadata.grounding_chunks or []:
                web = chunk.web
                if web and web.uri:
                    citations.append(Citation(title=web.title or web.uri, uri=web.uri))
        return citations

    def _classify_error(self, exc: Exception) -> RadarError:
        if isinstance(exc, genai_errors.APIError) and (exc.status or "").upper() == "RESOURCE_EXHAUSTED":
            return QuotaExceededError(f"Gemini quota exhausted (status {exc.code})")
        return super()._classify_error(exc)


# ═══════════════════════════════════════════════════════════════════════
# Provider: Groq  (alternative, no live search grounding)
# ═══════════════════════════════════════════════════════════════════════

class GroqGateway(AIGateway):
    """Groq LPU chat completions in JSON mode."""

    def __init__(self, settings: GatewaySettings) -> None:
        super().__init__(settings)
        self._client: Optional[AsyncGroq] = None

    @property
    def provider_name(self) -> str:
        return "Groq"

    def _get_client(self) -> AsyncGroq:
        if self._client is None:
            if not self._settings.api_key:
                raise ConfigurationError("GROQ_API_KEY not provided")
            # Retries are ours; keep the SDK from stacking its own
            self._client = AsyncGroq(api_key=self._settings.api_key, max_retries=0)
            logger.info(f"[AI] Groq ready: {self._settings.model_name}")
        return self._client

    async def _generate(
        self,
        prompt: str,
        *,
        system_instruction: Optional[str] = None,
        json_output: bool = False,
        grounded: bool = False,
        temperature: float = 0.0,
    ) -> GenerationResult:
        client = self._get_client()
        if grounded:
            logger.debug("[Groq] No search grounding available, answering from model knowledge")
        extra: dict[str, Any] = {}
        if json_output:
            extra["response_format"] = {"type": "json_object"}
        resp = await client.chat.completions.create(
            model=self._settings.model_name,
            messages=[
                {"role": "system", "content": system_instruction or SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=temperature,
            max_tokens=4096,
            **extra,
        )
        return GenerationResult(text=(resp.choices[0].message.content or "").strip())

    def _classify_error(self, exc: Exception) -> RadarError:
        if isinstance(exc, GroqConnectionError):
            return TransientError(f"Groq connection failure: {type(exc).__name__}")
        return super()._classify_error(exc)


# ═══════════════════════════════════════════════════════════════════════
# Factory
# ═══════════════════════════════════════════════════════════════════════

def create_ai_gateway(settings: GatewaySettings) -> AIGateway:
    """Create the gateway for the configured provider."""
    provider = settings.provider.strip().lower()
    if provider == "gemini":
        return GeminiGateway(settings)
    if provider == "groq":
        return GroqGateway(settings)
    raise ConfigurationError(f"Unknown AI provider: {settings.provider!r}")
