"""API routes for Sculpture Radar.

Endpoints:
- POST /search                     run a search for a place name or a GPS fix
- POST /sessions/{session_id}/reset start over (catalog spotlight again)
- GET  /spotlight                  curated parks shown before any search
- POST /expert-advice              free-text question to the AI curator
- POST /deep-dive                  art-historical background for one park

Every failure reaches the client as an ``AppError`` with a safe
``user_message``; raw backend text is only logged.
"""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, model_validator

from sculpture_radar.config import Settings
from sculpture_radar.models import (
    AppError,
    Citation,
    Coordinates,
    ErrorCode,
    LocationRecord,
    RadarError,
    RankedLocation,
)
from sculpture_radar.services.ai_gateway import AIGateway, create_ai_gateway
from sculpture_radar.services.catalog import ReferenceCatalog
from sculpture_radar.services.discovery import DiscoveryService
from sculpture_radar.services.session import SessionRegistry, SessionState

logger = logging.getLogger(__name__)

router = APIRouter()


# ─── Service singletons (lazy, overridable in tests) ───

_settings: Settings | None = None
_catalog: ReferenceCatalog | None = None
_gateway: AIGateway | None = None
_discovery: DiscoveryService | None = None
_registry: SessionRegistry | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_catalog() -> ReferenceCatalog:
    global _catalog
    if _catalog is None:
        _catalog = ReferenceCatalog.default()
    return _catalog


def get_gateway() -> AIGateway:
    global _gateway
    if _gateway is None:
        _gateway = create_ai_gateway(get_settings().gateway)
    return _gateway


def get_discovery_service() -> DiscoveryService:
    global _discovery
    if _discovery is None:
        _discovery = DiscoveryService(get_gateway(), get_catalog(), get_settings().discovery)
    return _discovery


def get_session_registry() -> SessionRegistry:
    global _registry
    if _registry is None:
        _registry = SessionRegistry()
    return _registry


# ─── Response shaping ───

class LocationResponse(BaseModel):
    """One location as sent to the client."""
    id: str
    name: str
    place: str = ""
    description: str = ""
    lat: float
    lng: float
    source: str
    tags: list[str] = Field(default_factory=list)
    website: Optional[str] = None
    region: Optional[str] = None
    distance_km: Optional[float] = None
    directions_url: Optional[str] = None


def location_to_response(location: Union[LocationRecord, RankedLocation]) -> LocationResponse:
    """Flatten a record (or a ranked view of one) for the client."""
    ranked = location if isinstance(location, RankedLocation) else None
    record = ranked.record if ranked else location
    return LocationResponse(
        id=record.id,
        name=record.name,
        place=record.place,
        description=record.description,
        lat=record.coordinates.lat,
        lng=record.coordinates.lng,
        source=record.source.value,
        tags=sorted(record.tags),
        website=record.website,
        region=record.region,
        distance_km=round(ranked.distance_km, 2) if ranked else None,
        directions_url=ranked.directions_url if ranked else None,
    )


# ─── Search ───

class SearchRequest(BaseModel):
    """A place name, or a device location, plus the caller's session."""
    query: Optional[str] = Field(default=None, max_length=200, description="Place name to search around")
    lat: Optional[float] = Field(default=None, ge=-90, le=90)
    lng: Optional[float] = Field(default=None, ge=-180, le=180)
    session_id: Optional[str] = Field(default=None, max_length=64)

    @model_validator(mode="after")
    def _needs_query_or_position(self) -> "SearchRequest":
        has_position = self.lat is not None and self.lng is not None
        if not has_position and not (self.query and self.query.strip()):
            raise ValueError("Provide a query or both lat and lng")
        return self


class SearchResponse(BaseModel):
    """Session view after a search."""
    success: bool
    session_id: str
    display_name: Optional[str] = None
    origin: Optional[Coordinates] = None
    curator_intro: Optional[str] = None
    quota_reached: bool = False
    locations: list[LocationResponse] = Field(default_factory=list)
    error: Optional[AppError] = None


def session_to_response(session_id: str, session: SessionState, catalog: ReferenceCatalog, spotlight_count: int) -> SearchResponse:
    return SearchResponse(
        success=session.error is None,
        session_id=session_id,
        display_name=session.display_name,
        origin=session.origin,
        curator_intro=session.curator_intro,
        quota_reached=session.quota_reached,
        locations=[location_to_response(loc) for loc in session.visible_locations(catalog, spotlight_count)],
        error=session.error,
    )


@router.post("/search", response_model=SearchResponse)
async def search(
    request: SearchRequest,
    discovery: DiscoveryService = Depends(get_discovery_service),
    catalog: ReferenceCatalog = Depends(get_catalog),
    registry: SessionRegistry = Depends(get_session_registry),
) -> SearchResponse:
    """Search for sculpture parks around a place or the caller's position.

    A device position wins over the text query and skips geocoding.
    If discovery is rate limited the response still succeeds, with
    ``quota_reached`` set and catalog-only locations.
    """
    session_id, session = registry.get_or_create(request.session_id)

    if request.lat is not None and request.lng is not None:
        query: Union[str, Coordinates] = Coordinates(lat=request.lat, lng=request.lng)
    else:
        query = request.query.strip()

    logger.info(f"[SEARCH] Session {session_id[:8]}: {query!r}")
    applied = await discovery.search_into(session, query)

    if not applied:
        return SearchResponse(
            success=False,
            session_id=session_id,
            error=AppError(
                code=ErrorCode.SEARCH_SUPERSEDED,
                message="Search superseded by a newer search or a reset",
                user_message="A newer search replaced this one.",
            ),
        )

    if session.error:
        logger.info(f"[SEARCH] Session {session_id[:8]} failed: {session.error.code.value}")
    return session_to_response(session_id, session, catalog, discovery.settings.spotlight_count)


@router.post("/sessions/{session_id}/reset", response_model=SearchResponse)
async def reset_session(
    session_id: str,
    discovery: DiscoveryService = Depends(get_discovery_service),
    catalog: ReferenceCatalog = Depends(get_catalog),
    registry: SessionRegistry = Depends(get_session_registry),
) -> SearchResponse:
    """Clear search results; the catalog spotlight is shown again."""
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    session.reset()
    return session_to_response(session_id, session, catalog, discovery.settings.spotlight_count)


class SpotlightResponse(BaseModel):
    success: bool
    locations: list[LocationResponse] = Field(default_factory=list)


@router.get("/spotlight", response_model=SpotlightResponse)
async def spotlight(
    catalog: ReferenceCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
) -> SpotlightResponse:
    """Curated parks for the landing view."""
    records = catalog.spotlight(settings.discovery.spotlight_count)
    return SpotlightResponse(success=True, locations=[location_to_response(r) for r in records])


# ─── Curator ───

class ExpertAdviceRequest(BaseModel):
    question: str = Field(..., min_length=1, max_length=1000)


class ExpertAdviceResponse(BaseModel):
    success: bool
    answer: str = ""
    citations: list[Citation] = Field(default_factory=list)
    error: Optional[AppError] = None


def _invalid_input(message: str) -> AppError:
    return AppError(
        code=ErrorCode.INVALID_INPUT,
        message=message,
        user_message="Invalid request. Please check your input and try again.",
    )


@router.post("/expert-advice", response_model=ExpertAdviceResponse)
async def expert_advice(
    request: ExpertAdviceRequest,
    gateway: AIGateway = Depends(get_gateway),
) -> ExpertAdviceResponse:
    """Ask the AI curator a free-text question, answered with web sources."""
    try:
        result = await gateway.answer_question(request.question)
    except ValueError as e:
        return ExpertAdviceResponse(success=False, error=_invalid_input(str(e)))
    except RadarError as e:
        logger.warning(f"[CURATOR] Expert advice failed: {e.message}")
        return ExpertAdviceResponse(success=False, error=e.to_app_error())
    return ExpertAdviceResponse(success=True, answer=result.answer, citations=result.citations)


class DeepDiveRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    place: str = Field(default="", max_length=200)


class DeepDiveResponse(BaseModel):
    success: bool
    text: str = ""
    error: Optional[AppError] = None


@router.post("/deep-dive", response_model=DeepDiveResponse)
async def deep_dive(
    request: DeepDiveRequest,
    gateway: AIGateway = Depends(get_gateway),
) -> DeepDiveResponse:
    """Background on the art movement, artists and history of one park."""
    try:
        text = await gateway.elaborate(request.name, request.place)
    except ValueError as e:
        return DeepDiveResponse(success=False, error=_invalid_input(str(e)))
    except RadarError as e:
        logger.warning(f"[CURATOR] Deep dive for {request.name!r} failed: {e.message}")
        return DeepDiveResponse(success=False, error=e.to_app_error())
    return DeepDiveResponse(success=True, text=text)
