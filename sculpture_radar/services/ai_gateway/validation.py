"""Parse-and-validate boundary for AI-discovered candidates.

Raw JSON from the model never leaves the gateway: every park the model
proposes is either turned into a strictly typed ``LocationRecord`` here or
rejected with the list of fields that failed.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional
from uuid import uuid4

from pydantic import ValidationError

from sculpture_radar.models import Coordinates, LocationRecord, LocationSource

TAG_SOLITARY = "solitary monument"
TAG_INTERACTIVE = "interactive"


@dataclass
class CandidateValidation:
    """Result of candidate validation."""
    is_valid: bool
    missing_fields: list[str]
    record: Optional[LocationRecord] = None


def new_candidate_id() -> str:
    """Fresh per-request id for an AI-discovered record."""
    return f"ai-{uuid4().hex[:12]}"


def coerce_number(value: Any) -> Optional[float]:
    """Turn a JSON number or numeric string into a finite float.

    ``"NaN"``, ``"inf"``, booleans and anything unparseable give ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def coerce_coordinates(lat: Any, lng: Any) -> Optional[Coordinates]:
    lat_value, lng_value = coerce_number(lat), coerce_number(lng)
    if lat_value is None or lng_value is None:
        return None
    if not (-90 <= lat_value <= 90 and -180 <= lng_value <= 180):
        return None
    return Coordinates(lat=lat_value, lng=lng_value)


def _is_flag_set(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return value is True


def _clean_website(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    url = value.strip()
    if url.startswith(("http://", "https://")):
        return url
    return None


def _text(raw: dict, *keys: str) -> str:
    for key in keys:
        value = raw.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def validate_candidate(raw: Any, record_id: Optional[str] = None) -> CandidateValidation:
    """Validate one park object from a search-parks response.

    Expected shape: ``{name, location, desc, lat, lng, isSolitary?,
    isInteractive?, url?}``. ``place``/``description``/``website`` are
    accepted as aliases.
    """
    if not isinstance(raw, dict):
        return CandidateValidation(is_valid=False, missing_fields=["record"])

    missing_fields = []

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        missing_fields.append("name")

    lat = coerce_number(raw.get("lat"))
    lng = coerce_number(raw.get("lng"))
    if lat is None or not (-90 <= lat <= 90):
        missing_fields.append("lat")
    if lng is None or not (-180 <= lng <= 180):
        missing_fields.append("lng")

    if missing_fields:
        return CandidateValidation(is_valid=False, missing_fields=missing_fields)

    tags = set()
    if _is_flag_set(raw.get("isSolitary")):
        tags.add(TAG_SOLITARY)
    if _is_flag_set(raw.get("isInteractive")):
        tags.add(TAG_INTERACTIVE)

    try:
        record = LocationRecord(
            id=record_id or new_candidate_id(),
            name=name.strip(),
            place=_text(raw, "location", "place"),
            description=_text(raw, "desc", "description"),
            coordinates=Coordinates(lat=lat, lng=lng),
            source=LocationSource.AI_DISCOVERED,
            tags=frozenset(tags),
            website=_clean_website(raw.get("url") or raw.get("website")),
        )
    except ValidationError:
        return CandidateValidation(is_valid=False, missing_fields=["validation_error"])

    return CandidateValidation(is_valid=True, missing_fields=[], record=record)
