"""Test doubles and builders shared by the unit tests."""

import json
from collections.abc import Iterable
from typing import Any, Optional, Union

import pytest

from sculpture_radar.config import GatewaySettings
from sculpture_radar.models import Coordinates, LocationRecord, LocationSource
from sculpture_radar.services.ai_gateway import AIGateway, GenerationResult

OTTERLO = Coordinates(lat=52.0952, lng=5.8169)

Scripted = Union[str, dict, list, GenerationResult, BaseException]


class FakeAPIError(Exception):
    """Stands in for an SDK error that carries an HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ScriptedGateway(AIGateway):
    """Gateway whose provider replies are queued up front.

    Each ``_generate`` call pops the next reply: strings are returned as the
    body, dicts and lists are JSON-encoded, exceptions are raised.
    """

    def __init__(self, replies: Iterable[Scripted] = (), settings: Optional[GatewaySettings] = None) -> None:
        super().__init__(settings or fast_gateway_settings())
        self.replies = list(replies)
        self.calls: list[dict[str, Any]] = []

    @property
    def provider_name(self) -> str:
        return "Scripted"

    async def _generate(self, prompt: str, **kwargs: Any) -> GenerationResult:
        self.calls.append({"prompt": prompt, **kwargs})
        if not self.replies:
            pytest.fail("ScriptedGateway ran out of replies")
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, GenerationResult):
            return reply
        if isinstance(reply, (dict, list)):
            reply = json.dumps(reply)
        return GenerationResult(text=reply)


def fast_gateway_settings(**overrides: Any) -> GatewaySettings:
    values = {"api_key": "test-key", "initial_backoff_seconds": 0.0, "timeout_seconds": 1.0,
              "discovery_timeout_seconds": 1.0}
    values.update(overrides)
    return GatewaySettings(**values)


def make_record(
    record_id: str,
    name: str,
    lat: float,
    lng: float,
    source: LocationSource = LocationSource.CATALOG,
    **extra: Any,
) -> LocationRecord:
    return LocationRecord(
        id=record_id,
        name=name,
        coordinates=Coordinates(lat=lat, lng=lng),
        source=source,
        **extra,
    )


def park(name: str, lat: Any, lng: Any, **extra: Any) -> dict:
    """A raw park object as the model returns it."""
    return {"name": name, "location": "Somewhere", "desc": "Outdoor art", "lat": lat, "lng": lng, **extra}
