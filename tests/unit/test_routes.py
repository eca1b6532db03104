"""API tests for the FastAPI routes, with the AI gateway scripted."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from sculpture_radar.api import routes
from sculpture_radar.config import Settings
from sculpture_radar.main import app
from sculpture_radar.models import Citation
from sculpture_radar.services.ai_gateway import GenerationResult
from sculpture_radar.services.catalog import ReferenceCatalog
from sculpture_radar.services.discovery import DiscoveryService
from sculpture_radar.services.session import SessionRegistry
from tests.support import OTTERLO, FakeAPIError, ScriptedGateway


class Harness:
    """Wires scripted services into the app's dependency providers."""

    def __init__(self, catalog: ReferenceCatalog) -> None:
        self.settings = Settings()
        self.catalog = catalog
        self.gateway = ScriptedGateway()
        self.registry = SessionRegistry()
        self.discovery = DiscoveryService(self.gateway, catalog, self.settings.discovery)

    def script(self, *replies) -> None:
        self.gateway.replies.extend(replies)


@pytest.fixture
def harness(otterlo_catalog: ReferenceCatalog) -> Iterator[Harness]:
    h = Harness(otterlo_catalog)
    app.dependency_overrides[routes.get_settings] = lambda: h.settings
    app.dependency_overrides[routes.get_catalog] = lambda: h.catalog
    app.dependency_overrides[routes.get_gateway] = lambda: h.gateway
    app.dependency_overrides[routes.get_discovery_service] = lambda: h.discovery
    app.dependency_overrides[routes.get_session_registry] = lambda: h.registry
    yield h
    app.dependency_overrides.clear()


@pytest.fixture
def client(harness: Harness) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


class TestHealth:

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestSpotlight:

    def test_spotlight_lists_catalog_entries(self, client: TestClient) -> None:
        data = client.get("/api/spotlight").json()
        assert data["success"] is True
        assert [loc["id"] for loc in data["locations"]] == ["cat-near", "cat-far"]
        assert data["locations"][0]["distance_km"] is None
        assert data["locations"][0]["source"] == "catalog"


class TestSearchEndpoint:

    def test_gps_search_with_quota_fallback(self, client: TestClient, harness: Harness) -> None:
        harness.script(FakeAPIError("quota", 429))

        response = client.post("/api/search", json={"lat": OTTERLO.lat, "lng": OTTERLO.lng})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["session_id"]
        assert data["quota_reached"] is True
        assert data["display_name"] == "your current location"
        assert data["error"] is None
        assert [loc["id"] for loc in data["locations"]] == ["cat-near"]
        location = data["locations"][0]
        assert location["distance_km"] == 0.0
        assert location["directions_url"].startswith("https://www.google.com/maps/dir/?api=1")

    def test_text_search(self, client: TestClient, harness: Harness) -> None:
        harness.script(
            {"lat": OTTERLO.lat, "lng": OTTERLO.lng, "name": "Otterlo"},
            {"curatorIntro": "Art in the woods.", "parks": [
                {"name": "Beeldentuin Hoge Veluwe", "location": "Otterlo", "lat": 52.12, "lng": 5.82,
                 "isSolitary": False, "isInteractive": True, "url": "https://example.org"},
            ]},
        )

        data = client.post("/api/search", json={"query": "Otterlo"}).json()

        assert data["success"] is True
        assert data["display_name"] == "Otterlo"
        assert data["curator_intro"] == "Art in the woods."
        assert data["origin"] == {"lat": OTTERLO.lat, "lng": OTTERLO.lng}
        ai = data["locations"][1]
        assert ai["source"] == "ai_discovered"
        assert ai["tags"] == ["interactive"]
        assert ai["id"].startswith("ai-")

    def test_not_found_hides_backend_text(self, client: TestClient, harness: Harness) -> None:
        harness.script("gibberish from the model", "more gibberish", "still gibberish")

        data = client.post("/api/search", json={"query": "Atlantis"}).json()

        assert data["success"] is False
        assert data["locations"] == []
        assert data["error"]["code"] == "LOCATION_NOT_FOUND"
        assert data["error"]["user_message"] == "Location not found. Try a different place name."
        assert "gibberish" not in str(data)

    def test_configuration_error(self, client: TestClient, harness: Harness) -> None:
        harness.script({"lat": 52.0, "lng": 5.0}, FakeAPIError("API key not valid", 401))
        data = client.post("/api/search", json={"query": "Otterlo"}).json()
        assert data["success"] is False
        assert data["error"]["code"] == "CONFIGURATION_ERROR"

    def test_session_is_reused(self, client: TestClient, harness: Harness) -> None:
        harness.script(FakeAPIError("quota", 429), FakeAPIError("quota", 429))
        first = client.post("/api/search", json={"lat": OTTERLO.lat, "lng": OTTERLO.lng}).json()
        second = client.post(
            "/api/search", json={"lat": OTTERLO.lat, "lng": OTTERLO.lng, "session_id": first["session_id"]}
        ).json()
        assert second["session_id"] == first["session_id"]
        assert len(harness.registry) == 1
        _, session = harness.registry.get_or_create(first["session_id"])
        assert session.generation == 2

    def test_requires_query_or_position(self, client: TestClient) -> None:
        assert client.post("/api/search", json={}).status_code == 422
        assert client.post("/api/search", json={"query": "   "}).status_code == 422
        assert client.post("/api/search", json={"lat": 52.0}).status_code == 422

    def test_rejects_out_of_range_position(self, client: TestClient) -> None:
        assert client.post("/api/search", json={"lat": 95.0, "lng": 5.0}).status_code == 422


class TestResetEndpoint:

    def test_reset_restores_spotlight(self, client: TestClient, harness: Harness) -> None:
        harness.script(FakeAPIError("quota", 429))
        session_id = client.post("/api/search", json={"lat": OTTERLO.lat, "lng": OTTERLO.lng}).json()["session_id"]

        data = client.post(f"/api/sessions/{session_id}/reset").json()

        assert data["success"] is True
        assert data["quota_reached"] is False
        assert data["display_name"] is None
        assert [loc["id"] for loc in data["locations"]] == ["cat-near", "cat-far"]
        assert len(harness.catalog) == 2

    def test_unknown_session(self, client: TestClient) -> None:
        assert client.post("/api/sessions/nope/reset").status_code == 404


class TestCuratorEndpoints:

    def test_expert_advice(self, client: TestClient, harness: Harness) -> None:
        harness.script(GenerationResult(
            text="Land art moved sculpture out of the gallery.",
            citations=[Citation(title="Land art", uri="https://en.wikipedia.org/wiki/Land_art")],
        ))
        data = client.post("/api/expert-advice", json={"question": "What is land art?"}).json()
        assert data["success"] is True
        assert data["answer"] == "Land art moved sculpture out of the gallery."
        assert data["citations"] == [{"title": "Land art", "uri": "https://en.wikipedia.org/wiki/Land_art"}]

    def test_expert_advice_quota(self, client: TestClient, harness: Harness) -> None:
        harness.script(FakeAPIError("quota", 429))
        data = client.post("/api/expert-advice", json={"question": "Who is Tony Cragg?"}).json()
        assert data["success"] is False
        assert data["error"]["code"] == "QUOTA_EXCEEDED"

    def test_expert_advice_blank_question(self, client: TestClient) -> None:
        data = client.post("/api/expert-advice", json={"question": "\x00\x01"}).json()
        assert data["success"] is False
        assert data["error"]["code"] == "INVALID_INPUT"

    def test_deep_dive(self, client: TestClient, harness: Harness) -> None:
        harness.script("Niki de Saint Phalle built the garden over two decades.")
        data = client.post("/api/deep-dive", json={"name": "Giardino dei Tarocchi", "place": "Capalbio"}).json()
        assert data["success"] is True
        assert data["text"].startswith("Niki de Saint Phalle")

    def test_deep_dive_transient_failure(self, client: TestClient, harness: Harness) -> None:
        harness.script(*[FakeAPIError("overloaded", 503)] * 3)
        data = client.post("/api/deep-dive", json={"name": "Arte Sella"}).json()
        assert data["success"] is False
        assert data["error"]["code"] == "TRANSIENT_ERROR"


class TestErrorHandlers:

    def test_unexpected_error_is_generic(self, client: TestClient, harness: Harness) -> None:
        async def explode(name: str, place: str) -> str:
            raise RuntimeError("secret internal detail")

        harness.gateway.elaborate = explode
        response = client.post("/api/deep-dive", json={"name": "Arte Sella"})

        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "API_ERROR"
        assert "secret" not in response.text
