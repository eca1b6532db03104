"""Shared fixtures."""

import pytest

from sculpture_radar.config import DiscoverySettings
from sculpture_radar.services.catalog import ReferenceCatalog
from tests.support import OTTERLO, make_record


@pytest.fixture
def discovery_settings() -> DiscoverySettings:
    return DiscoverySettings()


@pytest.fixture
def otterlo_catalog() -> ReferenceCatalog:
    """One entry at the Otterlo origin, one 120 km due north."""
    return ReferenceCatalog([
        make_record("cat-near", "Kröller-Müller Sculpture Garden", OTTERLO.lat, OTTERLO.lng),
        make_record("cat-far", "Wadden Beeldentuin", 53.1744, 5.8169),
    ])
