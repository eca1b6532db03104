"""Discovery orchestrator: catalog + AI candidates into one ranked list."""

from .service import DiscoveryService

__all__ = ["DiscoveryService"]
