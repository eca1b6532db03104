"""Reference catalog of curated sculpture parks."""

from .data import CATALOG_ENTRIES
from .service import ReferenceCatalog

__all__ = [
    "CATALOG_ENTRIES",
    "ReferenceCatalog",
]
