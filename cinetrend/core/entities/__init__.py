"""
Business entities representing core domain concepts.

All entities are frozen dataclasses: the presentation layer receives
read-only snapshots.

Exports:
- CatalogItem: Movie record from a catalog list endpoint
- CatalogItemDetails: Movie record with detail fields and extras
- CastMember, Video: Optional detail extras
- Extra: Extras that can be requested with a detail fetch
- SearchEvent: Search that yielded at least one result
- TrendingEntry: Persisted search count aggregate
"""

from cinetrend.core.entities.catalog import (
    CastMember,
    CatalogItem,
    CatalogItemDetails,
    Extra,
    Video,
)
from cinetrend.core.entities.trending import SearchEvent, TrendingEntry

__all__ = [
    "CastMember",
    "CatalogItem",
    "CatalogItemDetails",
    "Extra",
    "Video",
    "SearchEvent",
    "TrendingEntry",
]
