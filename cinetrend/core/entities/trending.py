"""
Trending entities.

A SearchEvent is produced each time a user's settled query yields at least
one result. TrendingEntry is the persisted aggregate, one per catalog item.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SearchEvent:
    """
    Write payload sent to the trending service.

    Attributes:
        term: Settled search term typed by the user
        top_item_id: Catalog id of the first search result
        poster_url: Full poster URL of that result
    """

    term: str
    top_item_id: int
    poster_url: str


@dataclass(frozen=True)
class TrendingEntry:
    """
    Aggregated search count for one catalog item.

    Attributes:
        item_id: Catalog id (one entry per id)
        search_term: Most recent term that surfaced this item first
        poster_url: Most recent poster URL
        count: Number of searches whose top result was this item (>= 1)
        updated_at: Time of the last recorded search
    """

    item_id: int
    search_term: str
    poster_url: str
    count: int
    updated_at: Optional[datetime] = None
