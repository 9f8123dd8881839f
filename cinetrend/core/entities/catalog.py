"""
Catalog entities.

Immutable snapshots of movie records received from the external catalog
(TMDB). They are never persisted by the application.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from cinetrend.utils.constants import TMDB_IMAGE_BASE_URL
from cinetrend.utils.helpers import image_url


class Extra(str, Enum):
    """Optional blocks requested alongside a movie detail fetch."""

    CAST = "cast"
    MEDIA = "media"


@dataclass(frozen=True)
class CatalogItem:
    """
    Movie record as listed by the catalog (search or browse).

    Attributes:
        id: Stable catalog identifier (TMDB id)
        title: Localized title
        poster_path: Relative poster path on the image CDN
        vote_average: Average rating (0-10)
        release_date: ISO date string (YYYY-MM-DD)
        original_language: Two-letter language code
        image_base_url: Image CDN base the poster path is resolved against
    """

    id: int
    title: str
    poster_path: Optional[str] = None
    vote_average: Optional[float] = None
    release_date: Optional[str] = None
    original_language: str = ""
    image_base_url: str = field(default=TMDB_IMAGE_BASE_URL, repr=False, compare=False)

    @property
    def year(self) -> Optional[int]:
        """Release year extracted from release_date."""
        if self.release_date and len(self.release_date) >= 4:
            try:
                return int(self.release_date[:4])
            except ValueError:
                return None
        return None

    @property
    def poster_url(self) -> str:
        """Full poster URL, or the local placeholder."""
        return image_url(self.poster_path, base_url=self.image_base_url)


@dataclass(frozen=True)
class CastMember:
    """A credited actor."""

    id: int
    name: str
    character: Optional[str] = None
    profile_path: Optional[str] = None


@dataclass(frozen=True)
class Video:
    """Trailer or clip attached to a movie."""

    key: str
    name: str
    site: str
    type: str


@dataclass(frozen=True)
class CatalogItemDetails(CatalogItem):
    """
    Movie record extended with detail fields and optional extras.

    cast is filled only when Extra.CAST was requested (top 12 actors),
    videos only when Extra.MEDIA was requested.
    """

    overview: Optional[str] = None
    tagline: Optional[str] = None
    homepage: Optional[str] = None
    runtime: Optional[int] = None
    status: Optional[str] = None
    budget: Optional[int] = None
    revenue: Optional[int] = None
    backdrop_path: Optional[str] = None
    genres: tuple[str, ...] = ()
    production_companies: tuple[str, ...] = ()
    production_countries: tuple[str, ...] = ()
    cast: tuple[CastMember, ...] = ()
    videos: tuple[Video, ...] = ()
