"""
Schemas pydantic de l'API HTTP.

Les champs sont exposes en camelCase (searchTerm, movieId, posterUrl...),
format attendu par le client web.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base des schemas : alias camelCase, lecture depuis les dataclasses."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SearchRecordRequest(CamelModel):
    """Corps de POST /trending/search."""

    search_term: str = Field(max_length=255)
    movie_id: int
    poster_url: Optional[str] = Field(default=None, max_length=500)

    @field_validator("search_term")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Le terme de recherche est obligatoire."""
        v = v.strip()
        if not v:
            raise ValueError("Search term is required")
        return v


class TrendingEntryResponse(CamelModel):
    """Entree du classement des tendances."""

    movie_id: int
    search_term: str
    poster_url: str
    count: int
    updated_at: Optional[datetime] = None


class MovieResponse(CamelModel):
    """Film tel que liste par le catalogue."""

    id: int
    title: str
    poster_path: Optional[str] = None
    poster_url: str
    vote_average: Optional[float] = None
    release_date: Optional[str] = None
    year: Optional[int] = None
    original_language: str = ""


class MovieListResponse(CamelModel):
    """Reponse de GET /movies."""

    query: str
    movies: list[MovieResponse]


class CastMemberResponse(CamelModel):
    id: int
    name: str
    character: Optional[str] = None
    profile_path: Optional[str] = None


class VideoResponse(CamelModel):
    key: str
    name: str
    site: str
    type: str


class MovieDetailResponse(MovieResponse):
    """Reponse de GET /movies/{id}."""

    overview: Optional[str] = None
    tagline: Optional[str] = None
    homepage: Optional[str] = None
    runtime: Optional[int] = None
    status: Optional[str] = None
    budget: Optional[int] = None
    revenue: Optional[int] = None
    backdrop_path: Optional[str] = None
    genres: list[str] = []
    production_companies: list[str] = []
    production_countries: list[str] = []
    cast: list[CastMemberResponse] = []
    videos: list[VideoResponse] = []
