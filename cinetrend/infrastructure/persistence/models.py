"""
Modeles SQLModel pour la base de donnees CineTrend.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- trending_entries: Compteur de recherches par film (une ligne par item_id)
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlmodel import Field, Index, SQLModel


def utcnow() -> datetime:
    """Horodatage UTC naif, format stocke par SQLite."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TrendingEntryModel(SQLModel, table=True):
    """
    Compteur des recherches dont le premier resultat etait ce film.

    search_term et poster_url refletent la recherche la plus recente.
    count ne decroit jamais ; les lignes ne sont jamais supprimees.
    """

    __tablename__ = "trending_entries"
    __table_args__ = (
        Index("ix_trending_entries_ranking", "count", "updated_at"),
    )

    id: int | None = Field(default=None, primary_key=True)
    item_id: int = Field(unique=True, index=True)  # ID TMDB
    search_term: str
    poster_url: str = Field(default="", max_length=500)
    count: int = Field(default=1, ge=1)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
