"""
Fixtures pytest partagees pour les tests CineTrend.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec base SQLite temporaire
- Engine et compteur de recherches sur cette base
- Mocks des interfaces (ICatalogClient, ITrendingService)
- Films types
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import Engine

from cinetrend.config import Settings
from cinetrend.core.entities.catalog import CatalogItem
from cinetrend.core.ports.api_clients import ICatalogClient
from cinetrend.core.ports.trending import ITrendingService
from cinetrend.infrastructure.persistence.database import create_db_engine, init_db
from cinetrend.infrastructure.persistence.repositories import SQLModelSearchCountStore


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler la base et les logs de chaque test.
    """
    return Settings(
        _env_file=None,
        tmdb_api_key="test_api_key",
        database_url=f"sqlite:///{tmp_path}/test.db",
        trending_api_url=None,
        debounce_seconds=0.05,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    """Engine SQLite fichier avec les tables creees."""
    engine = create_db_engine(f"sqlite:///{tmp_path}/counts.db")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine: Engine) -> SQLModelSearchCountStore:
    """Compteur de recherches sur la base temporaire."""
    return SQLModelSearchCountStore(engine)


@pytest.fixture
def avatar() -> CatalogItem:
    """CatalogItem pour un film type."""
    return CatalogItem(
        id=19995,
        title="Avatar",
        poster_path="/jRXYjXNq0Cs2TcJjLkki24MLp7u.jpg",
        vote_average=7.6,
        release_date="2009-12-15",
        original_language="en",
    )


@pytest.fixture
def avatar_sequel() -> CatalogItem:
    """Second resultat de la recherche 'avatar', sans affiche."""
    return CatalogItem(
        id=76600,
        title="Avatar: The Way of Water",
        vote_average=7.7,
        release_date="2022-12-14",
        original_language="en",
    )


@pytest.fixture
def popular_movies() -> list[CatalogItem]:
    """Films populaires types."""
    return [
        CatalogItem(id=872585, title="Oppenheimer", vote_average=8.1),
        CatalogItem(id=346698, title="Barbie", vote_average=7.0),
    ]


@pytest.fixture
def mock_catalog(
    avatar: CatalogItem,
    avatar_sequel: CatalogItem,
    popular_movies: list[CatalogItem],
) -> AsyncMock:
    """
    Mock de ICatalogClient.

    search retourne [avatar, avatar_sequel], browse_popular les films
    populaires. Configurer le mock dans chaque test pour d'autres cas.
    """
    mock = AsyncMock(spec=ICatalogClient)
    mock.search.return_value = [avatar, avatar_sequel]
    mock.browse_popular.return_value = popular_movies
    return mock


@pytest.fixture
def mock_trending() -> AsyncMock:
    """Mock de ITrendingService : classement vide par defaut."""
    mock = AsyncMock(spec=ITrendingService)
    mock.get_trending.return_value = []
    mock.record_search.return_value = None
    return mock
