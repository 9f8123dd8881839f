"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
engine et compteur de recherches, service de tendances (local ou distant),
client TMDB et orchestrateur de recherche.
"""

from dependency_injector import containers, providers

from .adapters.api.tmdb_client import TMDBCatalogClient
from .adapters.api.trending_client import HttpTrendingClient
from .config import Settings
from .core.ports.trending import ITrendingService
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import SQLModelSearchCountStore
from .services.search_orchestrator import SearchOrchestrator
from .services.trending import TrendingService


def _select_trending_service(
    settings: Settings,
    local: providers.Provider,
    remote: providers.Provider,
) -> ITrendingService:
    """Backend distant si CINETREND_TRENDING_API_URL est defini, base locale sinon."""
    return remote() if settings.remote_trending else local()


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        orchestrator = container.search_orchestrator()
        trending = container.trending_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - engine partage, Resource pour la creation des tables
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )
    database = providers.Resource(init_db, engine=engine)

    # Compteur de recherches - sans etat de session, partageable entre threads
    search_count_store = providers.Singleton(
        SQLModelSearchCountStore,
        engine=engine,
    )

    # Tendances - seul ecrivain du compteur
    local_trending_service = providers.Singleton(
        TrendingService,
        store=search_count_store,
        limit=config.provided.trending_limit,
    )
    remote_trending_client = providers.Singleton(
        HttpTrendingClient,
        base_url=config.provided.trending_api_url,
        timeout=config.provided.http_timeout_seconds,
    )
    trending_service = providers.Callable(
        _select_trending_service,
        settings=config,
        local=local_trending_service.provider,
        remote=remote_trending_client.provider,
    )

    # Client TMDB - configuration explicite construite depuis les settings
    catalog_client = providers.Singleton(
        TMDBCatalogClient,
        config=config.provided.catalog_config.call(),
    )

    # Orchestrateur - Factory : un etat d'affichage par session de recherche
    search_orchestrator = providers.Factory(
        SearchOrchestrator,
        catalog=catalog_client,
        trending=trending_service,
        debounce_seconds=config.provided.debounce_seconds,
    )
