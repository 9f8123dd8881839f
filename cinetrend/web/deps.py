"""
Dépendances partagées de l'application web.

Résout les services depuis le Container DI attaché à app.state au démarrage.
"""

from fastapi import HTTPException, Request, status

from ..container import Container
from ..services.search_orchestrator import SearchOrchestrator
from ..services.trending import TrendingService


def get_container(request: Request) -> Container:
    """Container DI créé par le lifespan de l'application."""
    return request.app.state.container


def get_trending_service(request: Request) -> TrendingService:
    """
    Service de tendances local.

    Le backend HTTP est toujours adossé à sa propre base : c'est lui que
    les clients distants appellent.
    """
    return get_container(request).local_trending_service()


def get_orchestrator(request: Request) -> SearchOrchestrator:
    """Orchestrateur de recherche, 503 si TMDB n'est pas configuré."""
    container = get_container(request)
    if not container.config().tmdb_enabled:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Catalogue TMDB non configuré (CINETREND_TMDB_API_KEY)",
        )
    return container.search_orchestrator()
