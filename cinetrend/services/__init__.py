"""
Services applicatifs de CineTrend.

- debounce.py : DebouncedQueryController, saisie -> requete stable sans course
- search_orchestrator.py : SearchOrchestrator, recherche/populaires/detail + tendances
- trending.py : TrendingService, seul ecrivain du compteur de recherches
"""

from cinetrend.services.debounce import (
    DebouncedQueryController,
    FetchOutcome,
    QueryPhase,
    QueryState,
)
from cinetrend.services.search_orchestrator import (
    DetailView,
    SearchOrchestrator,
    SearchView,
    ViewStatus,
)
from cinetrend.services.trending import TrendingService

__all__ = [
    "DebouncedQueryController",
    "FetchOutcome",
    "QueryPhase",
    "QueryState",
    "DetailView",
    "SearchOrchestrator",
    "SearchView",
    "ViewStatus",
    "TrendingService",
]
