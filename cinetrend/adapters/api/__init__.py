"""
Clients API externes.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- TMDB: The Movie Database, catalogue de films (TMDBCatalogClient)
- Backend de tendances distant (HttpTrendingClient)

Infrastructure partagee:
- RateLimitError: Exception pour les erreurs 429
- with_retry / request_with_retry: Backoff exponentiel sur rate limiting
"""

from cinetrend.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from cinetrend.adapters.api.tmdb_client import TMDBCatalogClient
from cinetrend.adapters.api.trending_client import HttpTrendingClient

__all__ = [
    "HttpTrendingClient",
    "RateLimitError",
    "TMDBCatalogClient",
    "request_with_retry",
    "with_retry",
]
