"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Port client catalogue :
- ICatalogClient : Lecture du catalogue de films (recherche, populaires, détail)
- CatalogClientConfig : Configuration explicite du client

Port repository :
- ISearchCountStore : Compteur persistant des recherches par film

Port service :
- ITrendingService : Enregistrement des recherches et lecture des tendances
"""

from cinetrend.core.ports.api_clients import CatalogClientConfig, ICatalogClient
from cinetrend.core.ports.repositories import ISearchCountStore
from cinetrend.core.ports.trending import ITrendingService

__all__ = [
    "CatalogClientConfig",
    "ICatalogClient",
    "ISearchCountStore",
    "ITrendingService",
]
