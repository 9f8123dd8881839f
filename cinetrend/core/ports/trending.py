"""
Interface port du service de tendances.

Deux adaptateurs : le service local adossé au stockage
(services/trending.py) et le client HTTP d'un backend distant
(adapters/api/trending_client.py).
"""

from abc import ABC, abstractmethod

from cinetrend.core.entities.trending import SearchEvent, TrendingEntry


class ITrendingService(ABC):
    """
    Contrat du service de tendances.

    Les deux opérations sont « best effort » : elles ne lèvent jamais
    d'exception vers l'appelant.
    """

    @abstractmethod
    async def record_search(self, event: SearchEvent) -> None:
        """Enregistre une recherche ayant produit au moins un résultat."""
        ...

    @abstractmethod
    async def get_trending(self) -> list[TrendingEntry]:
        """Retourne le classement des films tendance (vide en cas d'échec)."""
        ...
