"""
Service de tendances.

Seul ecrivain du compteur de recherches. Transforme les recherches
abouties (SearchEvent) en increments et expose le classement top-N.

Les tendances sont un enrichissement, pas une exigence de la recherche :
record_search et get_trending ne levent jamais d'exception vers l'appelant.
"""

import asyncio
from functools import partial

from loguru import logger

from cinetrend.core.entities.trending import SearchEvent, TrendingEntry
from cinetrend.core.ports.repositories import ISearchCountStore
from cinetrend.core.ports.trending import ITrendingService
from cinetrend.utils.constants import DEFAULT_TRENDING_LIMIT


class TrendingService(ITrendingService):
    """
    Service de tendances adosse a un ISearchCountStore.

    Les appels au stockage (synchrones) sont executes dans l'executor par
    defaut pour ne pas bloquer la boucle asyncio.

    Example:
        service = TrendingService(store, limit=5)
        await service.record_search(SearchEvent("avatar", 19995, poster_url))
        top = await service.get_trending()
    """

    def __init__(self, store: ISearchCountStore, limit: int = DEFAULT_TRENDING_LIMIT) -> None:
        """
        Initialise le service.

        Args:
            store: Compteur persistant des recherches
            limit: Taille du classement (N)
        """
        if limit < 1:
            raise ValueError("La taille du classement doit etre >= 1")
        self._store = store
        self._limit = limit

    @property
    def limit(self) -> int:
        """Taille du classement."""
        return self._limit

    async def record(self, event: SearchEvent) -> TrendingEntry:
        """
        Enregistre une recherche et retourne l'entree mise a jour.

        Variante stricte de record_search utilisee par l'API HTTP, qui doit
        signaler les echecs du stockage.

        Raises:
            StoreUnavailable: Si le stockage est inaccessible
        """
        loop = asyncio.get_running_loop()
        count = await loop.run_in_executor(
            None,
            partial(self._store.increment, event.top_item_id, event.term, event.poster_url),
        )
        logger.debug(f"Recherche '{event.term}' -> film {event.top_item_id} (compteur {count})")
        return TrendingEntry(
            item_id=event.top_item_id,
            search_term=event.term,
            poster_url=event.poster_url,
            count=count,
        )

    async def record_search(self, event: SearchEvent) -> None:
        """Enregistre une recherche (best effort, les erreurs sont journalisees)."""
        try:
            await self.record(event)
        except Exception as e:
            logger.warning(
                f"Enregistrement de la recherche '{event.term}' ignore: {e!r}"
            )

    async def top(self) -> list[TrendingEntry]:
        """
        Retourne le classement, en propageant les erreurs du stockage.

        Raises:
            StoreUnavailable: Si le stockage est inaccessible
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._store.top_n, self._limit)

    async def get_trending(self) -> list[TrendingEntry]:
        """Retourne le classement ([] si le stockage est indisponible)."""
        try:
            return await self.top()
        except Exception as e:
            logger.warning(f"Lecture des tendances ignoree: {e!r}")
            return []
