"""
Client HTTP du backend de tendances.

Implemente ITrendingService en appelant l'API HTTP d'un backend CineTrend
distant (POST /trending/search, GET /trending). Utilise quand le processus
client ne partage pas la base de donnees du backend.

Politique d'erreur : toute erreur (transport, statut non 2xx, corps
invalide) est journalisee puis ignoree. record_search devient un no-op et
get_trending renvoie une liste vide.
"""

from datetime import datetime
from typing import Any, Optional

import httpx
from loguru import logger

from cinetrend.core.entities.trending import SearchEvent, TrendingEntry
from cinetrend.core.ports.trending import ITrendingService


class HttpTrendingClient(ITrendingService):
    """
    Adaptateur HTTP du service de tendances.

    Example:
        client = HttpTrendingClient("http://localhost:8000")
        await client.record_search(SearchEvent("avatar", 19995, poster))
        trending = await client.get_trending()
        await client.close()
    """

    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL racine du backend (ex: "http://localhost:8000")
            timeout: Timeout HTTP en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    async def record_search(self, event: SearchEvent) -> None:
        """Envoie la recherche au backend (best effort)."""
        payload = {
            "searchTerm": event.term,
            "movieId": event.top_item_id,
            "posterUrl": event.poster_url,
        }
        try:
            response = await self._get_client().post("/trending/search", json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"Backend de tendances injoignable: {e!r}")
            return

        if not response.is_success:
            logger.warning(
                f"Enregistrement de recherche refuse ({response.status_code}) "
                f"pour le film {event.top_item_id}"
            )

    async def get_trending(self) -> list[TrendingEntry]:
        """Recupere le classement depuis le backend ([] en cas d'echec)."""
        try:
            response = await self._get_client().get("/trending")
        except httpx.HTTPError as e:
            logger.warning(f"Backend de tendances injoignable: {e!r}")
            return []

        if not response.is_success:
            logger.warning(f"Lecture des tendances en echec ({response.status_code})")
            return []

        try:
            body = response.json()
            if not isinstance(body, list):
                raise TypeError(f"Tableau JSON attendu, recu {type(body).__name__}")
            return [_entry_from_json(item) for item in body]
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning(f"Reponse de tendances invalide: {e!r}")
            return []

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None


def _entry_from_json(item: dict[str, Any]) -> TrendingEntry:
    """Convertit un objet JSON {movieId, searchTerm, posterUrl, count}."""
    if not isinstance(item, dict):
        raise TypeError(f"Objet JSON attendu, recu {type(item).__name__}")
    updated_at = item.get("updatedAt")
    return TrendingEntry(
        item_id=int(item["movieId"]),
        search_term=item["searchTerm"],
        poster_url=item.get("posterUrl") or "",
        count=int(item["count"]),
        updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
    )
