"""
Mecanisme de retry avec backoff exponentiel pour le catalogue externe.

Gere automatiquement les erreurs 429 (rate limiting) en relancant
les requetes avec un delai croissant et du jitter aleatoire, et traduit
les erreurs httpx dans la taxonomie du domaine (UpstreamUnavailable).

Usage:
    response = await request_with_retry(client, "GET", "/search/movie")
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from cinetrend.core.errors import UpstreamUnavailable


class RateLimitError(UpstreamUnavailable):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Sous-classe de UpstreamUnavailable : si les tentatives sont epuisees,
    l'appelant la traite comme une indisponibilite du catalogue.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s", status_code=429)


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur pour relancer sur RateLimitError avec backoff exponentiel.

    Utilise wait_random_exponential pour ajouter du jitter et eviter
    le "thundering herd" quand plusieurs clients relancent en meme temps.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur 429.

    Les reponses 429 sont relancees avec backoff exponentiel. Les erreurs
    de transport (connexion, timeout) et les autres statuts non 2xx sont
    converties en UpstreamUnavailable sans retry.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        UpstreamUnavailable: Erreur de transport ou statut HTTP non 2xx
                             (status_code renseigne si une reponse a ete recue)
    """

    @with_retry(max_attempts=max_attempts)
    async def _do_request() -> httpx.Response:
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logger.debug(f"Erreur de transport sur {url}: {e!r}")
            raise UpstreamUnavailable(f"Catalogue injoignable: {e}") from e

        if response.status_code == 429:
            retry_after_header = response.headers.get("Retry-After")
            retry_after = (
                int(retry_after_header)
                if retry_after_header and retry_after_header.isdigit()
                else None
            )
            raise RateLimitError(retry_after)
        if not response.is_success:
            raise UpstreamUnavailable(
                f"Le catalogue a repondu {response.status_code} pour {url}",
                status_code=response.status_code,
            )
        return response

    return await _do_request()
