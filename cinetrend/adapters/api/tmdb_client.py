"""
Client TMDB pour la recherche et la consultation du catalogue de films.

Implemente l'interface ICatalogClient pour TMDB (The Movie Database).
Le client est sans etat : aucune donnee n'est conservee entre deux appels,
seule la connexion HTTP est reutilisee.

Usage:
    config = CatalogClientConfig(api_key="your_key")
    async with TMDBCatalogClient(config) as client:
        results = await client.search("Avatar")
        details = await client.fetch_by_id(19995, frozenset({Extra.CAST}))
"""

from typing import Any, Optional

import httpx
from loguru import logger

from cinetrend.adapters.api.retry import request_with_retry
from cinetrend.core.entities.catalog import (
    CastMember,
    CatalogItem,
    CatalogItemDetails,
    Extra,
    Video,
)
from cinetrend.core.errors import NotFound, UpstreamMalformed, UpstreamUnavailable
from cinetrend.core.ports.api_clients import CatalogClientConfig, ICatalogClient
from cinetrend.utils.constants import CAST_LIMIT, TMDB_EXTRA_MAPPING
from cinetrend.utils.helpers import clean_title


class TMDBCatalogClient(ICatalogClient):
    """
    Client API TMDB pour le catalogue de films.

    Implemente ICatalogClient avec:
    - Recherche de films par titre (/search/movie)
    - Films populaires (/discover/movie trie par popularite)
    - Detail d'un film avec extras optionnels (casting, videos)
    - Retry automatique sur rate limiting (429)

    L'ordre des resultats renvoye par TMDB est conserve tel quel.

    Example:
        client = TMDBCatalogClient(CatalogClientConfig(api_key="xxx"))
        results = await client.search("Inception")
        if results:
            details = await client.fetch_by_id(results[0].id)
            print(f"{details.title} ({details.year}) - {details.genres}")
        await client.close()
    """

    def __init__(self, config: CatalogClientConfig) -> None:
        """
        Initialise le client TMDB.

        Args:
            config: Configuration explicite (cle API, URLs, langue, timeout)
        """
        self._config = config
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def config(self) -> CatalogClientConfig:
        """Configuration du client."""
        return self._config

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._config.api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._config.api_key}"
            else:
                params["api_key"] = self._config.api_key

            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                headers=headers,
                params=params,
                timeout=self._config.timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    async def search(self, term: str) -> list[CatalogItem]:
        """
        Recherche des films par titre.

        Args:
            term: Terme de recherche (non vide)

        Returns:
            Liste de CatalogItem dans l'ordre TMDB (vide si aucun resultat)

        Raises:
            ValueError: Si term est vide
            UpstreamUnavailable: Echec reseau, HTTP ou marqueur d'echec
            UpstreamMalformed: Reponse sans liste "results" exploitable
        """
        if not term or not term.strip():
            raise ValueError("Le terme de recherche ne peut pas etre vide")

        data = await self._get_json(
            "/search/movie",
            params={
                "query": term,
                "language": self._config.language,
                "include_adult": "false",
            },
        )
        results = self._parse_results(data)
        logger.debug(f"TMDB search '{term}': {len(results)} resultats")
        return results

    async def browse_popular(self) -> list[CatalogItem]:
        """
        Liste les films populaires du moment.

        Returns:
            Liste de CatalogItem tries par popularite decroissante
        """
        data = await self._get_json(
            "/discover/movie",
            params={
                "sort_by": "popularity.desc",
                "language": self._config.language,
                "include_adult": "false",
            },
        )
        return self._parse_results(data)

    async def fetch_by_id(
        self,
        item_id: int,
        with_extras: frozenset[Extra] = frozenset(),
    ) -> CatalogItemDetails:
        """
        Recupere les details complets d'un film.

        Les extras sont demandes en un seul appel via append_to_response
        (cast -> credits, media -> videos).

        Args:
            item_id: ID TMDB du film
            with_extras: Extras a inclure

        Returns:
            CatalogItemDetails

        Raises:
            NotFound: Si TMDB repond 404
            UpstreamUnavailable: Autre echec reseau ou HTTP
            UpstreamMalformed: Reponse de structure inattendue
        """
        params: dict[str, str] = {"language": self._config.language}
        appended = sorted(TMDB_EXTRA_MAPPING[Extra(extra).value] for extra in with_extras)
        if appended:
            params["append_to_response"] = ",".join(appended)

        try:
            data = await self._get_json(f"/movie/{item_id}", params=params)
        except UpstreamUnavailable as e:
            if e.status_code == 404:
                raise NotFound(item_id) from e
            raise

        return self._parse_details(data, with_extras)

    async def _get_json(self, url: str, params: dict[str, str]) -> dict[str, Any]:
        """
        Execute un GET et retourne le corps JSON valide.

        Un corps 200 portant un marqueur d'echec ("Response": "False" ou
        "success": false) est traite comme une indisponibilite.
        """
        client = self._get_client()
        response = await request_with_retry(client, "GET", url, params=params)

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamMalformed(f"Reponse non JSON pour {url}") from e

        if not isinstance(data, dict):
            raise UpstreamMalformed(f"Objet JSON attendu pour {url}")

        if data.get("Response") == "False" or data.get("success") is False:
            message = (
                data.get("Error")
                or data.get("status_message")
                or "Le catalogue a signale un echec"
            )
            raise UpstreamUnavailable(message, status_code=response.status_code)

        return data

    def _parse_results(self, data: dict[str, Any]) -> list[CatalogItem]:
        """Convertit le tableau "results" d'un endpoint de liste."""
        results = data.get("results")
        if not isinstance(results, list):
            raise UpstreamMalformed("Champ 'results' absent ou invalide")
        return [CatalogItem(**self._item_fields(item)) for item in results]

    def _item_fields(self, item: Any) -> dict[str, Any]:
        """Extrait les champs communs a CatalogItem et CatalogItemDetails."""
        if not isinstance(item, dict):
            raise UpstreamMalformed("Element de catalogue invalide")
        try:
            item_id = int(item["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamMalformed("Element de catalogue sans id valide") from e

        title = item.get("title") or item.get("original_title")
        if not isinstance(title, str):
            raise UpstreamMalformed(f"Element {item_id} sans titre")

        vote_average = item.get("vote_average")
        try:
            vote = float(vote_average) if vote_average is not None else None
        except (TypeError, ValueError) as e:
            raise UpstreamMalformed(f"Note invalide pour l'element {item_id}") from e

        return {
            "id": item_id,
            "title": clean_title(title),
            "poster_path": item.get("poster_path") or None,
            "vote_average": vote,
            "release_date": item.get("release_date") or None,
            "original_language": item.get("original_language") or "",
            "image_base_url": self._config.image_base_url,
        }

    def _parse_details(
        self, data: dict[str, Any], with_extras: frozenset[Extra]
    ) -> CatalogItemDetails:
        """
        Convertit la reponse /movie/{id} en CatalogItemDetails.

        Les blocs imbriques absents ou nuls sont traites comme vides et les
        elements qui ne sont pas des objets sont ignores. Toute autre
        incoherence de type devient UpstreamMalformed.
        """
        fields = self._item_fields(data)
        try:
            cast: tuple[CastMember, ...] = ()
            if Extra.CAST in with_extras:
                cast_list = _objects(_block(data, "credits").get("cast"))[:CAST_LIMIT]
                cast = tuple(
                    CastMember(
                        id=int(actor["id"]),
                        name=actor["name"],
                        character=actor.get("character"),
                        profile_path=actor.get("profile_path"),
                    )
                    for actor in cast_list
                    if actor.get("name") and "id" in actor
                )

            videos: tuple[Video, ...] = ()
            if Extra.MEDIA in with_extras:
                videos = tuple(
                    Video(
                        key=video["key"],
                        name=video.get("name", ""),
                        site=video.get("site", ""),
                        type=video.get("type", ""),
                    )
                    for video in _objects(_block(data, "videos").get("results"))
                    if video.get("key")
                )

            return CatalogItemDetails(
                **fields,
                overview=data.get("overview") or None,
                tagline=data.get("tagline") or None,
                homepage=data.get("homepage") or None,
                runtime=data.get("runtime"),
                status=data.get("status"),
                budget=data.get("budget") or None,
                revenue=data.get("revenue") or None,
                backdrop_path=data.get("backdrop_path"),
                genres=_names(data.get("genres")),
                production_companies=_names(data.get("production_companies")),
                production_countries=_names(data.get("production_countries")),
                cast=cast,
                videos=videos,
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise UpstreamMalformed(f"Details du film {fields['id']} invalides: {e}") from e

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "TMDBCatalogClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()


def _block(data: dict[str, Any], key: str) -> dict[str, Any]:
    """Retourne le sous-objet data[key], ou {} s'il est absent ou nul."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"Bloc '{key}' inattendu: {type(value).__name__}")
    return value


def _objects(value: Any) -> list[dict[str, Any]]:
    """Filtre les objets d'un tableau JSON (None -> [])."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"Tableau attendu, recu {type(value).__name__}")
    return [element for element in value if isinstance(element, dict)]


def _names(value: Any) -> tuple[str, ...]:
    return tuple(entry["name"] for entry in _objects(value) if entry.get("name"))
