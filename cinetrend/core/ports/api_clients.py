"""
Interfaces ports pour le client du catalogue.

Interface abstraite (port) définissant le contrat de lecture du catalogue de
films externe. L'implémentation concrète (adaptateur) est le client TMDB.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cinetrend.core.entities.catalog import CatalogItem, CatalogItemDetails, Extra
from cinetrend.utils.constants import TMDB_BASE_URL, TMDB_IMAGE_BASE_URL


@dataclass(frozen=True)
class CatalogClientConfig:
    """
    Configuration explicite d'un client de catalogue.

    Construite une fois (voir Settings.catalog_config) puis passée au client :
    le client ne lit jamais d'état global.

    Attributs :
        api_key : Clé API v3 ou Read Access Token v4
        base_url : URL de base de l'API
        image_base_url : URL de base du CDN d'images
        language : Langue des métadonnées (ex: "en-US")
        timeout : Timeout HTTP en secondes
    """

    api_key: str
    base_url: str = TMDB_BASE_URL
    image_base_url: str = TMDB_IMAGE_BASE_URL
    language: str = "en-US"
    timeout: float = 30.0


class ICatalogClient(ABC):
    """
    Interface de lecture du catalogue de films.

    L'ordre renvoyé par le catalogue est conservé tel quel.

    Erreurs :
        UpstreamUnavailable : échec réseau, statut HTTP ou marqueur d'échec
        UpstreamMalformed : réponse de structure inattendue
        NotFound : fetch_by_id sur un identifiant inexistant
    """

    @abstractmethod
    async def search(self, term: str) -> list[CatalogItem]:
        """
        Recherche des films par titre.

        Args :
            term : Terme de recherche non vide

        Retourne :
            Liste ordonnée des résultats (vide si aucun)
        """
        ...

    @abstractmethod
    async def browse_popular(self) -> list[CatalogItem]:
        """Liste les films populaires du moment."""
        ...

    @abstractmethod
    async def fetch_by_id(
        self,
        item_id: int,
        with_extras: frozenset[Extra] = frozenset(),
    ) -> CatalogItemDetails:
        """
        Récupère le détail d'un film.

        Args :
            item_id : Identifiant catalogue
            with_extras : Blocs optionnels (casting, vidéos)
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source (ex: 'tmdb')."""
        ...

    async def close(self) -> None:
        """Libère les ressources réseau (aucune par défaut)."""
