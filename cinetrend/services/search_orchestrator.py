"""
Orchestrateur de recherche.

Compose le client de catalogue, le service de tendances et le controleur
de requete debouncee en une seule operation : a partir de la requete
courante (eventuellement vide), produire la liste de films a afficher et,
si la requete est non vide et donne des resultats, signaler le premier
resultat au service de tendances.

Etats par requete stable :
    IDLE -> FETCHING_POPULAR (requete vide) -> DISPLAYED
    IDLE -> FETCHING_SEARCH (requete non vide) -> DISPLAYED (+ record_search si non vide)
    FETCHING_* -> ERROR (echec du catalogue)

Pendant un fetch, la liste precedente reste affichee. Une erreur remplace
la liste (etat exclusif). Les tendances sont chargees une seule fois au
montage.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

from loguru import logger

from cinetrend.core.entities.catalog import CatalogItem, CatalogItemDetails, Extra
from cinetrend.core.entities.trending import SearchEvent, TrendingEntry
from cinetrend.core.errors import CineTrendError, NotFound
from cinetrend.core.ports.api_clients import ICatalogClient
from cinetrend.core.ports.trending import ITrendingService
from cinetrend.services.debounce import DebouncedQueryController, FetchOutcome
from cinetrend.utils.constants import DEFAULT_DEBOUNCE_SECONDS
from cinetrend.utils.helpers import normalize_query

FETCH_ERROR_MESSAGE = "Impossible de recuperer les films. Reessayez plus tard."
DETAIL_ERROR_MESSAGE = "Impossible de charger le detail du film."
NOT_FOUND_MESSAGE = "Film introuvable."

DETAIL_EXTRAS = frozenset({Extra.CAST, Extra.MEDIA})


class ViewStatus(str, Enum):
    """Etat d'affichage de la liste de films."""

    IDLE = "idle"
    FETCHING_POPULAR = "fetching_popular"
    FETCHING_SEARCH = "fetching_search"
    DISPLAYED = "displayed"
    ERROR = "error"


@dataclass(frozen=True)
class SearchView:
    """
    Instantane de ce que la presentation doit afficher.

    Attributes:
        status: Etat courant
        query: Requete stable correspondant a l'etat
        movies: Liste affichee (conservee pendant un fetch, vide en erreur)
        error_message: Message d'erreur (uniquement en ERROR)
        trending: Classement charge au montage
    """

    status: ViewStatus = ViewStatus.IDLE
    query: str = ""
    movies: tuple[CatalogItem, ...] = ()
    error_message: Optional[str] = None
    trending: tuple[TrendingEntry, ...] = ()

    @property
    def is_loading(self) -> bool:
        return self.status in (ViewStatus.FETCHING_POPULAR, ViewStatus.FETCHING_SEARCH)


@dataclass(frozen=True)
class DetailView:
    """Resultat du chargement du detail d'un film."""

    item: Optional[CatalogItemDetails] = None
    error_message: Optional[str] = None
    not_found: bool = False


class SearchOrchestrator:
    """
    Orchestrateur unique de la recherche et du detail.

    Example:
        orchestrator = SearchOrchestrator(catalog, trending, debounce_seconds=1.0)
        await orchestrator.mount()       # tendances + films populaires
        orchestrator.on_input("avatar")  # frappe
        await orchestrator.drain()
        print(orchestrator.view.movies)
    """

    def __init__(
        self,
        catalog: ICatalogClient,
        trending: ITrendingService,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        on_change: Optional[Callable[[SearchView], None]] = None,
    ) -> None:
        """
        Initialise l'orchestrateur.

        Args:
            catalog: Client de catalogue
            trending: Service de tendances (local ou distant)
            debounce_seconds: Delai de silence avant recherche
            on_change: Notifie chaque nouvel etat d'affichage (optionnel)
        """
        self._catalog = catalog
        self._trending = trending
        self._on_change = on_change
        self._view = SearchView()
        self._trending_loaded = False
        self._controller: DebouncedQueryController[list[CatalogItem]] = (
            DebouncedQueryController(
                fetch=self.run_query,
                on_commit=self._commit,
                on_issue=self._on_issue,
                delay=debounce_seconds,
                normalize=normalize_query,
            )
        )

    @property
    def view(self) -> SearchView:
        """Etat d'affichage courant (instantane immuable)."""
        return self._view

    @property
    def controller(self) -> DebouncedQueryController[list[CatalogItem]]:
        return self._controller

    async def mount(self) -> None:
        """
        Chargement initial de la page.

        Emet le fetch des films populaires puis charge les tendances, une
        seule fois par orchestrateur.
        """
        self._controller.start()
        if self._trending_loaded:
            return
        self._trending_loaded = True
        trending = await self._trending.get_trending()
        self._set_view(replace(self._view, trending=tuple(trending)))

    def on_input(self, text: str) -> None:
        """Transmet une frappe au controleur (non bloquant)."""
        self._controller.on_input(text)

    async def run_query(self, query: str) -> list[CatalogItem]:
        """
        Execute l'operation de recherche pour une requete stable.

        Requete vide : films populaires, jamais de record_search.
        Requete non vide : recherche ; si au moins un resultat, le premier
        est signale au service de tendances.

        Raises:
            UpstreamUnavailable, UpstreamMalformed: Echec du catalogue
        """
        query = normalize_query(query)
        if not query:
            return await self._catalog.browse_popular()

        movies = await self._catalog.search(query)
        if movies:
            await self._report(query, movies[0])
        return movies

    async def _report(self, query: str, top: CatalogItem) -> None:
        event = SearchEvent(
            term=query,
            top_item_id=top.id,
            poster_url=top.poster_url,
        )
        try:
            await self._trending.record_search(event)
        except Exception as e:
            logger.warning(f"Service de tendances en echec, recherche non comptee: {e!r}")

    async def load_details(self, item_id: int) -> DetailView:
        """
        Charge le detail d'un film avec casting et videos.

        NotFound donne un message distinct de l'erreur generique.
        """
        try:
            item = await self._catalog.fetch_by_id(item_id, DETAIL_EXTRAS)
        except NotFound:
            logger.info(f"Film {item_id} introuvable")
            return DetailView(error_message=NOT_FOUND_MESSAGE, not_found=True)
        except CineTrendError as e:
            logger.warning(f"Detail du film {item_id} indisponible: {e}")
            return DetailView(error_message=DETAIL_ERROR_MESSAGE)
        return DetailView(item=item)

    def _on_issue(self, query: str, token: int) -> None:
        status = ViewStatus.FETCHING_SEARCH if query else ViewStatus.FETCHING_POPULAR
        self._set_view(replace(self._view, status=status, query=query, error_message=None))

    def _commit(self, outcome: FetchOutcome[list[CatalogItem]]) -> None:
        if outcome.ok:
            self._set_view(
                replace(
                    self._view,
                    status=ViewStatus.DISPLAYED,
                    query=outcome.query,
                    movies=tuple(outcome.value or ()),
                    error_message=None,
                )
            )
            return

        if isinstance(outcome.error, CineTrendError):
            logger.warning(f"Echec du catalogue pour '{outcome.query}': {outcome.error}")
        else:
            logger.opt(exception=outcome.error).error(
                f"Erreur inattendue pour '{outcome.query}'"
            )
        self._set_view(
            replace(
                self._view,
                status=ViewStatus.ERROR,
                query=outcome.query,
                movies=(),
                error_message=FETCH_ERROR_MESSAGE,
            )
        )

    def _set_view(self, view: SearchView) -> None:
        self._view = view
        if self._on_change is not None:
            self._on_change(view)

    async def drain(self) -> None:
        """Attend que la saisie soit stable et que les fetchs soient termines."""
        await self._controller.drain()

    async def close(self) -> None:
        """Annule le delai et les fetchs en cours."""
        await self._controller.close()
