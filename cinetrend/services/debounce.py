"""
Controleur de requete debouncee.

Transforme une saisie en direct (une chaine par frappe) en une requete
stable : la requete n'est promue qu'apres un delai de silence sans
nouvelle frappe. Chaque changement de requete stable declenche exactement
un fetch, identifie par un jeton (compteur de generation croissant).

Une reponse n'est appliquee que si son jeton est encore le jeton en vol :
une reponse lente a une ancienne requete ne peut pas ecraser la reponse
d'une requete plus recente. L'annulation est consultative (la reponse
obsolete est ecartee a l'arrivee), l'appel reseau n'est pas interrompu.

Modele d'execution : une seule boucle asyncio, aucune frappe n'est
bloquee par un fetch en cours.

Usage:
    controller = DebouncedQueryController(fetch=client.search, on_commit=render)
    controller.start()             # requete vide initiale
    controller.on_input("ava")
    controller.on_input("avatar")  # relance le delai
    await controller.drain()       # un seul fetch, pour "avatar"
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from loguru import logger

from cinetrend.utils.constants import DEFAULT_DEBOUNCE_SECONDS

T = TypeVar("T")


class QueryPhase(str, Enum):
    """Phase de la saisie."""

    IDLE = "idle"  # aucun delai en cours
    PENDING = "pending"  # saisie modifiee, delai en cours
    SETTLED = "settled"  # delai ecoule, saisie promue


@dataclass(frozen=True)
class QueryState:
    """
    Instantane de l'etat du controleur.

    Attributes:
        raw_input: Derniere saisie recue
        settled_query: Derniere requete stable (None avant le premier settle)
        in_flight_token: Jeton du dernier fetch emis (0 si aucun)
        last_committed_token: Jeton de la derniere reponse appliquee (0 si aucune)
        phase: Phase de la saisie
    """

    raw_input: str
    settled_query: Optional[str]
    in_flight_token: int
    last_committed_token: int
    phase: QueryPhase


@dataclass(frozen=True)
class FetchOutcome(Generic[T]):
    """Resultat (valeur ou erreur) d'un fetch, avec son jeton."""

    token: int
    query: str
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DebouncedQueryController(Generic[T]):
    """
    Machine a etats IDLE -> PENDING -> SETTLED pilotee par les frappes.

    Chaque frappe (meme en SETTLED) relance le delai et repasse en PENDING
    sans toucher a settled_query. A l'expiration du delai, la saisie
    normalisee devient settled_query ; si elle differe de la precedente, un
    fetch est emis avec un nouveau jeton.

    Callbacks:
        fetch(query): coroutine produisant le resultat d'une requete
        on_commit(outcome): appele pour chaque reponse non obsolete
        on_issue(query, token): appele a l'emission de chaque fetch
    """

    def __init__(
        self,
        fetch: Callable[[str], Awaitable[T]],
        on_commit: Callable[[FetchOutcome[T]], None],
        on_issue: Optional[Callable[[str, int], None]] = None,
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
        normalize: Callable[[str], str] = str,
    ) -> None:
        """
        Initialise le controleur.

        Args:
            fetch: Coroutine appelee avec la requete stable
            on_commit: Recoit les reponses appliquees
            on_issue: Notifie l'emission d'un fetch (optionnel)
            delay: Delai de silence en secondes, mesure depuis la derniere frappe
            normalize: Normalisation appliquee a la saisie au moment du settle
        """
        if delay < 0:
            raise ValueError("Le delai de debounce doit etre positif")
        self._fetch = fetch
        self._on_commit = on_commit
        self._on_issue = on_issue
        self._delay = delay
        self._normalize = normalize

        self._raw_input = ""
        self._settled_query: Optional[str] = None
        self._in_flight_token = 0
        self._last_committed_token = 0
        self._phase = QueryPhase.IDLE

        self._timer: Optional[asyncio.Task] = None
        self._fetches: set[asyncio.Task] = set()

    @property
    def state(self) -> QueryState:
        """Instantane de l'etat courant."""
        return QueryState(
            raw_input=self._raw_input,
            settled_query=self._settled_query,
            in_flight_token=self._in_flight_token,
            last_committed_token=self._last_committed_token,
            phase=self._phase,
        )

    @property
    def delay(self) -> float:
        return self._delay

    def on_input(self, text: str) -> None:
        """
        Accepte une frappe immediatement et relance le delai.

        Doit etre appele depuis la boucle asyncio.
        """
        self._raw_input = text
        self._phase = QueryPhase.PENDING
        if self._timer is not None:
            self._timer.cancel()
        self._timer = asyncio.get_running_loop().create_task(self._settle_after_delay())

    def start(self) -> None:
        """
        Promeut immediatement la saisie courante (vide au montage).

        Emet le fetch initial sans attendre le delai.
        """
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._settle()

    async def _settle_after_delay(self) -> None:
        await asyncio.sleep(self._delay)
        self._timer = None
        self._settle()

    def _settle(self) -> None:
        """Promeut la saisie en requete stable et emet un fetch si elle a change."""
        self._phase = QueryPhase.SETTLED
        query = self._normalize(self._raw_input)
        if query == self._settled_query:
            logger.debug(f"Requete inchangee '{query}', aucun fetch")
            return
        self._settled_query = query
        self._issue(query)

    def _issue(self, query: str) -> None:
        self._in_flight_token += 1
        token = self._in_flight_token
        if self._on_issue is not None:
            self._on_issue(query, token)
        task = asyncio.get_running_loop().create_task(self._run(token, query))
        self._fetches.add(task)
        task.add_done_callback(self._fetches.discard)

    async def _run(self, token: int, query: str) -> None:
        try:
            value = await self._fetch(query)
        except Exception as e:
            outcome: FetchOutcome[T] = FetchOutcome(token=token, query=query, error=e)
        else:
            outcome = FetchOutcome(token=token, query=query, value=value)
        self._commit(outcome)

    def _commit(self, outcome: FetchOutcome[T]) -> None:
        """Applique la reponse si et seulement si son jeton est le jeton en vol."""
        if outcome.token != self._in_flight_token:
            logger.debug(
                f"Reponse obsolete ecartee pour '{outcome.query}' "
                f"(jeton {outcome.token}, en vol {self._in_flight_token})"
            )
            return
        self._last_committed_token = outcome.token
        self._on_commit(outcome)

    async def drain(self) -> None:
        """Attend l'expiration du delai en cours et la fin de tous les fetchs."""
        while self._timer is not None or self._fetches:
            pending = list(self._fetches)
            if self._timer is not None:
                pending.append(self._timer)
            await asyncio.gather(*pending, return_exceptions=True)

    async def close(self) -> None:
        """Annule le delai et les fetchs en cours."""
        pending = list(self._fetches)
        if self._timer is not None:
            pending.append(self._timer)
            self._timer = None
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        self._phase = QueryPhase.IDLE
