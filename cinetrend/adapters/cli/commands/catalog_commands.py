"""
Commandes CLI du catalogue : recherche, films populaires et detail d'un film.
"""

import asyncio
from typing import Annotated

import typer

from cinetrend.adapters.cli.display import detail_panel, movies_table
from cinetrend.adapters.cli.helpers import console, suppress_loguru, with_container
from cinetrend.core.errors import CineTrendError
from cinetrend.services.search_orchestrator import FETCH_ERROR_MESSAGE
from cinetrend.utils.helpers import normalize_query


def search(
    query: Annotated[str, typer.Argument(help="Titre du film recherche")],
) -> None:
    """Recherche des films par titre (la recherche compte dans les tendances)."""
    asyncio.run(_search_async(query))


@with_container()
async def _search_async(container, query: str) -> None:
    """Implementation async de la commande search."""
    orchestrator = container.search_orchestrator()
    query = normalize_query(query)
    try:
        with suppress_loguru():
            movies = await orchestrator.run_query(query)
    except CineTrendError as e:
        console.print(f"[red]{FETCH_ERROR_MESSAGE}[/red]")
        console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(code=1)

    if not movies:
        console.print(f"[yellow]Aucun film trouve pour '{query}'.[/yellow]")
        return
    title = f"Resultats pour '{query}'" if query else "Films populaires"
    console.print(movies_table(movies, title))


def popular() -> None:
    """Affiche les films les plus populaires du moment."""
    asyncio.run(_popular_async())


@with_container()
async def _popular_async(container) -> None:
    """Implementation async de la commande popular."""
    orchestrator = container.search_orchestrator()
    try:
        with suppress_loguru():
            movies = await orchestrator.run_query("")
    except CineTrendError as e:
        console.print(f"[red]{FETCH_ERROR_MESSAGE}[/red]")
        console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(code=1)

    console.print(movies_table(movies, "Films populaires"))


def movie(
    movie_id: Annotated[int, typer.Argument(help="ID TMDB du film")],
) -> None:
    """Affiche la fiche detaillee d'un film (casting, bande-annonce)."""
    asyncio.run(_movie_async(movie_id))


@with_container()
async def _movie_async(container, movie_id: int) -> None:
    """Implementation async de la commande movie."""
    orchestrator = container.search_orchestrator()
    with suppress_loguru():
        detail = await orchestrator.load_details(movie_id)

    if detail.item is None:
        color = "yellow" if detail.not_found else "red"
        console.print(f"[{color}]{detail.error_message}[/{color}]")
        raise typer.Exit(code=1)
    console.print(detail_panel(detail.item))
