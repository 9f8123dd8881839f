"""
Recherche interactive au clavier.

Chaque ligne saisie remplace la saisie courante. La recherche n'est lancee
qu'apres le delai de debounce sans nouvelle saisie ; les reponses obsoletes
sont ecartees par l'orchestrateur.
"""

import asyncio
import sys

from cinetrend.adapters.cli.display import movies_table, trending_table
from cinetrend.adapters.cli.helpers import console, suppress_loguru, with_container
from cinetrend.services.search_orchestrator import SearchView, ViewStatus

QUIT_COMMANDS = {":q", ":quit"}


def interactive() -> None:
    """Recherche en direct : tapez un titre, ligne vide pour les films populaires."""
    asyncio.run(_interactive_async())


def _make_renderer():
    """Renderer qui n'affiche que les changements de liste ou d'erreur."""
    last = {"key": None}

    def render(view: SearchView) -> None:
        if view.is_loading:
            label = f"'{view.query}'" if view.query else "films populaires"
            console.print(f"[dim]Chargement ({label})...[/dim]")
            return
        key = (view.status, view.query, view.movies, view.error_message)
        if view.status == ViewStatus.IDLE or key == last["key"]:
            return
        last["key"] = key

        if view.status == ViewStatus.ERROR:
            console.print(f"[red]{view.error_message}[/red]")
        elif not view.movies:
            console.print(f"[yellow]Aucun film trouve pour '{view.query}'.[/yellow]")
        else:
            title = f"Resultats pour '{view.query}'" if view.query else "Films populaires"
            console.print(movies_table(view.movies, title))

    return render


@with_container()
async def _interactive_async(container) -> None:
    """Implementation async de la commande interactive."""
    orchestrator = container.search_orchestrator(on_change=_make_renderer())
    loop = asyncio.get_running_loop()

    console.print(
        "[bold cyan]Recherche interactive[/bold cyan] "
        "[dim](:q ou Ctrl-D pour quitter)[/dim]\n"
    )
    with suppress_loguru():
        await orchestrator.mount()
        if orchestrator.view.trending:
            console.print(trending_table(orchestrator.view.trending))
        try:
            while True:
                line = await loop.run_in_executor(None, sys.stdin.readline)
                if not line or line.strip() in QUIT_COMMANDS:
                    break
                orchestrator.on_input(line.rstrip("\n"))
            await orchestrator.drain()
        finally:
            await orchestrator.close()
