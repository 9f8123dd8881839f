"""
Commande CLI du classement des tendances.
"""

import asyncio

from cinetrend.adapters.cli.display import trending_table
from cinetrend.adapters.cli.helpers import console, with_container


def trending() -> None:
    """Affiche les films les plus recherches."""
    asyncio.run(_trending_async())


@with_container(requires_catalog=False)
async def _trending_async(container) -> None:
    """Implementation async de la commande trending."""
    service = container.trending_service()
    entries = await service.get_trending()

    if not entries:
        console.print("[yellow]Aucune tendance pour le moment.[/yellow]")
        console.print("[dim]Les recherches avec resultat alimentent le classement.[/dim]")
        return
    console.print(trending_table(entries))
