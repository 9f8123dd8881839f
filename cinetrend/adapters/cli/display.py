"""
Affichage Rich des listes de films, des tendances et du detail d'un film.
"""

from typing import Sequence

from rich.panel import Panel
from rich.table import Table

from cinetrend.core.entities.catalog import CatalogItem, CatalogItemDetails
from cinetrend.core.entities.trending import TrendingEntry


def _rating(vote_average: float | None) -> str:
    return f"{vote_average:.1f}" if vote_average else "N/A"


def movies_table(movies: Sequence[CatalogItem], title: str) -> Table:
    """Tableau des films : rang, titre, note, langue, annee."""
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Titre", style="bold")
    table.add_column("Note", justify="right", style="yellow")
    table.add_column("Langue")
    table.add_column("Annee", justify="right")

    for rank, movie in enumerate(movies, start=1):
        table.add_row(
            str(rank),
            str(movie.id),
            movie.title,
            _rating(movie.vote_average),
            movie.original_language or "-",
            str(movie.year) if movie.year else "N/A",
        )
    return table


def trending_table(entries: Sequence[TrendingEntry]) -> Table:
    """Tableau du classement des tendances."""
    table = Table(title="Films tendance")
    table.add_column("#", justify="right", style="bold magenta")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Derniere recherche")
    table.add_column("Recherches", justify="right", style="green")
    table.add_column("Affiche", style="dim", overflow="fold")

    for rank, entry in enumerate(entries, start=1):
        table.add_row(
            str(rank),
            str(entry.item_id),
            entry.search_term,
            str(entry.count),
            entry.poster_url,
        )
    return table


def detail_panel(item: CatalogItemDetails) -> Panel:
    """Fiche detaillee d'un film."""
    lines = []
    if item.tagline:
        lines.append(f"[italic]{item.tagline}[/italic]\n")

    facts = [
        f"Note: {_rating(item.vote_average)}",
        f"Sortie: {item.release_date or 'N/A'}",
        f"Langue: {item.original_language or '-'}",
    ]
    if item.runtime:
        facts.append(f"Duree: {item.runtime // 60}h{item.runtime % 60:02d}")
    if item.status:
        facts.append(f"Statut: {item.status}")
    lines.append(" | ".join(facts))

    if item.genres:
        lines.append(f"Genres: {', '.join(item.genres)}")
    if item.overview:
        lines.append(f"\n{item.overview}")
    if item.budget or item.revenue:
        lines.append(
            f"\nBudget: {item.budget or 0:,} $ | Recettes: {item.revenue or 0:,} $"
        )
    if item.production_companies:
        lines.append(f"Production: {', '.join(item.production_companies)}")
    if item.cast:
        cast = ", ".join(
            f"{member.name} ({member.character})" if member.character else member.name
            for member in item.cast
        )
        lines.append(f"\n[bold]Casting:[/bold] {cast}")
    trailers = [v for v in item.videos if v.site == "YouTube" and v.type == "Trailer"]
    if trailers:
        lines.append(f"Bande-annonce: https://www.youtube.com/watch?v={trailers[0].key}")
    if item.homepage:
        lines.append(f"Site officiel: {item.homepage}")
    lines.append(f"[dim]Affiche: {item.poster_url}[/dim]")

    year = f" ({item.year})" if item.year else ""
    return Panel("\n".join(lines), title=f"[bold cyan]{item.title}{year}[/bold cyan]")
