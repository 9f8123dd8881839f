"""
Point d'entrée CLI de CineTrend.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    interactive,
    movie,
    popular,
    search,
    trending,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="cinetrend",
    help="Recherche de films et classement des recherches les plus populaires",
)
container = Container()

# Commandes du catalogue et des tendances
app.command()(search)
app.command()(popular)
app.command()(movie)
app.command()(trending)
app.command()(interactive)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration CineTrend")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"Langue TMDB : {config.tmdb_language}")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(
        "Tendances : "
        + (f"distantes ({config.trending_api_url})" if config.remote_trending else "locales")
    )
    typer.echo(f"Taille du classement : {config.trending_limit}")
    typer.echo(f"Debounce : {config.debounce_seconds}s")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineTrend v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance l'API web CineTrend (tendances et catalogue)."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("cinetrend.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de CineTrend", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
