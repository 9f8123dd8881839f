"""
Utilitaires partages pour les commandes CLI de CineTrend.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from cinetrend.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("cinetrend")
    try:
        yield
    finally:
        loguru_logger.enable("cinetrend")


def with_container(requires_catalog: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    La base locale n'est initialisee que si les tendances ne passent pas par
    un backend distant. Les clients HTTP sont fermes a la fin de la commande.

    Args:
        requires_catalog: Si True (defaut), echoue si TMDB n'est pas configure.

    Usage:
        @with_container()
        async def my_command(container, ...):
            orchestrator = container.search_orchestrator()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            config = container.config()
            if requires_catalog and not config.tmdb_enabled:
                console.print(
                    "[red]Cle API TMDB absente.[/red] "
                    "Definissez CINETREND_TMDB_API_KEY."
                )
                raise typer.Exit(code=1)
            if not config.remote_trending:
                container.database.init()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.catalog_client().close()
                if config.remote_trending:
                    await container.remote_trending_client().close()
        return wrapper
    return decorator
