"""
Application FastAPI de CineTrend.

Initialise l'application web avec le Container DI, configure le CORS pour
le client web et monte les routes (tendances, catalogue).
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..container import Container
from .routes.movies import router as movies_router
from .routes.trending import router as trending_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI a utiliser (defaut: nouveau Container)
    """
    container = container or Container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Cree les tables au démarrage et ferme les clients HTTP à l'arrêt."""
        container.database.init()
        app.state.container = container
        yield
        await container.catalog_client().close()
        if container.config().remote_trending:
            await container.remote_trending_client().close()

    app = FastAPI(title="CineTrend", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=container.config().cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.include_router(trending_router)
    app.include_router(movies_router)
    return app


app = create_app()
