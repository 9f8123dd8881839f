"""
Module de persistance pour CineTrend.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementation du compteur de recherches

Usage:
    from cinetrend.infrastructure.persistence import init_db, get_engine

    engine = init_db()  # Cree les tables si necessaire
    store = SQLModelSearchCountStore(engine)
    store.increment(19995, "avatar", poster_url)
"""

from cinetrend.infrastructure.persistence.database import (
    create_db_engine,
    get_engine,
    init_db,
)
from cinetrend.infrastructure.persistence.models import TrendingEntryModel

__all__ = [
    "create_db_engine",
    "get_engine",
    "init_db",
    "TrendingEntryModel",
]
