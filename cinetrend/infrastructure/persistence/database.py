"""
Configuration de la base de donnees des compteurs de recherche.

Ce module fournit :
- Engine SQLAlchemy (SQLite par defaut, PostgreSQL supporte)
- Fonction d'initialisation des tables

La base de donnees est configuree via CINETREND_DATABASE_URL
(defaut: sqlite:///data/cinetrend.db). Les compteurs doivent survivre aux
redemarrages : la base par defaut est un fichier, jamais la memoire.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def create_db_engine(database_url: str) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Pour un fichier SQLite, le repertoire parent est cree si necessaire et
    un timeout de verrou est configure pour que les ecritures concurrentes
    attendent au lieu d'echouer.
    """
    connect_args: dict = {}
    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False, "timeout": 30}
        if database_url.startswith("sqlite:///") and ":memory:" not in database_url:
            db_path = Path(database_url.replace("sqlite:///", "", 1))
            db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(database_url, echo=False, connect_args=connect_args)


def get_engine() -> Engine:
    """
    Retourne l'engine applicatif, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from cinetrend.config import Settings

        _engine = create_db_engine(Settings().database_url)
    return _engine


def init_db(engine: Optional[Engine] = None) -> Engine:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables manquantes.

    Args:
        engine: Engine cible (defaut: engine applicatif)

    Returns:
        L'engine initialise
    """
    from cinetrend.infrastructure.persistence import models  # noqa: F401

    engine = engine or get_engine()
    SQLModel.metadata.create_all(engine)
    return engine
