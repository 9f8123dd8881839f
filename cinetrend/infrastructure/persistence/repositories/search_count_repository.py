"""
Implementation SQLModel du compteur de recherches.

Implemente l'interface ISearchCountStore. L'incrementation est une seule
instruction SQL (INSERT ... ON CONFLICT DO UPDATE ... RETURNING) : la base
garantit l'atomicite, aucun cycle lecture-modification-ecriture n'a lieu
cote Python. Chaque operation ouvre sa propre connexion, le repository peut
donc etre partage entre threads.
"""

from sqlalchemy import Engine
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from cinetrend.core.entities.trending import TrendingEntry
from cinetrend.core.errors import StoreUnavailable
from cinetrend.core.ports.repositories import ISearchCountStore
from cinetrend.infrastructure.persistence.models import TrendingEntryModel, utcnow

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class SQLModelSearchCountStore(ISearchCountStore):
    """
    Repository SQLModel des compteurs de recherche.

    Convertit les lignes TrendingEntryModel (persistance) en entites
    TrendingEntry (domaine). Les erreurs SQLAlchemy sont traduites en
    StoreUnavailable.
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialise le repository.

        Args :
            engine : Engine SQLAlchemy (SQLite ou PostgreSQL)
        """
        dialect = engine.dialect.name
        if dialect not in _UPSERT_DIALECTS:
            raise ValueError(f"Dialecte non supporte pour l'upsert atomique: {dialect}")
        self._engine = engine
        self._insert = _UPSERT_DIALECTS[dialect]

    def _to_entity(self, model: TrendingEntryModel) -> TrendingEntry:
        """Convertit un modele DB en entite domaine."""
        return TrendingEntry(
            item_id=model.item_id,
            search_term=model.search_term,
            poster_url=model.poster_url,
            count=model.count,
            updated_at=model.updated_at,
        )

    def increment(self, item_id: int, term: str, poster_url: str) -> int:
        """Incremente le compteur du film et retourne sa nouvelle valeur."""
        now = utcnow()
        table = TrendingEntryModel.__table__
        statement = self._insert(table).values(
            item_id=item_id,
            search_term=term,
            poster_url=poster_url,
            count=1,
            created_at=now,
            updated_at=now,
        )
        statement = statement.on_conflict_do_update(
            index_elements=[table.c.item_id],
            set_={
                "count": table.c.count + 1,
                "search_term": statement.excluded.search_term,
                "poster_url": statement.excluded.poster_url,
                "updated_at": statement.excluded.updated_at,
            },
        ).returning(table.c.count)

        try:
            with self._engine.begin() as conn:
                return conn.execute(statement).scalar_one()
        except SQLAlchemyError as e:
            raise StoreUnavailable(f"Incrementation impossible pour {item_id}: {e}") from e

    def top_n(self, n: int) -> list[TrendingEntry]:
        """Liste les n entrees les plus recherchees."""
        if n <= 0:
            return []

        statement = (
            select(TrendingEntryModel)
            .order_by(
                TrendingEntryModel.count.desc(),
                TrendingEntryModel.updated_at.desc(),
                TrendingEntryModel.id.desc(),
            )
            .limit(n)
        )
        try:
            with Session(self._engine) as session:
                models = session.exec(statement).all()
                return [self._to_entity(model) for model in models]
        except SQLAlchemyError as e:
            raise StoreUnavailable(f"Lecture des tendances impossible: {e}") from e
