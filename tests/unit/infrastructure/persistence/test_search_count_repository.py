"""
Tests du compteur de recherches SQLModel.

Verifie:
- increment cree la ligne a 1 puis incremente de 1
- search_term et poster_url refletent la recherche la plus recente
- top_n trie par count desc puis updated_at desc
- les incrementations concurrentes ne perdent aucune mise a jour
- les erreurs SQL deviennent StoreUnavailable
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from sqlalchemy import Engine
from sqlmodel import Session, select

from cinetrend.core.errors import StoreUnavailable
from cinetrend.infrastructure.persistence.database import create_db_engine, init_db
from cinetrend.infrastructure.persistence.models import TrendingEntryModel
from cinetrend.infrastructure.persistence.repositories import SQLModelSearchCountStore

POSTER = "https://image.tmdb.org/t/p/w500/jRXYjXNq0Cs2TcJjLkki24MLp7u.jpg"


class TestIncrement:
    """Tests de increment."""

    def test_first_increment_creates_row_at_one(self, store: SQLModelSearchCountStore) -> None:
        assert store.increment(19995, "avatar", POSTER) == 1

        [entry] = store.top_n(5)
        assert entry.item_id == 19995
        assert entry.search_term == "avatar"
        assert entry.poster_url == POSTER
        assert entry.count == 1
        assert entry.updated_at is not None

    def test_increment_is_monotonic(self, store: SQLModelSearchCountStore) -> None:
        counts = [store.increment(19995, "avatar", POSTER) for _ in range(4)]
        assert counts == [1, 2, 3, 4]

    def test_increment_overwrites_term_and_poster(
        self, store: SQLModelSearchCountStore
    ) -> None:
        """La ligne garde le terme et l'affiche de la recherche la plus recente."""
        store.increment(19995, "avatar", POSTER)
        store.increment(19995, "avatar 2009", "/no-movie.png")

        [entry] = store.top_n(5)
        assert entry.count == 2
        assert entry.search_term == "avatar 2009"
        assert entry.poster_url == "/no-movie.png"

    def test_increment_same_term_different_items(
        self, store: SQLModelSearchCountStore
    ) -> None:
        """Le compteur est cle sur le film, pas sur le terme."""
        store.increment(19995, "avatar", POSTER)
        store.increment(76600, "avatar", POSTER)

        entries = store.top_n(5)
        assert sorted(e.item_id for e in entries) == [19995, 76600]
        assert all(e.count == 1 for e in entries)

    def test_updated_at_advances(self, engine: Engine, store: SQLModelSearchCountStore) -> None:
        store.increment(19995, "avatar", POSTER)
        with Session(engine) as session:
            first = session.exec(select(TrendingEntryModel)).one()
            created_at, updated_at = first.created_at, first.updated_at

        store.increment(19995, "avatar", POSTER)
        with Session(engine) as session:
            second = session.exec(select(TrendingEntryModel)).one()

        assert second.created_at == created_at
        assert second.updated_at >= updated_at

    def test_concurrent_increments_are_not_lost(self, store: SQLModelSearchCountStore) -> None:
        """N incrementations concurrentes donnent exactement N."""
        workers, per_worker = 8, 25

        def hammer(_: int) -> None:
            for _ in range(per_worker):
                store.increment(19995, "avatar", POSTER)

        with ThreadPoolExecutor(max_workers=workers) as executor:
            list(executor.map(hammer, range(workers)))

        [entry] = store.top_n(1)
        assert entry.count == workers * per_worker

    def test_counts_survive_new_engine(self, tmp_path: Path) -> None:
        """Les compteurs sont persistants entre deux ouvertures de la base."""
        url = f"sqlite:///{tmp_path}/persist.db"

        first = init_db(create_db_engine(url))
        SQLModelSearchCountStore(first).increment(19995, "avatar", POSTER)
        first.dispose()

        second = init_db(create_db_engine(url))
        assert SQLModelSearchCountStore(second).increment(19995, "avatar", POSTER) == 2
        second.dispose()


class TestTopN:
    """Tests de top_n."""

    @staticmethod
    def _insert(engine: Engine, item_id: int, count: int, updated_at: datetime) -> None:
        with Session(engine) as session:
            session.add(
                TrendingEntryModel(
                    item_id=item_id,
                    search_term=f"term {item_id}",
                    poster_url=POSTER,
                    count=count,
                    created_at=updated_at,
                    updated_at=updated_at,
                )
            )
            session.commit()

    def test_orders_by_count_then_recency(
        self, engine: Engine, store: SQLModelSearchCountStore
    ) -> None:
        """Counts [5, 5, 3, 1] : egalite departagee par le plus recent."""
        base = datetime(2024, 1, 1, 12, 0, 0)
        self._insert(engine, 1, 5, base)
        self._insert(engine, 2, 5, base + timedelta(minutes=5))
        self._insert(engine, 3, 3, base + timedelta(minutes=10))
        self._insert(engine, 4, 1, base + timedelta(minutes=15))

        entries = store.top_n(5)

        assert [e.item_id for e in entries] == [2, 1, 3, 4]
        assert [e.count for e in entries] == [5, 5, 3, 1]

    def test_full_tie_breaks_by_newest_row(
        self, engine: Engine, store: SQLModelSearchCountStore
    ) -> None:
        same = datetime(2024, 1, 1, 12, 0, 0)
        self._insert(engine, 10, 2, same)
        self._insert(engine, 20, 2, same)

        assert [e.item_id for e in store.top_n(2)] == [20, 10]

    def test_limits_result_size(self, store: SQLModelSearchCountStore) -> None:
        for item_id in range(1, 8):
            store.increment(item_id, f"movie {item_id}", POSTER)

        assert len(store.top_n(5)) == 5

    def test_fewer_rows_than_limit(self, store: SQLModelSearchCountStore) -> None:
        store.increment(1, "one", POSTER)
        assert len(store.top_n(5)) == 1

    def test_empty_store(self, store: SQLModelSearchCountStore) -> None:
        assert store.top_n(5) == []

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_n(self, store: SQLModelSearchCountStore, n: int) -> None:
        store.increment(1, "one", POSTER)
        assert store.top_n(n) == []

    def test_most_searched_comes_first(self, store: SQLModelSearchCountStore) -> None:
        store.increment(1, "one", POSTER)
        for _ in range(3):
            store.increment(2, "two", POSTER)

        assert store.top_n(5)[0].item_id == 2


class TestStoreErrors:
    """Tests de la traduction des erreurs."""

    def test_missing_table_raises_store_unavailable(self, tmp_path: Path) -> None:
        engine = create_db_engine(f"sqlite:///{tmp_path}/empty.db")
        store = SQLModelSearchCountStore(engine)

        with pytest.raises(StoreUnavailable):
            store.increment(1, "one", POSTER)
        with pytest.raises(StoreUnavailable):
            store.top_n(5)
        engine.dispose()

    def test_unsupported_dialect_is_rejected(self) -> None:
        engine = MagicMock()
        engine.dialect.name = "mssql"

        with pytest.raises(ValueError, match="mssql"):
            SQLModelSearchCountStore(engine)
