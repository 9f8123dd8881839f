"""
Tests des routes /trending.
"""

from unittest.mock import MagicMock

from dependency_injector import providers
from fastapi.testclient import TestClient

from cinetrend.container import Container
from cinetrend.core.errors import StoreUnavailable
from cinetrend.core.ports.repositories import ISearchCountStore
from cinetrend.services.trending import TrendingService

POSTER = "https://image.tmdb.org/t/p/w500/jRXYjXNq0Cs2TcJjLkki24MLp7u.jpg"


def _record(client: TestClient, term: str, movie_id: int, poster: str = POSTER):
    return client.post(
        "/trending/search",
        json={"searchTerm": term, "movieId": movie_id, "posterUrl": poster},
    )


class TestRecordSearch:
    """POST /trending/search."""

    def test_creates_then_increments(self, client: TestClient) -> None:
        first = _record(client, "avatar", 19995)
        second = _record(client, "Avatar", 19995)

        assert first.status_code == 200
        assert first.json()["count"] == 1
        body = second.json()
        assert body["movieId"] == 19995
        assert body["searchTerm"] == "Avatar"
        assert body["posterUrl"] == POSTER
        assert body["count"] == 2

    def test_poster_is_optional(self, client: TestClient) -> None:
        response = client.post("/trending/search", json={"searchTerm": "alien", "movieId": 348})

        assert response.status_code == 200
        assert response.json()["posterUrl"] == ""

    def test_blank_search_term_is_rejected(self, client: TestClient) -> None:
        response = _record(client, "   ", 19995)

        assert response.status_code == 422
        assert "Search term is required" in response.text

    def test_missing_movie_id_is_rejected(self, client: TestClient) -> None:
        response = client.post("/trending/search", json={"searchTerm": "avatar"})

        assert response.status_code == 422

    def test_store_failure_returns_503(self, container: Container, client: TestClient) -> None:
        store = MagicMock(spec=ISearchCountStore)
        store.increment.side_effect = StoreUnavailable("database is locked")
        container.local_trending_service.override(providers.Object(TrendingService(store)))

        response = _record(client, "avatar", 19995)

        assert response.status_code == 503


class TestGetTrending:
    """GET /trending."""

    def test_empty(self, client: TestClient) -> None:
        response = client.get("/trending")

        assert response.status_code == 200
        assert response.json() == []

    def test_ordered_by_count(self, client: TestClient) -> None:
        _record(client, "inception", 27205)
        for _ in range(3):
            _record(client, "avatar", 19995)
        for _ in range(2):
            _record(client, "alien", 348)

        body = client.get("/trending").json()

        assert [entry["movieId"] for entry in body] == [19995, 348, 27205]
        assert [entry["count"] for entry in body] == [3, 2, 1]
        assert body[0]["searchTerm"] == "avatar"
        assert body[0]["updatedAt"] is not None

    def test_limited_to_configured_size(self, client: TestClient) -> None:
        for movie_id in range(1, 9):
            _record(client, f"movie {movie_id}", movie_id)

        assert len(client.get("/trending").json()) == 5

    def test_store_failure_returns_empty_list(
        self, container: Container, client: TestClient
    ) -> None:
        store = MagicMock(spec=ISearchCountStore)
        store.top_n.side_effect = StoreUnavailable("database is locked")
        container.local_trending_service.override(providers.Object(TrendingService(store)))

        response = client.get("/trending")

        assert response.status_code == 200
        assert response.json() == []
