"""
Tests unitaires pour le mecanisme de retry avec backoff exponentiel.

Ces tests verifient:
- RateLimitError capture le header Retry-After
- with_retry relance sur RateLimitError avec backoff exponentiel
- request_with_retry detecte les 429 et relance automatiquement
- Les autres echecs sont traduits en UpstreamUnavailable sans retry
"""

import httpx
import pytest
import respx

from cinetrend.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from cinetrend.core.errors import CineTrendError, UpstreamUnavailable


class TestRateLimitError:
    """Tests pour l'exception RateLimitError."""

    def test_rate_limit_error_stores_retry_after(self) -> None:
        """RateLimitError stocke la valeur Retry-After."""
        error = RateLimitError(retry_after=60)
        assert error.retry_after == 60
        assert "60" in str(error)

    def test_rate_limit_error_without_retry_after(self) -> None:
        """RateLimitError fonctionne sans Retry-After."""
        error = RateLimitError(retry_after=None)
        assert error.retry_after is None

    def test_rate_limit_error_is_upstream_unavailable(self) -> None:
        """Un 429 epuise est une indisponibilite du catalogue."""
        error = RateLimitError(retry_after=1)
        assert isinstance(error, UpstreamUnavailable)
        assert isinstance(error, CineTrendError)
        assert error.status_code == 429


class TestWithRetryDecorator:
    """Tests pour le decorateur with_retry."""

    @pytest.mark.asyncio
    async def test_with_retry_retries_on_rate_limit_error(self) -> None:
        """with_retry relance quand RateLimitError est levee."""
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def flaky_function() -> str:
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise RateLimitError(retry_after=1)
            return "success"

        result = await flaky_function()
        assert result == "success"
        assert call_count == 3

    @pytest.mark.asyncio
    async def test_with_retry_stops_after_max_attempts(self) -> None:
        """with_retry abandonne apres max_attempts tentatives."""
        call_count = 0

        @with_retry(max_attempts=2, max_wait=1)
        async def always_fails() -> str:
            nonlocal call_count
            call_count += 1
            raise RateLimitError(retry_after=1)

        with pytest.raises(RateLimitError):
            await always_fails()
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_with_retry_does_not_retry_other_upstream_errors(self) -> None:
        """with_retry ne relance pas les autres indisponibilites."""
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def server_error() -> str:
            nonlocal call_count
            call_count += 1
            raise UpstreamUnavailable("boom", status_code=500)

        with pytest.raises(UpstreamUnavailable):
            await server_error()
        assert call_count == 1  # Pas de retry


class TestRequestWithRetry:
    """Tests pour request_with_retry avec httpx."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_raises_on_429(self, respx_mock: respx.Router) -> None:
        """request_with_retry convertit 429 en RateLimitError et relance."""
        route = respx_mock.get("https://api.example.com/data").mock(
            return_value=httpx.Response(429, headers={"Retry-After": "30"})
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(RateLimitError) as exc_info:
                await request_with_retry(
                    client, "GET", "https://api.example.com/data", max_attempts=2
                )

        assert exc_info.value.retry_after == 30
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_retries_then_succeeds(self, respx_mock: respx.Router) -> None:
        """request_with_retry reussit apres un 429 initial."""
        route = respx_mock.get("https://api.example.com/data").mock(
            side_effect=[
                httpx.Response(429, headers={"Retry-After": "1"}),
                httpx.Response(200, json={"status": "ok"}),
            ]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(
                client, "GET", "https://api.example.com/data", max_attempts=3
            )

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_passes_on_success(self, respx_mock: respx.Router) -> None:
        """request_with_retry retourne directement sur 200."""
        route = respx_mock.get("https://api.example.com/data").mock(
            return_value=httpx.Response(200, json={"data": "value"})
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", "https://api.example.com/data")

        assert response.json() == {"data": "value"}
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_translates_server_error(
        self, respx_mock: respx.Router
    ) -> None:
        """Un 500 devient UpstreamUnavailable avec le statut, sans retry."""
        route = respx_mock.get("https://api.example.com/data").mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(UpstreamUnavailable) as exc_info:
                await request_with_retry(client, "GET", "https://api.example.com/data")

        assert exc_info.value.status_code == 500
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_translates_transport_error(
        self, respx_mock: respx.Router
    ) -> None:
        """Une erreur de connexion devient UpstreamUnavailable sans statut."""
        respx_mock.get("https://api.example.com/data").mock(
            side_effect=httpx.ConnectError("connection refused")
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(UpstreamUnavailable) as exc_info:
                await request_with_retry(client, "GET", "https://api.example.com/data")

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_translates_timeout(self, respx_mock: respx.Router) -> None:
        """Un timeout est une indisponibilite du catalogue."""
        respx_mock.get("https://api.example.com/data").mock(
            side_effect=httpx.ReadTimeout("timed out")
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(UpstreamUnavailable):
                await request_with_retry(client, "GET", "https://api.example.com/data")

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_with_retry_429_with_http_date(self, respx_mock: respx.Router) -> None:
        """Un Retry-After au format date n'est pas interprete."""
        respx_mock.get("https://api.example.com/data").mock(
            return_value=httpx.Response(
                429, headers={"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}
            )
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(RateLimitError) as exc_info:
                await request_with_retry(
                    client, "GET", "https://api.example.com/data", max_attempts=1
                )

        assert exc_info.value.retry_after is None
