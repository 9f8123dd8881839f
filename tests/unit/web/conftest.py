"""
Fixtures de l'application web : Container surcharge et TestClient.
"""

from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from cinetrend.config import Settings
from cinetrend.container import Container
from cinetrend.web.app import create_app


@pytest.fixture
def container(test_settings: Settings, mock_catalog: AsyncMock) -> Iterator[Container]:
    """Container pointant sur la base temporaire et un catalogue simule."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    container.catalog_client.override(providers.Object(mock_catalog))
    yield container
    container.engine().dispose()


@pytest.fixture
def client(container: Container) -> Iterator[TestClient]:
    """TestClient avec lifespan (creation des tables)."""
    with TestClient(create_app(container)) as client:
        yield client
