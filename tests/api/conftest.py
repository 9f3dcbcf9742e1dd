"""Shared fixtures for API tests."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from catalog_api.api.deps import Repositories, get_repositories
from catalog_api.infrastructure.memory import (
    InMemoryCategoryRepository,
    InMemoryProductRepository,
)
from catalog_api.main import app
from factories import make_category


@pytest.fixture
def repositories() -> Repositories:
    """In-memory repositories with a small category tree."""
    return Repositories(
        categories=InMemoryCategoryRepository(
            [
                make_category("cat-1", "Apparel"),
                make_category("cat-2", "Tops", parent_id="cat-1"),
                make_category("cat-3", "Electronics", display_order=1),
            ]
        ),
        products=InMemoryProductRepository(),
    )


@pytest.fixture
def client(repositories: Repositories) -> Generator[TestClient, None, None]:
    """Create test client backed by the in-memory repositories."""
    app.dependency_overrides[get_repositories] = lambda: repositories
    yield TestClient(app)
    app.dependency_overrides.clear()
