"""
Shared fixtures for the catalog test suite.

Every API test gets a freshly seeded application, a known API key
and clean rate-limit counters.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.infrastructure.catalog.in_memory_product_repository import (
    InMemoryProductRepository,
)
from app.main import create_app
from app.shared.security.rate_limiting import limiter

TEST_API_KEY = "test-api-key"


@pytest.fixture(autouse=True)
def _configure_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "api_key", TEST_API_KEY)


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> None:
    limiter.reset()


@pytest.fixture
def seeded_repository() -> InMemoryProductRepository:
    """Repository holding the two demo products."""
    return InMemoryProductRepository.with_fixtures()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def valid_payload() -> dict:
    return {
        "name": "Desk Lamp",
        "description": "LED desk lamp with adjustable arm",
        "price": 45.5,
        "category": "Home",
        "inStock": False,
    }
