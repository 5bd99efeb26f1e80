"""Fixtures for API tests."""

import falcon.asgi
import pytest
from falcon.testing import TestClient

from dashguard.config import Settings
from dashguard.infrastructure.persistence.memory.unit_of_work import InMemoryUserStore
from dashguard.interfaces.api.middleware.auth import AuthMiddleware
from dashguard.main import add_routes

from tests.conftest import FakeIdentityProvider


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def identity_provider(admin, regular_user, viewer) -> FakeIdentityProvider:
    return FakeIdentityProvider(
        {
            "admin-token": admin.id,
            "user-token": regular_user.id,
            "viewer-token": viewer.id,
        }
    )


@pytest.fixture
def app(store: InMemoryUserStore, identity_provider: FakeIdentityProvider) -> falcon.asgi.App:
    """Falcon ASGI app wired to the in-memory store and fake identity provider."""
    app = falcon.asgi.App(middleware=[AuthMiddleware(identity_provider, store.unit_of_work)])
    return add_routes(app, store, settings=Settings(_env_file=None))


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)
