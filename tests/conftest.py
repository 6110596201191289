"""Shared fixtures — a fresh application and store for every test.

Every test gets its own ``create_app()`` instance, and with it its own
in‑memory SQLite database, so records never leak between tests.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from user_registry_api.app.core.config import Settings
from user_registry_api.app.core.db import Database
from user_registry_api.app.main import create_app
from user_registry_api.app.services.user_service import UserService


@pytest.fixture
def settings():
    return Settings(server_url="http://test", log_level="WARNING")


@pytest.fixture
def app_factory(settings):
    """Build independent applications, closing their databases afterwards."""
    created = []

    def factory():
        application = create_app(settings)
        created.append(application)
        return application

    yield factory
    for application in created:
        application.state.db.close()


@pytest.fixture
def app(app_factory):
    return app_factory()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def db():
    database = Database()
    database.init_db()
    yield database
    database.close()


@pytest.fixture
def service(db):
    return UserService(db)


@pytest.fixture
def ana():
    return {"id": 12345678901, "name": "Ana", "birth_date": "1990-01-01"}
