"""Route test fixtures — FastAPI test clients over an in-memory collection.

Invariants:
    - get_collection overridden per test: real accessor, fresh SQLite database
    - client sends the admin key; anonymous_client sends nothing
    - failing_client answers every store call with CollectionOperationError

Design Decisions:
    - httpx ASGITransport does not run the lifespan, so app.state is filled here
"""

import pytest
from httpx import ASGITransport, AsyncClient

from participant_api.api.dependencies import get_collection
from participant_api.main import app
from tests.factories import ADMIN_KEY, FailingCollection


@pytest.fixture
async def client(collection, db_manager):
    """Authorized client backed by the in-memory collection."""
    app.dependency_overrides[get_collection] = lambda: collection
    app.state.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-API-Key": ADMIN_KEY},
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = None


@pytest.fixture
async def anonymous_client(collection):
    app.dependency_overrides[get_collection] = lambda: collection

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def failing_client():
    """Authorized client whose store is unreachable."""
    app.dependency_overrides[get_collection] = lambda: FailingCollection()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-API-Key": ADMIN_KEY},
    ) as c:
        yield c

    app.dependency_overrides.clear()
