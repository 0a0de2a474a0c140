"""Root conftest — shared test configuration and store fixtures.

Invariants:
    - Environment is set before any participant_api import (get_settings is cached)
    - Every test gets a fresh in-memory SQLite database
"""

import os

os.environ.setdefault("ADMIN_API_KEYS", "test-admin-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402

from participant_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from participant_api.infrastructure.participant_collection import (  # noqa: E402
    SqlParticipantCollection,
)


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture
async def collection(db_manager):
    return SqlParticipantCollection(db_manager, timeout_seconds=5)
