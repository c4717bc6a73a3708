"""Service test fixtures — storage backends + FastAPI test client.

Invariants:
    - Every test gets a fresh storage instance (memory or in-memory SQLite)
    - get_storage dependency overridden; the lifespan does not run under ASGITransport
    - Parametrized `storage` runs each test against both backends

Design Decisions:
    - SQLite in-memory via aiosqlite: no external service, unique indexes still enforced
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from httpx import ASGITransport, AsyncClient

from app.api.dependencies import get_storage
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.memory_storage import MemoryStorage
from app.infrastructure.sql_storage import SqlStorage
from app.main import create_app


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
async def sql_storage():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    manager = DatabaseSessionManager.from_engine(engine)
    await manager.create_schema()
    yield SqlStorage(manager)
    await engine.dispose()


@pytest.fixture(params=["memory", "sql"])
async def storage(request):
    """Each test using this fixture runs once per backend."""
    if request.param == "memory":
        yield MemoryStorage()
        return
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    manager = DatabaseSessionManager.from_engine(engine)
    await manager.create_schema()
    yield SqlStorage(manager)
    await engine.dispose()


@pytest.fixture
def app(storage):
    application = create_app()
    application.dependency_overrides[get_storage] = lambda: storage
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    """FastAPI test client with storage dependency overridden."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def lenient_client(app):
    """Client that returns 500 responses instead of re-raising app exceptions."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
