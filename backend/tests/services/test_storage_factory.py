"""Storage factory & lifespan — the configured backend lands on app.state."""

from app.config import Settings
from app.infrastructure.memory_storage import MemoryStorage
from app.infrastructure.sql_storage import SqlStorage
from app.infrastructure.storage_factory import build_storage, close_storage
from app.main import create_app


def _sqlite_settings(**overrides) -> Settings:
    return Settings(
        _env_file=None,
        storage_backend="database",
        database_url="sqlite+aiosqlite:///:memory:",
        database_create_schema=True,
        **overrides,
    )


async def test_memory_backend_by_default():
    storage = await build_storage(Settings(_env_file=None, storage_backend="memory"))
    assert isinstance(storage, MemoryStorage)
    await close_storage(storage)


async def test_database_backend_creates_schema():
    storage = await build_storage(_sqlite_settings())
    try:
        assert isinstance(storage, SqlStorage)
        assert await storage.list_progress_entries() == []
        assert await storage.health_check() is True
    finally:
        await close_storage(storage)


async def test_lifespan_sets_storage_on_app_state():
    app = create_app(Settings(_env_file=None, storage_backend="memory"))
    async with app.router.lifespan_context(app):
        assert isinstance(app.state.storage, MemoryStorage)


async def test_lifespan_uses_settings_passed_to_create_app():
    app = create_app(_sqlite_settings(log_format="text"))
    async with app.router.lifespan_context(app):
        assert isinstance(app.state.storage, SqlStorage)
        assert await app.state.storage.health_check() is True
