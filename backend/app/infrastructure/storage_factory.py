"""Storage Factory — builds the configured Storage backend at startup.

Invariants:
    - Called once per process (lifespan); the result lives on app.state.storage
    - close_storage releases the DB engine for SqlStorage, no-op for memory
"""

import logging

from app.config import Settings
from app.core.repository_protocols import Storage
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.memory_storage import MemoryStorage
from app.infrastructure.sql_storage import SqlStorage

logger = logging.getLogger(__name__)


async def build_storage(settings: Settings) -> Storage:
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage (data is lost on restart)")
        return MemoryStorage()

    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await db_manager.create_schema()
    logger.info("Using SQL storage")
    return SqlStorage(db_manager)


async def close_storage(storage: Storage) -> None:
    if isinstance(storage, SqlStorage):
        await storage.close()
