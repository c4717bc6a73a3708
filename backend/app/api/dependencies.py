"""API Dependencies — request-scoped access to process-wide components.

Invariants:
    - Storage is built once in the lifespan and read from app.state, never imported
    - Tests swap the backend via app.dependency_overrides[get_storage]
"""

from fastapi import Request

from app.core.repository_protocols import Storage


def get_storage(request: Request) -> Storage:
    """FastAPI dependency for the configured Storage backend."""
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("Storage not initialized")
    return storage
