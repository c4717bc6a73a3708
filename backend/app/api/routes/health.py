"""Health & Readiness Checks — liveness and readiness endpoints.

Invariants:
    - GET /api/health always returns 200 if the process is up (liveness)
    - GET /api/health/ready returns 503 if the storage backend is unreachable
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_storage
from app.core.repository_protocols import Storage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "ok": True,
        "service": "weekly-focus-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(storage: Storage = Depends(get_storage)):
    """Readiness check — includes storage connectivity."""
    if not await storage.health_check():
        logger.warning("Readiness check failed: storage unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
