"""Progress Routes — daily completion snapshots, upserted by date.

Invariants:
    - POST is an upsert: same date → same id, values overwritten, never duplicated
    - POST always answers 201 with the stored entry, created or updated
"""

import logging

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_storage
from app.core.repository_protocols import Storage
from app.schemas.progress import ProgressEntryCreate, ProgressEntryResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/progress", tags=["progress"])


@router.get("", response_model=list[ProgressEntryResponse])
async def list_progress_entries(storage: Storage = Depends(get_storage)):
    entries = await storage.list_progress_entries()
    return [ProgressEntryResponse.model_validate(e) for e in entries]


@router.post(
    "", response_model=ProgressEntryResponse, status_code=status.HTTP_201_CREATED,
)
async def upsert_progress_entry(
    body: ProgressEntryCreate, storage: Storage = Depends(get_storage),
):
    entry = await storage.upsert_progress_entry(body.to_domain())
    logger.debug(
        f"Progress for {entry.date}: {entry.goals_completed}/{entry.total_goals}",
        extra={"resource_id": entry.id},
    )
    return ProgressEntryResponse.model_validate(entry)
