"""Journal Routes — one reflection per week.

Invariants:
    - POST checks get_journal_entry_by_week first; an existing week → 400
      JOURNAL_ENTRY_EXISTS and nothing is created
    - PATCH without content → 400 with a single message (no field list)
    - Unknown week on GET, unknown id on PATCH/DELETE → 404

Design Decisions:
    - The week check is check-then-act and not atomic. MemoryStorage accepts the
      race; SqlStorage closes it with a unique index raising the same error
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_storage
from app.core.domain_types import JournalEntryId
from app.core.errors import (
    FieldValidationError, JournalEntryExistsError, ResourceNotFoundError,
)
from app.core.repository_protocols import Storage
from app.schemas.common import IsoDate
from app.schemas.journal import (
    JournalEntryCreate, JournalEntryResponse, JournalEntryUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/journal", tags=["journal"])


@router.get("", response_model=list[JournalEntryResponse])
async def list_journal_entries(storage: Storage = Depends(get_storage)):
    entries = await storage.list_journal_entries()
    return [JournalEntryResponse.model_validate(e) for e in entries]


@router.get("/{week_start}", response_model=JournalEntryResponse)
async def get_journal_entry(
    week_start: IsoDate, storage: Storage = Depends(get_storage),
):
    entry = await storage.get_journal_entry_by_week(week_start)
    if entry is None:
        raise ResourceNotFoundError("JournalEntry", week_start.isoformat())
    return JournalEntryResponse.model_validate(entry)


@router.post(
    "", response_model=JournalEntryResponse, status_code=status.HTTP_201_CREATED,
)
async def create_journal_entry(
    body: JournalEntryCreate, storage: Storage = Depends(get_storage),
):
    """Create this week's reflection; a second one for the same week is refused."""
    if await storage.get_journal_entry_by_week(body.week_start) is not None:
        raise JournalEntryExistsError(body.week_start.isoformat())
    entry = await storage.create_journal_entry(body.to_domain())
    logger.info(
        "Journal entry created",
        extra={"resource_id": entry.id, "week_start": entry.week_start.isoformat()},
    )
    return JournalEntryResponse.model_validate(entry)


@router.patch("/{entry_id}", response_model=JournalEntryResponse)
async def update_journal_entry(
    entry_id: str,
    body: JournalEntryUpdate,
    storage: Storage = Depends(get_storage),
):
    if not body.content:
        raise FieldValidationError("Content is required", field="content")
    entry = await storage.update_journal_entry(JournalEntryId(entry_id), body.content)
    if entry is None:
        raise ResourceNotFoundError("JournalEntry", entry_id)
    return JournalEntryResponse.model_validate(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_journal_entry(
    entry_id: str, storage: Storage = Depends(get_storage),
):
    if not await storage.delete_journal_entry(JournalEntryId(entry_id)):
        raise ResourceNotFoundError("JournalEntry", entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
