"""Journal Schemas — weekly reflection payloads.

Invariants:
    - content: 1–5000 chars on create
    - JournalEntryUpdate.content is optional at the schema level; the route
      rejects a missing/empty value with a single message
"""

from pydantic import Field

from app.core.domain_types import JOURNAL_CONTENT_MAX_LENGTH, NewJournalEntry
from app.schemas.common import CamelModel, IsoDate


class JournalEntryCreate(CamelModel):
    week_start: IsoDate
    content: str = Field(min_length=1, max_length=JOURNAL_CONTENT_MAX_LENGTH)

    def to_domain(self) -> NewJournalEntry:
        return NewJournalEntry(week_start=self.week_start, content=self.content)


class JournalEntryUpdate(CamelModel):
    content: str | None = Field(None, max_length=JOURNAL_CONTENT_MAX_LENGTH)


class JournalEntryResponse(CamelModel):
    id: str
    week_start: IsoDate
    content: str
