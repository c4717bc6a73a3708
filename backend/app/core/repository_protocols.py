"""Boundary Protocols — the storage contract between routes and backends.

Invariants:
    - Routes depend on Storage only, never on a concrete backend
    - Every method is async, including the in-memory implementation
    - Absence is returned (None / False), never raised
    - Storage has no cross-entity knowledge (goals never touch progress entries)

Design Decisions:
    - Protocol over ABC: MemoryStorage and SqlStorage satisfy it structurally
    - Journal week uniqueness is NOT part of this contract; the journal route checks it
"""

from datetime import date
from typing import Protocol

from app.core.domain_types import (
    Goal, GoalChanges, GoalId, JournalEntry, JournalEntryId,
    NewGoal, NewJournalEntry, NewProgressEntry, ProgressEntry,
)


class Storage(Protocol):
    """Contract for goal, progress and journal persistence, implemented in infrastructure/."""

    # Goals
    async def list_goals(self, week_start: date) -> list[Goal]: ...
    async def get_goal(self, goal_id: GoalId) -> Goal | None: ...
    async def create_goal(self, new_goal: NewGoal) -> Goal: ...
    async def update_goal(
        self, goal_id: GoalId, changes: GoalChanges,
    ) -> Goal | None: ...
    async def delete_goal(self, goal_id: GoalId) -> bool: ...

    # Progress entries
    async def list_progress_entries(self) -> list[ProgressEntry]: ...
    async def get_progress_entry(self, entry_date: date) -> ProgressEntry | None: ...
    async def upsert_progress_entry(
        self, new_entry: NewProgressEntry,
    ) -> ProgressEntry: ...

    # Journal entries
    async def list_journal_entries(self) -> list[JournalEntry]: ...
    async def get_journal_entry_by_week(
        self, week_start: date,
    ) -> JournalEntry | None: ...
    async def get_journal_entry_by_id(
        self, entry_id: JournalEntryId,
    ) -> JournalEntry | None: ...
    async def create_journal_entry(
        self, new_entry: NewJournalEntry,
    ) -> JournalEntry: ...
    async def update_journal_entry(
        self, entry_id: JournalEntryId, content: str,
    ) -> JournalEntry | None: ...
    async def delete_journal_entry(self, entry_id: JournalEntryId) -> bool: ...

    # Readiness
    async def health_check(self) -> bool: ...
