"""In-Memory Storage — volatile, dict-backed implementation of the Storage protocol.

Invariants:
    - One dict per entity type, keyed by id; insertion order is preserved
    - Lookups by week_start / date are linear scans (at most one entry per day/week)
    - No method awaits mid-operation, so each call is atomic against its collection
    - upsert_progress_entry never changes an existing entry's id or date

Design Decisions:
    - Constructed once at startup and held on app.state (no module-level singleton)
    - create_journal_entry does not check week uniqueness; the journal route does
"""

import logging
import uuid
from dataclasses import replace
from datetime import date

from app.core.domain_types import (
    Goal, GoalChanges, GoalId, JournalEntry, JournalEntryId,
    NewGoal, NewJournalEntry, NewProgressEntry, ProgressEntry, ProgressEntryId,
)

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class MemoryStorage:
    """Process-lifetime store; state is lost on restart."""

    def __init__(self) -> None:
        self._goals: dict[GoalId, Goal] = {}
        self._progress_entries: dict[ProgressEntryId, ProgressEntry] = {}
        self._journal_entries: dict[JournalEntryId, JournalEntry] = {}

    # ─── Goals ───────────────────────────────────────────────────

    async def list_goals(self, week_start: date) -> list[Goal]:
        return [g for g in self._goals.values() if g.week_start == week_start]

    async def get_goal(self, goal_id: GoalId) -> Goal | None:
        return self._goals.get(goal_id)

    async def create_goal(self, new_goal: NewGoal) -> Goal:
        goal = Goal(
            id=GoalId(_new_id()),
            title=new_goal.title,
            priority=new_goal.priority,
            week_start=new_goal.week_start,
            completed=new_goal.completed,
        )
        self._goals[goal.id] = goal
        logger.debug("Goal created", extra={"resource_id": goal.id})
        return goal

    async def update_goal(
        self, goal_id: GoalId, changes: GoalChanges,
    ) -> Goal | None:
        goal = self._goals.get(goal_id)
        if goal is None:
            return None
        updated = replace(goal, **changes)
        self._goals[goal_id] = updated
        return updated

    async def delete_goal(self, goal_id: GoalId) -> bool:
        return self._goals.pop(goal_id, None) is not None

    # ─── Progress Entries ────────────────────────────────────────

    async def list_progress_entries(self) -> list[ProgressEntry]:
        return list(self._progress_entries.values())

    async def get_progress_entry(self, entry_date: date) -> ProgressEntry | None:
        return next(
            (e for e in self._progress_entries.values() if e.date == entry_date),
            None,
        )

    async def upsert_progress_entry(
        self, new_entry: NewProgressEntry,
    ) -> ProgressEntry:
        existing = await self.get_progress_entry(new_entry.date)
        if existing is not None:
            updated = replace(
                existing,
                goals_completed=new_entry.goals_completed,
                total_goals=new_entry.total_goals,
            )
            self._progress_entries[existing.id] = updated
            return updated

        entry = ProgressEntry(
            id=ProgressEntryId(_new_id()),
            date=new_entry.date,
            goals_completed=new_entry.goals_completed,
            total_goals=new_entry.total_goals,
        )
        self._progress_entries[entry.id] = entry
        return entry

    # ─── Journal Entries ─────────────────────────────────────────

    async def list_journal_entries(self) -> list[JournalEntry]:
        return list(self._journal_entries.values())

    async def get_journal_entry_by_week(
        self, week_start: date,
    ) -> JournalEntry | None:
        return next(
            (e for e in self._journal_entries.values() if e.week_start == week_start),
            None,
        )

    async def get_journal_entry_by_id(
        self, entry_id: JournalEntryId,
    ) -> JournalEntry | None:
        return self._journal_entries.get(entry_id)

    async def create_journal_entry(
        self, new_entry: NewJournalEntry,
    ) -> JournalEntry:
        entry = JournalEntry(
            id=JournalEntryId(_new_id()),
            week_start=new_entry.week_start,
            content=new_entry.content,
        )
        self._journal_entries[entry.id] = entry
        logger.debug("Journal entry created", extra={"resource_id": entry.id})
        return entry

    async def update_journal_entry(
        self, entry_id: JournalEntryId, content: str,
    ) -> JournalEntry | None:
        entry = self._journal_entries.get(entry_id)
        if entry is None:
            return None
        updated = replace(entry, content=content)
        self._journal_entries[entry_id] = updated
        return updated

    async def delete_journal_entry(self, entry_id: JournalEntryId) -> bool:
        return self._journal_entries.pop(entry_id, None) is not None

    async def health_check(self) -> bool:
        return True
