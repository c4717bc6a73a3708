"""SQL Storage — async SQLAlchemy implementation of the Storage protocol.

Invariants:
    - One short-lived AsyncSession per operation (DatabaseSessionManager.session)
    - Rows never leave this module; callers receive domain dataclasses
    - progress_entries.date and journal_entries.week_start are UNIQUE in the schema
    - A duplicate journal week raises JournalEntryExistsError, same as the route check
    - Lists of goals and journal entries come back in insertion order (created_at)

Design Decisions:
    - Upsert is select-then-write; an insert that loses a race on the date index is
      retried once as an update instead of surfacing the IntegrityError
"""

import logging
import uuid
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    Goal, GoalChanges, GoalId, JournalEntry, JournalEntryId,
    NewGoal, NewJournalEntry, NewProgressEntry, ProgressEntry, ProgressEntryId,
)
from app.core.errors import JournalEntryExistsError
from app.infrastructure.database import DatabaseSessionManager
from app.models import GoalRow, JournalEntryRow, ProgressEntryRow

logger = logging.getLogger(__name__)


def _goal_from_row(row: GoalRow) -> Goal:
    return Goal(
        id=GoalId(row.id), title=row.title, priority=row.priority,
        week_start=row.week_start, completed=row.completed,
    )


def _progress_from_row(row: ProgressEntryRow) -> ProgressEntry:
    return ProgressEntry(
        id=ProgressEntryId(row.id), date=row.date,
        goals_completed=row.goals_completed, total_goals=row.total_goals,
    )


def _journal_from_row(row: JournalEntryRow) -> JournalEntry:
    return JournalEntry(
        id=JournalEntryId(row.id), week_start=row.week_start, content=row.content,
    )


class SqlStorage:
    """Relational backend; swap-in replacement for MemoryStorage."""

    def __init__(self, db_manager: DatabaseSessionManager) -> None:
        self._db = db_manager

    # ─── Goals ───────────────────────────────────────────────────

    async def list_goals(self, week_start: date) -> list[Goal]:
        async with self._db.session() as db:
            result = await db.execute(
                select(GoalRow)
                .where(GoalRow.week_start == week_start)
                .order_by(GoalRow.created_at),
            )
            return [_goal_from_row(r) for r in result.scalars().all()]

    async def get_goal(self, goal_id: GoalId) -> Goal | None:
        async with self._db.session() as db:
            row = await db.get(GoalRow, goal_id)
            return _goal_from_row(row) if row else None

    async def create_goal(self, new_goal: NewGoal) -> Goal:
        async with self._db.session() as db:
            row = GoalRow(
                id=str(uuid.uuid4()),
                title=new_goal.title,
                priority=new_goal.priority,
                week_start=new_goal.week_start,
                completed=new_goal.completed,
            )
            db.add(row)
            await db.commit()
            logger.debug("Goal created", extra={"resource_id": row.id})
            return _goal_from_row(row)

    async def update_goal(
        self, goal_id: GoalId, changes: GoalChanges,
    ) -> Goal | None:
        async with self._db.session() as db:
            row = await db.get(GoalRow, goal_id)
            if row is None:
                return None
            for key, value in changes.items():
                setattr(row, key, value)
            await db.commit()
            return _goal_from_row(row)

    async def delete_goal(self, goal_id: GoalId) -> bool:
        async with self._db.session() as db:
            result = await db.execute(delete(GoalRow).where(GoalRow.id == goal_id))
            await db.commit()
            return result.rowcount > 0

    # ─── Progress Entries ────────────────────────────────────────

    async def list_progress_entries(self) -> list[ProgressEntry]:
        async with self._db.session() as db:
            result = await db.execute(
                select(ProgressEntryRow).order_by(ProgressEntryRow.date),
            )
            return [_progress_from_row(r) for r in result.scalars().all()]

    async def get_progress_entry(self, entry_date: date) -> ProgressEntry | None:
        async with self._db.session() as db:
            row = await self._progress_row_by_date(db, entry_date)
            return _progress_from_row(row) if row else None

    async def upsert_progress_entry(
        self, new_entry: NewProgressEntry,
    ) -> ProgressEntry:
        async with self._db.session() as db:
            row = await self._progress_row_by_date(db, new_entry.date)
            if row is not None:
                return await self._overwrite_progress(db, row, new_entry)

            row = ProgressEntryRow(
                id=str(uuid.uuid4()),
                date=new_entry.date,
                goals_completed=new_entry.goals_completed,
                total_goals=new_entry.total_goals,
            )
            db.add(row)
            try:
                await db.commit()
            except IntegrityError:
                await db.rollback()
                logger.info(
                    f"Progress entry for {new_entry.date} inserted concurrently, updating",
                )
                row = await self._progress_row_by_date(db, new_entry.date)
                if row is None:
                    raise
                return await self._overwrite_progress(db, row, new_entry)
            return _progress_from_row(row)

    @staticmethod
    async def _progress_row_by_date(
        db: AsyncSession, entry_date: date,
    ) -> ProgressEntryRow | None:
        result = await db.execute(
            select(ProgressEntryRow).where(ProgressEntryRow.date == entry_date),
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def _overwrite_progress(
        db: AsyncSession, row: ProgressEntryRow, new_entry: NewProgressEntry,
    ) -> ProgressEntry:
        row.goals_completed = new_entry.goals_completed
        row.total_goals = new_entry.total_goals
        await db.commit()
        return _progress_from_row(row)

    # ─── Journal Entries ─────────────────────────────────────────

    async def list_journal_entries(self) -> list[JournalEntry]:
        async with self._db.session() as db:
            result = await db.execute(
                select(JournalEntryRow).order_by(JournalEntryRow.created_at),
            )
            return [_journal_from_row(r) for r in result.scalars().all()]

    async def get_journal_entry_by_week(
        self, week_start: date,
    ) -> JournalEntry | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(JournalEntryRow).where(JournalEntryRow.week_start == week_start),
            )
            row = result.scalar_one_or_none()
            return _journal_from_row(row) if row else None

    async def get_journal_entry_by_id(
        self, entry_id: JournalEntryId,
    ) -> JournalEntry | None:
        async with self._db.session() as db:
            row = await db.get(JournalEntryRow, entry_id)
            return _journal_from_row(row) if row else None

    async def create_journal_entry(
        self, new_entry: NewJournalEntry,
    ) -> JournalEntry:
        async with self._db.session() as db:
            row = JournalEntryRow(
                id=str(uuid.uuid4()),
                week_start=new_entry.week_start,
                content=new_entry.content,
            )
            db.add(row)
            try:
                await db.commit()
            except IntegrityError:
                await db.rollback()
                raise JournalEntryExistsError(new_entry.week_start.isoformat())
            logger.debug("Journal entry created", extra={"resource_id": row.id})
            return _journal_from_row(row)

    async def update_journal_entry(
        self, entry_id: JournalEntryId, content: str,
    ) -> JournalEntry | None:
        async with self._db.session() as db:
            row = await db.get(JournalEntryRow, entry_id)
            if row is None:
                return None
            row.content = content
            await db.commit()
            return _journal_from_row(row)

    async def delete_journal_entry(self, entry_id: JournalEntryId) -> bool:
        async with self._db.session() as db:
            result = await db.execute(
                delete(JournalEntryRow).where(JournalEntryRow.id == entry_id),
            )
            await db.commit()
            return result.rowcount > 0

    async def health_check(self) -> bool:
        return await self._db.health_check()

    async def close(self) -> None:
        await self._db.dispose()
