"""ProgressEntry ORM — one completion snapshot per calendar day.

Invariants:
    - date is UNIQUE: upsert keys on it
    - goals_completed 0–3, total_goals 1–3 (CHECK constraints)
"""

import datetime

from sqlalchemy import CheckConstraint, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class ProgressEntryRow(Base):
    """Daily progress snapshot."""
    __tablename__ = "progress_entries"
    __table_args__ = (
        CheckConstraint(
            "goals_completed BETWEEN 0 AND 3", name="ck_progress_goals_completed",
        ),
        CheckConstraint(
            "total_goals BETWEEN 1 AND 3", name="ck_progress_total_goals",
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, unique=True)
    goals_completed: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    total_goals: Mapped[int] = mapped_column(
        Integer, nullable=False, default=3,
    )
