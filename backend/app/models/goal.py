"""Goal ORM — persists one weekly priority.

Invariants:
    - id is a UUID4 string assigned by storage
    - priority is 1–3 (CHECK constraint); not unique within a week
    - week_start indexed: list_goals filters on it

Design Decisions:
    - created_at kept only to return goals in insertion order
"""

from datetime import date, datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, Date, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class GoalRow(Base):
    """Goal entity — a weekly priority with a completion flag."""
    __tablename__ = "goals"
    __table_args__ = (
        CheckConstraint("priority BETWEEN 1 AND 3", name="ck_goals_priority"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    priority: Mapped[int] = mapped_column(Integer, nullable=False)
    week_start: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
