"""Progress Schemas — daily completion snapshots.

Invariants:
    - goalsCompleted: 0–3; totalGoals: 1–3, defaults to 3
    - Both are JSON integers; booleans and floats are rejected, not coerced
"""

from pydantic import Field

from app.core.domain_types import DEFAULT_TOTAL_GOALS, NewProgressEntry
from app.schemas.common import CamelModel, IsoDate


class ProgressEntryCreate(CamelModel):
    date: IsoDate
    goals_completed: int = Field(ge=0, le=3, strict=True)
    total_goals: int = Field(DEFAULT_TOTAL_GOALS, ge=1, le=3, strict=True)

    def to_domain(self) -> NewProgressEntry:
        return NewProgressEntry(
            date=self.date,
            goals_completed=self.goals_completed,
            total_goals=self.total_goals,
        )


class ProgressEntryResponse(CamelModel):
    id: str
    date: IsoDate
    goals_completed: int
    total_goals: int
