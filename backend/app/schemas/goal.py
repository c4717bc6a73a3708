"""Goal Schemas — weekly priority payloads.

Invariants:
    - title: 1–200 chars, bounds checked after stripping whitespace
    - priority: JSON integer 1, 2 or 3; completed: JSON boolean (no coercion)
    - GoalUpdate: any subset of title/completed/priority; explicit null is rejected
    - to_changes() keeps only fields the client actually sent
"""

from typing import Annotated, Any

from pydantic import Field, StringConstraints, model_validator

from app.core.domain_types import (
    GOAL_TITLE_MAX_LENGTH, GoalChanges, NewGoal,
)
from app.schemas.common import CamelModel, IsoDate

GoalTitle = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True, min_length=1, max_length=GOAL_TITLE_MAX_LENGTH,
    ),
]


class GoalCreate(CamelModel):
    """Goal creation; weekStart is the Monday of the goal's week."""
    title: GoalTitle
    priority: int = Field(ge=1, le=3, strict=True)
    week_start: IsoDate
    completed: bool = Field(False, strict=True)

    def to_domain(self) -> NewGoal:
        return NewGoal(
            title=self.title, priority=self.priority,
            week_start=self.week_start, completed=self.completed,
        )


class GoalUpdate(CamelModel):
    """Partial goal update."""
    title: GoalTitle | None = None
    completed: bool | None = Field(None, strict=True)
    priority: int | None = Field(None, ge=1, le=3, strict=True)

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = [k for k, v in data.items() if v is None]
            if nulls:
                raise ValueError(f"fields cannot be null: {', '.join(sorted(nulls))}")
        return data

    def to_changes(self) -> GoalChanges:
        return GoalChanges(**self.model_dump(exclude_unset=True))


class GoalResponse(CamelModel):
    id: str
    title: str
    priority: int
    week_start: IsoDate
    completed: bool
