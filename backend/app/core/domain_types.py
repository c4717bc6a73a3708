"""Domain Types — entities and inputs shared by storage backends and routes.

Invariants:
    - Ids are UUID4 strings assigned by storage, never by callers
    - Dates are datetime.date in Python, ISO strings only at the HTTP boundary
    - Goal.priority in {1, 2, 3}; ProgressEntry.goals_completed 0–3, total_goals 1–3
    - Entities are frozen; storage updates produce new instances via replace()
    - GoalChanges key presence marks a provided field (False/0 still apply)

Design Decisions:
    - Plain dataclasses over ORM rows: MemoryStorage and SqlStorage return the same types
    - GoalChanges as TypedDict(total=False) instead of Optional defaults
"""

from dataclasses import dataclass
from datetime import date
from typing import NewType, TypedDict


# ─── Identity Types ──────────────────────────────────────────────

GoalId = NewType("GoalId", str)
ProgressEntryId = NewType("ProgressEntryId", str)
JournalEntryId = NewType("JournalEntryId", str)


# ─── Bounds ──────────────────────────────────────────────────────

GOAL_TITLE_MAX_LENGTH = 200
GOAL_PRIORITIES = (1, 2, 3)
JOURNAL_CONTENT_MAX_LENGTH = 5000
DEFAULT_TOTAL_GOALS = 3


# ─── Entities ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Goal:
    id: GoalId
    title: str
    priority: int
    week_start: date
    completed: bool = False


@dataclass(frozen=True)
class ProgressEntry:
    id: ProgressEntryId
    date: date
    goals_completed: int
    total_goals: int = DEFAULT_TOTAL_GOALS


@dataclass(frozen=True)
class JournalEntry:
    id: JournalEntryId
    week_start: date
    content: str


# ─── Inputs ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class NewGoal:
    """Validated goal creation input (no id yet)."""
    title: str
    priority: int
    week_start: date
    completed: bool = False


@dataclass(frozen=True)
class NewProgressEntry:
    """Validated progress snapshot for one calendar day."""
    date: date
    goals_completed: int
    total_goals: int = DEFAULT_TOTAL_GOALS


@dataclass(frozen=True)
class NewJournalEntry:
    """Validated weekly reflection."""
    week_start: date
    content: str


class GoalChanges(TypedDict, total=False):
    """Partial goal update: only the keys present are applied."""
    title: str
    completed: bool
    priority: int
