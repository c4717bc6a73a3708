"""ORM Models — SQLAlchemy declarative models backing SqlStorage.

Invariants:
    - All models inherit from Base (db/base.py)
    - No relationships: each entity type is an independent table

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from app.models.goal import GoalRow  # noqa: F401
from app.models.progress_entry import ProgressEntryRow  # noqa: F401
from app.models.journal_entry import JournalEntryRow  # noqa: F401
