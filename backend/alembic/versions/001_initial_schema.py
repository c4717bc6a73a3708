"""Initial schema — goals, progress_entries, journal_entries.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "goals",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("priority", sa.Integer, nullable=False),
        sa.Column("week_start", sa.Date, nullable=False),
        sa.Column("completed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("priority BETWEEN 1 AND 3", name="ck_goals_priority"),
    )
    op.create_index("ix_goals_week_start", "goals", ["week_start"])

    op.create_table(
        "progress_entries",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("date", sa.Date, nullable=False, unique=True),
        sa.Column("goals_completed", sa.Integer, nullable=False, server_default="0"),
        sa.Column("total_goals", sa.Integer, nullable=False, server_default="3"),
        sa.CheckConstraint("goals_completed BETWEEN 0 AND 3", name="ck_progress_goals_completed"),
        sa.CheckConstraint("total_goals BETWEEN 1 AND 3", name="ck_progress_total_goals"),
    )

    op.create_table(
        "journal_entries",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("week_start", sa.Date, nullable=False, unique=True),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("journal_entries")
    op.drop_table("progress_entries")
    op.drop_index("ix_goals_week_start", table_name="goals")
    op.drop_table("goals")
