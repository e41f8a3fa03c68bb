"""Create the revisions table.

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "revisions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("revisionable_type", sa.String(length=255), nullable=False),
        sa.Column("revisionable_id", sa.String(length=255), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=True),
        sa.Column("key", sa.String(length=255), nullable=False),
        sa.Column("old_value", sa.Text(), nullable=True),
        sa.Column("new_value", sa.Text(), nullable=True),
        sa.Column("action", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_revisions")),
    )
    op.create_index(
        "ix_revisions_revisionable",
        "revisions",
        ["revisionable_type", "revisionable_id"],
    )
    op.create_index("ix_revisions_user_id", "revisions", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_revisions_user_id", table_name="revisions")
    op.drop_index("ix_revisions_revisionable", table_name="revisions")
    op.drop_table("revisions")
