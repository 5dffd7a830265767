"""create task table

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19

Board tasks. List fields (assignees, depends_on, tags) are JSON arrays;
depends_on and parent_id hold task ids without foreign keys.
"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "task",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), server_default="", nullable=False),
        sa.Column("status", sa.String(length=64), nullable=False),
        sa.Column("priority", sa.String(length=64), nullable=False),
        sa.Column("assignees", sa.JSON(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("effort", sa.String(length=32), nullable=True),
        sa.Column("product_area", sa.String(length=128), nullable=True),
        sa.Column("order", sa.Integer(), server_default="0", nullable=False),
        sa.Column("depends_on", sa.JSON(), nullable=False),
        sa.Column("reporter", sa.String(length=255), nullable=True),
        sa.Column("parent_id", sa.String(), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_task_due_date", "task", ["due_date"], unique=False)
    op.create_index("ix_task_parent_id", "task", ["parent_id"], unique=False)
    op.create_index("ix_task_status_order", "task", ["status", "order"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_task_status_order", table_name="task")
    op.drop_index("ix_task_parent_id", table_name="task")
    op.drop_index("ix_task_due_date", table_name="task")
    op.drop_table("task")
