"""create projects table

Revision ID: 3f1c2a9e7b10
Revises:
Create Date: 2026-10-19 10:12:41.502117

Base schema. Idempotent: databases created by Base.metadata.create_all()
already have the table and are left alone.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9e7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _table_exists(table_name):
    """Check if a table exists."""
    bind = op.get_bind()
    insp = inspect(bind)
    return table_name in insp.get_table_names()


def upgrade() -> None:
    if _table_exists("projects"):
        return

    op.create_table(
        "projects",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("project_id", sa.String(), nullable=False),
        sa.Column("project_name", sa.String(), nullable=False),
        sa.Column("location", sa.String(), nullable=False),
        sa.Column("floor_area", sa.Float(), nullable=False),
        sa.Column("number_of_floors", sa.Integer(), nullable=False),
        sa.Column("material_type", sa.String(), nullable=False),
        sa.Column("additional_features", sa.JSON(), nullable=True),
        sa.Column("estimated_cost", sa.Float(), nullable=False),
        sa.Column("cost_breakdown", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_id", "projects", ["id"])
    op.create_index("ix_projects_project_id", "projects", ["project_id"], unique=True)
    op.create_index("ix_projects_created_at", "projects", ["created_at"])


def downgrade() -> None:
    if _table_exists("projects"):
        op.drop_index("ix_projects_created_at", table_name="projects")
        op.drop_index("ix_projects_project_id", table_name="projects")
        op.drop_index("ix_projects_id", table_name="projects")
        op.drop_table("projects")
