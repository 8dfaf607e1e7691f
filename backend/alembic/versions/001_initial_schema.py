"""Initial schema — users, projects, teams, team_members, tasks.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Reference columns carry no FOREIGN KEY constraints: integrity is checked by
the service layer at write time and deletes never cascade.
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
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("phone", sa.String(40), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
    )

    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("project_name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_projects"),
    )
    op.create_index(
        "ix_projects_project_name", "projects", ["project_name"], unique=True,
    )

    op.create_table(
        "teams",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_teams"),
    )

    op.create_table(
        "team_members",
        sa.Column("team_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.PrimaryKeyConstraint("team_id", "user_id", name="pk_team_members"),
    )

    op.create_table(
        "tasks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("body", sa.Text, nullable=True),
        sa.Column("due_date", sa.Date, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="todo"),
        sa.Column(
            "creation", sa.DateTime(timezone=True),
            nullable=False, server_default=sa.func.now(),
        ),
        sa.Column("priority", sa.Integer, nullable=True),
        sa.Column("story_point", sa.Integer, nullable=True),
        sa.Column("project", sa.String(200), nullable=True),
        sa.Column("creator", sa.Uuid(), nullable=False),
        sa.Column("assigned_primary", sa.Uuid(), nullable=False),
        sa.Column("assigned_secondary", sa.Uuid(), nullable=True),
        sa.Column("parent_task", sa.Uuid(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_tasks"),
    )
    op.create_index("ix_tasks_parent_task", "tasks", ["parent_task"])


def downgrade() -> None:
    op.drop_index("ix_tasks_parent_task", table_name="tasks")
    op.drop_table("tasks")
    op.drop_table("team_members")
    op.drop_table("teams")
    op.drop_index("ix_projects_project_name", table_name="projects")
    op.drop_table("projects")
    op.drop_table("users")
