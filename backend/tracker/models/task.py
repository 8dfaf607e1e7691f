"""Task ORM — the unit of work; holds every reference kind in the model.

Invariants:
    - creation is set once by the server at insert; never written afterwards
    - project stores Project.project_name, not Project.id
    - creator and assigned_primary are NOT NULL; assigned_secondary and parent_task are optional
    - parent_task is a self-reference; cycles are not prevented
    - Reference columns carry no FOREIGN KEY constraints (dangling references are a valid state)

Design Decisions:
    - subtasks not stored: computed on read by querying parent_task == id
    - Index on parent_task: the subtask reverse lookup stays an index scan
"""

import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tracker.db.base import Base


class Task(Base):
    """Task with user, project and parent-task references."""
    __tablename__ = "tasks"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    body: Mapped[str | None] = mapped_column(Text, nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="todo",
    )
    creation: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    priority: Mapped[int | None] = mapped_column(Integer, nullable=True)
    story_point: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # References
    project: Mapped[str | None] = mapped_column(String(200), nullable=True)
    creator: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), nullable=False,
    )
    assigned_primary: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), nullable=False,
    )
    assigned_secondary: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True), nullable=True,
    )
    parent_task: Mapped[uuid.UUID | None] = mapped_column(
        Uuid(as_uuid=True), nullable=True, index=True,
    )
