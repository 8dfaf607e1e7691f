"""Task Schemas — request/response models for /tasks.

Invariants:
    - creator and assignedPrimary are required on create/replace
    - creation is never accepted from the client (server-assigned, immutable)
    - TaskDetail adds subtasks; only GET /tasks/{id} returns it

Design Decisions:
    - status accepts any TaskStatus value; stored as its plain string
"""

from datetime import date, datetime, timezone
from uuid import UUID

from pydantic import Field, field_serializer, model_validator

from tracker.core.domain_types import TaskStatus
from tracker.schemas.base import ApiModel, reject_explicit_nulls


class TaskCreate(ApiModel):
    """Task creation and full replacement body."""
    title: str = Field(min_length=1, max_length=300)
    body: str | None = Field(None, max_length=20_000)
    due_date: date | None = None
    status: TaskStatus = Field(TaskStatus.TODO, validate_default=True)
    priority: int | None = Field(None, ge=0)
    story_point: int | None = Field(None, ge=0)

    project: str | None = Field(None, max_length=200)
    creator: UUID
    assigned_primary: UUID
    assigned_secondary: UUID | None = None
    parent_task: UUID | None = None


class TaskReplace(TaskCreate):
    pass


class TaskPatch(ApiModel):
    """Sparse update — only supplied keys are merged and re-validated."""
    title: str | None = Field(None, min_length=1, max_length=300)
    body: str | None = Field(None, max_length=20_000)
    due_date: date | None = None
    status: TaskStatus | None = None
    priority: int | None = Field(None, ge=0)
    story_point: int | None = Field(None, ge=0)

    project: str | None = Field(None, max_length=200)
    creator: UUID | None = None
    assigned_primary: UUID | None = None
    assigned_secondary: UUID | None = None
    parent_task: UUID | None = None

    @model_validator(mode="after")
    def validate_non_nullable(self):
        reject_explicit_nulls(
            self, ("title", "status", "creator", "assigned_primary"),
        )
        return self


class TaskRead(ApiModel):
    id: UUID
    title: str
    body: str | None = None
    due_date: date | None = None
    status: str
    creation: datetime
    priority: int | None = None
    story_point: int | None = None
    project: str | None = None
    creator: UUID
    assigned_primary: UUID
    assigned_secondary: UUID | None = None
    parent_task: UUID | None = None

    @field_serializer("creation")
    def serialize_creation(self, value: datetime) -> datetime:
        """Always emit UTC; SQLite hands back naive timestamps."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class TaskDetail(TaskRead):
    subtasks: list[TaskRead] = Field(default_factory=list)
