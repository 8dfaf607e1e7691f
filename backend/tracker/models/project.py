"""Project ORM — groups tasks under a human-chosen unique name.

Invariants:
    - project_name is unique and is the key Tasks reference (not id)
    - Renaming a project does not rewrite Task.project (no cascade)

Design Decisions:
    - Unique index on project_name: Existence Resolver lookups by name stay point lookups
"""

import uuid

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tracker.db.base import Base


class Project(Base):
    """Project, addressed by id in its own routes and by name from Tasks."""
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    project_name: Mapped[str] = mapped_column(
        String(200), nullable=False, unique=True, index=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
