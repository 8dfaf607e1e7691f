"""Team ORM — named group of users, membership held in a join table.

Invariants:
    - team_members has (team_id, user_id) as composite primary key: no duplicate membership
    - Membership rows are written only by the Many-to-Many Reconciler
    - No FOREIGN KEY constraints: deleting a user leaves its membership rows dangling

Design Decisions:
    - Plain Table over relationship(): membership is a set owned by neither
      side, read and replaced explicitly (ADR: no lazy loads in async sessions)
"""

import uuid

from sqlalchemy import Column, String, Table, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tracker.db.base import Base


team_members = Table(
    "team_members",
    Base.metadata,
    Column("team_id", Uuid(as_uuid=True), primary_key=True),
    Column("user_id", Uuid(as_uuid=True), primary_key=True),
)


class Team(Base):
    """Team; members are not a mapped attribute (see team_members)."""
    __tablename__ = "teams"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
