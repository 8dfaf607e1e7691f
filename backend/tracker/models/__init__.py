"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - No model declares a FOREIGN KEY: reference integrity is checked by the
      service layer at write time only

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from tracker.models.user import User  # noqa: F401
from tracker.models.project import Project  # noqa: F401
from tracker.models.team import Team, team_members  # noqa: F401
from tracker.models.task import Task  # noqa: F401
