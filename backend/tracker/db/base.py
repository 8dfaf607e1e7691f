"""SQLAlchemy Declarative Base — shared metadata for models and migrations.

Invariants:
    - All models inherit from Base
    - Constraint and index names are deterministic (naming convention), so
      alembic revisions and create_all produce the same names
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all Tracker ORM models."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
