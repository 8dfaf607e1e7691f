"""Domain Types — entity kinds, task states and reference declarations.

Invariants:
    - EntityKey is a UUID for every entity except Project, which Tasks name by
      project_name (a str)
    - Reference schemas are ordered tuples: declaration order is check order
    - All valid entity kinds encoded as an Enum — no raw string matching

Design Decisions:
    - Frozen dataclasses for schema declarations: shared module-level constants, never mutated
    - Whether a reference may be null is the request schema's concern; the
      declarations only say what a non-null value must point at
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union
from uuid import UUID


# ─── Keys ────────────────────────────────────────────────────────

EntityKey = Union[UUID, str]


# ─── Enums ───────────────────────────────────────────────────────

class EntityType(str, Enum):
    """The four entity families served by the API."""
    USER = "user"
    PROJECT = "project"
    TEAM = "team"
    TASK = "task"


class TaskStatus(str, Enum):
    """Task workflow states — stored as plain strings."""
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    BLOCKED = "blocked"
    DONE = "done"


# ─── Reference Schemas ───────────────────────────────────────────

@dataclass(frozen=True)
class ForeignKey:
    """A single-valued reference field and the entity type it names."""
    field: str
    target: EntityType


@dataclass(frozen=True)
class ManyToMany:
    """A set-valued reference held in a join table."""
    name: str
    target: EntityType


@dataclass(frozen=True)
class ReferenceCheck:
    """One existence lookup planned by the validator."""
    field: str
    target: EntityType
    key: EntityKey
