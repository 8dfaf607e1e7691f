"""Entity Definitions — the per-entity reference schema each Entity Service runs with.

Invariants:
    - references tuples are ordered: validation reports the first missing field
      in this order
    - id is immutable everywhere; Task.creation is immutable after insert
    - Project is the only entity with a unique secondary key (project_name)
"""

from dataclasses import dataclass

from tracker.core.domain_types import EntityType, ForeignKey, ManyToMany
from tracker.db.base import Base
from tracker.models.project import Project
from tracker.models.task import Task
from tracker.models.team import Team
from tracker.models.user import User


@dataclass(frozen=True)
class EntityDefinition:
    """Static description of one entity family."""
    entity_type: EntityType
    model: type[Base]
    references: tuple[ForeignKey, ...] = ()
    relations: tuple[ManyToMany, ...] = ()
    immutable: frozenset[str] = frozenset({"id"})
    unique: tuple[str, ...] = ()

    @property
    def relation_names(self) -> frozenset[str]:
        return frozenset(rel.name for rel in self.relations)


USER_DEFINITION = EntityDefinition(entity_type=EntityType.USER, model=User)

PROJECT_DEFINITION = EntityDefinition(
    entity_type=EntityType.PROJECT,
    model=Project,
    unique=("project_name",),
)

TEAM_DEFINITION = EntityDefinition(
    entity_type=EntityType.TEAM,
    model=Team,
    relations=(ManyToMany("members", EntityType.USER),),
)

TASK_DEFINITION = EntityDefinition(
    entity_type=EntityType.TASK,
    model=Task,
    references=(
        ForeignKey("project", EntityType.PROJECT),
        ForeignKey("creator", EntityType.USER),
        ForeignKey("assigned_primary", EntityType.USER),
        ForeignKey("assigned_secondary", EntityType.USER),
        ForeignKey("parent_task", EntityType.TASK),
    ),
    immutable=frozenset({"id", "creation"}),
)

ENTITY_DEFINITIONS = {
    EntityType.USER: USER_DEFINITION,
    EntityType.PROJECT: PROJECT_DEFINITION,
    EntityType.TEAM: TEAM_DEFINITION,
    EntityType.TASK: TASK_DEFINITION,
}
