"""Service Factory — wires an Entity Service to the request's database session.

Invariants:
    - One validator/resolver per service instance, all bound to the same AsyncSession
    - Entity-to-service-class mapping is an explicit dict (no auto-discovery)
"""

from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.domain_types import EntityType
from tracker.infrastructure.existence_resolver import SqlExistenceResolver
from tracker.infrastructure.repositories import SqlEntityRepository, SqlMembershipStore
from tracker.models.team import team_members
from tracker.services.entity_definitions import ENTITY_DEFINITIONS
from tracker.services.entity_service import EntityService
from tracker.services.membership_reconciler import MembershipReconciler
from tracker.services.reference_validator import ReferenceValidator
from tracker.services.task_service import TaskService

# relation name -> (join table, owner column, member column)
MEMBERSHIP_TABLES = {
    "members": (team_members, "team_id", "user_id"),
}

SERVICE_CLASSES: dict[EntityType, type[EntityService]] = {
    EntityType.USER: EntityService,
    EntityType.PROJECT: EntityService,
    EntityType.TEAM: EntityService,
    EntityType.TASK: TaskService,
}


def build_entity_service(entity_type: EntityType, db: AsyncSession) -> EntityService:
    """Assemble the service for `entity_type` over `db`."""
    definition = ENTITY_DEFINITIONS[entity_type]
    validator = ReferenceValidator(SqlExistenceResolver(db))
    stores = {
        relation.name: SqlMembershipStore(db, *MEMBERSHIP_TABLES[relation.name])
        for relation in definition.relations
    }
    return SERVICE_CLASSES[entity_type](
        db,
        definition,
        SqlEntityRepository(db, definition.model),
        validator,
        MembershipReconciler(validator, stores),
    )
