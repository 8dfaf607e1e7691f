"""Existence Resolver — point lookups answering "does this entity exist right now?".

Invariants:
    - One indexed equality lookup per call (primary key, or Project.project_name)
    - Side-effect-free: SELECT only, nothing added to the session
    - Storage failures propagate (mapped to DatabaseError by the session manager),
      never reported as "not found"

Design Decisions:
    - Lookup column table keyed by EntityType: the only place that knows Project
      is referenced by name rather than id
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.domain_types import EntityKey, EntityType
from tracker.models.project import Project
from tracker.models.task import Task
from tracker.models.team import Team
from tracker.models.user import User

logger = logging.getLogger(__name__)

LOOKUP_COLUMNS = {
    EntityType.USER: User.id,
    EntityType.PROJECT: Project.project_name,
    EntityType.TEAM: Team.id,
    EntityType.TASK: Task.id,
}


class SqlExistenceResolver:
    """ExistenceResolver backed by the request's AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists(self, entity_type: EntityType, key: EntityKey) -> bool:
        column = LOOKUP_COLUMNS[entity_type]
        result = await self.db.execute(
            select(column).where(column == key).limit(1),
        )
        found = result.first() is not None
        logger.debug(
            f"exists({entity_type.value}, {key}) -> {found}",
            extra={"entity_type": entity_type.value, "entity_key": key},
        )
        return found
