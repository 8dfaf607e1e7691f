"""Task Service — Entity Service plus the computed, read-only subtasks collection.

Invariants:
    - subtasks = every Task whose parent_task equals this Task's id, computed on read
    - Only direct children are returned; no recursive descent, so parent_task
      cycles can never loop a read
"""

from tracker.core.domain_types import EntityKey
from tracker.services.entity_service import EntityService


class TaskService(EntityService):
    """Tasks: same write path as every entity, richer get."""

    async def get(self, key: EntityKey) -> dict:
        state = await super().get(key)
        state["subtasks"] = await self.subtasks_of(key)
        return state

    async def subtasks_of(self, key: EntityKey) -> list[dict]:
        children = await self.repository.find_by("parent_task", key)
        return [self._snapshot(child) for child in children]
