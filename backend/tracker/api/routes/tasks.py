"""Task Routes — /api/v1/tasks.

Invariants:
    - GET /tasks/{id} is the only response carrying computed subtasks
"""

from tracker.api.routes.crud import build_crud_router
from tracker.core.domain_types import EntityType
from tracker.schemas.task import (
    TaskCreate, TaskDetail, TaskPatch, TaskRead, TaskReplace,
)

router = build_crud_router(
    prefix="/api/v1/tasks",
    entity_type=EntityType.TASK,
    create_schema=TaskCreate,
    replace_schema=TaskReplace,
    patch_schema=TaskPatch,
    read_schema=TaskRead,
    detail_schema=TaskDetail,
)
