"""Project Routes — /api/v1/projects.

Invariants:
    - Routes address a project by id; Tasks reference it by projectName
    - A projectName already held by another project -> 409
"""

from tracker.api.routes.crud import build_crud_router
from tracker.core.domain_types import EntityType
from tracker.schemas.project import (
    ProjectCreate, ProjectPatch, ProjectRead, ProjectReplace,
)

router = build_crud_router(
    prefix="/api/v1/projects",
    entity_type=EntityType.PROJECT,
    create_schema=ProjectCreate,
    replace_schema=ProjectReplace,
    patch_schema=ProjectPatch,
    read_schema=ProjectRead,
)
