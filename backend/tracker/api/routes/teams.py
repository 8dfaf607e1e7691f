"""Team Routes — /api/v1/teams.

Invariants:
    - members in a PUT/PATCH body replaces the whole membership set
"""

from tracker.api.routes.crud import build_crud_router
from tracker.core.domain_types import EntityType
from tracker.schemas.team import TeamCreate, TeamPatch, TeamRead, TeamReplace

router = build_crud_router(
    prefix="/api/v1/teams",
    entity_type=EntityType.TEAM,
    create_schema=TeamCreate,
    replace_schema=TeamReplace,
    patch_schema=TeamPatch,
    read_schema=TeamRead,
)
