"""User Routes — /api/v1/users."""

from tracker.api.routes.crud import build_crud_router
from tracker.core.domain_types import EntityType
from tracker.schemas.user import UserCreate, UserPatch, UserRead, UserReplace

router = build_crud_router(
    prefix="/api/v1/users",
    entity_type=EntityType.USER,
    create_schema=UserCreate,
    replace_schema=UserReplace,
    patch_schema=UserPatch,
    read_schema=UserRead,
)
