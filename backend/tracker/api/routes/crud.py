"""CRUD Router Builder — the five HTTP operations shared by every entity family.

Invariants:
    - POST -> 201, GET/PUT/PATCH/DELETE -> 200, all wrapped as {"data": ...}
    - Routes never contain business logic: bodies are dumped to dicts and
      handed to the Entity Service
    - PATCH forwards only the keys the client sent (exclude_unset)
    - NotFound / ReferenceNotFound surface as 404 via the global TrackerError handler

Design Decisions:
    - One builder over four copy-pasted route modules; each entity module
      still owns its router and is registered explicitly in main.py
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.domain_types import EntityType
from tracker.infrastructure.database import get_db
from tracker.schemas.base import DataEnvelope
from tracker.services.entity_service import EntityService
from tracker.services.service_factory import build_entity_service


def build_crud_router(
    *,
    prefix: str,
    entity_type: EntityType,
    create_schema: type[BaseModel],
    replace_schema: type[BaseModel],
    patch_schema: type[BaseModel],
    read_schema: type[BaseModel],
    detail_schema: type[BaseModel] | None = None,
) -> APIRouter:
    """Build the router for one entity family."""
    router = APIRouter(prefix=prefix, tags=[entity_type.value])
    detail_schema = detail_schema or read_schema

    async def get_service(db: AsyncSession = Depends(get_db)) -> EntityService:
        return build_entity_service(entity_type, db)

    @router.post(
        "", response_model=DataEnvelope[read_schema],
        status_code=status.HTTP_201_CREATED,
    )
    async def create_entity(
        body: create_schema, service: EntityService = Depends(get_service),
    ):
        return {"data": await service.create(body.model_dump())}

    @router.get("", response_model=DataEnvelope[list[read_schema]])
    async def list_entities(service: EntityService = Depends(get_service)):
        return {"data": await service.list()}

    @router.get("/{entity_id}", response_model=DataEnvelope[detail_schema])
    async def get_entity(
        entity_id: UUID, service: EntityService = Depends(get_service),
    ):
        return {"data": await service.get(entity_id)}

    @router.put("/{entity_id}", response_model=DataEnvelope[read_schema])
    async def replace_entity(
        entity_id: UUID,
        body: replace_schema,
        service: EntityService = Depends(get_service),
    ):
        return {"data": await service.replace(entity_id, body.model_dump())}

    @router.patch("/{entity_id}", response_model=DataEnvelope[read_schema])
    async def patch_entity(
        entity_id: UUID,
        body: patch_schema,
        service: EntityService = Depends(get_service),
    ):
        return {
            "data": await service.patch(
                entity_id, body.model_dump(exclude_unset=True),
            ),
        }

    @router.delete("/{entity_id}", response_model=DataEnvelope[read_schema])
    async def delete_entity(
        entity_id: UUID, service: EntityService = Depends(get_service),
    ):
        return {"data": await service.delete(entity_id)}

    return router
