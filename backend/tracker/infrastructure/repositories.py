"""SQL Repositories — single-table entity persistence and join-table membership.

Invariants:
    - Repositories flush but never commit: the Entity Service owns the unit of work
    - SqlMembershipStore.replace deletes then inserts inside the caller's transaction,
      so the swap is atomic with the owning entity's write
    - find_by only accepts mapped column names (no arbitrary SQL)

Design Decisions:
    - One generic repository parameterised by model over four copies
    - Membership rows read with an explicit SELECT rather than a relationship()
      to avoid lazy loading on AsyncSession
"""

import logging
from collections.abc import Sequence

from sqlalchemy import Table, delete, insert, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.domain_types import EntityKey
from tracker.db.base import Base

logger = logging.getLogger(__name__)


class SqlEntityRepository:
    """EntityRepository over one ORM model."""

    def __init__(self, db: AsyncSession, model: type[Base]):
        self.db = db
        self.model = model
        self._columns = {c.key for c in inspect(model).column_attrs}

    async def get(self, key: EntityKey):
        return await self.db.get(self.model, key)

    async def list(self) -> Sequence:
        result = await self.db.execute(select(self.model))
        return result.scalars().all()

    async def find_by(self, field: str, value: object) -> Sequence:
        if field not in self._columns:
            raise ValueError(f"{self.model.__name__} has no column '{field}'")
        column = getattr(self.model, field)
        result = await self.db.execute(
            select(self.model).where(column == value),
        )
        return result.scalars().all()

    async def add(self, values: dict):
        entity = self.model(**values)
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def update(self, entity, values: dict):
        for key, value in values.items():
            setattr(entity, key, value)
        await self.db.flush()
        return entity

    async def delete(self, entity) -> None:
        await self.db.delete(entity)
        await self.db.flush()


class SqlMembershipStore:
    """MembershipStore over a two-column join table."""

    def __init__(
        self, db: AsyncSession, table: Table, owner_column: str, member_column: str,
    ):
        self.db = db
        self.table = table
        self.owner = table.c[owner_column]
        self.member = table.c[member_column]

    async def members_of(self, owner_key: EntityKey) -> list[EntityKey]:
        result = await self.db.execute(
            select(self.member).where(self.owner == owner_key),
        )
        return list(result.scalars().all())

    async def replace(
        self, owner_key: EntityKey, member_keys: list[EntityKey],
    ) -> None:
        await self.db.execute(delete(self.table).where(self.owner == owner_key))
        if member_keys:
            await self.db.execute(
                insert(self.table),
                [
                    {self.owner.key: owner_key, self.member.key: key}
                    for key in member_keys
                ],
            )
        logger.info(
            f"{self.table.name}: {owner_key} now has {len(member_keys)} member(s)",
        )
