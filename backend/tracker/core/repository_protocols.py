"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these protocols are never async themselves —
      the shell orchestrates the async calls around the pure logic
"""

from collections.abc import Sequence
from typing import Any, Protocol

from tracker.core.domain_types import EntityKey, EntityType


class ExistenceResolver(Protocol):
    """Point lookup: does an entity of `entity_type` with `key` exist right now?"""
    async def exists(self, entity_type: EntityType, key: EntityKey) -> bool: ...


class EntityRepository(Protocol):
    """Single-table persistence for one entity type — implemented by shell."""
    async def get(self, key: EntityKey) -> Any | None: ...
    async def list(self) -> Sequence[Any]: ...
    async def find_by(self, field: str, value: object) -> Sequence[Any]: ...
    async def add(self, values: dict) -> Any: ...
    async def update(self, entity: Any, values: dict) -> Any: ...
    async def delete(self, entity: Any) -> None: ...


class MembershipStore(Protocol):
    """Join-table persistence for one set-valued relation — implemented by shell."""
    async def members_of(self, owner_key: EntityKey) -> list[EntityKey]: ...
    async def replace(
        self, owner_key: EntityKey, member_keys: list[EntityKey],
    ) -> None: ...
